"""Execute request descriptors and deliver a single outcome per request."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Union

import httpx

from photo_search.config import PhotoSearchSettings, get_settings
from photo_search.exceptions import TransportError
from photo_search.request_builder import RequestDescriptor


@dataclass(frozen=True, slots=True)
class Success:
    body: bytes

    ok = True

    def unwrap(self) -> bytes:
        return self.body


@dataclass(frozen=True, slots=True)
class Failure:
    error: TransportError

    ok = False

    def unwrap(self) -> bytes:
        raise self.error


ResponseOutcome = Union[Success, Failure]


def build_async_client(settings: PhotoSearchSettings | None = None) -> httpx.AsyncClient:
    """Create the transport client used to execute descriptors."""

    settings = settings or get_settings()
    if settings.request_timeout_seconds is None:
        return httpx.AsyncClient()
    return httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout_seconds))


@lru_cache
def get_shared_client() -> httpx.AsyncClient:
    """Return the process-wide client; connections are reclaimed with the process."""

    return build_async_client()


class ResponsePublisher:
    """Runs one request per call and reports only the response body.

    Status codes are not interpreted here: a 404 body is still a ``Success``.
    Cancelling the awaiting task aborts the request and produces no outcome.
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._client = http_client

    async def fetch(self, descriptor: RequestDescriptor) -> ResponseOutcome:
        try:
            response = await self._client.request(descriptor.method, descriptor.url)
        except httpx.RequestError as exc:
            return Failure(TransportError(f"Request to {descriptor.host} failed: {exc}", original=exc))
        return Success(response.content)

    async def fetch_bytes(self, descriptor: RequestDescriptor) -> bytes:
        outcome = await self.fetch(descriptor)
        return outcome.unwrap()


async def fetch(
    descriptor: RequestDescriptor,
    client: httpx.AsyncClient | None = None,
) -> ResponseOutcome:
    """Fetch ``descriptor`` using ``client`` or the shared transport client."""

    return await ResponsePublisher(client or get_shared_client()).fetch(descriptor)


__all__ = [
    "Success",
    "Failure",
    "ResponseOutcome",
    "ResponsePublisher",
    "build_async_client",
    "get_shared_client",
    "fetch",
]

"""Construction of search requests for the photo API.

Requests are described by an immutable :class:`RequestDescriptor` and the
URL is always assembled from structured parts, so query values are
percent-encoded by ``httpx`` rather than spliced into a URL template.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from photo_search.config import get_settings
from photo_search.exceptions import ConfigurationError, InvalidQueryError

SCHEME = "https"
HOST = "api.unsplash.com"
SEARCH_PHOTOS_PATH = "/search/photos"
FIRST_PAGE = 1
DEFAULT_PER_PAGE = 80
# Documented provider maximum. Larger values are sent as-is and rejected upstream.
MAX_PER_PAGE = 80


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """An HTTP request described before it is sent."""

    path: str
    params: tuple[tuple[str, str], ...]
    method: str = "GET"
    scheme: str = SCHEME
    host: str = HOST

    def __post_init__(self) -> None:
        items = self.params.items() if isinstance(self.params, Mapping) else self.params
        object.__setattr__(self, "params", tuple(sorted((str(k), str(v)) for k, v in items)))

    @property
    def query_parameters(self) -> dict[str, str]:
        return dict(self.params)

    @property
    def url(self) -> httpx.URL:
        return httpx.URL(
            scheme=self.scheme,
            host=self.host,
            path=self.path,
            params=self.params,
        )

    @property
    def is_valid(self) -> bool:
        params = self.query_parameters
        per_page = params.get("per_page", "")
        return (
            bool(params.get("query"))
            and bool(params.get("client_id"))
            and per_page.isdigit()
            and int(per_page) > 0
        )

    def __str__(self) -> str:
        return f"{self.method} {self.url}"


def _ensure_encodable(name: str, value: str) -> str:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidQueryError(f"Query parameter {name!r} contains text that cannot be URL-encoded.") from exc
    return value


def _resolve_client_id(client_id: str | None) -> str:
    if client_id is None:
        client_id = get_settings().client_id()
    if not client_id:
        raise ConfigurationError(
            "Photo search access key is not configured (set PHOTO_SEARCH_ACCESS_KEY)."
        )
    return client_id


def build_search_request(
    query: str,
    per_page: int = DEFAULT_PER_PAGE,
    *,
    client_id: str | None = None,
) -> RequestDescriptor:
    """Describe a first-page photo search for ``query``.

    ``client_id`` falls back to the configured access key. Empty queries are
    accepted; the resulting descriptor simply reports ``is_valid == False``.
    """

    if not isinstance(query, str):
        raise InvalidQueryError(f"Search query must be a string, got {type(query).__name__}.")
    if isinstance(per_page, bool) or not isinstance(per_page, int) or per_page < 1:
        raise InvalidQueryError(f"per_page must be a positive integer, got {per_page!r}.")

    params: dict[str, Any] = {
        "page": str(FIRST_PAGE),
        "per_page": str(per_page),
        "query": _ensure_encodable("query", query),
        "client_id": _ensure_encodable("client_id", _resolve_client_id(client_id)),
    }
    return RequestDescriptor(path=SEARCH_PHOTOS_PATH, params=params)


__all__ = [
    "RequestDescriptor",
    "build_search_request",
    "DEFAULT_PER_PAGE",
    "MAX_PER_PAGE",
    "HOST",
    "SEARCH_PHOTOS_PATH",
]

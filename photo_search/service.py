"""Photo search as consumed by callers: build, fetch, decode."""

from __future__ import annotations

import httpx

from photo_search.config import PhotoSearchSettings, get_settings
from photo_search.decoding import SearchResults, decode_search_results
from photo_search.exceptions import InvalidQueryError, PhotoSearchError
from photo_search.logging import logger
from photo_search.publisher import ResponsePublisher
from photo_search.request_builder import build_search_request


class PhotoSearchService:
    """Encapsulates the photo search provider integration."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: PhotoSearchSettings | None = None,
    ) -> None:
        self._publisher = ResponsePublisher(http_client)
        self._settings = settings or get_settings()

    async def fetch_raw(self, query: str, per_page: int | None = None) -> bytes:
        query = query.strip()
        if not query:
            raise InvalidQueryError("Search query must not be empty.")
        descriptor = build_search_request(
            query,
            per_page if per_page is not None else self._settings.default_per_page,
            client_id=self._settings.client_id() or "",
        )
        logger.info(
            "photo_search_request",
            query=descriptor.query_parameters["query"],
            per_page=descriptor.query_parameters["per_page"],
        )
        outcome = await self._publisher.fetch(descriptor)
        if not outcome.ok:
            logger.warning("photo_search_failed", error=str(outcome.error))
        return outcome.unwrap()

    async def search(self, query: str, per_page: int | None = None) -> SearchResults:
        body = await self.fetch_raw(query, per_page)
        try:
            results = decode_search_results(body)
        except PhotoSearchError as exc:
            logger.warning("photo_search_failed", error=str(exc))
            raise
        logger.info(
            "photo_search_completed",
            total=results.total,
            returned=len(results.results),
        )
        return results


__all__ = ["PhotoSearchService"]

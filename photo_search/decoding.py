"""Pydantic models for the search payload and the decode step consumers apply."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from photo_search.exceptions import ResponseDecodeError, SearchAPIError


class _PayloadModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class PhotoUrls(_PayloadModel):
    raw: str | None = None
    full: str | None = None
    regular: str | None = None
    small: str | None = None
    thumb: str | None = None


class PhotoUser(_PayloadModel):
    id: str
    username: str
    name: str | None = None


class Photo(_PayloadModel):
    id: str
    width: int | None = None
    height: int | None = None
    color: str | None = None
    description: str | None = None
    alt_description: str | None = None
    likes: int = 0
    urls: PhotoUrls = Field(default_factory=PhotoUrls)
    user: PhotoUser | None = None

    @property
    def caption(self) -> str:
        return self.description or self.alt_description or ""


class SearchResults(_PayloadModel):
    total: int = 0
    total_pages: int = 0
    results: list[Photo] = Field(default_factory=list)


def _error_messages(data: Any) -> list[str] | None:
    if not isinstance(data, dict) or "errors" not in data:
        return None
    errors = data.get("errors") or []
    if isinstance(errors, str):
        return [errors]
    return [str(item) for item in errors]


def decode_search_results(body: bytes) -> SearchResults:
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise ResponseDecodeError("Photo search response is not valid JSON.") from exc

    messages = _error_messages(data)
    if messages is not None:
        raise SearchAPIError(messages)

    try:
        return SearchResults.model_validate(data)
    except ValidationError as exc:
        raise ResponseDecodeError(f"Photo search response format is invalid: {exc}") from exc


__all__ = [
    "Photo",
    "PhotoUrls",
    "PhotoUser",
    "SearchResults",
    "decode_search_results",
]

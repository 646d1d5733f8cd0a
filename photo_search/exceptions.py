"""Domain-specific exceptions."""

from __future__ import annotations

from collections.abc import Sequence


class PhotoSearchError(Exception):
    pass


class InvalidQueryError(PhotoSearchError, ValueError):
    """Raised when a query component cannot be placed in a URL."""


class ConfigurationError(PhotoSearchError):
    pass


class TransportError(PhotoSearchError):
    """Raised when the network layer fails before a response body arrives."""

    def __init__(self, message: str, original: BaseException | None = None) -> None:
        super().__init__(message)
        self.original = original
        if original is not None:
            self.__cause__ = original


class ResponseDecodeError(PhotoSearchError):
    pass


class SearchAPIError(PhotoSearchError):
    """The provider answered with its error document instead of results."""

    def __init__(self, messages: Sequence[str]) -> None:
        self.messages = list(messages)
        super().__init__("; ".join(self.messages) or "Photo search API returned an error.")


__all__ = [
    "PhotoSearchError",
    "InvalidQueryError",
    "ConfigurationError",
    "TransportError",
    "ResponseDecodeError",
    "SearchAPIError",
]

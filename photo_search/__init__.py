"""Asynchronous client for the photo search API."""

from photo_search.exceptions import InvalidQueryError, PhotoSearchError, TransportError
from photo_search.publisher import Failure, ResponseOutcome, ResponsePublisher, Success, fetch
from photo_search.request_builder import RequestDescriptor, build_search_request

__all__ = [
    "PhotoSearchError",
    "InvalidQueryError",
    "TransportError",
    "RequestDescriptor",
    "build_search_request",
    "ResponsePublisher",
    "ResponseOutcome",
    "Success",
    "Failure",
    "fetch",
]

"""Core JSON:API document, error and response helpers."""

from .document import JSONAPIDocumentBuilder
from .errors import (
    JSONAPIError,
    JSONAPIErrorBuilder,
    MalformedURLError,
    ResourceNotFoundError,
)
from .responses import JSONAPI_MEDIA_TYPE, JSONAPIResponse

__all__ = [
    "JSONAPI_MEDIA_TYPE",
    "JSONAPIDocumentBuilder",
    "JSONAPIError",
    "JSONAPIErrorBuilder",
    "JSONAPIResponse",
    "MalformedURLError",
    "ResourceNotFoundError",
]

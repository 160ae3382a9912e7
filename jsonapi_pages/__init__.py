"""JSON:API page-number pagination and navigation links for FastAPI."""

from .core.document import JSONAPIDocumentBuilder
from .core.errors import JSONAPIErrorBuilder, MalformedURLError
from .pagination import LinkBuilder, LinkSet, PageCalculator, PageMetadata, PageNumberPagination
from .routers.base import JSONAPIRouter
from .serializers.base import JSONAPISerializer
from .viewsets.base import JSONAPIViewSet

__all__ = [
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "JSONAPIRouter",
    "JSONAPISerializer",
    "JSONAPIViewSet",
    "LinkBuilder",
    "LinkSet",
    "MalformedURLError",
    "PageCalculator",
    "PageMetadata",
    "PageNumberPagination",
]

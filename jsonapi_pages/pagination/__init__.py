"""Pagination for JSON:API collections."""

from .base import CollectionProvider, Page, PaginationBase
from .calculator import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    PageCalculator,
    PageMetadata,
    PaginationRequest,
)
from .links import LinkBuilder, LinkSet
from .page_number import PageNumberPagination

__all__ = [
    "CollectionProvider",
    "DEFAULT_PAGE_NUMBER",
    "DEFAULT_PAGE_SIZE",
    "LinkBuilder",
    "LinkSet",
    "Page",
    "PageCalculator",
    "PageMetadata",
    "PageNumberPagination",
    "PaginationBase",
    "PaginationRequest",
]

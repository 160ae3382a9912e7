"""page[number]/page[size] pagination strategy."""

from __future__ import annotations

from typing import Any, Mapping

from .base import PaginationBase
from .calculator import DEFAULT_PAGE_SIZE, PageCalculator, PageMetadata
from .links import LinkBuilder, LinkSet


class PageNumberPagination(PaginationBase):
    """Paginate with 1-based ``page[number]`` and ``page[size]``.

    Meta is reported as ``{"total": <items>, "pages": <page count>}``.
    """

    default_page_size: int | None = None
    max_page_size: int | None = None

    def __init__(
        self,
        *,
        default_page_size: int | None = None,
        max_page_size: int | None = None,
    ) -> None:
        self.calculator = PageCalculator(
            default_page_size=default_page_size or self.default_page_size or DEFAULT_PAGE_SIZE,
            max_page_size=max_page_size if max_page_size is not None else self.max_page_size,
        )
        self.link_builder = LinkBuilder()

    def get_metadata(self, *, total: int, params: Mapping[str, Any]) -> PageMetadata:
        """Normalize params and compute the page."""
        return self.calculator.compute(total, params)

    def get_links(self, *, metadata: PageMetadata, base_url: str) -> LinkSet:
        """Build self/first/prev/next/last links."""
        return self.link_builder.build(metadata, base_url)

    def get_meta(self, *, metadata: PageMetadata) -> dict[str, Any]:
        """Return total item and page counts."""
        return {"total": metadata.total_count, "pages": metadata.page_count}

"""Page-number/page-size normalization and page arithmetic."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

import structlog

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 20

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)

logger = structlog.get_logger(__name__)


def _parse_positive_int(value: Any) -> int | None:
    """Return value as a positive int, or None when it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        stripped = value.strip()
        if not _INTEGER.fullmatch(stripped):
            return None
        try:
            parsed = int(stripped)
        except ValueError:
            # Digit strings past the interpreter's int conversion limit.
            return None
    else:
        return None
    return parsed if parsed >= 1 else None


@dataclass(frozen=True)
class PaginationRequest:
    """Normalized page[number]/page[size] pair; both always positive."""

    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_raw(
        cls,
        raw_params: Mapping[str, Any] | None,
        *,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int | None = None,
    ) -> PaginationRequest:
        """Normalize raw ``number``/``size`` values, defaulting anything invalid."""
        raw_params = raw_params or {}
        number = _parse_positive_int(raw_params.get("number"))
        size = _parse_positive_int(raw_params.get("size"))
        if number is None:
            number = DEFAULT_PAGE_NUMBER
        if size is None:
            size = default_page_size
        if max_page_size is not None and size > max_page_size:
            size = max_page_size
        return cls(page_number=number, page_size=size)


@dataclass(frozen=True)
class PageMetadata:
    """Computed page of a collection.

    ``page_number`` is kept as requested even when it lies past
    ``page_count``; slicing such a page yields no items.
    """

    total_count: int
    page_number: int
    page_size: int
    page_count: int

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    @property
    def has_prev(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.page_count

    @property
    def is_out_of_range(self) -> bool:
        return self.page_number > self.page_count


class PageCalculator:
    """Turn a total count and raw pagination params into ``PageMetadata``."""

    def __init__(
        self,
        *,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int | None = None,
    ) -> None:
        if default_page_size < 1:
            raise ValueError("default_page_size must be a positive integer.")
        if max_page_size is not None and max_page_size < 1:
            raise ValueError("max_page_size must be a positive integer or None.")
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    def normalize(
        self, raw_params: Mapping[str, Any] | None, max_page_size: int | None = None
    ) -> PaginationRequest:
        """Return the normalized request for raw params."""
        if max_page_size is None:
            max_page_size = self.max_page_size
        return PaginationRequest.from_raw(
            raw_params,
            default_page_size=self.default_page_size,
            max_page_size=max_page_size,
        )

    def compute(
        self,
        total_count: int,
        raw_params: Mapping[str, Any] | None = None,
        max_page_size: int | None = None,
    ) -> PageMetadata:
        """Return page metadata for a collection of ``total_count`` items."""
        if total_count < 0:
            raise ValueError(f"total_count must be non-negative, got {total_count}.")
        request = self.normalize(raw_params, max_page_size)
        page_count = -(-total_count // request.page_size)
        metadata = PageMetadata(
            total_count=total_count,
            page_number=request.page_number,
            page_size=request.page_size,
            page_count=page_count,
        )
        logger.debug(
            "page_computed",
            total=total_count,
            page_number=metadata.page_number,
            page_size=metadata.page_size,
            pages=page_count,
        )
        return metadata

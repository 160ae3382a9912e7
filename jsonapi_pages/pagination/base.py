"""Pagination strategy API and the collection provider protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from jsonapi_pages.schemas.pagination import CollectionOptions, PaginationLinks, PaginationMeta

from .calculator import PageMetadata
from .links import LinkSet


@runtime_checkable
class CollectionProvider(Protocol):
    """Ordered collection with a known size that can be sliced."""

    async def count(self) -> int:
        """Return the number of items in the whole collection."""
        ...

    async def slice(self, offset: int, limit: int) -> list[Any]:
        """Return up to ``limit`` items from ``offset``; empty past the end."""
        ...


@dataclass(frozen=True)
class Page:
    """One page of a collection together with its meta and links."""

    items: Sequence[Any]
    metadata: PageMetadata
    links: LinkSet
    meta: Mapping[str, Any]

    @property
    def options(self) -> CollectionOptions:
        """Typed meta/links options for a document serializer."""
        return CollectionOptions(
            meta=PaginationMeta(**self.meta),
            links=PaginationLinks(**self.links),
        )


class PaginationBase:
    """Define pagination API for JSON:API."""

    def get_metadata(self, *, total: int, params: Mapping[str, Any]) -> PageMetadata:
        """Return page metadata for raw ``page[...]`` params."""
        raise NotImplementedError

    def get_links(self, *, metadata: PageMetadata, base_url: str) -> LinkSet:
        """Return JSON:API pagination links."""
        raise NotImplementedError

    def get_meta(self, *, metadata: PageMetadata) -> dict[str, Any]:
        """Return JSON:API pagination metadata."""
        raise NotImplementedError

    async def paginate(
        self,
        collection: CollectionProvider,
        params: Mapping[str, Any],
        *,
        base_url: str,
    ) -> Page:
        """Count, slice and link one page of ``collection``.

        Links are built before slicing; a malformed ``base_url`` raises
        before any items are loaded.
        """
        total = await collection.count()
        metadata = self.get_metadata(total=total, params=params)
        links = self.get_links(metadata=metadata, base_url=base_url)
        items = await collection.slice(metadata.offset, metadata.limit)
        return Page(
            items=items,
            metadata=metadata,
            links=links,
            meta=self.get_meta(metadata=metadata),
        )

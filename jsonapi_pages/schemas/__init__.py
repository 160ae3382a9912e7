"""Pydantic schemas for JSON:API."""

from .pagination import CollectionOptions, PaginationLinks, PaginationMeta

__all__ = ["CollectionOptions", "PaginationLinks", "PaginationMeta"]

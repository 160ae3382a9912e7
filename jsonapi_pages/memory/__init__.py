"""In-memory collection provider for JSON:API."""

from .data_layer import InMemoryDataLayer

__all__ = ["InMemoryDataLayer"]

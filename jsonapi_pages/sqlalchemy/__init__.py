"""SQLAlchemy collection provider for JSON:API."""

from .data_layer import SQLAlchemyDataLayer

__all__ = ["SQLAlchemyDataLayer"]

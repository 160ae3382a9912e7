"""Viewsets for JSON:API resources."""

from .base import JSONAPIViewSet

__all__ = ["JSONAPIViewSet"]

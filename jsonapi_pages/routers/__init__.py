"""Routers for JSON:API viewsets."""

from .base import JSONAPIRouter

__all__ = ["JSONAPIRouter"]

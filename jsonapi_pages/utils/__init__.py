"""Utilities for JSON:API parsing and headers."""

from .content_negotiation import parse_accept_header, parse_jsonapi_media_type
from .query_params import parse_page_params, parse_query_params

__all__ = [
    "parse_accept_header",
    "parse_jsonapi_media_type",
    "parse_page_params",
    "parse_query_params",
]

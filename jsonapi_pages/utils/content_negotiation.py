"""Helpers for JSON:API content negotiation."""

from __future__ import annotations

from typing import Any

# Media type parameters defined by JSON:API; values are space-separated URIs.
JSONAPI_PARAMS = ("ext", "profile")


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def parse_jsonapi_media_type(media_type: str) -> dict[str, Any]:
    """Split a media type into its type, JSON:API params and other params."""
    media, _, raw_params = media_type.partition(";")
    parsed: dict[str, Any] = {
        "media_type": media.strip().lower(),
        "ext": [],
        "profile": [],
    }
    for param in raw_params.split(";"):
        name, sep, value = param.partition("=")
        name = name.strip().lower()
        if not sep or not name:
            continue
        value = _unquote(value.strip())
        if name in JSONAPI_PARAMS:
            parsed[name] = value.split()
        else:
            parsed.setdefault("other_params", {})[name] = value
    return parsed


def parse_accept_header(accept: str) -> list[dict[str, Any]]:
    """Parse each media range of an Accept header."""
    return [
        parse_jsonapi_media_type(media_range)
        for media_range in accept.split(",")
        if media_range.strip()
    ]

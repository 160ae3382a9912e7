"""Helpers for JSON:API query parameter parsing."""

from __future__ import annotations

from typing import Any, Mapping


def parse_page_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Collect the ``page[...]`` family as ``{member: raw value}``.

    Values are left as given; normalization belongs to the page calculator.
    """
    page: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if key.startswith("page[") and key.endswith("]"):
            page[key[len("page[") : -1]] = value
    return page


def parse_query_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Normalize the JSON:API query parameter families this package reads."""
    return {"page": parse_page_params(params)}

"""Tests for JSON:API query parameter extraction."""

from starlette.datastructures import QueryParams

from jsonapi_pages.utils import parse_page_params, parse_query_params


def test_page_family_is_collected_raw():
    params = QueryParams("page[number]=abc&page[size]=5&foo=bar&sort=-title")

    assert parse_page_params(params) == {"number": "abc", "size": "5"}


def test_other_families_are_ignored():
    assert parse_query_params({"filter[title]": "x", "include": "author"}) == {"page": {}}


def test_none_values_are_skipped():
    assert parse_page_params({"page[number]": None, "page[size]": 3}) == {"size": 3}

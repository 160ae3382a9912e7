"""Tests for page-number/page-size normalization and page arithmetic."""

import math

import pytest
from hypothesis import given, settings, strategies as st

from jsonapi_pages.pagination import PageCalculator, PaginationRequest


@pytest.fixture
def calculator():
    return PageCalculator()


def test_second_page_of_three_single_item_pages(calculator):
    metadata = calculator.compute(3, {"number": 2, "size": 1})

    assert metadata.page_count == 3
    assert metadata.offset == 1
    assert metadata.limit == 1
    assert metadata.has_prev
    assert metadata.has_next


def test_empty_collection_has_no_pages(calculator):
    metadata = calculator.compute(0, {"number": 1, "size": 20})

    assert metadata.page_count == 0
    assert metadata.page_number == 1
    assert metadata.offset == 0
    assert not metadata.has_next


def test_single_full_page(calculator):
    metadata = calculator.compute(5, {"number": 1, "size": 5})

    assert metadata.page_count == 1
    assert not metadata.has_prev
    assert not metadata.has_next


def test_non_numeric_number_and_missing_size_use_defaults(calculator):
    metadata = calculator.compute(10, {"number": "abc"})

    assert metadata.page_number == 1
    assert metadata.page_size == 20
    assert metadata.page_count == 1


@pytest.mark.parametrize(
    "raw, expected",
    [
        ({}, (1, 20)),
        (None, (1, 20)),
        ({"number": "0", "size": "-3"}, (1, 20)),
        ({"number": " 3 ", "size": "10"}, (3, 10)),
        ({"number": "+4", "size": "7"}, (4, 7)),
        ({"number": "1.5", "size": "2.0"}, (1, 20)),
        ({"number": "1_0", "size": ""}, (1, 20)),
        ({"number": True, "size": False}, (1, 20)),
        ({"number": 2.0, "size": None}, (1, 20)),
        ({"number": ["2"], "size": {"a": 1}}, (1, 20)),
        ({"number": 6, "size": 3}, (6, 3)),
        ({"number": "9" * 5000, "size": "9" * 5000}, (1, 20)),
    ],
)
def test_malformed_params_are_normalized(calculator, raw, expected):
    metadata = calculator.compute(100, raw)

    assert (metadata.page_number, metadata.page_size) == expected


def test_offset_and_limit(calculator):
    metadata = calculator.compute(100, {"number": "3", "size": "10"})

    assert metadata.offset == 20
    assert metadata.limit == 10


def test_page_past_the_end_is_not_clamped(calculator):
    metadata = calculator.compute(10, {"number": "5", "size": "5"})

    assert metadata.page_number == 5
    assert metadata.page_count == 2
    assert metadata.offset == 20
    assert metadata.is_out_of_range
    assert metadata.has_prev
    assert not metadata.has_next


def test_size_clamped_to_argument_maximum(calculator):
    metadata = calculator.compute(1000, {"size": "500"}, max_page_size=50)

    assert metadata.page_size == 50
    assert metadata.page_count == 20


def test_argument_maximum_overrides_instance_maximum():
    calculator = PageCalculator(max_page_size=100)

    assert calculator.compute(1000, {"size": "500"}).page_size == 100
    assert calculator.compute(1000, {"size": "500"}, max_page_size=30).page_size == 30


def test_custom_default_page_size():
    calculator = PageCalculator(default_page_size=5)

    metadata = calculator.compute(12, {})

    assert metadata.page_size == 5
    assert metadata.page_count == 3


def test_negative_total_is_rejected(calculator):
    with pytest.raises(ValueError):
        calculator.compute(-1, {})


@pytest.mark.parametrize("kwargs", [{"default_page_size": 0}, {"max_page_size": 0}])
def test_invalid_calculator_configuration(kwargs):
    with pytest.raises(ValueError):
        PageCalculator(**kwargs)


def test_pagination_request_from_raw():
    request = PaginationRequest.from_raw(
        {"number": "2", "size": "250"}, default_page_size=10, max_page_size=100
    )

    assert request == PaginationRequest(page_number=2, page_size=100)


def test_metadata_is_immutable(calculator):
    metadata = calculator.compute(10, {})

    with pytest.raises(AttributeError):
        metadata.page_number = 2


@settings(max_examples=200)
@given(
    total=st.integers(min_value=0, max_value=10**6),
    size=st.integers(min_value=1, max_value=1000),
)
def test_page_count_is_ceiling_of_total_over_size(total, size):
    metadata = PageCalculator().compute(total, {"size": size})

    assert metadata.page_count == math.ceil(total / size)
    assert (metadata.page_count == 0) == (total == 0)


@settings(max_examples=200)
@given(
    number=st.one_of(st.none(), st.integers(), st.text(max_size=8)),
    size=st.one_of(st.none(), st.integers(), st.text(max_size=8)),
)
def test_normalized_values_are_always_positive(number, size):
    metadata = PageCalculator(max_page_size=100).compute(50, {"number": number, "size": size})

    assert metadata.page_number >= 1
    assert 1 <= metadata.page_size <= 100


@settings(max_examples=100)
@given(
    total=st.integers(min_value=0, max_value=300),
    size=st.integers(min_value=1, max_value=40),
)
def test_pages_partition_the_collection(total, size):
    items = list(range(total))
    calculator = PageCalculator()
    page_count = calculator.compute(total, {"size": size}).page_count

    collected = []
    for number in range(1, page_count + 1):
        metadata = calculator.compute(total, {"number": number, "size": size})
        page = items[metadata.offset : metadata.offset + metadata.limit]
        assert page
        collected.extend(page)

    assert collected == items

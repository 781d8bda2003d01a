"""
Unit tests for listing filters and pagination metadata.
"""

import pytest

from moviedb.core.filters import Filter, Metadata, calculate_metadata, validate_filter
from moviedb.utils.validator import Validator


SAFELIST = ["id", "title", "year", "runtime", "-id", "-title", "-year", "-runtime"]


def make_filter(**kwargs):
    params = {"page": 1, "page_size": 20, "sort": "id", "sort_safelist": SAFELIST}
    params.update(kwargs)
    return Filter(**params)


def errors_for(f):
    v = Validator()
    validate_filter(v, f)
    return v.errors


class TestValidateFilter:
    """Tests for validate_filter."""

    def test_defaults_are_valid(self):
        assert errors_for(make_filter()) == {}

    def test_page_zero(self):
        assert errors_for(make_filter(page=0)) == {"page": "must be greater than zero"}

    def test_page_overflow_guard(self):
        assert errors_for(make_filter(page=10_000_000)) == {}
        assert errors_for(make_filter(page=10_000_001)) == {"page": "must be a maximum of 10 million"}

    def test_page_size_bounds(self):
        assert errors_for(make_filter(page_size=0)) == {"page_size": "must be greater than zero"}
        assert errors_for(make_filter(page_size=101)) == {"page_size": "must be a maximum of 100"}
        assert errors_for(make_filter(page_size=1)) == {}
        assert errors_for(make_filter(page_size=100)) == {}

    @pytest.mark.parametrize("sort", SAFELIST)
    def test_allowed_sorts(self, sort):
        assert errors_for(make_filter(sort=sort)) == {}

    @pytest.mark.parametrize("sort", ["rating", "--id", "id;drop table movies", "", "ID"])
    def test_rejected_sorts(self, sort):
        assert errors_for(make_filter(sort=sort)) == {"sort": "invalid sort value"}


class TestFilterDerivations:
    """Tests for limit, offset and sort helpers."""

    def test_limit_and_offset(self):
        f = make_filter(page=3, page_size=20)
        assert f.limit() == 20
        assert f.offset() == 40

    def test_first_page_offset(self):
        assert make_filter(page=1, page_size=5).offset() == 0

    def test_sort_ascending(self):
        f = make_filter(sort="title")
        assert f.sort_column() == "title"
        assert f.sort_direction() == "ASC"

    def test_sort_descending(self):
        f = make_filter(sort="-year")
        assert f.sort_column() == "year"
        assert f.sort_direction() == "DESC"

    def test_unsafe_sort_column_raises(self):
        with pytest.raises(ValueError):
            make_filter(sort="rating").sort_column()


class TestCalculateMetadata:
    """Tests for calculate_metadata."""

    def test_empty_result(self):
        assert calculate_metadata(0, 1, 20) == Metadata()

    def test_partial_last_page(self):
        metadata = calculate_metadata(25, 2, 20)
        assert metadata == Metadata(
            current_page=2,
            page_size=20,
            first_page=1,
            last_page=2,
            total_records=25,
        )

    def test_exact_pages(self):
        assert calculate_metadata(40, 1, 20).last_page == 2
        assert calculate_metadata(1, 1, 100).last_page == 1

"""
Unit tests for path and query-string helpers.
"""

import pytest

from moviedb.api.helpers import parse_int64, read_csv, read_id_param, read_int, read_string
from moviedb.database.errors import RecordNotFoundError
from moviedb.utils.validator import Validator


class TestParseInt64:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("42", 42),
            ("+5", 5),
            ("-7", -7),
            ("9223372036854775807", 2**63 - 1),
            ("-9223372036854775808", -(2**63)),
        ],
    )
    def test_valid(self, raw, expected):
        assert parse_int64(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["", "abc", "1.5", "1_0", " 5 ", "5\n", "0x10", "١٢", "9223372036854775808", "9" * 5000],
    )
    def test_invalid(self, raw):
        assert parse_int64(raw) is None


class TestReadIdParam:

    def test_valid_id(self):
        assert read_id_param("42") == 42

    @pytest.mark.parametrize(
        "raw", ["0", "-1", "abc", "1.5", "", "1_0", " 5", "99999999999999999999"]
    )
    def test_invalid_id(self, raw):
        with pytest.raises(RecordNotFoundError):
            read_id_param(raw)


class TestQueryHelpers:

    def test_read_string(self):
        assert read_string(None, "id") == "id"
        assert read_string("", "id") == "id"
        assert read_string("-year", "id") == "-year"

    def test_read_csv(self):
        assert read_csv(None, []) == []
        assert read_csv("drama", []) == ["drama"]
        assert read_csv("action, comedy,,", []) == ["action", "comedy"]

    def test_read_int(self):
        v = Validator()
        assert read_int(None, "page", 1, v) == 1
        assert read_int("3", "page", 1, v) == 3
        assert v.valid()

    @pytest.mark.parametrize("raw", ["three", "1_0", " 2", "99999999999999999999"])
    def test_read_int_invalid(self, raw):
        v = Validator()
        assert read_int(raw, "page", 1, v) == 1
        assert v.errors == {"page": "must be an integer value"}

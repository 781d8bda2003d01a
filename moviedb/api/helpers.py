"""
Helpers for reading path and query-string values.
"""

import re
from typing import List, Optional

from moviedb.database.errors import RecordNotFoundError
from moviedb.utils.validator import Validator


# Optional sign and decimal digits only; no whitespace or underscores
INTEGER_RX = re.compile(r"[+-]?[0-9]+")

MAX_INT64 = 2**63 - 1


def parse_int64(value: str) -> Optional[int]:
    """Parse a base-10 signed 64-bit integer, or return None if value is not one."""
    if len(value) > 20 or not INTEGER_RX.fullmatch(value):
        return None
    number = int(value)
    if not -MAX_INT64 - 1 <= number <= MAX_INT64:
        return None
    return number


def read_id_param(raw_id: str) -> int:
    """
    Parse a movie ID from the URL path.

    Raises:
        RecordNotFoundError: If the value is not a positive 64-bit integer
    """
    movie_id = parse_int64(raw_id)
    if movie_id is None or movie_id < 1:
        raise RecordNotFoundError(f"invalid id parameter: {raw_id!r}")
    return movie_id


def read_string(value: Optional[str], default: str) -> str:
    """Return a query-string value, or default when absent or empty."""
    if not value:
        return default
    return value


def read_csv(value: Optional[str], default: List[str]) -> List[str]:
    """Split a comma separated query-string value, dropping empty items."""
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


def read_int(value: Optional[str], key: str, default: int, v: Validator) -> int:
    """
    Parse an integer query-string value.

    A value that is not an integer is recorded in the validator under key and
    the default is returned.
    """
    if not value:
        return default
    number = parse_int64(value)
    if number is None:
        v.add_error(key, "must be an integer value")
        return default
    return number

"""
Listing filters and pagination metadata.

A Filter carries the page, page size and sort parameters of a list request.
The sort value is only ever turned into a column name after it has been
checked against the filter's safelist.
"""

import math
from dataclasses import dataclass, field
from typing import List

from moviedb.utils.validator import Validator, permitted_value


MAX_PAGE = 10_000_000
MAX_PAGE_SIZE = 100


@dataclass
class Filter:
    """
    Page, page size and sort parameters of a list request.

    Attributes:
        page: 1-based page number
        page_size: Number of records per page
        sort: Column name, prefixed with '-' for descending order
        sort_safelist: Sort values accepted for this listing
    """

    page: int = 1
    page_size: int = 20
    sort: str = "id"
    sort_safelist: List[str] = field(default_factory=list)

    def sort_column(self) -> str:
        """
        Return the column name to order by.

        Raises:
            ValueError: If the sort value is not in the safelist
        """
        for safe_value in self.sort_safelist:
            if self.sort == safe_value:
                return self.sort.lstrip("-")
        raise ValueError(f"unsafe sort parameter: {self.sort}")

    def sort_direction(self) -> str:
        """Return 'DESC' for a '-' prefixed sort value, otherwise 'ASC'."""
        if self.sort.startswith("-"):
            return "DESC"
        return "ASC"

    def limit(self) -> int:
        return self.page_size

    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass
class Metadata:
    """Pagination metadata for a list response. All zero for an empty result."""

    current_page: int = 0
    page_size: int = 0
    first_page: int = 0
    last_page: int = 0
    total_records: int = 0


def validate_filter(v: Validator, f: Filter) -> None:
    """
    Check filter parameters, recording failures in the validator.

    Args:
        v: Validator collecting field errors
        f: Filter to check
    """
    v.check(f.page > 0, "page", "must be greater than zero")
    v.check(f.page <= MAX_PAGE, "page", "must be a maximum of 10 million")
    v.check(f.page_size > 0, "page_size", "must be greater than zero")
    v.check(f.page_size <= MAX_PAGE_SIZE, "page_size", f"must be a maximum of {MAX_PAGE_SIZE}")
    v.check(permitted_value(f.sort, *f.sort_safelist), "sort", "invalid sort value")


def calculate_metadata(total_records: int, page: int, page_size: int) -> Metadata:
    """
    Build pagination metadata for a result set.

    Args:
        total_records: Number of records matching the query (all pages)
        page: Current page number
        page_size: Records per page

    Returns:
        Metadata, empty when total_records is zero
    """
    if total_records == 0:
        return Metadata()

    return Metadata(
        current_page=page,
        page_size=page_size,
        first_page=1,
        last_page=math.ceil(total_records / page_size),
        total_records=total_records,
    )

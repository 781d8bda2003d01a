"""
Field-level validation helper.

A Validator collects one error message per field. Validation rules call
check() with a condition; the first failing check for a field wins and later
failures for the same field are ignored.
"""

from typing import Dict, Iterable


class Validator:
    """
    Accumulates validation errors keyed by field name.

    Usage:
        v = Validator()
        v.check(movie.title != "", "title", "must be provided")
        if not v.valid():
            raise FailedValidationError(v.errors)
    """

    def __init__(self):
        self.errors: Dict[str, str] = {}

    def valid(self) -> bool:
        """Return True if no errors have been recorded."""
        return not self.errors

    def add_error(self, key: str, message: str) -> None:
        """Record an error for key unless one is already present."""
        if key not in self.errors:
            self.errors[key] = message

    def check(self, ok: bool, key: str, message: str) -> None:
        """Record an error for key when ok is false."""
        if not ok:
            self.add_error(key, message)

    def __repr__(self) -> str:
        return f"<Validator(errors={self.errors})>"


def permitted_value(value, *permitted_values) -> bool:
    """Return True if value is one of permitted_values."""
    return value in permitted_values


def unique(values: Iterable) -> bool:
    """Return True if every item in values is distinct."""
    seen = set()
    for value in values:
        if value in seen:
            return False
        seen.add(value)
    return True

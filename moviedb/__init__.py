"""
Movie database API package.

This package contains the movie entity and its validation rules, the
pagination filters, the SQL-backed movie store and the FastAPI application
that exposes them over HTTP.
"""

__version__ = "1.0.0"

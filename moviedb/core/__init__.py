"""
Core domain module.

Contains the movie entity with its validation rules, and the listing
filters with pagination metadata.
"""

from moviedb.core.movie import Movie, validate_movie
from moviedb.core.filters import Filter, Metadata, validate_filter, calculate_metadata

__all__ = [
    'Movie',
    'validate_movie',
    'Filter',
    'Metadata',
    'validate_filter',
    'calculate_metadata',
]

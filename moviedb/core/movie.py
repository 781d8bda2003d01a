"""
Movie entity and its business rules.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from moviedb.utils.validator import Validator, unique


MIN_YEAR = 1888
MAX_TITLE_BYTES = 500
MAX_GENRES = 5


@dataclass
class Movie:
    """
    A movie record.

    Attributes:
        id: Primary key, assigned by the store on insert
        title: Movie title
        year: Release year
        runtime: Runtime in minutes
        genres: Genre names, in the order supplied
        version: Optimistic concurrency counter, starts at 1
        created_at: Timestamp assigned by the store on insert
    """

    id: int = 0
    title: str = ""
    year: int = 0
    runtime: int = 0
    genres: Optional[List[str]] = field(default_factory=list)
    version: int = 0
    created_at: Optional[datetime] = None


def validate_movie(v: Validator, movie: Movie) -> None:
    """
    Check a movie against the business rules.

    Failures are recorded in the validator; nothing is raised.

    Args:
        v: Validator collecting field errors
        movie: Movie to check
    """
    v.check(movie.title != "", "title", "must be provided")
    v.check(
        len(movie.title.encode("utf-8")) <= MAX_TITLE_BYTES,
        "title",
        f"must not be more than {MAX_TITLE_BYTES} bytes long",
    )

    v.check(movie.year != 0, "year", "must be provided")
    v.check(movie.year >= MIN_YEAR, "year", f"must be greater than {MIN_YEAR}")
    v.check(movie.year <= datetime.now().year, "year", "must not be in the future")

    v.check(movie.runtime != 0, "runtime", "must be provided")
    v.check(movie.runtime > 0, "runtime", "must be a positive integer")

    v.check(movie.genres is not None, "genres", "must be provided")
    genres = movie.genres or []
    v.check(len(genres) >= 1, "genres", "must contain at least 1 genre")
    v.check(len(genres) <= MAX_GENRES, "genres", f"must not contain more than {MAX_GENRES} genres")
    v.check(unique(genres), "genres", "must not contain duplicate values")

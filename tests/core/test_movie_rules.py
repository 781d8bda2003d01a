"""
Unit tests for movie validation rules.
"""

from datetime import datetime

import pytest

from moviedb.core.movie import Movie, validate_movie
from moviedb.utils.validator import Validator


@pytest.fixture
def movie():
    """A movie that passes every rule."""
    return Movie(title="Moana", year=2016, runtime=107, genres=["animation", "adventure"])


def errors_for(movie):
    v = Validator()
    validate_movie(v, movie)
    return v.errors


class TestValidateMovie:
    """Tests for validate_movie."""

    def test_valid_movie(self, movie):
        assert errors_for(movie) == {}

    def test_empty_title(self, movie):
        movie.title = ""
        assert errors_for(movie) == {"title": "must be provided"}

    def test_title_length_counts_bytes(self, movie):
        movie.title = "a" * 500
        assert errors_for(movie) == {}

        movie.title = "a" * 501
        assert errors_for(movie) == {"title": "must not be more than 500 bytes long"}

        # 250 two-byte characters are 500 bytes; one more goes over
        movie.title = "é" * 251
        assert "title" in errors_for(movie)

    def test_missing_year(self, movie):
        movie.year = 0
        assert errors_for(movie) == {"year": "must be provided"}

    def test_year_before_first_film(self, movie):
        movie.year = 1887
        assert errors_for(movie) == {"year": "must be greater than 1888"}

        movie.year = 1888
        assert errors_for(movie) == {}

    def test_year_in_future(self, movie):
        movie.year = datetime.now().year + 1
        assert errors_for(movie) == {"year": "must not be in the future"}

        movie.year = datetime.now().year
        assert errors_for(movie) == {}

    def test_runtime(self, movie):
        movie.runtime = 0
        assert errors_for(movie) == {"runtime": "must be provided"}

        movie.runtime = -10
        assert errors_for(movie) == {"runtime": "must be a positive integer"}

    def test_genres_missing(self, movie):
        movie.genres = None
        assert errors_for(movie) == {"genres": "must be provided"}

    def test_genres_empty(self, movie):
        movie.genres = []
        assert errors_for(movie) == {"genres": "must contain at least 1 genre"}

    def test_six_genres(self, movie):
        movie.genres = ["action", "comedy", "drama", "horror", "romance", "western"]
        assert errors_for(movie) == {"genres": "must not contain more than 5 genres"}

    def test_five_genres(self, movie):
        movie.genres = ["action", "comedy", "drama", "horror", "romance"]
        assert errors_for(movie) == {}

    def test_duplicate_genres(self, movie):
        movie.genres = ["drama", "drama"]
        assert errors_for(movie) == {"genres": "must not contain duplicate values"}

    def test_reports_every_failing_field(self):
        errors = errors_for(Movie())
        assert set(errors) == {"title", "year", "runtime", "genres"}

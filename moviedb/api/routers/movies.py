"""
Movie API endpoints.
"""

import logging

from fastapi import APIRouter, Depends, Header, Query, Response, status

from moviedb.api.dependencies import get_movie_crud
from moviedb.api.errors import FailedValidationError
from moviedb.api.helpers import read_csv, read_id_param, read_int, read_string
from moviedb.api.models.movie import (
    MessageEnvelope,
    MovieEnvelope,
    MovieInput,
    MovieListEnvelope,
)
from moviedb.core.filters import Filter, validate_filter
from moviedb.core.movie import Movie, validate_movie
from moviedb.database.crud import MovieCRUD
from moviedb.database.errors import EditConflictError, RecordNotFoundError
from moviedb.utils.validator import Validator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])


SORT_SAFELIST = ["id", "title", "year", "runtime", "-id", "-title", "-year", "-runtime"]


def _check_movie(movie: Movie) -> None:
    """Raise FailedValidationError if the movie breaks a business rule."""
    v = Validator()
    validate_movie(v, movie)
    if not v.valid():
        raise FailedValidationError(v.errors)


def _copy_input(movie_in: MovieInput, movie: Movie) -> None:
    """Copy the fields present in the request body onto movie."""
    if movie_in.title is not None:
        movie.title = movie_in.title
    if movie_in.year is not None:
        movie.year = movie_in.year
    if movie_in.runtime is not None:
        movie.runtime = movie_in.runtime
    if movie_in.genres is not None:
        movie.genres = movie_in.genres


def _fetch_movie(movies: MovieCRUD, raw_id: str) -> Movie:
    """Load a movie by its path id; a store returning no movie counts as not found."""
    movie = movies.get(read_id_param(raw_id))
    if movie is None:
        raise RecordNotFoundError()
    return movie


def _expected_version_matches(expected_version: str, version: int) -> bool:
    """Compare an X-Expected-Version header value with a record version."""
    try:
        return int(expected_version) == version
    except ValueError:
        return False


@router.post("", response_model=MovieEnvelope, status_code=status.HTTP_201_CREATED)
def create_movie(
    movie_in: MovieInput,
    response: Response,
    movies: MovieCRUD = Depends(get_movie_crud),
):
    """Create a movie and return it with its assigned id and version."""
    movie = Movie(
        title=movie_in.title or "",
        year=movie_in.year or 0,
        runtime=movie_in.runtime or 0,
        genres=movie_in.genres,
    )
    _check_movie(movie)

    movies.insert(movie)
    logger.info(f"Created movie {movie.id} ({movie.title!r})")

    response.headers["Location"] = f"/movies/{movie.id}"
    return {"movie": movie}


@router.get("", response_model=MovieListEnvelope)
def list_movies(
    title: str | None = Query(None),
    genres: str | None = Query(None, description="Comma separated genres"),
    page: str | None = Query(None),
    page_size: str | None = Query(None),
    sort: str | None = Query(None),
    movies: MovieCRUD = Depends(get_movie_crud),
):
    """List movies filtered by title and genres, with pagination."""
    v = Validator()

    filters = Filter(
        page=read_int(page, "page", 1, v),
        page_size=read_int(page_size, "page_size", 20, v),
        sort=read_string(sort, "id"),
        sort_safelist=SORT_SAFELIST,
    )
    validate_filter(v, filters)
    if not v.valid():
        raise FailedValidationError(v.errors)

    results, metadata = movies.get_all(read_string(title, ""), read_csv(genres, []), filters)
    return {"metadata": metadata, "movies": results}


@router.get("/{movie_id}", response_model=MovieEnvelope)
def get_movie(movie_id: str, movies: MovieCRUD = Depends(get_movie_crud)):
    """Get movie details by ID."""
    return {"movie": _fetch_movie(movies, movie_id)}


@router.patch("/{movie_id}", response_model=MovieEnvelope)
def update_movie(
    movie_id: str,
    movie_in: MovieInput,
    x_expected_version: str | None = Header(None),
    movies: MovieCRUD = Depends(get_movie_crud),
):
    """
    Update the fields present in the request body.

    If an X-Expected-Version header is sent, it must equal the stored
    version or the request fails with an edit conflict.
    """
    movie = _fetch_movie(movies, movie_id)

    if x_expected_version and not _expected_version_matches(x_expected_version, movie.version):
        raise EditConflictError()

    _copy_input(movie_in, movie)
    _check_movie(movie)

    movies.update(movie)
    logger.info(f"Updated movie {movie.id} to version {movie.version}")
    return {"movie": movie}


@router.delete("/{movie_id}", response_model=MessageEnvelope)
def delete_movie(movie_id: str, movies: MovieCRUD = Depends(get_movie_crud)):
    """Delete a movie by ID."""
    movies.delete(read_id_param(movie_id))
    logger.info(f"Deleted movie {movie_id}")
    return {"message": "movie successfully deleted"}

"""
Pydantic schemas for Movie API.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# Range of the 32-bit integer columns
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class MovieInput(BaseModel):
    """
    Request body for creating or updating a movie.

    Every field is optional at the schema level: missing fields on create are
    reported by the business rules, and on update they are left unchanged.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    year: int | None = Field(None, ge=INT32_MIN, le=INT32_MAX)
    runtime: int | None = Field(None, ge=INT32_MIN, le=INT32_MAX)
    genres: list[str] | None = None


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    year: int
    runtime: int
    genres: list[str]
    version: int
    created_at: datetime | None = None


class MovieEnvelope(BaseModel):
    """Envelope wrapping a single movie."""

    movie: MovieResponse


class MetadataResponse(BaseModel):
    """Pagination metadata of a movie list."""

    model_config = ConfigDict(from_attributes=True)

    current_page: int
    page_size: int
    first_page: int
    last_page: int
    total_records: int


class MovieListEnvelope(BaseModel):
    """Envelope wrapping one page of movies and its pagination metadata."""

    metadata: MetadataResponse
    movies: list[MovieResponse]


class MessageEnvelope(BaseModel):
    """Envelope wrapping a human-readable message."""

    message: str

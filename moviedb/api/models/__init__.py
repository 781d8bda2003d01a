"""
Pydantic schemas for API request/response validation.
"""

from moviedb.api.models.movie import (
    MovieInput,
    MovieResponse,
    MovieEnvelope,
    MetadataResponse,
    MovieListEnvelope,
    MessageEnvelope,
)
from moviedb.api.models.system import HealthResponse, SystemInfo

__all__ = [
    "MovieInput",
    "MovieResponse",
    "MovieEnvelope",
    "MetadataResponse",
    "MovieListEnvelope",
    "MessageEnvelope",
    "HealthResponse",
    "SystemInfo",
]

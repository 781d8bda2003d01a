"""
SQLAlchemy ORM models for the movie database.

This module defines the movies table. Genres are a native text array on
PostgreSQL and a JSON array on SQLite.
"""

from datetime import datetime
from typing import List
from sqlalchemy import Integer, Text, TIMESTAMP, JSON
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func

from moviedb.core.movie import Movie


GenreList = ARRAY(Text).with_variant(JSON(), "sqlite")


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class MovieRecord(Base):
    """
    Movie table.

    Attributes:
        id: Primary key, auto-incremented
        created_at: Timestamp when record was created
        title: Movie title
        year: Release year
        runtime: Runtime in minutes
        genres: Genre names
        version: Incremented on every successful update
    """
    __tablename__ = 'movies'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.current_timestamp()
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    runtime: Mapped[int] = mapped_column(Integer, nullable=False)
    genres: Mapped[List[str]] = mapped_column(GenreList, nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default="1")

    def to_movie(self) -> Movie:
        """Copy this row into a Movie entity."""
        return Movie(
            id=self.id,
            title=self.title,
            year=self.year,
            runtime=self.runtime,
            genres=list(self.genres),
            version=self.version,
            created_at=self.created_at,
        )

    def __repr__(self) -> str:
        return f"<MovieRecord(id={self.id}, title='{self.title}', year={self.year}, version={self.version})>"

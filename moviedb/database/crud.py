"""
Movie store: CRUD operations for the movies table.

MovieCRUD is the interface the API depends on. SQLMovieCRUD runs
parameterized statements through SQLAlchemy, each bounded by the store's
per-operation timeout. MockMovieCRUD is a no-op stand-in for tests.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Generator, List, Optional, Tuple
from sqlalchemy import Text, and_, delete, func, literal, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from moviedb.core.filters import Filter, Metadata, calculate_metadata
from moviedb.core.movie import Movie
from moviedb.database.connection import DatabaseManager, statement_deadline
from moviedb.database.errors import EditConflictError, RecordNotFoundError, StoreError
from moviedb.database.models import MovieRecord

logger = logging.getLogger(__name__)


DEFAULT_QUERY_TIMEOUT = 3.0


class MovieCRUD(ABC):
    """Abstract interface of the movie store."""

    @abstractmethod
    def insert(self, movie: Movie) -> None:
        """
        Insert a new movie.

        The store assigns id, created_at and version and writes them back
        into `movie`.
        """

    @abstractmethod
    def get(self, movie_id: int) -> Movie:
        """
        Get a movie by ID.

        Raises:
            RecordNotFoundError: If movie_id < 1 or no row matches
        """

    @abstractmethod
    def update(self, movie: Movie) -> int:
        """
        Replace title, year, runtime and genres of `movie`.

        The update only applies while the stored version still equals
        movie.version. On success movie.version is set to the new version,
        which is also returned.

        Raises:
            EditConflictError: If the row was modified or deleted meanwhile
        """

    @abstractmethod
    def delete(self, movie_id: int) -> None:
        """
        Delete a movie by ID.

        Raises:
            RecordNotFoundError: If movie_id < 1 or no row matches
        """

    @abstractmethod
    def get_all(self, title: str, genres: List[str], filters: Filter) -> Tuple[List[Movie], Metadata]:
        """
        List movies matching title and genres, one page at a time.

        Args:
            title: Case-insensitive partial title match ('' matches all)
            genres: Genres every result must contain ([] matches all)
            filters: Validated page, page size and sort parameters

        Returns:
            Tuple of (movies on the requested page, pagination metadata)
        """


class SQLMovieCRUD(MovieCRUD):
    """
    Movie store backed by a SQL database.

    Usage:
        movies = SQLMovieCRUD(db_manager, timeout=3.0)
        movie = Movie(title="Moana", year=2016, runtime=107, genres=["animation"])
        movies.insert(movie)
    """

    def __init__(self, db_manager: DatabaseManager, timeout: float = DEFAULT_QUERY_TIMEOUT):
        """
        Initialize the store.

        Args:
            db_manager: Database manager owning the engine and connection pool
            timeout: Per-operation deadline in seconds
        """
        self.db = db_manager
        self.timeout = timeout

    @contextmanager
    def _session(self) -> Generator[Session, None, None]:
        """Open a transactional session bounded by the store timeout."""
        try:
            with self.db.session_scope() as session, statement_deadline(session, self.timeout):
                yield session
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e

    def insert(self, movie: Movie) -> None:
        record = MovieRecord(
            title=movie.title,
            year=movie.year,
            runtime=movie.runtime,
            genres=list(movie.genres),
        )
        with self._session() as session:
            session.add(record)
            session.flush()
            session.refresh(record)

            movie.id = record.id
            movie.created_at = record.created_at
            movie.version = record.version

        logger.debug(f"Inserted movie {movie.id}")

    def get(self, movie_id: int) -> Movie:
        if movie_id < 1:
            raise RecordNotFoundError()

        with self._session() as session:
            record = session.get(MovieRecord, movie_id)
            if record is None:
                raise RecordNotFoundError()
            return record.to_movie()

    def update(self, movie: Movie) -> int:
        stmt = (
            update(MovieRecord)
            .where(MovieRecord.id == movie.id, MovieRecord.version == movie.version)
            .values(
                title=movie.title,
                year=movie.year,
                runtime=movie.runtime,
                genres=list(movie.genres),
                version=MovieRecord.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        with self._session() as session:
            result = session.execute(stmt)
            if result.rowcount == 0:
                raise EditConflictError()

        movie.version += 1
        logger.debug(f"Updated movie {movie.id} to version {movie.version}")
        return movie.version

    def delete(self, movie_id: int) -> None:
        if movie_id < 1:
            raise RecordNotFoundError()

        stmt = (
            delete(MovieRecord)
            .where(MovieRecord.id == movie_id)
            .execution_options(synchronize_session=False)
        )
        with self._session() as session:
            result = session.execute(stmt)
            if result.rowcount == 0:
                raise RecordNotFoundError()

        logger.debug(f"Deleted movie {movie_id}")

    def get_all(self, title: str, genres: List[str], filters: Filter) -> Tuple[List[Movie], Metadata]:
        total = func.count().over().label("total_records")
        stmt = select(MovieRecord, total)

        if title:
            stmt = stmt.where(func.lower(MovieRecord.title, type_=Text).contains(title.lower(), autoescape=True))
        if genres:
            stmt = stmt.where(self._contains_genres(genres))

        column = getattr(MovieRecord, filters.sort_column())
        order = column.desc() if filters.sort_direction() == "DESC" else column.asc()
        stmt = (
            stmt.order_by(order, MovieRecord.id.asc())
            .limit(filters.limit())
            .offset(filters.offset())
        )

        with self._session() as session:
            rows = session.execute(stmt).all()
            movies = [record.to_movie() for record, _ in rows]
            total_records = rows[0].total_records if rows else 0

        metadata = calculate_metadata(total_records, filters.page, filters.page_size)
        return movies, metadata

    def _contains_genres(self, genres: List[str]):
        """Build a clause matching rows whose genres include all of `genres`."""
        if self.db.dialect == "postgresql":
            return MovieRecord.genres.contains(genres)

        # SQLite keeps genres as a JSON array
        clauses = []
        for genre in genres:
            values = func.json_each(MovieRecord.genres).table_valued("value")
            clauses.append(
                select(literal(1)).select_from(values).where(values.c.value == genre).exists()
            )
        return and_(*clauses)


class MockMovieCRUD(MovieCRUD):
    """No-op movie store for tests that do not need a database."""

    def insert(self, movie: Movie) -> None:
        return None

    def get(self, movie_id: int) -> Optional[Movie]:
        return None

    def update(self, movie: Movie) -> int:
        return movie.version

    def delete(self, movie_id: int) -> None:
        return None

    def get_all(self, title: str, genres: List[str], filters: Filter) -> Tuple[List[Movie], Metadata]:
        return [], Metadata()

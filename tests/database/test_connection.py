"""
Unit tests for database connection management and schema initialization.
"""

import time

import pytest
from sqlalchemy import text

from moviedb.core.movie import Movie
from moviedb.database.connection import DatabaseManager, statement_deadline
from moviedb.database.crud import SQLMovieCRUD
from moviedb.database.errors import QueryTimeoutError
from moviedb.database.init_db import init_database, verify_schema


# Counts far enough that only an interrupt ends the statement in time
SLOW_QUERY = text(
    "WITH RECURSIVE c(x) AS (SELECT 1 UNION ALL SELECT x + 1 FROM c WHERE x < 100000000000) "
    "SELECT count(*) FROM c"
)


@pytest.fixture
def db_manager():
    manager = DatabaseManager("sqlite:///:memory:")
    yield manager
    manager.close()


class TestDatabaseManager:
    """Tests for engine creation and sessions."""

    def test_sqlite_dialect(self, db_manager):
        assert db_manager.dialect == "sqlite"

    def test_default_url_is_sqlite_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        manager = DatabaseManager()
        try:
            assert manager.database_url.startswith("sqlite:///")
            assert manager.database_url.endswith("moviedb.db")
            assert (tmp_path / "data").is_dir()
        finally:
            manager.close()

    def test_file_database_creates_directory(self, tmp_path):
        db_file = tmp_path / "nested" / "movies.db"
        manager = DatabaseManager(f"sqlite:///{db_file}")
        try:
            manager.create_tables()
            assert db_file.exists()
        finally:
            manager.close()

    def test_session_scope_rolls_back_on_error(self, db_manager):
        db_manager.create_tables()

        with pytest.raises(RuntimeError):
            with db_manager.session_scope() as session:
                session.execute(text(
                    "INSERT INTO movies (title, year, runtime, genres, version) "
                    "VALUES ('Moana', 2016, 107, '[\"animation\"]', 1)"
                ))
                raise RuntimeError("boom")

        with db_manager.session_scope() as session:
            assert session.execute(text("SELECT count(*) FROM movies")).scalar() == 0

    def test_file_database_sessions_use_separate_connections(self, tmp_path):
        manager = DatabaseManager(f"sqlite:///{tmp_path / 'movies.db'}")
        try:
            manager.create_tables()
            store = SQLMovieCRUD(manager)
            movie = Movie(title="Moana", year=2016, runtime=107, genres=["animation"])
            store.insert(movie)

            a = manager.SessionLocal()
            b = manager.SessionLocal()
            try:
                conn_a = a.connection().connection.dbapi_connection
                conn_b = b.connection().connection.dbapi_connection
                assert conn_a is not conn_b

                b.execute(text("SELECT count(*) FROM movies")).scalar()
                a.execute(
                    text("UPDATE movies SET version = version + 1 WHERE id = :id AND version = 1"),
                    {"id": movie.id},
                )
                b.rollback()
                a.commit()
            finally:
                a.close()
                b.close()

            assert store.get(movie.id).version == 2
        finally:
            manager.close()

    def test_memory_database_is_shared_between_sessions(self, db_manager):
        db_manager.create_tables()
        with db_manager.session_scope() as session:
            session.execute(text(
                "INSERT INTO movies (title, year, runtime, genres) "
                "VALUES ('Moana', 2016, 107, '[\"animation\"]')"
            ))

        with db_manager.session_scope() as session:
            assert session.execute(text("SELECT count(*) FROM movies")).scalar() == 1


class TestStatementDeadline:
    """Tests for the per-operation timeout."""

    def test_fast_statement_passes(self, db_manager):
        with db_manager.session_scope() as session:
            with statement_deadline(session, 5.0):
                assert session.execute(text("SELECT 1")).scalar() == 1

    def test_slow_statement_is_cancelled(self, db_manager):
        start = time.monotonic()
        with pytest.raises(QueryTimeoutError):
            with db_manager.session_scope() as session:
                with statement_deadline(session, 0.1):
                    session.execute(SLOW_QUERY).scalar()
        assert time.monotonic() - start < 10

    def test_non_timeout_errors_pass_through(self, db_manager):
        from sqlalchemy.exc import OperationalError

        with pytest.raises(OperationalError):
            with db_manager.session_scope() as session:
                with statement_deadline(session, 5.0):
                    session.execute(text("SELECT * FROM no_such_table"))


class TestInitDatabase:
    """Tests for schema creation and verification."""

    def test_verify_schema_before_and_after(self, db_manager):
        assert verify_schema(db_manager) is False
        init_database(db_manager=db_manager)
        assert verify_schema(db_manager) is True

    def test_reset_drops_rows(self, db_manager):
        init_database(db_manager=db_manager)
        with db_manager.session_scope() as session:
            session.execute(text(
                "INSERT INTO movies (title, year, runtime, genres) "
                "VALUES ('Moana', 2016, 107, '[\"animation\"]')"
            ))

        init_database(db_manager=db_manager, reset=True)

        with db_manager.session_scope() as session:
            assert session.execute(text("SELECT count(*) FROM movies")).scalar() == 0

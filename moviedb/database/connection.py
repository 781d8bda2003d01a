"""
Database connection management using SQLAlchemy.

This module handles engine creation (SQLite for development and tests,
PostgreSQL in production), session management, and the per-statement
deadline used by the movie store.
"""

import logging
import os
import threading
from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from moviedb.database.errors import QueryTimeoutError
from moviedb.database.models import Base

logger = logging.getLogger(__name__)


# Default database path
DEFAULT_DB_PATH = "data/moviedb.db"


def get_database_url(db_path: str = DEFAULT_DB_PATH) -> str:
    """
    Get SQLite database URL for a file path.

    Args:
        db_path: Path to SQLite database file

    Returns:
        SQLAlchemy database URL
    """
    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)

    abs_path = os.path.abspath(db_path)

    # SQLite URL format: sqlite:///path/to/database.db
    return f"sqlite:///{abs_path}"


class DatabaseManager:
    """
    Database connection manager.

    Handles engine creation, session management, and database initialization.
    Pool limits only apply to server databases. An in-memory SQLite database
    shares one connection through a StaticPool; a SQLite file gets one
    connection per session.
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        echo: bool = False,
        pool_size: int = 25,
        max_overflow: int = 0,
        pool_timeout: float = 30.0,
        pool_recycle: int = 900,
    ):
        """
        Initialize database manager.

        Args:
            database_url: SQLAlchemy URL (default: SQLite file at DEFAULT_DB_PATH)
            echo: If True, log all SQL statements (useful for debugging)
            pool_size: Connections kept open in the pool
            max_overflow: Extra connections allowed above pool_size
            pool_timeout: Seconds to wait for a free connection
            pool_recycle: Seconds after which a connection is replaced
        """
        self.database_url = database_url or get_database_url()
        url = make_url(self.database_url)

        if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
            # All sessions must see the same in-memory database
            self.engine = create_engine(
                self.database_url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool
            )
        elif url.get_backend_name() == "sqlite":
            db_dir = os.path.dirname(url.database)
            if db_dir:
                os.makedirs(db_dir, exist_ok=True)

            self.engine = create_engine(
                self.database_url,
                echo=echo,
                connect_args={"check_same_thread": False},
            )
        else:
            self.engine = create_engine(
                self.database_url,
                echo=echo,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
                pool_recycle=pool_recycle,
                pool_pre_ping=True,
            )

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )

        logger.info(f"Database engine created ({url.render_as_string(hide_password=True)})")

    @property
    def dialect(self) -> str:
        """Name of the engine's SQL dialect, e.g. 'sqlite' or 'postgresql'."""
        return self.engine.dialect.name

    def create_tables(self):
        """
        Create all tables defined in the models.

        This creates tables if they don't exist. Existing tables are not modified.
        """
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        """
        Drop all tables defined in the models.

        WARNING: This will delete all data in the database!
        """
        Base.metadata.drop_all(bind=self.engine)

    def reset_database(self):
        """
        Drop and recreate all tables.

        WARNING: This will delete all data in the database!
        """
        self.drop_tables()
        self.create_tables()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.

        Automatically commits on success and rolls back on failure.

        Usage:
            with db_manager.session_scope() as session:
                session.add(record)

        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self):
        """Close the database engine and all connections."""
        self.engine.dispose()


@contextmanager
def statement_deadline(session: Session, timeout: float) -> Generator[None, None, None]:
    """
    Bound the statements run inside the block to `timeout` seconds.

    When the deadline passes, the running statement is cancelled on the DBAPI
    connection (sqlite3 interrupt(), psycopg cancel()) and the resulting
    driver error is raised as QueryTimeoutError.

    Args:
        session: Session whose connection runs the statements
        timeout: Deadline in seconds

    Raises:
        QueryTimeoutError: If the deadline passed while a statement was running
    """
    dbapi_conn = session.connection().connection.dbapi_connection
    cancel = getattr(dbapi_conn, "interrupt", None) or getattr(dbapi_conn, "cancel", None)
    expired = threading.Event()

    def _expire():
        expired.set()
        if cancel is not None:
            cancel()

    timer = threading.Timer(timeout, _expire)
    timer.daemon = True
    timer.start()
    try:
        yield
    except DBAPIError as e:
        if expired.is_set():
            raise QueryTimeoutError(f"statement exceeded {timeout}s deadline") from e
        raise
    finally:
        timer.cancel()


# Global database manager instance (singleton pattern)
_db_manager = None


def get_db_manager(database_url: Optional[str] = None, **engine_options) -> DatabaseManager:
    """
    Get or create the global database manager instance.

    Args:
        database_url: SQLAlchemy URL used when the manager is first created
        **engine_options: Pool and echo options passed to DatabaseManager

    Returns:
        DatabaseManager instance
    """
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(database_url=database_url, **engine_options)
    return _db_manager

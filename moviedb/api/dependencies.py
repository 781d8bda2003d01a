"""
FastAPI dependency injection for the database manager and movie store.
"""

import logging

from moviedb.api.config import (
    get_database_url,
    get_db_echo,
    get_db_max_overflow,
    get_db_pool_recycle,
    get_db_pool_size,
    get_db_pool_timeout,
    get_db_query_timeout,
)
from moviedb.database.connection import DatabaseManager, get_db_manager
from moviedb.database.crud import MovieCRUD, SQLMovieCRUD

logger = logging.getLogger(__name__)


def get_database() -> DatabaseManager:
    """Get the process-wide database manager, configured from env."""
    return get_db_manager(
        database_url=get_database_url(),
        echo=get_db_echo(),
        pool_size=get_db_pool_size(),
        max_overflow=get_db_max_overflow(),
        pool_timeout=get_db_pool_timeout(),
        pool_recycle=get_db_pool_recycle(),
    )


# Singleton movie store
_movie_crud: MovieCRUD | None = None


def get_movie_crud() -> MovieCRUD:
    """Get or create the singleton SQL movie store."""
    global _movie_crud
    if _movie_crud is None:
        timeout = get_db_query_timeout()
        _movie_crud = SQLMovieCRUD(get_database(), timeout=timeout)
        logger.info(f"Movie store ready (query timeout: {timeout}s)")
    return _movie_crud

"""
Database module for the movie API.

This module provides the ORM model, connection management, and the movie
store (SQL-backed and mock) used by the API.
"""

from moviedb.database.models import Base, MovieRecord
from moviedb.database.connection import DatabaseManager, get_db_manager, statement_deadline
from moviedb.database.init_db import init_database, verify_schema
from moviedb.database.errors import (
    StoreError,
    RecordNotFoundError,
    EditConflictError,
    QueryTimeoutError,
)
from moviedb.database.crud import MovieCRUD, SQLMovieCRUD, MockMovieCRUD

__all__ = [
    # Models
    'Base',
    'MovieRecord',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    'statement_deadline',
    # Initialization
    'init_database',
    'verify_schema',
    # Errors
    'StoreError',
    'RecordNotFoundError',
    'EditConflictError',
    'QueryTimeoutError',
    # Store
    'MovieCRUD',
    'SQLMovieCRUD',
    'MockMovieCRUD',
]

"""
Database initialization and schema creation.

Tables are created when missing; existing tables are never altered.
"""

import logging
from typing import Optional
from sqlalchemy import inspect

from moviedb.database.connection import DatabaseManager, get_db_manager

logger = logging.getLogger(__name__)


EXPECTED_TABLES = {'movies'}


def init_database(
    database_url: Optional[str] = None,
    reset: bool = False,
    db_manager: Optional[DatabaseManager] = None,
) -> DatabaseManager:
    """
    Initialize the database and create all tables.

    Args:
        database_url: SQLAlchemy URL (ignored when db_manager is given)
        reset: If True, drop existing tables before creating new ones
        db_manager: Manager to initialize (default: the global manager)

    Returns:
        DatabaseManager instance
    """
    db_manager = db_manager or get_db_manager(database_url=database_url)

    if reset:
        logger.warning("Resetting database (dropping all tables)...")
        db_manager.reset_database()
        logger.info("Database reset complete.")
    else:
        db_manager.create_tables()
        logger.info("Database tables created.")

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    inspector = inspect(db_manager.engine)
    existing_tables = set(inspector.get_table_names())

    missing_tables = EXPECTED_TABLES - existing_tables

    if missing_tables:
        logger.error(f"Missing tables: {missing_tables}")
        return False

    logger.info(f"All tables exist: {existing_tables}")
    return True

"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

from moviedb import __version__


def get_database_url() -> str:
    """Get SQLAlchemy database URL from env or default SQLite file."""
    return os.getenv("DATABASE_URL", "") or "sqlite:///" + str(
        Path(__file__).resolve().parents[2] / "data" / "moviedb.db"
    )


def get_db_pool_size() -> int:
    """Get number of pooled database connections."""
    return int(os.getenv("DB_POOL_SIZE", "25"))


def get_db_max_overflow() -> int:
    """Get number of connections allowed above the pool size."""
    return int(os.getenv("DB_MAX_OVERFLOW", "0"))


def get_db_pool_timeout() -> float:
    """Get seconds to wait for a free pooled connection."""
    return float(os.getenv("DB_POOL_TIMEOUT", "30"))


def get_db_pool_recycle() -> int:
    """Get seconds after which pooled connections are replaced."""
    return int(os.getenv("DB_POOL_RECYCLE", "900"))


def get_db_query_timeout() -> float:
    """Get per-operation database timeout in seconds."""
    return float(os.getenv("DB_QUERY_TIMEOUT", "3"))


def get_db_echo() -> bool:
    """Log SQL statements if DB_ECHO is set."""
    return os.getenv("DB_ECHO", "false").lower() in ("1", "true", "yes")


def get_auto_create_tables() -> bool:
    """Create missing tables at startup unless disabled."""
    return os.getenv("AUTO_CREATE_TABLES", "true").lower() in ("1", "true", "yes")


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name under logs/, or None to log to console only."""
    return os.getenv("LOG_FILE") or None


def get_environment() -> str:
    """Get deployment environment name."""
    return os.getenv("APP_ENV", "development")


def get_version() -> str:
    """Get application version."""
    return __version__


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))

"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

from app.database.connection import get_database_url as build_mysql_url

DEFAULT_SEED_PATH = Path(__file__).resolve().parents[1] / "data" / "movies.json"


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("PORT", "1234"))


def get_store_backend() -> str:
    """Get movie store backend: 'memory' or 'sql'."""
    backend = os.getenv("MOVIE_STORE", "memory").strip().lower()
    if backend not in ("memory", "sql"):
        raise ValueError(f"MOVIE_STORE must be 'memory' or 'sql', got {backend!r}")
    return backend


def get_seed_path() -> str | None:
    """Get the JSON seed file for the in-memory store; empty disables seeding."""
    path = os.getenv("MOVIES_SEED_PATH")
    if path is None:
        return str(DEFAULT_SEED_PATH)
    return path or None


def get_database_url() -> str:
    """Get database URL from DATABASE_URL or the DB_* variables."""
    url = os.getenv("DATABASE_URL", "")
    if url:
        return url
    return build_mysql_url(
        host=os.getenv("DB_HOST", "localhost"),
        user=os.getenv("DB_USER", "root"),
        password=os.getenv("DB_PASSWORD", ""),
        port=int(os.getenv("DB_PORT", "3306")),
        database=os.getenv("DB_NAME", "moviesdb"),
    )


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name under logs/; empty logs to console only."""
    return os.getenv("LOG_FILE", "api.log") or None


def get_cors_origins() -> list[str]:
    """Get allowed CORS origins."""
    return [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

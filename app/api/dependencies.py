"""
FastAPI dependency injection for the movie store.
"""

import logging
import threading

from app.api.config import get_database_url, get_seed_path, get_store_backend
from app.core.memory_store import InMemoryMovieStore
from app.core.store import MovieStore
from app.database.connection import get_db_manager
from app.database.init_db import init_database
from app.database.sql_store import SqlMovieStore

logger = logging.getLogger(__name__)

# Singleton movie store
_movie_store: MovieStore | None = None
_movie_store_lock = threading.Lock()


def create_movie_store(backend: str | None = None) -> MovieStore:
    """Build the store selected by MOVIE_STORE (or ``backend``)."""
    backend = backend or get_store_backend()
    if backend == "sql":
        db_manager = init_database(get_db_manager(get_database_url()))
        return SqlMovieStore(db_manager)
    seed_path = get_seed_path()
    if seed_path:
        return InMemoryMovieStore.from_json(seed_path)
    return InMemoryMovieStore()


def get_movie_store() -> MovieStore:
    """Get or create singleton MovieStore."""
    global _movie_store
    with _movie_store_lock:
        if _movie_store is None:
            _movie_store = create_movie_store()
            logger.info("Using %s movie store", _movie_store.name)
    return _movie_store

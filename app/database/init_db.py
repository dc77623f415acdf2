"""
Database initialization and schema creation.

This module creates the tables, seeds the fixed genre list and can load an
initial set of movies from a JSON file.
"""

import argparse
import logging
from sqlalchemy import inspect

from app.api.models.movie import GENRES, MovieCreate
from app.core.memory_store import load_seed_movies
from app.core.store import parse_movie_id
from app.database import crud
from app.database.connection import DatabaseManager

logger = logging.getLogger(__name__)

EXPECTED_TABLES = {'movies', 'genres', 'movie_genres'}


def init_database(db_manager: DatabaseManager, reset: bool = False) -> DatabaseManager:
    """
    Create all tables and seed the genres.

    Args:
        db_manager: DatabaseManager instance
        reset: If True, drop existing tables before creating new ones

    Returns:
        The same DatabaseManager instance
    """
    if reset:
        logger.warning("Resetting database (dropping all tables)")
        db_manager.reset_database()
    else:
        db_manager.create_tables()

    with db_manager.session_scope() as session:
        added = crud.seed_genres(session, GENRES)
    logger.info("Database tables ready (%d genres added)", added)
    return db_manager


def seed_movies(db_manager: DatabaseManager, path: str) -> int:
    """
    Load movies from a JSON file, keeping their ids.

    Movies whose id already exists are skipped.

    Args:
        db_manager: DatabaseManager instance
        path: Path to a JSON array of movies

    Returns:
        Number of movies inserted
    """
    inserted = 0
    with db_manager.session_scope() as session:
        for movie in load_seed_movies(path):
            movie_id = parse_movie_id(movie.id)
            if crud.get_movie(session, movie_id) is not None:
                continue
            fields = MovieCreate.model_validate(movie.model_dump(exclude={"id"})).model_dump()
            crud.create_movie(session, movie_id=movie_id, **fields)
            inserted += 1
    logger.info("Seeded %d movies from %s", inserted, path)
    return inserted


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    inspector = inspect(db_manager.engine)
    missing_tables = EXPECTED_TABLES - set(inspector.get_table_names())

    if missing_tables:
        logger.error("Missing tables: %s", sorted(missing_tables))
        return False
    return True


def main(argv=None) -> int:
    from app.api.config import get_database_url, get_log_level
    from app.utils.logging_config import setup_logging

    parser = argparse.ArgumentParser(description="Initialize the movies database")
    parser.add_argument("--reset", action="store_true", help="Drop all tables first")
    parser.add_argument("--seed", metavar="PATH", help="JSON file of movies to load")
    args = parser.parse_args(argv)

    setup_logging(level=get_log_level())
    db_manager = init_database(DatabaseManager(get_database_url()), reset=args.reset)
    if args.seed:
        seed_movies(db_manager, args.seed)
    return 0 if verify_schema(db_manager) else 1


if __name__ == "__main__":
    raise SystemExit(main())

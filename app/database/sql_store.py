"""
Relational movie store.

Each operation runs in its own session; writes commit as one transaction so
a movie is never visible without all of its genre links.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from app.api.models.movie import MovieCreate, MovieResponse, MovieUpdate
from app.core.errors import StorageError
from app.core.store import MovieStore, parse_movie_id
from app.database import crud
from app.database.connection import DatabaseManager
from app.database.models import Movie

logger = logging.getLogger(__name__)


def to_response(movie: Movie) -> MovieResponse:
    """Convert an ORM movie (with genre links loaded) to its API shape."""
    return MovieResponse(
        id=str(movie.id),
        title=movie.title,
        year=movie.year,
        director=movie.director,
        duration=movie.duration,
        poster=movie.poster,
        genre=movie.genre,
        rate=movie.rate,
    )


class SqlMovieStore(MovieStore):
    """Movie store backed by the movies/genres/movie_genres tables."""

    name = "sql"

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    def get_all(self, genre: str | None = None) -> list[MovieResponse]:
        try:
            with self.db_manager.session_scope() as session:
                return [to_response(m) for m in crud.get_movies(session, genre=genre)]
        except SQLAlchemyError as e:
            logger.exception("Failed to list movies")
            raise StorageError("Error fetching movies") from e

    def get_by_id(self, movie_id: str) -> MovieResponse | None:
        parsed = parse_movie_id(movie_id)
        if parsed is None:
            return None
        try:
            with self.db_manager.session_scope() as session:
                movie = crud.get_movie(session, parsed)
                return to_response(movie) if movie else None
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch movie %s", movie_id)
            raise StorageError("Error fetching movie") from e

    def create(self, movie: MovieCreate) -> MovieResponse:
        try:
            with self.db_manager.session_scope() as session:
                created = crud.create_movie(session, **movie.model_dump())
                result = to_response(created)
        except (SQLAlchemyError, crud.GenreNotFoundError) as e:
            logger.exception("Failed to create movie %r", movie.title)
            raise StorageError("Error creating movie") from e
        logger.info("Created movie %s (%s)", result.id, result.title)
        return result

    def update(self, movie_id: str, changes: MovieUpdate) -> MovieResponse | None:
        parsed = parse_movie_id(movie_id)
        if parsed is None:
            return None
        fields = changes.changes()
        try:
            with self.db_manager.session_scope() as session:
                movie = crud.get_movie(session, parsed)
                if movie is None:
                    return None
                if fields:
                    crud.update_movie(session, movie, fields)
                result = to_response(movie)
        except (SQLAlchemyError, crud.GenreNotFoundError) as e:
            logger.exception("Failed to update movie %s", movie_id)
            raise StorageError("Error updating movie") from e
        if fields:
            logger.info("Updated movie %s: %s", result.id, sorted(fields))
        return result

    def delete(self, movie_id: str) -> bool:
        parsed = parse_movie_id(movie_id)
        if parsed is None:
            return False
        try:
            with self.db_manager.session_scope() as session:
                movie = crud.get_movie(session, parsed)
                if movie is None:
                    return False
                crud.delete_movie(session, movie)
        except SQLAlchemyError as e:
            logger.exception("Failed to delete movie %s", movie_id)
            raise StorageError("Error deleting movie") from e
        logger.info("Deleted movie %s", movie_id)
        return True

    def count(self) -> int:
        try:
            with self.db_manager.session_scope() as session:
                return crud.get_movie_count(session)
        except SQLAlchemyError as e:
            logger.exception("Failed to count movies")
            raise StorageError("Error counting movies") from e

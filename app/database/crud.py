"""
CRUD operations for Movie and Genre models.

Functions here only add, flush and query; committing is left to the caller
(``DatabaseManager.session_scope()``) so a movie and its genre links are
written in one transaction.
"""

import uuid
from typing import Iterable, List, Optional, Dict, Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from app.database.models import Movie, Genre, MovieGenre

# Scalar columns a partial update may touch; genre links are handled separately.
UPDATABLE_COLUMNS = ("title", "year", "director", "duration", "poster", "rate")


class GenreNotFoundError(LookupError):
    """Raised when a genre name has no row in the genres table."""


# ==================== GENRE OPERATIONS ====================

def get_genre_by_name(session: Session, name: str) -> Optional[Genre]:
    """
    Get a genre by name, ignoring case.

    Args:
        session: Database session
        name: Genre name

    Returns:
        Genre object or None if not found
    """
    return session.scalars(
        select(Genre).where(func.lower(Genre.name) == name.lower())
    ).first()


def get_genres(session: Session) -> List[Genre]:
    """Get all genres ordered by id."""
    return list(session.scalars(select(Genre).order_by(Genre.id)))


def seed_genres(session: Session, names: Iterable[str]) -> int:
    """
    Insert the genres that are not in the table yet.

    Args:
        session: Database session
        names: Genre names

    Returns:
        Number of genres added
    """
    existing = {g.name.lower() for g in get_genres(session)}
    added = 0
    for name in names:
        if name.lower() not in existing:
            session.add(Genre(name=name))
            existing.add(name.lower())
            added += 1
    session.flush()
    return added


def set_movie_genres(session: Session, movie: Movie, names: List[str]) -> None:
    """
    Replace the genre links of a movie, keeping the order of ``names``.

    Raises:
        GenreNotFoundError: If a name has no genre row
    """
    genres = []
    for name in names:
        genre = get_genre_by_name(session, name)
        if genre is None:
            raise GenreNotFoundError(f'Genre "{name}" does not exist.')
        genres.append(genre)

    movie.genre_links.clear()
    # Flush the removals first so (movie_id, position) keys can be reused
    session.flush()
    for position, genre in enumerate(genres):
        movie.genre_links.append(MovieGenre(position=position, genre=genre))
    session.flush()


# ==================== MOVIE OPERATIONS ====================

def _movie_query():
    return select(Movie).options(
        selectinload(Movie.genre_links).joinedload(MovieGenre.genre)
    )


def get_movie(session: Session, movie_id: uuid.UUID) -> Optional[Movie]:
    """
    Get a movie by ID.

    Args:
        session: Database session
        movie_id: Movie UUID

    Returns:
        Movie object or None if not found
    """
    return session.scalars(_movie_query().where(Movie.id == movie_id)).first()


def get_movies(session: Session, genre: Optional[str] = None) -> List[Movie]:
    """
    Get all movies, optionally only those linked to a genre.

    Args:
        session: Database session
        genre: Genre name to filter by (case-insensitive)

    Returns:
        List of Movie objects in creation order
    """
    query = _movie_query()
    if genre:
        linked = (
            select(MovieGenre.movie_id)
            .join(Genre, Genre.id == MovieGenre.genre_id)
            .where(func.lower(Genre.name) == genre.lower())
        )
        query = query.where(Movie.id.in_(linked))
    return list(session.scalars(query.order_by(Movie.created_at)))


def get_movie_count(session: Session) -> int:
    """
    Get total count of movies.

    Args:
        session: Database session

    Returns:
        Total number of movies
    """
    return session.scalar(select(func.count(Movie.id)))


def create_movie(
    session: Session,
    title: str,
    year: int,
    director: str,
    duration: int,
    poster: str,
    genre: List[str],
    rate: float,
    movie_id: Optional[uuid.UUID] = None,
) -> Movie:
    """
    Create a new movie and link all of its genres.

    Args:
        session: Database session
        title: Movie title
        year: Release year
        director: Director name
        duration: Length in minutes
        poster: Poster URL
        genre: Genre names, linked in order
        rate: Rating from 0 to 10
        movie_id: Id to use instead of a fresh UUID (seeding)

    Returns:
        Created Movie object

    Raises:
        GenreNotFoundError: If a genre has no row in the genres table
    """
    movie = Movie(
        id=movie_id or uuid.uuid4(),
        title=title,
        year=year,
        director=director,
        duration=duration,
        poster=poster,
        rate=rate,
    )
    session.add(movie)
    session.flush()
    set_movie_genres(session, movie, genre)
    return movie


def update_movie(session: Session, movie: Movie, changes: Dict[str, Any]) -> Movie:
    """
    Apply a partial update to a movie.

    Args:
        session: Database session
        movie: Movie to update
        changes: Supplied fields; only UPDATABLE_COLUMNS and ``genre`` are used

    Returns:
        Updated Movie object
    """
    for column in UPDATABLE_COLUMNS:
        if column in changes:
            setattr(movie, column, changes[column])
    if "genre" in changes:
        set_movie_genres(session, movie, changes["genre"])
    session.flush()
    return movie


def delete_movie(session: Session, movie: Movie) -> None:
    """Delete a movie; its genre links are removed with it."""
    session.delete(movie)
    session.flush()

"""
Movie store interface.

Handlers talk to a ``MovieStore`` only, so the in-memory and relational
implementations are interchangeable.
"""

import uuid
from abc import ABC, abstractmethod

from app.api.models.movie import MovieCreate, MovieResponse, MovieUpdate


def parse_movie_id(movie_id: str) -> uuid.UUID | None:
    """Return the UUID for ``movie_id`` or None if it is not a well-formed UUID."""
    try:
        return uuid.UUID(movie_id)
    except (ValueError, TypeError, AttributeError):
        return None


class MovieStore(ABC):
    """Owns the canonical collection of movies."""

    name: str = "abstract"

    @abstractmethod
    def get_all(self, genre: str | None = None) -> list[MovieResponse]:
        """
        Get all movies, optionally only those having ``genre``.

        The genre match ignores case. An unknown genre yields an empty list.
        """

    @abstractmethod
    def get_by_id(self, movie_id: str) -> MovieResponse | None:
        """Get a movie by id; None for a malformed or unknown id."""

    @abstractmethod
    def create(self, movie: MovieCreate) -> MovieResponse:
        """
        Persist a validated movie under a fresh id.

        Raises:
            StorageError: If the write fails; nothing is persisted.
        """

    @abstractmethod
    def update(self, movie_id: str, changes: MovieUpdate) -> MovieResponse | None:
        """
        Merge the supplied fields of ``changes`` over an existing movie.

        Returns None if the id does not resolve. With no supplied fields the
        existing movie is returned and nothing is written.

        Raises:
            StorageError: If the write fails.
        """

    @abstractmethod
    def delete(self, movie_id: str) -> bool:
        """
        Delete a movie.

        Returns:
            True if the movie was deleted, False if not found

        Raises:
            StorageError: If the delete fails.
        """

    @abstractmethod
    def count(self) -> int:
        """Total number of stored movies."""

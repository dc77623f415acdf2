"""
In-process movie store backed by an ordered list.

The collection lives for the lifetime of the process; nothing is persisted
across restarts. All access is serialized by a single lock because FastAPI
runs sync handlers in a thread pool.
"""

import json
import logging
import threading
import uuid
from pathlib import Path
from typing import Iterable

from app.api.models.movie import MovieCreate, MovieResponse, MovieUpdate
from app.core.store import MovieStore, parse_movie_id

logger = logging.getLogger(__name__)


def load_seed_movies(path: str | Path) -> list[MovieResponse]:
    """
    Load movies from a JSON array file.

    Args:
        path: Path to a JSON file holding a list of movie objects with ids

    Returns:
        List of MovieResponse objects
    """
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return [MovieResponse.model_validate(item) for item in raw]


class InMemoryMovieStore(MovieStore):
    """Movie store keeping records in a list, in insertion order."""

    name = "memory"

    def __init__(self, movies: Iterable[MovieResponse] = ()):
        self._lock = threading.Lock()
        self._movies: list[MovieResponse] = []
        for movie in movies:
            movie_id = parse_movie_id(movie.id)
            if movie_id is None:
                raise ValueError(f"Invalid movie id: {movie.id!r}")
            self._movies.append(movie.model_copy(update={"id": str(movie_id)}, deep=True))

    @classmethod
    def from_json(cls, path: str | Path) -> "InMemoryMovieStore":
        movies = load_seed_movies(path)
        logger.info("Loaded %d movies from %s", len(movies), path)
        return cls(movies)

    def _index_of(self, movie_id: str) -> int:
        parsed = parse_movie_id(movie_id)
        if parsed is None:
            return -1
        key = str(parsed)
        for i, movie in enumerate(self._movies):
            if movie.id == key:
                return i
        return -1

    def get_all(self, genre: str | None = None) -> list[MovieResponse]:
        with self._lock:
            if not genre:
                return [m.model_copy(deep=True) for m in self._movies]
            wanted = genre.lower()
            return [
                m.model_copy(deep=True)
                for m in self._movies
                if any(g.lower() == wanted for g in m.genre)
            ]

    def get_by_id(self, movie_id: str) -> MovieResponse | None:
        with self._lock:
            index = self._index_of(movie_id)
            if index == -1:
                return None
            return self._movies[index].model_copy(deep=True)

    def create(self, movie: MovieCreate) -> MovieResponse:
        record = MovieResponse(id=str(uuid.uuid4()), **movie.model_dump())
        with self._lock:
            self._movies.append(record)
        logger.info("Created movie %s (%s)", record.id, record.title)
        return record.model_copy(deep=True)

    def update(self, movie_id: str, changes: MovieUpdate) -> MovieResponse | None:
        fields = changes.changes()
        with self._lock:
            index = self._index_of(movie_id)
            if index == -1:
                return None
            if not fields:
                return self._movies[index].model_copy(deep=True)
            updated = MovieResponse.model_validate({**self._movies[index].model_dump(), **fields})
            self._movies[index] = updated
        logger.info("Updated movie %s: %s", updated.id, sorted(fields))
        return updated.model_copy(deep=True)

    def delete(self, movie_id: str) -> bool:
        with self._lock:
            index = self._index_of(movie_id)
            if index == -1:
                return False
            removed = self._movies.pop(index)
        logger.info("Deleted movie %s", removed.id)
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._movies)

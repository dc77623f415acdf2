"""
Unit tests for the in-memory movie store.
"""

import json
import threading
import uuid

import pytest

from app.api.config import DEFAULT_SEED_PATH
from app.api.models.movie import MovieCreate, MovieResponse, MovieUpdate
from app.core.memory_store import InMemoryMovieStore, load_seed_movies


def make_movie(**overrides) -> MovieCreate:
    data = {
        "title": "Inception",
        "year": 2010,
        "director": "C. Nolan",
        "duration": 148,
        "poster": "https://x/p.jpg",
        "genre": ["Sci-Fi", "Action"],
        "rate": 8.8,
    }
    data.update(overrides)
    return MovieCreate.model_validate(data)


@pytest.fixture
def store():
    """An empty in-memory store."""
    return InMemoryMovieStore()


class TestCreateAndGet:
    """Tests for create, get_by_id and get_all."""

    def test_create_assigns_uuid(self, store):
        movie = store.create(make_movie())
        assert str(uuid.UUID(movie.id)) == movie.id
        assert movie.title == "Inception"
        assert movie.genre == ["Sci-Fi", "Action"]

    def test_create_then_get(self, store):
        """A created movie reads back equal in every field."""
        created = store.create(make_movie())
        assert store.get_by_id(created.id) == created

    def test_ids_are_unique(self, store):
        ids = {store.create(make_movie(title=f"Movie {i}")).id for i in range(20)}
        assert len(ids) == 20

    def test_get_unknown_id(self, store):
        assert store.get_by_id(str(uuid.uuid4())) is None

    def test_get_malformed_id(self, store):
        store.create(make_movie())
        assert store.get_by_id("not-a-uuid") is None

    def test_get_id_is_case_insensitive(self, store):
        created = store.create(make_movie())
        assert store.get_by_id(created.id.upper()) == created

    def test_get_all_keeps_order(self, store):
        titles = ["A", "B", "C"]
        for title in titles:
            store.create(make_movie(title=title))
        assert [m.title for m in store.get_all()] == titles

    def test_genre_filter_ignores_case(self, store):
        store.create(make_movie(title="Heat", genre=["Crime", "Action"]))
        store.create(make_movie(title="Up", genre=["Animation"]))
        store.create(make_movie(title="Ronin", genre=["Action"]))

        lower = store.get_all(genre="action")
        upper = store.get_all(genre="Action")
        assert lower == upper
        assert [m.title for m in lower] == ["Heat", "Ronin"]

    def test_unknown_genre_is_empty(self, store):
        store.create(make_movie())
        assert store.get_all(genre="Nonexistent") == []

    def test_returned_records_are_copies(self, store):
        """Mutating a returned record does not change the store."""
        created = store.create(make_movie())
        fetched = store.get_by_id(created.id)
        fetched.genre.append("Drama")
        fetched.title = "Changed"
        assert store.get_by_id(created.id) == created

    def test_count(self, store):
        assert store.count() == 0
        store.create(make_movie())
        assert store.count() == 1


class TestUpdate:
    """Tests for partial updates."""

    def test_update_changes_only_supplied_fields(self, store):
        created = store.create(make_movie())
        updated = store.update(created.id, MovieUpdate(rate=9))
        assert updated.rate == 9
        assert updated.model_dump(exclude={"rate"}) == created.model_dump(exclude={"rate"})
        assert store.get_by_id(created.id) == updated

    def test_update_genre(self, store):
        created = store.create(make_movie())
        updated = store.update(created.id, MovieUpdate(genre=["Drama"]))
        assert updated.genre == ["Drama"]
        assert store.get_all(genre="action") == []

    def test_empty_update_returns_existing(self, store):
        created = store.create(make_movie())
        assert store.update(created.id, MovieUpdate()) == created

    def test_update_unknown_id(self, store):
        assert store.update(str(uuid.uuid4()), MovieUpdate(rate=1)) is None
        assert store.update("garbage", MovieUpdate(rate=1)) is None


class TestDelete:
    """Tests for delete."""

    def test_delete_then_get(self, store):
        created = store.create(make_movie())
        assert store.delete(created.id) is True
        assert store.get_by_id(created.id) is None
        assert store.count() == 0

    def test_delete_unknown_id(self, store):
        assert store.delete(str(uuid.uuid4())) is False
        assert store.delete("garbage") is False

    def test_delete_twice(self, store):
        created = store.create(make_movie())
        assert store.delete(created.id) is True
        assert store.delete(created.id) is False


class TestSeeding:
    """Tests for loading seed movies from JSON."""

    def test_bundled_seed_file(self):
        store = InMemoryMovieStore.from_json(DEFAULT_SEED_PATH)
        movies = store.get_all()
        assert len(movies) == len(json.loads(DEFAULT_SEED_PATH.read_text(encoding="utf-8")))
        for movie in movies:
            assert store.get_by_id(movie.id) == movie

    def test_load_seed_movies(self, tmp_path):
        movie_id = str(uuid.uuid4())
        path = tmp_path / "movies.json"
        path.write_text(json.dumps([{"id": movie_id, **make_movie().model_dump()}]))
        movies = load_seed_movies(path)
        assert movies == [MovieResponse(id=movie_id, **make_movie().model_dump())]

    def test_seed_with_invalid_id(self):
        bad = MovieResponse(id="nope", **make_movie().model_dump())
        with pytest.raises(ValueError):
            InMemoryMovieStore([bad])


class TestConcurrency:
    """Concurrent writers must not corrupt the collection."""

    def test_parallel_creates_and_deletes(self, store):
        keep = [store.create(make_movie(title=f"keep {i}")) for i in range(10)]
        doomed = [store.create(make_movie(title=f"drop {i}")) for i in range(50)]

        def create_many():
            for i in range(50):
                store.create(make_movie(title=f"new {i}"))

        def delete_many():
            for movie in doomed:
                assert store.delete(movie.id) is True

        threads = [threading.Thread(target=create_many) for _ in range(4)]
        threads.append(threading.Thread(target=delete_many))
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert store.count() == 10 + 4 * 50
        for movie in keep:
            assert store.get_by_id(movie.id) == movie

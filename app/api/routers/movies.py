"""
Movie API endpoints.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from app.api.dependencies import get_movie_store
from app.api.models.movie import ErrorResponse, MessageResponse, MovieResponse
from app.core.errors import NotFoundError, ValidationError
from app.core.store import MovieStore
from app.core.validation import validate_full, validate_partial

router = APIRouter(prefix="/movies", tags=["movies"])

NOT_FOUND = {404: {"model": MessageResponse}}
INVALID = {400: {"model": ErrorResponse}}


@router.get("", response_model=list[MovieResponse])
def list_movies(
    genre: str | None = Query(None),
    store: MovieStore = Depends(get_movie_store),
):
    """List movies, optionally filtered by genre (case-insensitive)."""
    return store.get_all(genre=genre)


@router.get("/{movie_id}", response_model=MovieResponse, responses=NOT_FOUND)
def get_movie(movie_id: str, store: MovieStore = Depends(get_movie_store)):
    """Get movie details by ID."""
    movie = store.get_by_id(movie_id)
    if movie is None:
        raise NotFoundError()
    return movie


@router.post(
    "",
    response_model=MovieResponse,
    status_code=status.HTTP_201_CREATED,
    responses=INVALID,
)
def create_movie(
    payload: Any = Body(None),
    store: MovieStore = Depends(get_movie_store),
):
    """Create a movie; rate defaults to 5."""
    result = validate_full(payload)
    if not result.success:
        raise ValidationError(result.errors)
    return store.create(result.data)


@router.patch(
    "/{movie_id}",
    response_model=MovieResponse,
    responses={**INVALID, **NOT_FOUND},
)
def update_movie(
    movie_id: str,
    payload: Any = Body(None),
    store: MovieStore = Depends(get_movie_store),
):
    """Update only the supplied fields of a movie."""
    result = validate_partial(payload)
    if not result.success:
        raise ValidationError(result.errors)
    movie = store.update(movie_id, result.data)
    if movie is None:
        raise NotFoundError()
    return movie


@router.delete("/{movie_id}", response_model=MessageResponse, responses=NOT_FOUND)
def delete_movie(movie_id: str, store: MovieStore = Depends(get_movie_store)):
    """Delete a movie."""
    if not store.delete(movie_id):
        raise NotFoundError()
    return MessageResponse(message="Movie deleted")

"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.movie import (
    GENRES,
    ErrorResponse,
    FieldError,
    MessageResponse,
    MovieCreate,
    MovieResponse,
    MovieUpdate,
)

__all__ = [
    "GENRES",
    "ErrorResponse",
    "FieldError",
    "MessageResponse",
    "MovieCreate",
    "MovieResponse",
    "MovieUpdate",
]

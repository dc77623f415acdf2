"""
Error types shared by the validator, the stores and the API layer.
"""

from app.api.models.movie import FieldError


class MovieError(Exception):
    """Base class for movie catalog errors."""


class ValidationError(MovieError):
    """Client payload violates the movie schema."""

    def __init__(self, errors: list[FieldError]):
        super().__init__(f"{len(errors)} invalid field(s)")
        self.errors = errors


class NotFoundError(MovieError):
    """Movie id is malformed or does not resolve to a record."""

    def __init__(self, message: str = "Movie not found"):
        super().__init__(message)
        self.message = message


class StorageError(MovieError):
    """
    Underlying persistence failure.

    The message is generic and safe to return to clients; the original
    exception is chained as ``__cause__``.
    """

    def __init__(self, message: str = "Storage error"):
        super().__init__(message)
        self.message = message

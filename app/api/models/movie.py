"""
Pydantic schemas for Movie API.
"""

from typing import Literal, get_args

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

Genre = Literal[
    "Action",
    "Adventure",
    "Comedy",
    "Drama",
    "Terror",
    "Sci-Fi",
    "Crime",
    "Animation",
    "Biography",
]

GENRES: tuple[str, ...] = get_args(Genre)

MIN_YEAR = 1900
MAX_YEAR = 2025
DEFAULT_RATE = 5

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # The submitted string is kept as-is; AnyUrl only checks it.
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid url") from None
    return value


class MovieCreate(BaseModel):
    """Request body for creating a movie (every field required except rate)."""

    model_config = ConfigDict(strict=True)

    title: str = Field(..., min_length=1)
    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR)
    director: str
    duration: int = Field(..., gt=0)
    poster: str
    genre: list[Genre] = Field(..., min_length=1)
    rate: float = Field(DEFAULT_RATE, ge=0, le=10)

    @field_validator("poster")
    @classmethod
    def poster_must_be_url(cls, value: str) -> str:
        return _check_url(value)


class MovieUpdate(BaseModel):
    """
    Request body for a partial update.

    Only the fields present in the payload are set; use
    ``model_dump(exclude_unset=True)`` to get the changes.
    """

    model_config = ConfigDict(strict=True)

    title: str | None = Field(None, min_length=1)
    year: int | None = Field(None, ge=MIN_YEAR, le=MAX_YEAR)
    director: str | None = None
    duration: int | None = Field(None, gt=0)
    poster: str | None = None
    genre: list[Genre] | None = Field(None, min_length=1)
    rate: float | None = Field(None, ge=0, le=10)

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value):
        # Defaults are not validated, so this only sees explicit values.
        if value is None:
            raise ValueError("Field may not be null")
        return value

    @field_validator("poster")
    @classmethod
    def poster_must_be_url(cls, value: str) -> str:
        return _check_url(value)

    def changes(self) -> dict:
        """Fields supplied by the client."""
        return self.model_dump(exclude_unset=True)


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    id: str
    title: str
    year: int
    director: str
    duration: int
    poster: str
    genre: list[str]
    rate: float


class FieldError(BaseModel):
    """One violated constraint in a request body."""

    path: list[str]
    message: str
    code: str


class ErrorResponse(BaseModel):
    error: list[FieldError]


class MessageResponse(BaseModel):
    message: str

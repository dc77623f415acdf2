"""
Schema validation for movie payloads.

Both validators are side-effect free and report every violated constraint,
not just the first one.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import pydantic
from pydantic import BaseModel

from app.api.models.movie import FieldError, MovieCreate, MovieUpdate

T = TypeVar("T", bound=BaseModel)


@dataclass
class ValidationResult(Generic[T]):
    """Outcome of validating a payload: either ``data`` or ``errors`` is set."""

    data: T | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.data is not None


def to_field_errors(errors: list[dict]) -> list[FieldError]:
    """Convert pydantic/FastAPI error dicts to ``FieldError`` entries."""
    return [
        FieldError(
            path=[str(part) for part in err.get("loc", ())],
            message=err.get("msg", "Invalid value"),
            code=err.get("type", "invalid"),
        )
        for err in errors
    ]


def _validate(model: type[T], payload: Any) -> ValidationResult[T]:
    try:
        return ValidationResult(data=model.model_validate(payload))
    except pydantic.ValidationError as e:
        return ValidationResult(errors=to_field_errors(e.errors()))


def validate_full(payload: Any) -> ValidationResult[MovieCreate]:
    """Validate a complete movie; ``rate`` defaults to 5 when omitted."""
    return _validate(MovieCreate, payload)


def validate_partial(payload: Any) -> ValidationResult[MovieUpdate]:
    """Validate only the fields present in ``payload``."""
    return _validate(MovieUpdate, payload)

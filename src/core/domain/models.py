"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-describing fields (Field) without coupling the
  Core to any I/O library.
- `frozen=True` gives immutability, structural equality and hashing for free.

Note:
- These models describe *what* a zoo is, not *how* it is stored.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.config import ConfigDict

from core.domain.errors import ValidationError


class Zoo(BaseModel):
    """A zoo: a mandatory name and an optional location.

    Rules:
    - `name` must be a non-blank string.
    - An absent location is the empty string; `None` is normalized to `""`
      so every format reads back the same value it wrote.
    - Build through `ZooBuilder`. `model_copy(update=...)` re-validates;
      `model_construct` bypasses validation and is not supported.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="forbid")

    name: str = Field(
        ...,
        min_length=1,
        description="Zoo name. Identity-bearing for equality.",
    )
    location: str = Field(
        default="",
        description="Where the zoo is. Empty when unknown.",
    )

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name cannot be blank")
        return value

    @field_validator("location", mode="before")
    @classmethod
    def _location_unset(cls, value: Any) -> Any:
        return "" if value is None else value

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> "Zoo":
        """Copy, re-validating any `update` (pydantic skips validation there)."""

        copied = super().model_copy(update=update, deep=deep)
        if not update:
            return copied
        try:
            return type(self).model_validate(dict(copied))
        except PydanticValidationError as exc:
            raise ValidationError(str(exc)) from exc

    def __str__(self) -> str:
        return f"Zoo(name={self.name!r}, location={self.location!r})"


class ZooBuilder:
    """Two-phase construction for `Zoo`: accumulate, then validate-and-freeze.

    The mandatory name is checked in the constructor (fail fast), so an
    invalid builder never exists. `build()` may be called repeatedly.
    """

    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError(f"Zoo name cannot be empty (got {name!r})")
        self._name = name
        self._location: str | None = None

    def location(self, location: str | None) -> "ZooBuilder":
        self._location = location
        return self

    def build(self) -> Zoo:
        try:
            return Zoo(name=self._name, location=self._location)
        except PydanticValidationError as exc:
            raise ValidationError(str(exc)) from exc

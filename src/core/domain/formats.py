"""Supported on-disk encodings.

This closed enumeration selects a codec. Keeping it in the domain layer lets
the CLI, the settings and the file store share a single source of truth.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from core.domain.errors import UnsupportedFormat


class Format(str, Enum):
    """Encodings a zoo can be persisted in."""

    JSON = "json"
    XML = "xml"
    TXT = "txt"

    @classmethod
    def coerce(cls, value: Any) -> "Format":
        """Resolve a `Format` or a case-insensitive name into a member.

        Anything outside the enumeration is a caller error.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedFormat(value)

    @classmethod
    def from_path(cls, path: Path | str) -> "Format":
        """Infer the format from a file suffix (`.json`, `.xml`, `.txt`)."""

        suffix = Path(path).suffix.lstrip(".")
        if not suffix:
            raise UnsupportedFormat(str(path))
        return cls.coerce(suffix)

    @property
    def suffix(self) -> str:
        return f".{self.value}"

"""Error taxonomy shared by the domain, the codecs and the file store.

Why a single module:
- Callers catch `ZooStoreError` to handle every library failure uniformly,
  or one of the concrete kinds when they need to react differently.
- Adapters depend on this module; it depends on nothing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class ZooStoreError(Exception):
    """Base type for every error raised by zoo-store."""


class ValidationError(ZooStoreError, ValueError):
    """A zoo was about to be built with an absent or invalid mandatory field."""


class UnsupportedFormat(ZooStoreError, ValueError):
    """The requested format is not one of the supported encodings."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Unsupported format: {value!r}")
        self.value = value


class MalformedInput(ZooStoreError):
    """Bytes being decoded do not have the shape expected for their format."""

    def __init__(self, message: str, *, format: Any = None) -> None:
        if format is not None:
            message = f"[{getattr(format, 'value', format)}] {message}"
        super().__init__(message)
        self.format = format


class UnrepresentableEntity(ZooStoreError):
    """A zoo holds a value the chosen format cannot encode without corruption."""


class IOFailure(ZooStoreError):
    """Reading or writing the backing file failed.

    The original `OSError` is kept in `cause` and chained as `__cause__`.
    """

    def __init__(self, message: str, *, path: Path, cause: OSError) -> None:
        super().__init__(f"{message}: {path} ({cause})")
        self.path = path
        self.cause = cause

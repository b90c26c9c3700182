"""Helpers shared by the codecs."""

from __future__ import annotations

from core.domain.errors import MalformedInput, ValidationError
from core.domain.formats import Format
from core.domain.models import Zoo, ZooBuilder


def decode_utf8(data: bytes, fmt: Format) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedInput(f"not valid UTF-8: {exc}", format=fmt) from exc


def build_zoo(name: object, location: str | None, fmt: Format) -> Zoo:
    """Map decoded fields back through the builder.

    A blank name inside a well-formed document is a data error, so the
    builder's `ValidationError` surfaces as `MalformedInput`.
    """

    try:
        return ZooBuilder(name).location(location).build()  # type: ignore[arg-type]
    except ValidationError as exc:
        raise MalformedInput(str(exc), format=fmt) from exc

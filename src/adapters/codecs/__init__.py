"""Concrete codecs, one per `Format`.

Why a package:
- Groups one module per encoding (JSON, XML, flat text).
- Each module implements `core.interfaces.codec.ZooCodec`.
"""

from __future__ import annotations

from adapters.codecs.json_codec import JsonZooCodec
from adapters.codecs.text_codec import TextZooCodec
from adapters.codecs.xml_codec import XmlZooCodec
from core.config import AppSettings
from core.domain.formats import Format
from core.interfaces.codec import ZooCodec


def default_codecs(settings: AppSettings | None = None) -> dict[Format, ZooCodec]:
    """Build the registry used by the file store: one codec per format."""

    settings = settings or AppSettings()
    return {
        Format.JSON: JsonZooCodec(indent=settings.json_indent),
        Format.XML: XmlZooCodec(),
        Format.TXT: TextZooCodec(),
    }


__all__ = [
    "JsonZooCodec",
    "TextZooCodec",
    "XmlZooCodec",
    "default_codecs",
]

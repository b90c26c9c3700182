"""JSON codec.

Why JSON:
- Interoperable with other tools and pipelines.
- Stable output (sorted keys, fixed indent) keeps files diff-friendly.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.config import ConfigDict

from adapters.codecs.common import build_zoo, decode_utf8
from core.domain.errors import MalformedInput
from core.domain.formats import Format
from core.domain.models import Zoo
from core.interfaces.codec import ZooCodec


class ZooDocument(BaseModel):
    """Wire shape of a JSON zoo document."""

    model_config = ConfigDict(extra="ignore", strict=True)

    name: str = Field(..., description="Zoo name.")
    location: str | None = Field(default=None, description="Zoo location, may be null.")


class JsonZooCodec(ZooCodec):
    """Reads and writes a single JSON object with `name` and `location`."""

    format = Format.JSON

    def __init__(self, *, indent: int = 2) -> None:
        self._indent = indent

    def encode(self, zoo: Zoo) -> bytes:
        payload = zoo.model_dump(mode="json")
        text = json.dumps(payload, ensure_ascii=False, indent=self._indent, sort_keys=True) + "\n"
        return text.encode("utf-8")

    def decode(self, data: bytes) -> Zoo:
        text = decode_utf8(data, self.format)
        try:
            raw = json.loads(text)
        except (ValueError, RecursionError) as exc:
            raise MalformedInput(f"invalid JSON: {exc}", format=self.format) from exc

        if not isinstance(raw, dict):
            raise MalformedInput(
                f"top-level value must be an object, got {type(raw).__name__}",
                format=self.format,
            )
        try:
            document = ZooDocument.model_validate(raw)
        except PydanticValidationError as exc:
            raise MalformedInput(str(exc), format=self.format) from exc

        return build_zoo(document.name, document.location, self.format)

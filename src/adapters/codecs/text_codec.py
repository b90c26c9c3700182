"""Flat text codec: a single `name,location` line.

Known limitation:
- Commas and line breaks are not escaped, so a name or location containing
  `,`, `\\n` or `\\r` cannot be represented. `encode` refuses such values with
  `UnrepresentableEntity` instead of writing a line that would read back as a
  different zoo.
"""

from __future__ import annotations

from adapters.codecs.common import build_zoo, decode_utf8
from core.domain.errors import MalformedInput, UnrepresentableEntity
from core.domain.formats import Format
from core.domain.models import Zoo
from core.interfaces.codec import ZooCodec


SEPARATOR = ","
_FORBIDDEN = (SEPARATOR, "\n", "\r")


class TextZooCodec(ZooCodec):
    """Reads and writes `<name>,<location>` with no trailing newline."""

    format = Format.TXT

    def encode(self, zoo: Zoo) -> bytes:
        for label, value in (("name", zoo.name), ("location", zoo.location)):
            if any(ch in value for ch in _FORBIDDEN):
                raise UnrepresentableEntity(
                    f"{label} {value!r} contains a comma or a line break; "
                    "flat text cannot represent it"
                )
        return f"{zoo.name}{SEPARATOR}{zoo.location}".encode("utf-8")

    def decode(self, data: bytes) -> Zoo:
        text = decode_utf8(data, self.format)
        if not text:
            raise MalformedInput("empty file", format=self.format)

        line = text.partition("\n")[0].rstrip("\r")
        parts = line.split(SEPARATOR)
        if len(parts) != 2:
            raise MalformedInput(
                f"expected 'name,location', got {len(parts)} part(s) in {line!r}",
                format=self.format,
            )

        name, location = parts
        return build_zoo(name, location, self.format)

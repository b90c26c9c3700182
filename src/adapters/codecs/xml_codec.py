"""XML codec.

Document shape:
    <?xml version='1.0' encoding='utf-8'?>
    <Zoo>
      <name>Kyiv Zoo</name>
      <location>Kyiv</location>
    </Zoo>

Decoding also accepts `name`/`location` as attributes of the root element.

A carriage return is written as `&#13;` so the parser does not fold it into
`\\n`. Characters XML 1.0 cannot carry at all (most C0 controls, surrogates,
U+FFFE, U+FFFF) are refused with `UnrepresentableEntity`.
"""

from __future__ import annotations

import re
from xml.etree import ElementTree as ET

from adapters.codecs.common import build_zoo
from core.domain.errors import MalformedInput, UnrepresentableEntity
from core.domain.formats import Format
from core.domain.models import Zoo
from core.interfaces.codec import ZooCodec


ROOT_TAG = Zoo.__name__
_NOT_XML_CHAR = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _field(root: ET.Element, key: str) -> str | None:
    child = root.find(key)
    if child is not None:
        return child.text or ""
    return root.attrib.get(key)


class XmlZooCodec(ZooCodec):
    """Reads and writes a single `<Zoo>` element."""

    format = Format.XML

    def encode(self, zoo: Zoo) -> bytes:
        for label, value in (("name", zoo.name), ("location", zoo.location)):
            bad = _NOT_XML_CHAR.search(value)
            if bad:
                raise UnrepresentableEntity(
                    f"{label} {value!r} contains {bad.group()!r}, which XML cannot represent"
                )
        root = ET.Element(ROOT_TAG)
        ET.SubElement(root, "name").text = zoo.name
        ET.SubElement(root, "location").text = zoo.location
        ET.indent(root)
        data = ET.tostring(root, encoding="utf-8", xml_declaration=True)
        # ET.indent only emits "\n", so every "\r" here comes from a value.
        return data.replace(b"\r", b"&#13;") + b"\n"

    def decode(self, data: bytes) -> Zoo:
        try:
            root = ET.fromstring(data)
        except ET.ParseError as exc:
            raise MalformedInput(f"invalid XML: {exc}", format=self.format) from exc

        if root.tag != ROOT_TAG:
            raise MalformedInput(
                f"root element must be <{ROOT_TAG}>, got <{root.tag}>",
                format=self.format,
            )

        name = _field(root, "name")
        if name is None:
            raise MalformedInput("missing <name>", format=self.format)

        return build_zoo(name, _field(root, "location"), self.format)

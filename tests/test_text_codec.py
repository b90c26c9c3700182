"""Tests for the flat `name,location` codec."""

from __future__ import annotations

import pytest

from adapters.codecs import TextZooCodec
from core.domain.errors import MalformedInput, UnrepresentableEntity
from core.domain.formats import Format
from core.domain.models import ZooBuilder


@pytest.fixture()
def codec() -> TextZooCodec:
    return TextZooCodec()


def test_encode_writes_single_line(codec: TextZooCodec) -> None:
    assert codec.encode(ZooBuilder("Kyiv Zoo").location("Kyiv").build()) == b"Kyiv Zoo,Kyiv"


def test_empty_location_round_trips(codec: TextZooCodec) -> None:
    zoo = ZooBuilder("A").location("").build()

    assert codec.encode(zoo) == b"A,"
    assert codec.decode(b"A,") == zoo


def test_decode_reads_only_first_line(codec: TextZooCodec) -> None:
    zoo = codec.decode(b"A,B\r\nignored,line\n")

    assert zoo == ZooBuilder("A").location("B").build()


@pytest.mark.parametrize(
    ("name", "location"),
    [("A,B", "C"), ("A", "B,C"), ("A\nB", "C"), ("A", "B\rC")],
)
def test_encode_refuses_values_it_cannot_represent(codec: TextZooCodec, name: str, location: str) -> None:
    with pytest.raises(UnrepresentableEntity):
        codec.encode(ZooBuilder(name).location(location).build())


@pytest.mark.parametrize(
    "data",
    [b"", b"\n", b"OnlyName", b"A,B,C", b",Kyiv", b"\xff,\xfe"],
)
def test_decode_rejects_malformed_input(codec: TextZooCodec, data: bytes) -> None:
    with pytest.raises(MalformedInput) as info:
        codec.decode(data)

    assert info.value.format is Format.TXT

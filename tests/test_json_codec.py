"""Tests for the JSON codec."""

from __future__ import annotations

import json

import pytest

from adapters.codecs import JsonZooCodec
from core.domain.errors import MalformedInput
from core.domain.formats import Format
from core.domain.models import ZooBuilder
from core.interfaces.codec import ZooCodec


@pytest.fixture()
def codec() -> JsonZooCodec:
    return JsonZooCodec()


def test_implements_codec_protocol(codec: JsonZooCodec) -> None:
    assert isinstance(codec, ZooCodec)
    assert codec.format is Format.JSON


def test_encode_is_stable_utf8_object(codec: JsonZooCodec) -> None:
    zoo = ZooBuilder("Київський зоопарк").location("Київ").build()

    data = codec.encode(zoo)

    assert data.decode("utf-8") == (
        '{\n  "location": "Київ",\n  "name": "Київський зоопарк"\n}\n'
    )


def test_indent_is_configurable() -> None:
    data = JsonZooCodec(indent=4).encode(ZooBuilder("A").build())

    assert b'\n    "location": ""' in data


def test_round_trip(codec: JsonZooCodec) -> None:
    zoo = ZooBuilder("Kyiv Zoo").location("Kyiv, Ukraine").build()

    assert codec.decode(codec.encode(zoo)) == zoo


@pytest.mark.parametrize(
    "document",
    [
        {"name": "A"},
        {"name": "A", "location": None},
        {"name": "A", "location": "", "opened": 1864},
    ],
)
def test_decode_tolerates_absent_location_and_extra_keys(codec: JsonZooCodec, document: dict) -> None:
    zoo = codec.decode(json.dumps(document).encode())

    assert zoo == ZooBuilder("A").build()


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"{",
        b"[]",
        b'"Kyiv Zoo"',
        b"{}",
        b'{"location": "Kyiv"}',
        b'{"name": 5}',
        b'{"name": "A", "location": 5}',
        b'{"name": ""}',
        b"\xff\xfe",
        b'{"name": "A", "location": ' + b"1" * 5000 + b"}",
        b"[" * 100_000,
    ],
)
def test_decode_rejects_malformed_input(codec: JsonZooCodec, data: bytes) -> None:
    with pytest.raises(MalformedInput) as info:
        codec.decode(data)

    assert info.value.format is Format.JSON

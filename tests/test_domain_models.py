"""Tests for the `Zoo` value object and its builder."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from core.domain.errors import ValidationError, ZooStoreError
from core.domain.models import Zoo, ZooBuilder


def test_builder_builds_zoo_with_location() -> None:
    zoo = ZooBuilder("Kyiv Zoo").location("Kyiv").build()

    assert zoo.name == "Kyiv Zoo"
    assert zoo.location == "Kyiv"


def test_builder_without_location_leaves_it_unset() -> None:
    assert ZooBuilder("Kyiv Zoo").build().location == ""


def test_none_location_is_normalized_to_empty() -> None:
    assert ZooBuilder("A").location(None).build() == ZooBuilder("A").location("").build()


@pytest.mark.parametrize("name", [None, "", "   ", 42])
def test_builder_rejects_missing_name_before_build(name: object) -> None:
    with pytest.raises(ValidationError):
        ZooBuilder(name)  # type: ignore[arg-type]


def test_validation_error_is_part_of_the_taxonomy() -> None:
    assert issubclass(ValidationError, ZooStoreError)
    assert issubclass(ValidationError, ValueError)


def test_builder_can_be_reused() -> None:
    builder = ZooBuilder("A").location("x")
    first = builder.build()
    second = builder.location("y").build()

    assert first.location == "x"
    assert second.location == "y"
    assert builder.build() == second


def test_build_wraps_invalid_location_type() -> None:
    with pytest.raises(ValidationError) as info:
        ZooBuilder("A").location(5).build()  # type: ignore[arg-type]

    assert isinstance(info.value.__cause__, PydanticValidationError)


def test_equality_and_hash_are_structural() -> None:
    a = ZooBuilder("Kyiv Zoo").location("Kyiv").build()
    b = ZooBuilder("Kyiv Zoo").location("Kyiv").build()
    c = ZooBuilder("Kyiv Zoo").location("Lviv").build()

    assert a == b
    assert a is not b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_zoo_is_immutable() -> None:
    zoo = ZooBuilder("A").build()

    with pytest.raises(PydanticValidationError):
        zoo.name = "B"  # type: ignore[misc]


def test_direct_construction_still_enforces_name() -> None:
    with pytest.raises(PydanticValidationError):
        Zoo(name="")


def test_str_is_readable_for_logs() -> None:
    zoo = ZooBuilder("Kyiv Zoo").location("Kyiv").build()

    assert str(zoo) == "Zoo(name='Kyiv Zoo', location='Kyiv')"


@pytest.mark.parametrize("update", [{"name": ""}, {"name": "  "}, {"location": 5}])
def test_model_copy_revalidates_updates(update: dict) -> None:
    zoo = ZooBuilder("Kyiv Zoo").location("Kyiv").build()

    with pytest.raises(ValidationError):
        zoo.model_copy(update=update)


def test_model_copy_with_valid_update() -> None:
    zoo = ZooBuilder("Kyiv Zoo").location("Kyiv").build()

    assert zoo.model_copy(update={"location": None}) == ZooBuilder("Kyiv Zoo").build()
    assert zoo.model_copy() == zoo

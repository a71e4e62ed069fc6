"""Domain Types — the allow-list and field kinds the validators depend on."""

from app.core.domain_types import (
    DogField, DogId, FieldKind, FIELD_KINDS, VALID_KEYS,
)


def test_dog_id_wraps_int():
    assert DogId(7) == 7


def test_allow_list_is_exactly_four_fields():
    assert VALID_KEYS == {"name", "breed", "age", "description"}


def test_every_field_has_a_kind():
    assert set(FIELD_KINDS) == set(DogField)


def test_only_age_is_numeric():
    numeric = [f for f, kind in FIELD_KINDS.items() if kind is FieldKind.NUMBER]
    assert numeric == [DogField.AGE]


def test_field_enum_serializes_to_plain_string():
    assert DogField.DESCRIPTION.value == "description"
    assert DogField.NAME == "name"

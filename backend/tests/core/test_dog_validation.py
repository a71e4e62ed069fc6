"""Dog Validation — pure key/type checks and JavaScript-style id coercion.

Tests cover:
    - Invalid key detection preserves body order
    - Type errors cover missing fields and reject bool / non-finite numbers
    - select_dog_fields drops unknown keys
    - coerce_numeric_id mirrors Number() for the spellings a URL can carry
    - as_dog_id narrows to storable ids only
"""

import math

import pytest

from app.core.dog_validation import (
    as_dog_id,
    coerce_numeric_id,
    field_type_errors,
    invalid_key_errors,
    is_json_number,
    present_fields,
    select_dog_fields,
    validate_new_dog,
)
from app.core.domain_types import DogField, MAX_DOG_ID


# --- Field checks -------------------------------------------------------------

def test_valid_body_has_no_errors():
    body = {"name": "Rex", "breed": "Lab", "age": 3, "description": "friendly"}
    assert validate_new_dog(body) == []


def test_invalid_keys_reported_in_body_order():
    body = {"zeta": 1, "name": "Rex", "alpha": 2}
    assert invalid_key_errors(body) == [
        "'zeta' is not a valid key",
        "'alpha' is not a valid key",
    ]


def test_missing_fields_count_as_wrong_type():
    assert field_type_errors({}) == [
        "age should be a number",
        "name should be a string",
        "breed should be a string",
        "description should be a string",
    ]


def test_string_number_is_not_a_number():
    assert field_type_errors({"age": "3"}, (DogField.AGE,)) == ["age should be a number"]


def test_number_is_not_a_string():
    assert field_type_errors({"name": 7}, (DogField.NAME,)) == ["name should be a string"]


@pytest.mark.parametrize("value", [3, 0, -1, 2.5, 10**300])
def test_finite_numbers_are_json_numbers(value):
    assert is_json_number(value)


@pytest.mark.parametrize("value", [True, False, math.nan, math.inf, "3", None, 10**400, -10**400])
def test_bool_nan_inf_and_strings_are_not_json_numbers(value):
    assert not is_json_number(value)


def test_select_dog_fields_drops_unknown_keys():
    body = {"color": "brown", "name": "Rex", "age": 4}
    assert select_dog_fields(body) == {"age": 4, "name": "Rex"}


def test_present_fields_only_lists_sent_keys():
    assert present_fields({"breed": "Lab"}) == (DogField.BREED,)


# --- Id coercion --------------------------------------------------------------

@pytest.mark.parametrize("raw, expected", [
    ("42", 42.0),
    (" 42 ", 42.0),
    ("", 0.0),
    ("   ", 0.0),
    ("+7", 7.0),
    ("-7", -7.0),
    ("1.", 1.0),
    (".5", 0.5),
    ("1e3", 1000.0),
    ("0x1F", 31.0),
    ("0o17", 15.0),
    ("0b101", 5.0),
    ("Infinity", math.inf),
    ("-Infinity", -math.inf),
])
def test_coerce_numeric_id_accepts_javascript_numbers(raw, expected):
    assert coerce_numeric_id(raw) == expected


@pytest.mark.parametrize("raw", [
    "abc", "12abc", "nan", "inf", "1_000", "-0x10", "0x", "1e", "١٢",
])
def test_coerce_numeric_id_rejects_what_javascript_calls_nan(raw):
    assert coerce_numeric_id(raw) is None


def test_as_dog_id_keeps_integral_values():
    assert as_dog_id(5.0) == 5


@pytest.mark.parametrize("value", [None, 1.5, math.inf, float(MAX_DOG_ID + 1)])
def test_as_dog_id_rejects_unstorable_values(value):
    assert as_dog_id(value) is None

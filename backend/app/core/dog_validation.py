"""Dog Request Validation — key allow-list, field typing, and path id coercion.

Invariants:
    - All functions are PURE: no IO, no request objects, no store access
    - Error strings are the public contract of POST/PATCH /dogs responses
    - Error order: invalid keys (body order), then age, name, breed, description
    - coerce_numeric_id follows JavaScript Number() string semantics;
      None stands in for NaN

Design Decisions:
    - bool is NOT a number here even though Python treats it as an int subclass
    - Non-finite floats (NaN/Infinity smuggled through json.loads) are not numbers
    - Integers beyond float range are not numbers either: the store keeps age as a float
    - as_dog_id separates "is numeric" from "can be a stored id" so routes can
      answer 400 for the former and 204 for the latter
"""

import math
import re
import sys
from typing import Any

from app.core.domain_types import (
    DogField, DogId, FieldKind, FIELD_KINDS, MAX_DOG_ID, MIN_DOG_ID, VALID_KEYS,
)


INVALID_ID_MESSAGE = "id should be a number"
BODY_NOT_JSON_MESSAGE = "request body should be valid JSON"
BODY_NOT_OBJECT_MESSAGE = "request body should be a JSON object"

_DECIMAL_LITERAL = re.compile(
    r"^[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)$",
)
_RADIX_LITERALS = (
    (re.compile(r"^0[xX][0-9a-fA-F]+$"), 16),
    (re.compile(r"^0[oO][0-7]+$"), 8),
    (re.compile(r"^0[bB][01]+$"), 2),
)


# ─── Field checks ────────────────────────────────────────────────

def is_json_number(value: Any) -> bool:
    """True for finite ints/floats, excluding bool."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return abs(value) <= sys.float_info.max
    return isinstance(value, float) and math.isfinite(value)


def matches_kind(value: Any, kind: FieldKind) -> bool:
    if kind is FieldKind.NUMBER:
        return is_json_number(value)
    return isinstance(value, str)


def invalid_key_errors(body: dict[str, Any]) -> list[str]:
    """One error per key outside the allow-list, in body order."""
    return [f"'{key}' is not a valid key" for key in body if key not in VALID_KEYS]


def field_type_errors(
    body: dict[str, Any], fields: tuple[DogField, ...] = tuple(DogField),
) -> list[str]:
    """One error per field whose value is missing or of the wrong JSON type."""
    errors: list[str] = []
    for dog_field in fields:
        kind = FIELD_KINDS[dog_field]
        if not matches_kind(body.get(dog_field.value), kind):
            errors.append(f"{dog_field.value} should be a {kind.value}")
    return errors


def validate_new_dog(body: dict[str, Any]) -> list[str]:
    """Create rule: only allowed keys, and all four fields present and typed."""
    return invalid_key_errors(body) + field_type_errors(body)


def select_dog_fields(body: dict[str, Any]) -> dict[str, Any]:
    """Keep only allow-listed keys that are present, in DogField order."""
    return {f.value: body[f.value] for f in DogField if f.value in body}


def present_fields(changes: dict[str, Any]) -> tuple[DogField, ...]:
    return tuple(f for f in DogField if f.value in changes)


# ─── Path id coercion ────────────────────────────────────────────

def coerce_numeric_id(raw: str) -> float | None:
    """Coerce a path segment the way JavaScript's unary + does.

    Returns None where JavaScript would produce NaN. Whitespace is trimmed,
    an empty string is 0, and 0x/0o/0b literals are read in their radix.
    """
    text = raw.strip()
    if not text:
        return 0.0
    for pattern, base in _RADIX_LITERALS:
        if pattern.match(text):
            value = int(text[2:], base)
            return float(value) if value.bit_length() <= 1023 else math.inf
    if not _DECIMAL_LITERAL.match(text):
        return None
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def as_dog_id(value: float | None) -> DogId | None:
    """Narrow a coerced number to a storable id, or None if no row could carry it."""
    if value is None or not math.isfinite(value) or not value.is_integer():
        return None
    if not MIN_DOG_ID <= value <= MAX_DOG_ID:
        return None
    return DogId(int(value))

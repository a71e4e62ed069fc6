"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - DogId wraps int — only storable ids (32-bit signed range of dogs.id)
    - DogField is the fixed allow-list of writable dog attributes; its order is
      the order type errors are reported in

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DogId = NewType("DogId", int)

MAX_DOG_ID = 2**31 - 1   # dogs.id is a 32-bit signed INTEGER
MIN_DOG_ID = -(2**31)


# ─── Enums ───────────────────────────────────────────────────────

class DogField(str, Enum):
    """Writable dog attributes. Anything else in a request body is an invalid key."""
    AGE = "age"
    NAME = "name"
    BREED = "breed"
    DESCRIPTION = "description"


class FieldKind(str, Enum):
    """JSON type a dog attribute must carry — used verbatim in error messages."""
    NUMBER = "number"
    STRING = "string"


FIELD_KINDS: dict[DogField, FieldKind] = {
    DogField.AGE: FieldKind.NUMBER,
    DogField.NAME: FieldKind.STRING,
    DogField.BREED: FieldKind.STRING,
    DogField.DESCRIPTION: FieldKind.STRING,
}

VALID_KEYS: frozenset[str] = frozenset(f.value for f in DogField)

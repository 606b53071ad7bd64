"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the integer key assigned by the record store
    - Field limits live here and nowhere else (validation and ORM both import them)
    - FieldError / ValidationResult are immutable value objects

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost, full type-checker support
    - ValidationResult carries every violation, not just the first one
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)

# Range of the 32-bit integer primary key; ids outside it can never exist
USER_ID_MIN: int = 1
USER_ID_MAX: int = 2**31 - 1


def is_storable_user_id(value: int) -> bool:
    """True if value fits the users.id column."""
    return USER_ID_MIN <= value <= USER_ID_MAX


# ─── Field Limits ────────────────────────────────────────────────

NAME_MAX_LENGTH: int = 100
EMAIL_MAX_LENGTH: int = 255
PHONE_MAX_LENGTH: int = 15


# ─── Enums ───────────────────────────────────────────────────────

class UserField(str, Enum):
    """Client-writable User fields, used as FieldError.field values."""
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"


# ─── Validation Result ───────────────────────────────────────────

@dataclass(frozen=True)
class FieldError:
    """A single violated field constraint."""
    field: str
    message: str
    type: str = "value_error"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate_user_fields: ok, or a tuple of field errors."""
    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def for_field(self, field: str) -> list[str]:
        """Messages reported against one field."""
        return [e.message for e in self.errors if e.field == field]

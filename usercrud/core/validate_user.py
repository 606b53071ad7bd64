"""User Field Validation — explicit checks run before create and update.

Invariants:
    - validate_user_fields is PURE: no IO, no exceptions, returns ValidationResult
    - All violated fields are reported in one pass, in field order (name, email, phone)
    - normalize_* helpers are applied by the shell before persisting

Design Decisions:
    - Explicit function over schema-level constraints: the service decides when to
      validate, and the result is inspectable without catching exceptions
    - EMAIL_PATTERN accepts local@domain with single-label domains (admin@localhost);
      no DNS or deliverability checks
"""

import re

from usercrud.core.domain_types import (
    FieldError, ValidationResult, UserField,
    NAME_MAX_LENGTH, EMAIL_MAX_LENGTH, PHONE_MAX_LENGTH,
)


EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*$",
)


def normalize_text(value: str | None) -> str:
    """Strip surrounding whitespace; None becomes empty string."""
    return (value or "").strip()


def normalize_phone(value: str | None) -> str | None:
    """Strip whitespace; empty phone is stored as null."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def validate_user_fields(
    name: str | None, email: str | None, phone: str | None,
) -> ValidationResult:
    """Check name, email and phone against the User field rules."""
    errors: list[FieldError] = []
    errors.extend(_check_name(normalize_text(name)))
    errors.extend(_check_email(normalize_text(email)))
    errors.extend(_check_phone(normalize_phone(phone)))
    return ValidationResult(tuple(errors))


def _check_name(name: str) -> list[FieldError]:
    if not name:
        return [FieldError(UserField.NAME.value, "Name is required")]
    if len(name) > NAME_MAX_LENGTH:
        return [FieldError(
            UserField.NAME.value,
            f"Name cannot exceed {NAME_MAX_LENGTH} characters",
        )]
    return []


def _check_email(email: str) -> list[FieldError]:
    if not email:
        return [FieldError(UserField.EMAIL.value, "Email is required")]
    if len(email) > EMAIL_MAX_LENGTH:
        return [FieldError(
            UserField.EMAIL.value,
            f"Email cannot exceed {EMAIL_MAX_LENGTH} characters",
        )]
    if not EMAIL_PATTERN.match(email):
        return [FieldError(UserField.EMAIL.value, "Email should be valid")]
    return []


def _check_phone(phone: str | None) -> list[FieldError]:
    if phone is not None and len(phone) > PHONE_MAX_LENGTH:
        return [FieldError(
            UserField.PHONE.value,
            f"Phone number cannot exceed {PHONE_MAX_LENGTH} characters",
        )]
    return []

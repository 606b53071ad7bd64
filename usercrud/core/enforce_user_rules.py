"""User Business Rules — email uniqueness and timestamp decisions.

Invariants:
    - All functions are PURE: they return decisions, the shell performs the IO
    - Email uniqueness is checked on create always, on update only when the email changes
    - created_at == updated_at on creation; updated_at strictly increases on every update
    - Naive datetimes (SQLite round-trips) are interpreted as UTC

Design Decisions:
    - check_email_available returns the error instead of raising it, like the other
      enforce_* rules, so the shell decides when to abort
    - Email comparison is exact (case-sensitive)
"""

from datetime import datetime, timedelta, timezone

from usercrud.core.domain_types import UserId
from usercrud.core.errors import EmailAlreadyExistsError


TIMESTAMP_RESOLUTION = timedelta(microseconds=1)


def utc_now() -> datetime:
    """Default service clock."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# ─── Email Uniqueness ────────────────────────────────────────────

def email_changed(current_email: str, candidate_email: str) -> bool:
    """Update re-checks uniqueness only when this returns True."""
    return current_email != candidate_email


def check_email_available(
    email: str, owner_id: UserId | None, target_id: UserId | None = None,
) -> EmailAlreadyExistsError | None:
    """Rule: an email may belong to at most one record.

    owner_id is the id of the record currently holding the email (None if free).
    target_id is the record being updated (None on create). A record keeping its
    own email is not a conflict.
    """
    if owner_id is None:
        return None
    if target_id is not None and owner_id == target_id:
        return None
    return EmailAlreadyExistsError(email)


# ─── Timestamps ──────────────────────────────────────────────────

def stamp_creation(now: datetime) -> tuple[datetime, datetime]:
    """(created_at, updated_at) for a new record, always equal."""
    now = as_utc(now)
    return now, now


def advance_updated_at(previous: datetime, now: datetime) -> datetime:
    """New updated_at: the clock reading, bumped past previous if the clock lags."""
    previous, now = as_utc(previous), as_utc(now)
    if now > previous:
        return now
    return previous + TIMESTAMP_RESOLUTION

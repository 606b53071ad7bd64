"""User Schemas — Pydantic models for the /api/users request and response bodies.

Invariants:
    - UserPayload only checks JSON shape (types, presence); field rules run in
      core/validate_user.py so create and update share one validation path
    - UserResponse serializes with camelCase keys: id, name, email, phone, createdAt, updatedAt
    - Response timestamps are always timezone-aware UTC (ISO-8601 with offset)

Design Decisions:
    - Same payload for POST and PUT: update replaces name, email and phone together
    - from_attributes: routes return ORM objects, FastAPI validates them into UserResponse
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from usercrud.core.enforce_user_rules import as_utc


class UserPayload(BaseModel):
    """Client-writable User fields for create (POST) and update (PUT)."""
    name: str
    email: str
    phone: str | None = None


class UserResponse(BaseModel):
    """Persisted User record as returned by the API."""
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    name: str
    email: str
    phone: str | None = None
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        return as_utc(v)

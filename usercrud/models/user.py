"""User ORM — the single persisted entity.

Invariants:
    - id is an autoincrement integer primary key, assigned on insert, never changed
    - email carries a unique index (store-level backstop for the service's uniqueness rule)
    - created_at is written once; updated_at >= created_at
    - Column lengths come from core.domain_types so ORM and validation agree

Design Decisions:
    - No column defaults on timestamps: the service clock is the only writer, and an
      insert that skips it fails on NOT NULL instead of silently using the DB clock
"""

from datetime import datetime

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from usercrud.core.domain_types import (
    NAME_MAX_LENGTH, EMAIL_MAX_LENGTH, PHONE_MAX_LENGTH,
)
from usercrud.db.base import Base


class User(Base):
    """User record with a unique email, an optional phone and audit timestamps."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(
        String(EMAIL_MAX_LENGTH), nullable=False, unique=True, index=True,
    )
    phone: Mapped[str | None] = mapped_column(
        String(PHONE_MAX_LENGTH), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"

"""User Repository — SQLAlchemy implementation of the UserRepository protocol.

Invariants:
    - One repository per AsyncSession; the repository never opens or closes sessions
    - save() commits and refreshes, so returned records carry store-assigned ids
    - A unique-index violation on email is rolled back and reported as EmailAlreadyExistsError;
      other integrity failures (NOT NULL) are rolled back and re-raised
    - list_all() orders by id for stable responses
    - get_by_id() answers None for ids outside the column range without querying

Design Decisions:
    - Commit inside save()/delete(): every business operation is a single unit of work
"""

import logging
from datetime import datetime
from typing import Sequence

from sqlalchemy import select, exists
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from usercrud.core.domain_types import UserId, is_storable_user_id
from usercrud.core.errors import EmailAlreadyExistsError
from usercrud.models.user import User as UserModel

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """Record store for User rows backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> Sequence[UserModel]:
        result = await self._db.execute(
            select(UserModel).order_by(UserModel.id),
        )
        return result.scalars().all()

    async def get_by_id(self, user_id: UserId) -> UserModel | None:
        if not is_storable_user_id(user_id):
            return None
        return await self._db.get(UserModel, user_id)

    async def get_by_email(self, email: str) -> UserModel | None:
        result = await self._db.execute(
            select(UserModel).where(UserModel.email == email),
        )
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        result = await self._db.execute(
            select(exists().where(UserModel.email == email)),
        )
        return bool(result.scalar())

    def new(
        self, *, name: str, email: str, phone: str | None,
        created_at: datetime, updated_at: datetime,
    ) -> UserModel:
        """Build an unsaved record. Nothing is written until save()."""
        return UserModel(
            name=name, email=email, phone=phone,
            created_at=created_at, updated_at=updated_at,
        )

    async def save(self, user: UserModel) -> UserModel:
        """Upsert: insert a new record or flush changes to an existing one."""
        email, user_id = user.email, user.id
        self._db.add(user)
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            owner = await self.get_by_email(email)
            if owner is None or owner.id == user_id:
                raise
            logger.warning(
                f"Unique email violation on save: {e.orig}",
                extra={"operation": "save"},
            )
            raise EmailAlreadyExistsError(email) from e
        await self._db.refresh(user)
        return user

    async def delete(self, user: UserModel) -> None:
        await self._db.delete(user)
        await self._db.commit()

"""User Service — business-rule layer between the API routes and the record store.

Invariants:
    - Field validation runs before any store access that could write
    - Create: email must be unused; created_at == updated_at
    - Update: target must exist; email re-checked only when it changes; updated_at advances,
      created_at untouched
    - Delete: target must exist
    - A rejected operation never writes: all checks happen before the record is mutated

Design Decisions:
    - Imperative shell around core/enforce_user_rules.py and core/validate_user.py
    - Clock injected so tests can pin timestamps
    - get_user returns None for absence; routes decide it is a 404
"""

import logging
from datetime import datetime
from typing import Callable, Sequence

from usercrud.core.domain_types import UserId
from usercrud.core.enforce_user_rules import (
    utc_now, stamp_creation, advance_updated_at,
    email_changed, check_email_available,
)
from usercrud.core.errors import (
    EmailAlreadyExistsError, ResourceNotFoundError, UserValidationError,
)
from usercrud.core.repository_protocols import UserLike, UserRepository
from usercrud.core.validate_user import (
    validate_user_fields, normalize_text, normalize_phone,
)
from usercrud.schemas.user import UserPayload

logger = logging.getLogger(__name__)


class UserService:
    """CRUD operations on User records with uniqueness and existence rules."""

    def __init__(
        self,
        repository: UserRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._repo = repository
        self._clock = clock

    async def list_users(self) -> Sequence[UserLike]:
        return await self._repo.list_all()

    async def get_user(self, user_id: UserId) -> UserLike | None:
        return await self._repo.get_by_id(user_id)

    async def create_user(self, payload: UserPayload) -> UserLike:
        """Validate, enforce email uniqueness, stamp timestamps, persist."""
        name, email, phone = _clean(payload)

        if await self._repo.exists_by_email(email):
            logger.warning(
                "Create rejected: email already in use",
                extra={"error_code": "EMAIL_ALREADY_EXISTS", "operation": "create"},
            )
            raise EmailAlreadyExistsError(email)

        created_at, updated_at = stamp_creation(self._clock())
        user = self._repo.new(
            name=name, email=email, phone=phone,
            created_at=created_at, updated_at=updated_at,
        )
        user = await self._repo.save(user)
        logger.info(
            f"Created user {user.id}",
            extra={"user_id": user.id, "operation": "create"},
        )
        return user

    async def update_user(self, user_id: UserId, payload: UserPayload) -> UserLike:
        """Replace name/email/phone on an existing record and refresh updated_at."""
        user = await self._require(user_id, "update")
        name, email, phone = _clean(payload)

        if email_changed(user.email, email):
            owner = await self._repo.get_by_email(email)
            conflict = check_email_available(
                email,
                owner_id=UserId(owner.id) if owner else None,
                target_id=user_id,
            )
            if conflict:
                logger.warning(
                    f"Update of user {user_id} rejected: email already in use",
                    extra={
                        "user_id": user_id, "error_code": conflict.code,
                        "operation": "update",
                    },
                )
                raise conflict

        user.name = name
        user.email = email
        user.phone = phone
        user.updated_at = advance_updated_at(user.updated_at, self._clock())
        user = await self._repo.save(user)
        logger.info(
            f"Updated user {user_id}",
            extra={"user_id": user_id, "operation": "update"},
        )
        return user

    async def delete_user(self, user_id: UserId) -> None:
        user = await self._require(user_id, "delete")
        await self._repo.delete(user)
        logger.info(
            f"Deleted user {user_id}",
            extra={"user_id": user_id, "operation": "delete"},
        )

    async def _require(self, user_id: UserId, operation: str) -> UserLike:
        user = await self._repo.get_by_id(user_id)
        if user is None:
            logger.warning(
                f"{operation.capitalize()} rejected: user {user_id} not found",
                extra={
                    "user_id": user_id, "error_code": "RESOURCE_NOT_FOUND",
                    "operation": operation,
                },
            )
            raise ResourceNotFoundError("User", str(user_id))
        return user


def _clean(payload: UserPayload) -> tuple[str, str, str | None]:
    """Validate payload fields, return them normalized for storage."""
    result = validate_user_fields(payload.name, payload.email, payload.phone)
    if not result.ok:
        raise UserValidationError(list(result.errors))
    return (
        normalize_text(payload.name),
        normalize_text(payload.email),
        normalize_phone(payload.phone),
    )

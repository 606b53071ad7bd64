"""Boundary Protocols — contracts between the business rules and the record store.

Invariants:
    - Services depend on UserRepository, never on a concrete store
    - save() is an upsert: inserts a new record (assigning its id) or updates an existing one
    - Store-level email uniqueness violations surface as EmailAlreadyExistsError

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: implementations do IO on an AsyncSession
"""

from datetime import datetime
from typing import Protocol, Sequence

from usercrud.core.domain_types import UserId


class UserLike(Protocol):
    """Structural contract for User records passed between store and service."""
    id: int | None
    name: str
    email: str
    phone: str | None
    created_at: datetime
    updated_at: datetime


class UserRepository(Protocol):
    """Contract for User persistence, implemented by the infrastructure layer."""
    async def list_all(self) -> Sequence[UserLike]: ...
    async def get_by_id(self, user_id: UserId) -> UserLike | None: ...
    async def get_by_email(self, email: str) -> UserLike | None: ...
    async def exists_by_email(self, email: str) -> bool: ...
    def new(
        self, *, name: str, email: str, phone: str | None,
        created_at: datetime, updated_at: datetime,
    ) -> UserLike: ...
    async def save(self, user: UserLike) -> UserLike: ...
    async def delete(self, user: UserLike) -> None: ...

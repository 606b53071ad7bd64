"""User Routes — REST mapping of /api/users onto UserService.

Invariants:
    - GET list → 200, GET one → 200 | 404, POST → 201 | 400, PUT → 200 | 400 | 404,
      DELETE → 204 | 404
    - Non-integer {user_id} is rejected by FastAPI as a 400 validation error
    - Errors are raised as UserCrudError subclasses; api/error_handlers.py renders them

Design Decisions:
    - One UserService per request, built by get_user_service over the request's DB session
    - get_user_or_404 keeps "absence" (service) separate from "404" (HTTP)
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from usercrud.core.domain_types import UserId
from usercrud.core.errors import ResourceNotFoundError
from usercrud.infrastructure.database import get_db
from usercrud.infrastructure.user_repository import SqlUserRepository
from usercrud.schemas.user import UserPayload, UserResponse
from usercrud.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    """FastAPI dependency: business-rule layer bound to this request's session."""
    return UserService(SqlUserRepository(db))


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """List every user."""
    return await service.list_users()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user_or_404(
    user_id: int, service: UserService = Depends(get_user_service),
):
    """Get one user, 404 if absent."""
    user = await service.get_user(UserId(user_id))
    if user is None:
        raise ResourceNotFoundError("User", str(user_id))
    return user


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserPayload, service: UserService = Depends(get_user_service),
):
    """Create a user. 400 on invalid fields or an email already in use."""
    return await service.create_user(body)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    body: UserPayload,
    service: UserService = Depends(get_user_service),
):
    """Replace a user's name, email and phone."""
    return await service.update_user(UserId(user_id), body)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int, service: UserService = Depends(get_user_service),
):
    """Delete a user. 404 if absent."""
    await service.delete_user(UserId(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

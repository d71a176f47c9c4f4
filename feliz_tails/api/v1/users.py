"""User registration, admin check and admin-only user management."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from feliz_tails.core.dependencies import get_user_store, verify_admin, verify_token
from feliz_tails.core.exceptions import forbidden
from feliz_tails.core.repository_protocols import UserStore
from feliz_tails.models.user import ROLE_ADMIN, ROLE_USER, User
from feliz_tails.schemas.common import AlreadyExistsResponse
from feliz_tails.schemas.user import AdminStatusResponse, UserCreate, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=201)
async def register_user(
    body: UserCreate,
    users: UserStore = Depends(get_user_store),
):
    """Called on every sign-in; only the first call creates the user."""
    existing = await users.get_by_email(body.email)
    user = None
    if existing is None:
        user = await users.create({**body.model_dump(), "role": ROLE_USER})
    if user is None:
        return JSONResponse(
            status_code=200,
            content=AlreadyExistsResponse(message="user already exists").model_dump(),
        )
    return UserResponse.model_validate(user)


@router.get("", response_model=list[UserResponse])
async def list_users(
    _admin: User = Depends(verify_admin),
    users: UserStore = Depends(get_user_store),
) -> list[UserResponse]:
    return [UserResponse.model_validate(u) for u in await users.list_all()]


@router.get("/admin/{email}", response_model=AdminStatusResponse)
async def check_admin(
    email: str,
    claims: dict = Depends(verify_token),
    users: UserStore = Depends(get_user_store),
) -> AdminStatusResponse:
    if email != claims.get("email"):
        raise forbidden()
    user = await users.get_by_email(email)
    return AdminStatusResponse(admin=user is not None and user.role == ROLE_ADMIN)


@router.patch("/admin/{user_id}", response_model=UserResponse)
@router.patch("/{user_id}", response_model=UserResponse)
async def make_admin(
    user_id: uuid.UUID,
    admin: User = Depends(verify_admin),
    users: UserStore = Depends(get_user_store),
) -> UserResponse:
    user = await users.set_role(user_id, ROLE_ADMIN)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    logger.info("User %s promoted to admin by %s", user.email, admin.email)
    return UserResponse.model_validate(user)

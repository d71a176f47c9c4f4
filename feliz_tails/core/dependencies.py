"""FastAPI dependency chain: session → stores, cookie → claims → admin role."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Query, Request
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from feliz_tails.core.config import settings
from feliz_tails.core.exceptions import forbidden, unauthorized
from feliz_tails.core.repository_protocols import (
    AdoptionStore,
    CampaignStore,
    ListingStore,
    ReviewStore,
    UserStore,
)
from feliz_tails.core.security import decode_access_token
from feliz_tails.db.session import DatabaseSessionManager
from feliz_tails.models.user import ROLE_ADMIN, User
from feliz_tails.repositories.adoption_requests import SqlAdoptionStore
from feliz_tails.repositories.campaigns import SqlCampaignStore
from feliz_tails.repositories.pets import SqlListingStore
from feliz_tails.repositories.reviews import SqlReviewStore
from feliz_tails.repositories.users import SqlUserStore


def get_database(request: Request) -> DatabaseSessionManager:
    """The process-wide session manager created in the app lifespan."""
    return request.app.state.db


async def get_db(
    database: DatabaseSessionManager = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session. Commits on success, rolls back on error."""
    async with database.session() as session:
        yield session


def get_user_store(db: AsyncSession = Depends(get_db)) -> UserStore:
    return SqlUserStore(db)


def get_listing_store(db: AsyncSession = Depends(get_db)) -> ListingStore:
    return SqlListingStore(db)


def get_adoption_store(db: AsyncSession = Depends(get_db)) -> AdoptionStore:
    return SqlAdoptionStore(db)


def get_campaign_store(db: AsyncSession = Depends(get_db)) -> CampaignStore:
    return SqlCampaignStore(db)


def get_review_store(db: AsyncSession = Depends(get_db)) -> ReviewStore:
    return SqlReviewStore(db)


async def verify_token(request: Request) -> dict:
    """Verify the session cookie and return its claims.

    The decoded claims are also left on ``request.state.user``.
    """
    token = request.cookies.get(settings.TOKEN_COOKIE_NAME)
    if not token:
        raise unauthorized()

    try:
        claims = decode_access_token(token)
    except JWTError as exc:
        raise unauthorized() from exc

    request.state.user = claims
    return claims


async def verify_admin(
    claims: dict = Depends(verify_token),
    users: UserStore = Depends(get_user_store),
) -> User:
    """Require the caller's stored role to be admin. Looked up on every request."""
    email = claims.get("email")
    user = await users.get_by_email(email) if email else None
    if user is None or user.role != ROLE_ADMIN:
        raise forbidden()
    return user


async def ensure_owner_or_admin(owner: dict, claims: dict, users: UserStore) -> None:
    """Allow the record's ``added_by`` owner, or any admin."""
    email = claims.get("email")
    if email and owner.get("email") == email:
        return
    user = await users.get_by_email(email) if email else None
    if user is None or user.role != ROLE_ADMIN:
        raise forbidden()


async def verify_owner_email(
    email: str = Query(..., min_length=3),
    claims: dict = Depends(verify_token),
) -> str:
    """For ``?email=`` endpoints: the queried email must be the caller's own."""
    if email != claims.get("email"):
        raise forbidden()
    return email

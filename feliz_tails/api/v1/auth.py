"""Session cookie issue / clear."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from feliz_tails.core.config import settings
from feliz_tails.core.security import create_access_token, token_cookie_options
from feliz_tails.schemas.auth import TokenRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/jwt")
async def issue_token(body: TokenRequest):
    """Sign the posted claims and set them as the httpOnly session cookie."""
    token = create_access_token(body.model_dump(exclude_none=True))

    response = JSONResponse(content={"success": True})
    response.set_cookie(
        key=settings.TOKEN_COOKIE_NAME,
        value=token,
        max_age=settings.ACCESS_TOKEN_EXPIRES_IN,
        **token_cookie_options(),
    )
    logger.debug("Issued session token", extra={"user_email": body.email})
    return response


@router.post("/logout")
async def logout():
    response = JSONResponse(content={"success": True})
    response.delete_cookie(key=settings.TOKEN_COOKIE_NAME, **token_cookie_options())
    return response

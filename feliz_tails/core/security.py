"""Session token signing and verification (HS256, carried in a cookie)."""

import time

from jose import jwt

from feliz_tails.core.config import settings

ALGORITHM = "HS256"


def create_access_token(claims: dict, expires_in: int | None = None) -> str:
    """Sign the caller-supplied claims with an expiry."""
    now = int(time.time())
    payload = dict(claims)
    payload["iat"] = now
    payload["exp"] = now + (expires_in or settings.ACCESS_TOKEN_EXPIRES_IN)
    return jwt.encode(payload, settings.ACCESS_TOKEN_SECRET, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Verify signature and expiry. Raises ``jose.JWTError`` on failure."""
    return jwt.decode(
        token,
        settings.ACCESS_TOKEN_SECRET,
        algorithms=[ALGORITHM],
        options={"verify_aud": False, "verify_iss": False},
    )


def token_cookie_options() -> dict:
    """Cookie flags for the session token.

    Cross-site front-ends need ``SameSite=None; Secure`` in production;
    local development runs over plain http on the same site.
    """
    if settings.is_development:
        return {"httponly": True, "secure": False, "samesite": "strict"}
    return {"httponly": True, "secure": True, "samesite": "none"}

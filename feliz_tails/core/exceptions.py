"""Error responses.

Domain and HTTP errors are RFC 7807 problem+json. The auth gate keeps the
flat ``{"message": ...}`` body the front-end already checks for.
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ProblemDetailError(Exception):
    """Raise for RFC 7807 problem+json responses."""

    def __init__(
        self,
        status: int,
        title: str,
        detail: str,
        error_type: str | None = None,
    ):
        self.status = status
        self.title = title
        self.detail = detail
        self.error_type = error_type or "about:blank"


class AccessDeniedError(Exception):
    """Auth gate rejection (401 unauthorized / 403 forbidden)."""

    def __init__(self, status: int, message: str):
        self.status = status
        self.message = message


def unauthorized() -> AccessDeniedError:
    return AccessDeniedError(401, "unauthorized access")


def forbidden() -> AccessDeniedError:
    return AccessDeniedError(403, "forbidden access")


async def access_denied_handler(request: Request, exc: AccessDeniedError) -> JSONResponse:
    logger.info(
        "Access denied (%s) on %s", exc.status, request.url.path, extra={"path": request.url.path}
    )
    return JSONResponse(status_code=exc.status, content={"message": exc.message})


async def problem_detail_handler(request: Request, exc: ProblemDetailError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status,
        content={
            "type": exc.error_type,
            "title": exc.title,
            "status": exc.status,
            "detail": exc.detail,
            "instance": str(request.url.path),
        },
        media_type="application/problem+json",
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "type": "about:blank",
            "title": exc.detail if isinstance(exc.detail, str) else "Error",
            "status": exc.status_code,
            "detail": exc.detail,
            "instance": str(request.url.path),
        },
        media_type="application/problem+json",
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "type": "about:blank",
            "title": "Validation Error",
            "status": 422,
            "detail": jsonable_errors(exc),
            "instance": str(request.url.path),
        },
        media_type="application/problem+json",
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Strip non-serialisable ``ctx`` values (e.g. the raised ValueError)."""
    errors = []
    for err in exc.errors():
        err = dict(err)
        if "ctx" in err:
            err["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
        errors.append(err)
    return errors

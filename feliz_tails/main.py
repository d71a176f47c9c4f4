"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from feliz_tails.api.v1.router import api_v1_router
from feliz_tails.core.config import settings
from feliz_tails.core.exceptions import (
    AccessDeniedError,
    ProblemDetailError,
    access_denied_handler,
    http_exception_handler,
    problem_detail_handler,
    validation_exception_handler,
)
from feliz_tails.core.middleware.cors import get_cors_config
from feliz_tails.core.middleware.request_id import RequestIdMiddleware
from feliz_tails.core.observability import setup_logging
from feliz_tails.db.session import DatabaseSessionManager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared connection pool on startup, dispose it on shutdown."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    app.state.db = DatabaseSessionManager(
        settings.DATABASE_URL,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
    )
    logger.info("Feliz Tails API started (%s)", settings.ENVIRONMENT)
    yield
    await app.state.db.dispose()
    logger.info("Feliz Tails API shut down")


app = FastAPI(
    title="Feliz Tails API",
    version="0.1.0",
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Middleware (last added = first executed)
app.add_middleware(RequestIdMiddleware)
app.add_middleware(CORSMiddleware, **get_cors_config())

# Exception handlers
app.add_exception_handler(AccessDeniedError, access_denied_handler)
app.add_exception_handler(ProblemDetailError, problem_detail_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Routes
app.include_router(api_v1_router)

"""Liveness banner and health check."""

from fastapi import APIRouter, Depends

from feliz_tails.core.dependencies import get_database
from feliz_tails.db.session import DatabaseSessionManager

router = APIRouter()

VERSION = "0.1.0"


@router.get("/")
async def root():
    return {"message": "Feliz Tails server is running"}


@router.get("/health")
async def health_check(database: DatabaseSessionManager = Depends(get_database)):
    """Check DB connectivity."""
    db_status = "ok" if await database.health_check() else "error"
    return {
        "status": "ok" if db_status == "ok" else "degraded",
        "db": db_status,
        "version": VERSION,
    }

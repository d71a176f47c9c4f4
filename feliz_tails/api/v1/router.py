"""Aggregate all v1 sub-routers. Mounted at the root; the front-end uses bare paths."""

from fastapi import APIRouter

from feliz_tails.api.v1.adoption_requests import router as adoption_requests_router
from feliz_tails.api.v1.auth import router as auth_router
from feliz_tails.api.v1.campaigns import router as campaigns_router
from feliz_tails.api.v1.donations import router as donations_router
from feliz_tails.api.v1.health import router as health_router
from feliz_tails.api.v1.payments import router as payments_router
from feliz_tails.api.v1.pets import router as pets_router
from feliz_tails.api.v1.reviews import router as reviews_router
from feliz_tails.api.v1.users import router as users_router

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["health"])
api_v1_router.include_router(auth_router, tags=["auth"])
api_v1_router.include_router(users_router, prefix="/users", tags=["users"])
api_v1_router.include_router(pets_router, tags=["pets"])
api_v1_router.include_router(
    adoption_requests_router, prefix="/adoption-requests", tags=["adoption-requests"]
)
api_v1_router.include_router(campaigns_router, tags=["campaigns"])
api_v1_router.include_router(donations_router, tags=["donations"])
api_v1_router.include_router(payments_router, tags=["payments"])
api_v1_router.include_router(reviews_router, prefix="/reviews", tags=["reviews"])

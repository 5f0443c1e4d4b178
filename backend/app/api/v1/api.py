"""
Version 1 API router configuration.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import competitors

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(
    competitors.router,
    prefix="/competitors",
    tags=["Competitors"],
)

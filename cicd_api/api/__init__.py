"""Main API router that combines all route modules."""

from fastapi import APIRouter

from cicd_api.api.routers import health, home, users

api_router = APIRouter()

api_router.include_router(home.router)
api_router.include_router(health.router)
api_router.include_router(users.router)

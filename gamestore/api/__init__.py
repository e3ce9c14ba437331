"""API routes, mounted under settings.API_PREFIX."""

from fastapi import APIRouter

from gamestore.api import auth, games, health, orders, upload, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(games.router, prefix="/games", tags=["games"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
router.include_router(upload.router, prefix="/upload", tags=["upload"])
router.include_router(users.router, prefix="/users", tags=["users"])

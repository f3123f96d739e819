"""API routes."""

from fastapi import APIRouter

from app.api import auth, buses, health

router = APIRouter()
router.include_router(auth.router, tags=["auth"])
router.include_router(buses.router, prefix="/api/buses", tags=["buses"])
router.include_router(health.router, prefix="/health", tags=["health"])

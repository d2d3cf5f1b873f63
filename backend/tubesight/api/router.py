"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from tubesight.api import centerline, health, materials

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(centerline.router)
api_router.include_router(materials.router)

"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from perfect_square.api import analyze, health, scores

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(analyze.router)
api_router.include_router(scores.router)

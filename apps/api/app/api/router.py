from __future__ import annotations

from fastapi import APIRouter

from app.api.endpoints import backgrounds, health, lessons, media, video

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(lessons.router)
api_router.include_router(video.router)
api_router.include_router(backgrounds.router)
api_router.include_router(media.router)

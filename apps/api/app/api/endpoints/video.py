from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, HTTPException, Query

from app.core.config import settings
from app.services.video_service import video_orchestrator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["video"])


@router.get("/video-status")
async def video_status(id: str | None = Query(default=None)):
    if not id:
        raise HTTPException(status_code=400, detail="Missing id")

    if not settings.has_heygen_key:
        return {"data": {"status": "completed", "video_url": None}, "message": "HeyGen API not configured"}

    logger.info("Checking status for video job %s", id)
    try:
        return await video_orchestrator.provider.get_status(id)
    except httpx.HTTPError as exc:
        logger.error("Video status proxy failed for %s: %s", id, exc)
        raise HTTPException(status_code=500, detail="Failed to fetch status") from exc

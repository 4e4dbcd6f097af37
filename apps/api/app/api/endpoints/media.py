from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, HTTPException, Query

from app.services.media_service import media_service

router = APIRouter(tags=["media"])


@router.get("/pexels")
async def pexels(
    query: str | None = Query(default=None),
    type: Literal["photos", "videos"] = Query(default="photos"),
    per_page: int = Query(default=5, ge=1),
):
    if not query:
        raise HTTPException(status_code=400, detail="Missing query parameter")
    return await media_service.search(query, type, per_page)

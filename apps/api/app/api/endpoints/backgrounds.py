from __future__ import annotations

from fastapi import APIRouter, HTTPException

from app.schemas.background import BackgroundRequest
from app.services.background_service import background_service

router = APIRouter(tags=["backgrounds"])


@router.post("/generate-background")
async def generate_background(payload: BackgroundRequest):
    if not payload.concept:
        raise HTTPException(status_code=400, detail="Concept is required")
    return await background_service.generate(payload.concept, payload.subject, payload.style)

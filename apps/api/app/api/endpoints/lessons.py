from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from app.core.exceptions import QuotaExceededError
from app.schemas.lesson import LessonRequest, ThrottledResponse
from app.services.tutor_service import tutor_service

router = APIRouter(tags=["lessons"])

RETRY_AFTER_SECONDS = 60


@router.post("/ask")
async def ask(payload: LessonRequest | None = None):
    if payload is None or not payload.question or not payload.question.strip():
        raise HTTPException(status_code=400, detail="Missing question")

    try:
        outcome = await tutor_service.ask(payload)
    except QuotaExceededError:
        body = ThrottledResponse(
            error="AI service is temporarily rate limited. Please try again in a few minutes.",
            retry_after=RETRY_AFTER_SECONDS,
        )
        return JSONResponse(
            status_code=429,
            content=body.model_dump(by_alias=True),
            headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
        )

    return JSONResponse(
        content=outcome.payload.model_dump(mode="json", by_alias=True),
        headers={"X-Tutor-Mode": outcome.mode.value},
    )

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from app.core.config import settings
from app.core.exceptions import RenderFailedError
from app.schemas.lesson import VideoJob
from app.services.providers.base import AvatarProvider
from app.services.providers.heygen_provider import HeyGenProvider
from app.utils.lesson_terms import GREEN_SCREEN_COLOR, SUBJECT_COLORS

logger = logging.getLogger(__name__)

POLL_BASE_DELAY_MS = 1000
POLL_GROWTH = 1.5
POLL_MAX_DELAY_MS = 8000
DONE_STATUSES = {"completed", "succeeded"}
FAILED_STATUSES = {"failed", "error"}


def resolve_background(preference: str, subject: str) -> dict:
    if preference == "green":
        return {"type": "color", "value": GREEN_SCREEN_COLOR}
    if preference == "auto" and subject in SUBJECT_COLORS:
        return {"type": "color", "value": SUBJECT_COLORS[subject]}
    return {"type": "transparent"}


def poll_delay_ms(attempt: int) -> float:
    """Wait before poll ``attempt`` (0-based)."""
    return min(POLL_BASE_DELAY_MS * POLL_GROWTH**attempt, POLL_MAX_DELAY_MS)


class VideoJobOrchestrator:
    def __init__(
        self,
        provider: AvatarProvider | None = None,
        max_attempts: int | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.provider = provider or HeyGenProvider()
        self.max_attempts = max_attempts or settings.video_max_poll_attempts
        self._sleep = sleep

    async def synthesize(self, narration: str, background_preference: str, subject: str) -> VideoJob:
        background = resolve_background(background_preference, subject)
        submitted = await self.provider.submit_video(narration, background)

        video_url = submitted.get("video_url")
        job_id = submitted.get("video_id")
        if video_url:
            return VideoJob(video_url=video_url)
        if not job_id:
            logger.warning("Avatar vendor returned neither a video url nor a job id")
            return VideoJob()

        return await self._poll(job_id)

    async def _poll(self, job_id: str) -> VideoJob:
        for attempt in range(self.max_attempts):
            await self._sleep(poll_delay_ms(attempt) / 1000)
            payload = await self.provider.get_status(job_id)
            data = payload.get("data") or {}
            status = data.get("status")
            video_url = data.get("video_url")
            logger.debug("Video job %s poll %s: status=%s", job_id, attempt + 1, status)

            if status in DONE_STATUSES or video_url:
                # A completed job without a url keeps its id so the caller can re-check it.
                return VideoJob(video_url=video_url, job_id=None if video_url else job_id)
            if status in FAILED_STATUSES:
                raise RenderFailedError(job_id, status)

        logger.info("Video job %s unresolved after %s polls", job_id, self.max_attempts)
        return VideoJob(job_id=job_id)


video_orchestrator = VideoJobOrchestrator()

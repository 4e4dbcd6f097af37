from __future__ import annotations

import logging

import httpx

from app.core.config import settings
from app.core.exceptions import ConfigurationError
from app.services.providers.base import AvatarProvider

logger = logging.getLogger(__name__)


class HeyGenProvider(AvatarProvider):
    name = "heygen"

    SUBMIT_TIMEOUT = 30
    STATUS_TIMEOUT = 15

    def ready(self) -> bool:
        return settings.has_heygen

    def _headers(self) -> dict:
        return {"X-Api-Key": settings.heygen_api_key or "", "Content-Type": "application/json"}

    async def submit_video(self, narration: str, background: dict) -> dict:
        if not self.ready():
            raise ConfigurationError("HeyGen API key or avatar id missing")
        payload = {
            "video_inputs": [
                {
                    "character": {
                        "type": "avatar",
                        "avatar_id": settings.heygen_avatar_id,
                        "avatar_style": "normal",
                    },
                    "voice": {"type": "text", "input_text": narration, "voice_id": settings.heygen_voice_id},
                    "background": background,
                }
            ],
            "dimension": {"width": 1280, "height": 720},
        }
        url = f"{settings.heygen_base_url}/v2/video/generate"
        async with httpx.AsyncClient(timeout=self.SUBMIT_TIMEOUT) as client:
            response = await client.post(url, json=payload, headers=self._headers())
            response.raise_for_status()
            data = response.json().get("data") or {}

        return {
            "video_url": data.get("video_url"),
            "video_id": data.get("video_id") or data.get("task_id"),
        }

    async def get_status(self, job_id: str) -> dict:
        if not settings.has_heygen_key:
            raise ConfigurationError("HeyGen API key missing")
        url = f"{settings.heygen_base_url}/v1/video.status"
        async with httpx.AsyncClient(timeout=self.STATUS_TIMEOUT) as client:
            response = await client.get(url, params={"id": job_id}, headers={"X-Api-Key": settings.heygen_api_key})
            response.raise_for_status()
            return response.json()

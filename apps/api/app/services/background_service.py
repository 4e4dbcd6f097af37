from __future__ import annotations

import hashlib
import json
import logging

import httpx

from app.core.cache import cache
from app.core.exceptions import ConfigurationError
from app.services.providers.huggingface_provider import HuggingFaceImageProvider
from app.utils.lesson_terms import BACKGROUND_PROMPTS, DEFAULT_BACKGROUND_COLOR, SUBJECT_COLORS

logger = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 24 * 3600


def educational_prompt(concept: str, subject: str) -> str:
    template = BACKGROUND_PROMPTS.get(subject) or BACKGROUND_PROMPTS["General"]
    return template.format(concept=concept)


def cache_key_for(prompt: str, subject: str | None, style: str | None) -> str:
    digest = hashlib.sha256(
        json.dumps({"prompt": prompt, "subject": subject, "style": style}, sort_keys=True).encode("utf-8")
    ).hexdigest()
    return f"background:{digest}"


class BackgroundService:
    def __init__(self, provider: HuggingFaceImageProvider | None = None) -> None:
        self.provider = provider or HuggingFaceImageProvider()

    def _fallback(self, concept: str, subject: str | None, error: str) -> dict:
        return {
            "success": False,
            "fallback": True,
            "color": SUBJECT_COLORS.get(subject or "General", DEFAULT_BACKGROUND_COLOR),
            "error": error,
            "concept": concept,
        }

    async def generate(self, concept: str, subject: str | None = None, style: str | None = None) -> dict:
        prompt = educational_prompt(concept, subject or "General")
        preview = prompt[:100] + "..."
        key = cache_key_for(prompt, subject, style)

        cached = await cache.get(key)
        if cached:
            logger.info("Using cached background for %s", concept)
            return {"success": True, "url": cached["url"], "cached": True, "concept": concept, "prompt": preview}

        if not self.provider.ready():
            return self._fallback(concept, subject, "HuggingFace API token not configured")

        try:
            url = await self.provider.generate_image(prompt)
        except (httpx.HTTPError, ConfigurationError) as exc:
            logger.warning("Background generation failed for %s: %s", concept, exc)
            message = "HuggingFace API token required" if "token" in str(exc).lower() else "Image generation temporarily unavailable"
            return self._fallback(concept, subject, message)

        await cache.set(key, {"url": url}, ttl_seconds=CACHE_TTL_SECONDS)
        logger.info("Generated background for %s", concept)
        return {"success": True, "url": url, "cached": False, "concept": concept, "prompt": preview}


background_service = BackgroundService()

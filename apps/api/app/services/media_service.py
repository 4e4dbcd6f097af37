from __future__ import annotations

import logging

import httpx
from fastapi import HTTPException

from app.services.providers.pexels_provider import PexelsProvider

logger = logging.getLogger(__name__)


class MediaService:
    def __init__(self, provider: PexelsProvider | None = None) -> None:
        self.provider = provider or PexelsProvider()

    async def search(self, query: str, media_type: str = "photos", per_page: int = 5) -> dict:
        if not self.provider.ready():
            raise HTTPException(status_code=500, detail="Pexels API key not configured")

        try:
            content = await self.provider.search(query, media_type, per_page)
        except httpx.HTTPError as exc:
            throttled = isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code == 429
            logger.error("Pexels search failed for %r: %s", query, exc)
            raise HTTPException(
                status_code=500,
                detail={
                    "error": "Failed to fetch content from Pexels",
                    "details": "Rate limit exceeded" if throttled else "Unknown error",
                },
            ) from exc

        return {"success": True, "type": media_type, "query": query, "content": content, "total": len(content)}


media_service = MediaService()

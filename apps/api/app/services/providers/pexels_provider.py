from __future__ import annotations

import httpx

from app.core.config import settings
from app.core.exceptions import ConfigurationError


class PexelsProvider:
    name = "pexels"

    PHOTOS_URL = "https://api.pexels.com/v1/search"
    VIDEOS_URL = "https://api.pexels.com/videos/search"

    def ready(self) -> bool:
        return settings.has_pexels

    async def search(self, query: str, media_type: str = "photos", per_page: int = 5) -> list[dict]:
        if not self.ready():
            raise ConfigurationError("Pexels API key not configured")
        videos = media_type == "videos"
        params = {"query": query, "per_page": per_page, "orientation": "landscape"}
        async with httpx.AsyncClient(timeout=20) as client:
            response = await client.get(
                self.VIDEOS_URL if videos else self.PHOTOS_URL,
                params=params,
                headers={"Authorization": settings.pexels_api_key},
            )
            response.raise_for_status()
            payload = response.json()

        if videos:
            return [
                {
                    "id": video.get("id"),
                    "url": ((video.get("video_files") or [{}])[0]).get("link"),
                    "image": video.get("image"),
                    "duration": video.get("duration"),
                    "width": video.get("width"),
                    "height": video.get("height"),
                }
                for video in payload.get("videos") or []
            ]

        return [
            {
                "id": photo.get("id"),
                "url": (photo.get("src") or {}).get("large"),
                "original": (photo.get("src") or {}).get("original"),
                "medium": (photo.get("src") or {}).get("medium"),
                "small": (photo.get("src") or {}).get("small"),
                "alt": photo.get("alt"),
                "width": photo.get("width"),
                "height": photo.get("height"),
            }
            for photo in payload.get("photos") or []
        ]

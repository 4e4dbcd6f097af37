from __future__ import annotations

from app.api.endpoints import backgrounds, health, lessons, media, video

__all__ = ["backgrounds", "health", "lessons", "media", "video"]

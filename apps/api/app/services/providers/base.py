from __future__ import annotations

from abc import ABC, abstractmethod


class AvatarProvider(ABC):
    name: str

    @abstractmethod
    def ready(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def submit_video(self, narration: str, background: dict) -> dict:
        """Start a render; the returned dict may carry ``video_url`` and/or ``video_id``."""
        raise NotImplementedError

    @abstractmethod
    async def get_status(self, job_id: str) -> dict:
        """Raw vendor status payload; job fields live under ``data``."""
        raise NotImplementedError

from __future__ import annotations

from pydantic import BaseModel


class BackgroundRequest(BaseModel):
    concept: str | None = None
    subject: str | None = None
    style: str | None = None

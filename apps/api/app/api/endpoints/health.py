from __future__ import annotations

import platform
from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {
        "ok": True,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "env": {
            "hasGemini": settings.has_gemini,
            "hasHeygen": settings.has_heygen,
            "hasHuggingFace": settings.has_huggingface,
            "hasPexels": settings.has_pexels,
            "pythonVersion": platform.python_version(),
            "platform": platform.system().lower(),
        },
    }

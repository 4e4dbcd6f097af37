from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core.cache import cache
from app.core.config import settings
from app.core.logging import set_request_id, setup_logging

setup_logging(level=settings.log_level, use_json=settings.json_logs)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info(
        "Starting tutor API (gemini=%s, heygen=%s, huggingface=%s, pexels=%s)",
        settings.has_gemini,
        settings.has_heygen,
        settings.has_huggingface,
        settings.has_pexels,
    )
    await cache.connect()
    yield
    await cache.close()


app = FastAPI(
    title="Avatar Tutor API",
    version="1.0.0",
    description="Turns student questions into structured lessons narrated by a talking avatar.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_origin_regex=settings.cors_origin_regex,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Tutor-Mode"],
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    set_request_id(request_id)
    try:
        response = await call_next(request)
    finally:
        set_request_id(None)
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/")
def root():
    return {"status": "ok", "message": f"Tutor API running. Use {settings.api_prefix}/health or {settings.api_prefix}/ask."}


app.include_router(api_router, prefix=settings.api_prefix)

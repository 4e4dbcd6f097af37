from __future__ import annotations

import json
import logging
import time

from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.core.config import settings

logger = logging.getLogger(__name__)


class MemoryTTLCache:
    def __init__(self) -> None:
        self._store: dict[str, tuple[float, str]] = {}

    async def get(self, key: str) -> dict | list | str | None:
        entry = self._store.get(key)
        if not entry:
            return None
        expires_at, value = entry
        if time.time() > expires_at:
            self._store.pop(key, None)
            return None
        return json.loads(value)

    async def set(self, key: str, value: dict | list | str, ttl_seconds: int) -> None:
        self._store[key] = (time.time() + ttl_seconds, json.dumps(value))


class CacheClient:
    """Redis when reachable, process memory otherwise."""

    def __init__(self) -> None:
        self._memory = MemoryTTLCache()
        self._redis: Redis | None = None

    async def connect(self) -> None:
        try:
            client = Redis.from_url(settings.redis_url, decode_responses=True)
            await client.ping()
            self._redis = client
            logger.info("Cache connected to redis")
        except (RedisError, OSError) as exc:
            logger.info("Redis unavailable (%s); using in-memory cache", exc)
            self._redis = None

    async def close(self) -> None:
        if self._redis:
            await self._redis.aclose()

    async def get(self, key: str):
        if self._redis:
            try:
                value = await self._redis.get(key)
                return json.loads(value) if value else None
            except RedisError as exc:
                logger.warning("Redis get failed for %s: %s", key, exc)
        return await self._memory.get(key)

    async def set(self, key: str, value: dict | list | str, ttl_seconds: int = 300) -> None:
        serialized = json.dumps(value)
        if self._redis:
            try:
                await self._redis.set(name=key, value=serialized, ex=ttl_seconds)
                return
            except RedisError as exc:
                logger.warning("Redis set failed for %s: %s", key, exc)
        await self._memory.set(key, value, ttl_seconds)


cache = CacheClient()

"""
Shared fixtures: vendor credentials are blanked for every test so nothing
reaches a real API, and helpers are provided to switch them back on and to
stub vendor HTTP with ``httpx.MockTransport``.
"""

import httpx
import pytest

from app.core import cache as cache_module
from app.core.config import settings

CREDENTIAL_FIELDS = ("gemini_api_key", "heygen_api_key", "heygen_avatar_id", "hf_api_token", "pexels_api_key")


@pytest.fixture(autouse=True)
def no_vendor_credentials(monkeypatch):
    for field in CREDENTIAL_FIELDS:
        monkeypatch.setattr(settings, field, None)


@pytest.fixture(autouse=True)
def fresh_memory_cache(monkeypatch):
    monkeypatch.setattr(cache_module.cache, "_memory", cache_module.MemoryTTLCache())
    monkeypatch.setattr(cache_module.cache, "_redis", None)


@pytest.fixture
def live_credentials(monkeypatch):
    """Credentials long enough to count as configured."""
    values = {
        "gemini_api_key": "gemini-test-key-123456",
        "heygen_api_key": "heygen-test-key-123456",
        "heygen_avatar_id": "avatar-test-id-123456",
        "hf_api_token": "hf-test-token-123456",
        "pexels_api_key": "pexels-test-key-123456",
    }
    for field, value in values.items():
        monkeypatch.setattr(settings, field, value)
    return values


@pytest.fixture
def vendor_http(monkeypatch):
    """Route every ``httpx.AsyncClient`` created by the app through ``handler``."""
    real_client = httpx.AsyncClient
    requests: list[httpx.Request] = []

    def install(handler):
        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        def factory(*args, **kwargs):
            kwargs["transport"] = httpx.MockTransport(recording_handler)
            return real_client(*args, **kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", factory)
        return requests

    return install


class FakeClock:
    """Monotonic clock whose sleep advances time instantly."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()

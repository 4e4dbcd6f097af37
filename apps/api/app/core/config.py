from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_CREDENTIAL_LENGTH = 10


class Settings(BaseSettings):
    env: str = "development"
    api_prefix: str = "/api"
    redis_url: str = "redis://localhost:6379/0"
    allowed_origins: str = "http://localhost:5173,http://127.0.0.1:5173"

    log_level: str = "INFO"
    json_logs: bool = False

    gemini_api_key: str | None = None
    gemini_model: str = "gemini-1.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    gemini_timeout_seconds: float = 30.0
    gemini_max_retries: int = 3
    min_request_interval_ms: int = 4000
    max_daily_requests: int = 1400

    heygen_api_key: str | None = None
    heygen_avatar_id: str | None = None
    heygen_voice_id: str = "en-US"
    heygen_base_url: str = "https://api.heygen.com"
    video_max_poll_attempts: int = 12

    hf_api_token: str | None = None
    hf_model_url: str = "https://api-inference.huggingface.co/models/stabilityai/stable-diffusion-xl-base-1.0"

    pexels_api_key: str | None = None

    model_config = SettingsConfigDict(env_file=(".env", ".env.local"), extra="ignore", case_sensitive=False)

    @field_validator(
        "gemini_api_key",
        "heygen_api_key",
        "heygen_avatar_id",
        "heygen_voice_id",
        "hf_api_token",
        "pexels_api_key",
        mode="before",
    )
    @classmethod
    def _strip_quotes(cls, value):
        # Hosting dashboards often store secrets wrapped in quotes.
        if isinstance(value, str):
            return value.strip().strip("'\"").strip()
        return value

    @staticmethod
    def _usable(value: str | None) -> bool:
        return bool(value) and len(value) > MIN_CREDENTIAL_LENGTH

    @property
    def has_gemini(self) -> bool:
        return self._usable(self.gemini_api_key)

    @property
    def has_heygen_key(self) -> bool:
        return self._usable(self.heygen_api_key)

    @property
    def has_heygen(self) -> bool:
        return self.has_heygen_key and self._usable(self.heygen_avatar_id)

    @property
    def has_huggingface(self) -> bool:
        return self._usable(self.hf_api_token)

    @property
    def has_pexels(self) -> bool:
        return self._usable(self.pexels_api_key)

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def cors_origin_regex(self) -> str | None:
        # In development, allow any localhost port so the frontend dev server can move around.
        if self.env.lower() == "development":
            return r"^https?://(localhost|127\.0\.0\.1|\[::1\])(:\d+)?$"
        return None


settings = Settings()

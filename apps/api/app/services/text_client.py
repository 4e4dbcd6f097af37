from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

import openai
from openai import OpenAI
from tenacity import (
    AsyncRetrying,
    RetryError,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from app.core.config import settings
from app.core.exceptions import ConfigurationError, QuotaExceededError
from app.core.rate_limit import TextRateLimiter, text_rate_limiter

logger = logging.getLogger(__name__)

RETRY_BASE_DELAY_SECONDS = 5
RETRY_MAX_DELAY_SECONDS = 60
THROTTLE_MARKERS = ("quota", "rate limit", "rate_limit", "resource_exhausted", "resource exhausted")


def is_throttling_error(exc: BaseException) -> bool:
    if isinstance(exc, openai.RateLimitError):
        return True
    if isinstance(exc, openai.APIStatusError):
        return exc.status_code == 429
    message = str(exc).lower()
    return any(marker in message for marker in THROTTLE_MARKERS)


class TextGenerationClient:
    """Gemini through its OpenAI-compatible endpoint, spaced and retried on throttling."""

    def __init__(
        self,
        limiter: TextRateLimiter = text_rate_limiter,
        max_retries: int | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.limiter = limiter
        self.max_retries = max_retries or settings.gemini_max_retries
        self._sleep = sleep
        self.client = (
            OpenAI(
                api_key=settings.gemini_api_key,
                base_url=settings.gemini_base_url,
                timeout=settings.gemini_timeout_seconds,
                max_retries=0,
            )
            if settings.has_gemini
            else None
        )

    def _complete(self, prompt: str) -> str:
        response = self.client.chat.completions.create(
            model=settings.gemini_model,
            messages=[{"role": "user", "content": prompt}],
        )
        return response.choices[0].message.content or ""

    def _retrying(self) -> AsyncRetrying:
        # 5s, 10s, 20s ... capped at 60s between throttled attempts.
        return AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=RETRY_BASE_DELAY_SECONDS, max=RETRY_MAX_DELAY_SECONDS),
            retry=retry_if_exception(is_throttling_error),
            sleep=self._sleep,
            before_sleep=before_sleep_log(logger, logging.WARNING),
        )

    async def generate(self, prompt: str) -> str:
        if self.client is None:
            raise ConfigurationError("Gemini API key is not configured")

        if not self.limiter.quota_available():
            logger.warning(
                "Daily request limit reached: %s/%s",
                self.limiter.state.daily_request_count,
                self.limiter.max_daily,
            )
            raise QuotaExceededError("Daily quota exceeded")

        try:
            async for attempt in self._retrying():
                with attempt:
                    await self.limiter.wait_for_slot()
                    logger.info("Text request attempt %s/%s", attempt.retry_state.attempt_number, self.max_retries)
                    text = await asyncio.to_thread(self._complete, prompt)
        except RetryError as exc:
            raise QuotaExceededError("Rate limit exceeded - please try again later") from exc.last_attempt.exception()

        self.limiter.record_success()
        logger.info(
            "Text request succeeded; daily count %s/%s",
            self.limiter.state.daily_request_count,
            self.limiter.max_daily,
        )
        return text.strip()


text_client = TextGenerationClient()

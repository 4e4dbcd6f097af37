from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from app.core.config import settings
from app.core.exceptions import ConfigurationError, QuotaExceededError
from app.schemas.lesson import Difficulty, LessonRequest, LessonResponse, Subject
from app.services.content_normalizer import MAX_CONCEPT_CHARS, normalize_lesson
from app.services.prompt_builder import build_lesson_prompt
from app.services.text_client import TextGenerationClient, text_client
from app.services.video_service import VideoJobOrchestrator, video_orchestrator

logger = logging.getLogger(__name__)


class ResponseMode(str, Enum):
    live = "live"
    degraded_no_credentials = "degraded-no-credentials"
    degraded_upstream_failure = "degraded-upstream-failure"


@dataclass(frozen=True)
class LessonOutcome:
    mode: ResponseMode
    payload: LessonResponse


def build_mock_lesson(question: str) -> LessonResponse:
    concept = (" ".join((question or "").split()[:2]) or "General")[:MAX_CONCEPT_CHARS]
    return LessonResponse(
        answer=(
            f"Here is a comprehensive explanation of {concept}. This is a mock response because API "
            "limits have been reached or API keys are not configured properly."
        ),
        concept=concept,
        difficulty=Difficulty.beginner,
        subject=Subject.general,
        slides=[
            f"Overview of {concept}",
            "Key steps or components",
            "Real-world examples and applications",
            "Common challenges and solutions",
            "Quick recap and summary",
        ],
        interactive_elements=["animation", "visualization"],
        video_url=None,
        job_id=None,
    )


class TutorService:
    def __init__(
        self,
        text: TextGenerationClient | None = None,
        video: VideoJobOrchestrator | None = None,
    ) -> None:
        self.text = text or text_client
        self.video = video or video_orchestrator

    async def ask(self, request: LessonRequest) -> LessonOutcome:
        """Run the lesson pipeline; only throttling escapes, everything else degrades to a mock."""
        question = request.question or ""

        if not settings.has_gemini or not settings.has_heygen:
            logger.info("Using mock lesson: text or avatar credentials missing")
            return LessonOutcome(ResponseMode.degraded_no_credentials, build_mock_lesson(question))

        try:
            payload = await self._live_lesson(request)
        except QuotaExceededError:
            raise
        except ConfigurationError as exc:
            logger.warning("Using mock lesson: %s", exc)
            return LessonOutcome(ResponseMode.degraded_no_credentials, build_mock_lesson(question))
        except Exception:
            logger.exception("Lesson pipeline failed; returning mock lesson")
            return LessonOutcome(ResponseMode.degraded_upstream_failure, build_mock_lesson(question))

        return LessonOutcome(ResponseMode.live, payload)

    async def _live_lesson(self, request: LessonRequest) -> LessonResponse:
        prompt = build_lesson_prompt(request.question, request.user_level)
        raw = await self.text.generate(prompt)

        normalized = normalize_lesson(raw, request.question)
        content = normalized.content
        logger.info(
            "Generated lesson for %s (%s, %s level) via %s parse",
            content.concept,
            content.subject.value,
            content.difficulty.value,
            normalized.source.value,
        )

        job = await self.video.synthesize(content.answer, request.background_preference, content.subject.value)
        return LessonResponse(**content.model_dump(), video_url=job.video_url, job_id=job.job_id)


tutor_service = TutorService()

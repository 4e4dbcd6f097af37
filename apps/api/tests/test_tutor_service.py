"""
Tests for the response assembler in app.services.tutor_service.
"""

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from app.core.exceptions import ConfigurationError, QuotaExceededError, RenderFailedError
from app.schemas.lesson import LessonRequest, VideoJob
from app.services.prompt_builder import build_lesson_prompt
from app.services.tutor_service import ResponseMode, TutorService, build_mock_lesson

LESSON = {
    "answer": "Gravity is the pull between masses.",
    "concept": "Gravity",
    "slides": ["Mass attracts mass", "Distance weakens the pull"],
    "difficulty": "beginner",
    "subject": "Physics",
    "interactiveElements": ["falling-apple"],
}


def _service(generated: str | Exception = json.dumps(LESSON), job: VideoJob | Exception | None = None):
    text = MagicMock()
    text.generate = AsyncMock(side_effect=generated if isinstance(generated, Exception) else None, return_value=generated)
    video = MagicMock()
    video.synthesize = AsyncMock(
        side_effect=job if isinstance(job, Exception) else None,
        return_value=job or VideoJob(video_url="https://cdn/v.mp4"),
    )
    return TutorService(text=text, video=video), text, video


@pytest.mark.asyncio
async def test_missing_credentials_return_mock_without_vendor_calls():
    service, text, video = _service()

    outcome = await service.ask(LessonRequest(question="Explain gravity"))

    assert outcome.mode == ResponseMode.degraded_no_credentials
    assert outcome.payload.video_url is None
    assert outcome.payload.job_id is None
    assert "gravity" in outcome.payload.answer
    text.generate.assert_not_awaited()
    video.synthesize.assert_not_awaited()


@pytest.mark.asyncio
async def test_avatar_credentials_alone_are_not_enough(monkeypatch, live_credentials):
    from app.core.config import settings

    monkeypatch.setattr(settings, "heygen_avatar_id", "short")
    service, text, _ = _service()

    outcome = await service.ask(LessonRequest(question="Explain gravity"))

    assert outcome.mode == ResponseMode.degraded_no_credentials
    text.generate.assert_not_awaited()


@pytest.mark.asyncio
async def test_live_lesson(live_credentials):
    service, text, video = _service()

    outcome = await service.ask(
        LessonRequest(question="Explain gravity", background_preference="green", user_level="high school")
    )

    assert outcome.mode == ResponseMode.live
    payload = outcome.payload
    assert payload.answer == LESSON["answer"]
    assert payload.concept == "Gravity"
    assert payload.subject.value == "Physics"
    assert payload.video_url == "https://cdn/v.mp4"
    assert payload.job_id is None
    text.generate.assert_awaited_once_with(build_lesson_prompt("Explain gravity", "high school"))
    video.synthesize.assert_awaited_once_with(LESSON["answer"], "green", "Physics")


@pytest.mark.asyncio
async def test_long_answer_truncated_in_payload(live_credentials):
    service, _, video = _service(json.dumps({**LESSON, "answer": "x" * 5000}))

    outcome = await service.ask(LessonRequest(question="Explain gravity"))

    assert len(outcome.payload.answer) == 2000
    assert len(video.synthesize.await_args.args[0]) == 2000


@pytest.mark.asyncio
async def test_unresolved_video_keeps_job_id(live_credentials):
    service, _, _ = _service(job=VideoJob(job_id="job-9"))

    outcome = await service.ask(LessonRequest(question="Explain gravity"))

    assert outcome.mode == ResponseMode.live
    assert outcome.payload.video_url is None
    assert outcome.payload.job_id == "job-9"


@pytest.mark.asyncio
async def test_render_failure_degrades_to_mock(live_credentials):
    service, _, _ = _service(job=RenderFailedError("job-10", "failed"))

    outcome = await service.ask(LessonRequest(question="Explain gravity"))

    assert outcome.mode == ResponseMode.degraded_upstream_failure
    assert outcome.payload == build_mock_lesson("Explain gravity")


@pytest.mark.asyncio
async def test_network_failure_degrades_to_mock(live_credentials):
    service, _, _ = _service(generated=httpx.ConnectTimeout("timed out"))

    outcome = await service.ask(LessonRequest(question="Explain gravity"))

    assert outcome.mode == ResponseMode.degraded_upstream_failure
    assert outcome.payload.video_url is None


@pytest.mark.asyncio
async def test_configuration_error_mid_pipeline(live_credentials):
    service, _, _ = _service(job=ConfigurationError("avatar id rejected"))

    outcome = await service.ask(LessonRequest(question="Explain gravity"))

    assert outcome.mode == ResponseMode.degraded_no_credentials


@pytest.mark.asyncio
async def test_throttling_is_not_masked(live_credentials):
    service, _, video = _service(generated=QuotaExceededError("Rate limit exceeded"))

    with pytest.raises(QuotaExceededError):
        await service.ask(LessonRequest(question="Explain gravity"))

    video.synthesize.assert_not_awaited()


def test_mock_lesson_shape():
    mock = build_mock_lesson("Explain gravity to me")

    assert mock.concept == "Explain gravity"
    assert len(mock.slides) == 5
    assert mock.slides[0] == "Overview of Explain gravity"
    assert mock.interactive_elements == ["animation", "visualization"]
    assert build_mock_lesson("").concept == "General"
    assert len(build_mock_lesson("a" * 100).concept) == 64

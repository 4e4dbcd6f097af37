"""
Core exceptions shared by the lesson pipeline and the vendor providers.
"""

from __future__ import annotations


class TutorError(Exception):
    """Base exception for all application errors."""


class ConfigurationError(TutorError):
    """A vendor credential is missing or unusable."""


class QuotaExceededError(TutorError):
    """The text vendor throttled us, or the local daily ceiling was reached."""


class RenderFailedError(TutorError):
    """The avatar vendor reported that a video job failed."""

    def __init__(self, job_id: str, status: str | None = None) -> None:
        super().__init__(f"Avatar vendor failed to render video {job_id} (status={status})")
        self.job_id = job_id
        self.status = status


class ParseError(TutorError):
    """Model output could not be read as a structured lesson."""

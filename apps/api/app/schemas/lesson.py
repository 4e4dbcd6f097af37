from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

BackgroundPreference = Literal["transparent", "green", "auto"]


class Difficulty(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


class Subject(str, Enum):
    biology = "Biology"
    physics = "Physics"
    chemistry = "Chemistry"
    mathematics = "Mathematics"
    computer_science = "Computer Science"
    general = "General"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LessonRequest(CamelModel):
    # Optional so a missing question is answered with 400 rather than a validation error.
    question: str | None = None
    background_preference: BackgroundPreference = "auto"
    user_level: str | None = None

    @field_validator("background_preference", mode="before")
    @classmethod
    def _default_preference(cls, value):
        return value or "auto"


class LessonContent(CamelModel):
    answer: str
    concept: str
    difficulty: Difficulty = Difficulty.beginner
    subject: Subject = Subject.general
    slides: list[str] = Field(min_length=1, max_length=6)
    interactive_elements: list[str] = Field(default_factory=list)
    prerequisites: list[str] = Field(default_factory=list)
    next_topics: list[str] = Field(default_factory=list)
    real_world_examples: list[str] = Field(default_factory=list)


class VideoJob(CamelModel):
    video_url: str | None = None
    job_id: str | None = None


class LessonResponse(LessonContent):
    video_url: str | None = None
    job_id: str | None = None


class ThrottledResponse(CamelModel):
    error: str
    retry_after: int = 60

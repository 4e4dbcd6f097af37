"""
Turns raw text-model output into a fully populated ``LessonContent``.

The model is asked for JSON but does not always comply. Strict parsing is
tried first; when it fails, fields are pulled out of the text with regexes,
and every field that still has no usable value gets a deterministic default.
Nothing here raises and nothing here keeps state, so the same input always
yields the same lesson.
"""

from __future__ import annotations

import json
import re
import string
from dataclasses import dataclass
from enum import Enum

from app.core.exceptions import ParseError
from app.schemas.lesson import Difficulty, LessonContent, Subject
from app.utils.lesson_terms import CONCEPT_KEYWORDS, DIFFICULTY_HINTS, SUBJECT_KEYWORDS

MAX_ANSWER_CHARS = 2000
MAX_CONCEPT_CHARS = 64
MAX_SLIDES = 6
MAX_INTERACTIVE_ELEMENTS = 10
MAX_RELATED_ITEMS = 5

DEFAULT_ANSWER = "Let me think about that topic."
DEFAULT_CONCEPT = "Learning Topic"

FENCE_RE = re.compile(r"```(?:json)?[ \t]*\n?", re.IGNORECASE)
ANSWER_RE = re.compile(r"""answer["\s]*:\s*(?:"([^"]+)"|'([^']+)')""", re.IGNORECASE)
CONCEPT_RE = re.compile(r"""concept["\s]*:\s*(?:"([^"]+)"|'([^']+)')""", re.IGNORECASE)
SLIDES_RE = re.compile(r"""slides["\s]*:\s*\[([^\]]+)\]""", re.IGNORECASE)


class ContentSource(str, Enum):
    structured = "structured"
    heuristic = "heuristic"
    default = "default"


@dataclass(frozen=True)
class NormalizedLesson:
    source: ContentSource
    content: LessonContent


def strip_code_fences(text: str) -> str:
    return FENCE_RE.sub("", text or "").strip()


def parse_lesson_json(text: str) -> dict:
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, TypeError, RecursionError) as exc:
        raise ParseError(f"Model output is not valid JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise ParseError(f"Expected a JSON object, got {type(parsed).__name__}")
    return parsed


def extract_concept_from_question(question: str) -> str:
    lowered = (question or "").lower()
    for keyword, concept in CONCEPT_KEYWORDS.items():
        if keyword in lowered:
            return concept

    words = [word.strip(string.punctuation) for word in (question or "").split()]
    meaningful = [word for word in words if len(word) > 3]
    if meaningful:
        first = meaningful[0]
        return first[:1].upper() + first[1:]
    return DEFAULT_CONCEPT


def infer_difficulty(question: str) -> Difficulty:
    lowered = (question or "").lower()
    for level, hints in DIFFICULTY_HINTS.items():
        if any(hint in lowered for hint in hints):
            return Difficulty(level)
    return Difficulty.beginner


def infer_subject(concept: str) -> Subject:
    lowered = (concept or "").lower()
    for subject, keywords in SUBJECT_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            return Subject(subject)
    return Subject.general


def default_slides(concept: str) -> list[str]:
    return [
        f"Introduction to {concept}",
        "Key components and principles",
        "Real-world applications",
        "Common examples",
        "Why it matters",
    ]


def _clean_text(value) -> str:
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return str(value).strip()
    return ""


def _string_list(value, limit: int, unique: bool = False) -> list[str]:
    if not isinstance(value, list):
        return []
    items: list[str] = []
    for raw in value:
        cleaned = _clean_text(raw)
        if not cleaned or (unique and cleaned in items):
            continue
        items.append(cleaned)
    return items[:limit]


def _coerce_difficulty(value) -> Difficulty | None:
    cleaned = _clean_text(value).lower()
    try:
        return Difficulty(cleaned)
    except ValueError:
        return None


def _coerce_subject(value) -> Subject | None:
    cleaned = _clean_text(value).lower()
    for subject in Subject:
        if subject.value.lower() == cleaned:
            return subject
    return None


def _first_group(match: re.Match | None) -> str:
    if not match:
        return ""
    return (match.group(1) or match.group(2) or "").strip()


def _assemble(
    question: str,
    answer: str,
    concept: str,
    slides: list[str],
    difficulty: Difficulty | None,
    subject: Subject | None,
    interactive_elements: list[str] | None = None,
    prerequisites: list[str] | None = None,
    next_topics: list[str] | None = None,
    real_world_examples: list[str] | None = None,
) -> LessonContent:
    concept = (concept or extract_concept_from_question(question))[:MAX_CONCEPT_CHARS]
    return LessonContent(
        answer=(answer or DEFAULT_ANSWER)[:MAX_ANSWER_CHARS],
        concept=concept,
        difficulty=difficulty or Difficulty.beginner,
        subject=subject or Subject.general,
        slides=slides[:MAX_SLIDES] or default_slides(concept),
        interactive_elements=interactive_elements or [],
        prerequisites=prerequisites or [],
        next_topics=next_topics or [],
        real_world_examples=real_world_examples or [],
    )


def _from_structured(parsed: dict, question: str) -> LessonContent:
    return _assemble(
        question=question,
        answer=_clean_text(parsed.get("answer")),
        concept=_clean_text(parsed.get("concept")),
        slides=_string_list(parsed.get("slides"), MAX_SLIDES),
        difficulty=_coerce_difficulty(parsed.get("difficulty")),
        subject=_coerce_subject(parsed.get("subject")),
        interactive_elements=_string_list(parsed.get("interactiveElements"), MAX_INTERACTIVE_ELEMENTS, unique=True),
        prerequisites=_string_list(parsed.get("prerequisites"), MAX_RELATED_ITEMS),
        next_topics=_string_list(parsed.get("nextTopics"), MAX_RELATED_ITEMS),
        real_world_examples=_string_list(parsed.get("realWorldExamples"), MAX_RELATED_ITEMS),
    )


def _from_heuristics(text: str, question: str) -> LessonContent:
    answer = _first_group(ANSWER_RE.search(text))
    if not answer:
        lines = [line.strip() for line in text.splitlines() if line.strip()]
        answer = " ".join(lines[:3])

    concept = _first_group(CONCEPT_RE.search(text)) or extract_concept_from_question(question)

    slides: list[str] = []
    slides_match = SLIDES_RE.search(text)
    if slides_match:
        slides = [part.strip().strip("\"'").strip() for part in slides_match.group(1).split(",")]
        slides = [slide for slide in slides if slide]

    return _assemble(
        question=question,
        answer=answer,
        concept=concept,
        slides=slides,
        difficulty=infer_difficulty(question),
        subject=infer_subject(concept),
    )


def normalize_lesson(raw_text: str, question: str) -> NormalizedLesson:
    text = strip_code_fences(raw_text)

    if not text:
        concept = extract_concept_from_question(question)
        content = _assemble(
            question=question,
            answer="",
            concept=concept,
            slides=[],
            difficulty=infer_difficulty(question),
            subject=infer_subject(concept),
        )
        return NormalizedLesson(ContentSource.default, content)

    try:
        parsed = parse_lesson_json(text)
    except ParseError:
        return NormalizedLesson(ContentSource.heuristic, _from_heuristics(text, question))

    return NormalizedLesson(ContentSource.structured, _from_structured(parsed, question))

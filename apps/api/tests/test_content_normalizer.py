"""
Tests for app.services.content_normalizer
"""

import json

import pytest

from app.schemas.lesson import Difficulty, Subject
from app.services.content_normalizer import (
    ContentSource,
    default_slides,
    extract_concept_from_question,
    infer_difficulty,
    infer_subject,
    normalize_lesson,
    strip_code_fences,
)

QUESTION = "Explain photosynthesis"


def _lesson(**overrides) -> str:
    data = {
        "answer": "Plants turn light into sugar.",
        "concept": "Photosynthesis",
        "slides": ["Light", "Water", "Sugar"],
        "difficulty": "intermediate",
        "subject": "Biology",
        "interactiveElements": ["leaf-zoom"],
    }
    data.update(overrides)
    return json.dumps(data)


class TestStructuredPath:
    def test_fenced_json_is_structured(self):
        result = normalize_lesson(f"```json\n{_lesson()}\n```", QUESTION)

        assert result.source == ContentSource.structured
        content = result.content
        assert content.answer == "Plants turn light into sugar."
        assert content.concept == "Photosynthesis"
        assert content.slides == ["Light", "Water", "Sugar"]
        assert content.difficulty == Difficulty.intermediate
        assert content.subject == Subject.biology
        assert content.interactive_elements == ["leaf-zoom"]

    @pytest.mark.parametrize("slides", [None, [], ["", "  "], "not a list"])
    def test_missing_slides_use_five_item_template(self, slides):
        raw = _lesson(slides=slides) if slides is not None else json.dumps({"answer": "x", "concept": "Optics"})
        content = normalize_lesson(raw, QUESTION).content

        assert content.slides == [
            "Introduction to Optics" if slides is None else "Introduction to Photosynthesis",
            "Key components and principles",
            "Real-world applications",
            "Common examples",
            "Why it matters",
        ]

    def test_long_answer_and_concept_are_truncated(self):
        content = normalize_lesson(_lesson(answer="a" * 2500, concept="c" * 100), QUESTION).content

        assert len(content.answer) == 2000
        assert len(content.concept) == 64

    def test_slides_capped_at_six(self):
        content = normalize_lesson(_lesson(slides=[f"point {i}" for i in range(10)]), QUESTION).content
        assert content.slides == [f"point {i}" for i in range(6)]

    def test_invalid_enums_fall_back_to_defaults(self):
        content = normalize_lesson(_lesson(difficulty="expert", subject="Astrology"), QUESTION).content

        assert content.difficulty == Difficulty.beginner
        assert content.subject == Subject.general

    def test_enum_matching_ignores_case(self):
        content = normalize_lesson(_lesson(difficulty="ADVANCED", subject="computer science"), QUESTION).content

        assert content.difficulty == Difficulty.advanced
        assert content.subject == Subject.computer_science

    def test_missing_answer_and_concept_get_fallbacks(self):
        content = normalize_lesson(json.dumps({"slides": ["one"]}), "How does gravity work?").content

        assert content.answer == "Let me think about that topic."
        assert content.concept == "Gravity and Forces"

    def test_interactive_elements_deduplicated_and_capped(self):
        tags = ["zoom", "zoom"] + [f"tag-{i}" for i in range(15)]
        content = normalize_lesson(_lesson(interactiveElements=tags), QUESTION).content

        assert content.interactive_elements[0] == "zoom"
        assert content.interactive_elements.count("zoom") == 1
        assert len(content.interactive_elements) == 10

    def test_related_lists_are_kept(self):
        raw = _lesson(prerequisites=["Plants"], nextTopics=["Respiration"], realWorldExamples=[1, "Forests"])
        content = normalize_lesson(raw, QUESTION).content

        assert content.prerequisites == ["Plants"]
        assert content.next_topics == ["Respiration"]
        assert content.real_world_examples == ["1", "Forests"]


class TestHeuristicPath:
    def test_key_value_text_is_extracted(self):
        raw = 'Sure! answer: "Gravity pulls masses together" concept: \'Gravity\' slides: ["Mass", "Distance"]'
        result = normalize_lesson(raw, "Explain gravity")

        assert result.source == ContentSource.heuristic
        assert result.content.answer == "Gravity pulls masses together"
        assert result.content.concept == "Gravity"
        assert result.content.slides == ["Mass", "Distance"]
        assert result.content.subject == Subject.physics

    def test_plain_prose_uses_first_three_lines(self):
        raw = "Line one\n\nLine two\nLine three\nLine four"
        result = normalize_lesson(raw, QUESTION)

        assert result.source == ContentSource.heuristic
        assert result.content.answer == "Line one Line two Line three"
        assert result.content.concept == "Photosynthesis"
        assert result.content.slides == default_slides("Photosynthesis")
        assert result.content.subject == Subject.biology
        assert result.content.difficulty == Difficulty.beginner

    def test_json_array_is_not_structured(self):
        result = normalize_lesson('["just", "a", "list"]', QUESTION)
        assert result.source == ContentSource.heuristic

    def test_deeply_nested_output_falls_back(self):
        result = normalize_lesson("[" * 100000 + "]" * 100000, "Explain gravity")

        assert result.source == ContentSource.heuristic
        assert len(result.content.answer) == 2000
        assert result.content.concept == "Gravity and Forces"
        assert len(result.content.slides) == 5

    def test_apostrophes_inside_double_quoted_answer(self):
        raw = 'answer: "It\'s the plant\'s kitchen", broken {'
        assert normalize_lesson(raw, QUESTION).content.answer == "It's the plant's kitchen"


class TestDefaultPath:
    @pytest.mark.parametrize("raw", ["", "   ", "```json\n```"])
    def test_blank_output_is_default(self, raw):
        result = normalize_lesson(raw, "Compare algorithms for sorting")

        assert result.source == ContentSource.default
        assert result.content.answer == "Let me think about that topic."
        assert result.content.concept == "Algorithms"
        assert result.content.difficulty == Difficulty.intermediate
        assert result.content.subject == Subject.computer_science
        assert len(result.content.slides) == 5


def test_normalizer_is_idempotent():
    raw = "```json\n" + _lesson(slides=[]) + "\n```"
    assert normalize_lesson(raw, QUESTION) == normalize_lesson(raw, QUESTION)

    prose = "Some text\nwithout structure"
    assert normalize_lesson(prose, QUESTION) == normalize_lesson(prose, QUESTION)


class TestHelpers:
    def test_strip_code_fences(self):
        assert strip_code_fences('```JSON\n{"a": 1}\n```') == '{"a": 1}'
        assert strip_code_fences('```\n{"a": 1}```') == '{"a": 1}'
        assert strip_code_fences(None) == ""

    @pytest.mark.parametrize(
        "question,expected",
        [
            ("What is DNA?", "DNA Structure"),
            ("Tell me about data structures", "Data Structures"),
            ("Why volcanoes erupt", "Volcanoes"),
            ("why do we", "Learning Topic"),
            ("", "Learning Topic"),
        ],
    )
    def test_extract_concept_from_question(self, question, expected):
        assert extract_concept_from_question(question) == expected

    @pytest.mark.parametrize(
        "question,expected",
        [
            ("What is a cell?", Difficulty.beginner),
            ("Derive the quadratic formula", Difficulty.advanced),
            ("How does a transistor switch?", Difficulty.intermediate),
            ("Transistors", Difficulty.beginner),
        ],
    )
    def test_infer_difficulty(self, question, expected):
        assert infer_difficulty(question) == expected

    def test_infer_subject(self):
        assert infer_subject("Acids and Bases") == Subject.chemistry
        assert infer_subject("Coordinate Geometry") == Subject.mathematics
        assert infer_subject("Renaissance art") == Subject.general

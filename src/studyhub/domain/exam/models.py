"""
Domain models for exam scoring.

These are pure data structures with no I/O or external dependencies.
"""

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from enum import Enum, StrEnum
from types import MappingProxyType

from studyhub.domain.constants import (
    EXCELLENT_THRESHOLD,
    GOOD_THRESHOLD,
    PASSING_THRESHOLD,
)


class QuestionCategory(StrEnum):
    """PANCE content blueprint categories shared by decks and exam questions."""

    CARDIOLOGY = "CARDIOLOGY"
    PULMONOLOGY = "PULMONOLOGY"
    GASTROENTEROLOGY = "GASTROENTEROLOGY"
    MUSCULOSKELETAL = "MUSCULOSKELETAL"
    NEUROLOGY = "NEUROLOGY"
    PSYCHIATRY = "PSYCHIATRY"
    DERMATOLOGY = "DERMATOLOGY"
    EENT = "EENT"
    ENDOCRINOLOGY = "ENDOCRINOLOGY"
    HEMATOLOGY = "HEMATOLOGY"
    INFECTIOUS_DISEASE = "INFECTIOUS_DISEASE"
    NEPHROLOGY = "NEPHROLOGY"
    REPRODUCTIVE = "REPRODUCTIVE"
    PEDIATRICS = "PEDIATRICS"
    EMERGENCY_MEDICINE = "EMERGENCY_MEDICINE"
    PHARMACOLOGY = "PHARMACOLOGY"
    ANATOMY = "ANATOMY"


class PerformanceBand(Enum):
    """
    Ordered classification of an exam percentage.

    Bands are listed from best to worst; thresholds are inclusive lower bounds.
    """

    EXCELLENT = ("80%+", "Outstanding, well prepared for the PANCE")
    GOOD = ("70-79%", "Good, keep reviewing weak areas")
    PASSING = ("60-69%", "Borderline, focused review recommended")
    NEEDS_IMPROVEMENT = ("Below 60%", "Intensive review needed before the exam")

    def __init__(self, range_label: str, message: str):
        self.range_label = range_label
        self.message = message

    @classmethod
    def from_percent(cls, percent: float) -> "PerformanceBand":
        if percent >= EXCELLENT_THRESHOLD:
            return cls.EXCELLENT
        if percent >= GOOD_THRESHOLD:
            return cls.GOOD
        if percent >= PASSING_THRESHOLD:
            return cls.PASSING
        return cls.NEEDS_IMPROVEMENT


@dataclass(frozen=True)
class ExamAnswerRecord:
    """
    One answered question of a completed exam session.

    Attributes:
        question_id: Identifier of the question (UUID, int or str).
        category: Category name; a QuestionCategory or any string.
        is_correct: Whether the selected option was right.
        time_spent_seconds: Seconds spent on the question, None if not timed.
    """

    question_id: Hashable
    category: str
    is_correct: bool
    time_spent_seconds: int | None = None


@dataclass(frozen=True)
class ScoreResult:
    """
    Complete result of scoring an exam session.
    """

    raw_score: int
    total_questions: int
    score_percent: float
    category_breakdown: Mapping[str, float] = field(hash=False)
    performance_band: PerformanceBand
    avg_time_per_question_seconds: float
    incorrect_question_ids: tuple[Hashable, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Read-only view so the frozen result cannot be changed through its mapping
        object.__setattr__(
            self, "category_breakdown", MappingProxyType(dict(self.category_breakdown))
        )
        object.__setattr__(self, "incorrect_question_ids", tuple(self.incorrect_question_ids))

    @property
    def incorrect_count(self) -> int:
        return self.total_questions - self.raw_score

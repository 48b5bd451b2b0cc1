"""
Domain models for SM-2 review scheduling.

These are pure data structures with no I/O or external dependencies.
"""

from dataclasses import dataclass
from datetime import date
from enum import IntEnum

from studyhub.domain.constants import (
    CORRECT_QUALITY_THRESHOLD,
    DEFAULT_EASE_FACTOR,
    MASTERY_INTERVAL_DAYS,
)


class ReviewButton(IntEnum):
    """
    Rating buttons shown to the learner, valued as SM-2 quality grades.

    Quality 0 (blackout) and 3 (barely correct) are valid scheduler inputs
    but have no button.
    """

    AGAIN = 1
    HARD = 2
    GOOD = 4
    EASY = 5


def is_correct_quality(quality: int) -> bool:
    return quality >= CORRECT_QUALITY_THRESHOLD


@dataclass(frozen=True)
class ReviewState:
    """
    Scheduling state of one card for one user, as persisted before a review.

    Attributes:
        interval_days: Current interval in days (0 for a card never reviewed).
        repetitions: Consecutive correct recalls.
        ease_factor: SM-2 multiplier, never below 1.3.
    """

    interval_days: int = 0
    repetitions: int = 0
    ease_factor: float = DEFAULT_EASE_FACTOR


@dataclass(frozen=True)
class ReviewResult:
    """
    Outcome of one SM-2 calculation.

    The caller copies these values back onto its own state record.
    """

    new_interval: int
    new_ease_factor: float
    new_repetitions: int
    next_review_date: date

    @property
    def is_mastered(self) -> bool:
        return self.new_interval >= MASTERY_INTERVAL_DAYS

    def to_state(self) -> ReviewState:
        """Return the state a subsequent review should start from."""
        return ReviewState(
            interval_days=self.new_interval,
            repetitions=self.new_repetitions,
            ease_factor=self.new_ease_factor,
        )

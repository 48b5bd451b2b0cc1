"""
Domain models for study progress analytics.

These are pure data structures with no I/O or external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType

from studyhub.domain.constants import (
    DEFAULT_TARGET_CARDS_PER_DAY,
    DEFAULT_TARGET_MINUTES_PER_DAY,
    FLASHCARD_REVIEW,
)


@dataclass(frozen=True)
class ActivityRecord:
    """
    A single entry of a user's activity log.

    Attributes:
        category: Category the activity belongs to.
        activity_date: Calendar day the activity happened on.
        duration_minutes: Minutes spent.
        correct_count: Items answered correctly.
        total_count: Items attempted.
        activity_type: Kind of activity (e.g. FLASHCARD_REVIEW).
    """

    category: str
    activity_date: date
    duration_minutes: int = 0
    correct_count: int = 0
    total_count: int = 0
    activity_type: str = FLASHCARD_REVIEW


@dataclass(frozen=True)
class DailyGoal:
    target_cards_per_day: int = DEFAULT_TARGET_CARDS_PER_DAY
    target_minutes_per_day: int = DEFAULT_TARGET_MINUTES_PER_DAY


@dataclass(frozen=True)
class GoalProgress:
    """Progress towards today's goal."""

    target_cards_per_day: int
    target_minutes_per_day: int
    cards_reviewed_today: int
    minutes_studied_today: int
    card_goal_met: bool
    time_goal_met: bool
    card_goal_percent: float
    time_goal_percent: float


@dataclass(frozen=True)
class DailyProgressPoint:
    """A single day of the activity trend."""

    date: date
    cards_reviewed: int
    minutes_studied: int
    accuracy: float
    goal_met: bool


@dataclass(frozen=True)
class ProgressDashboard:
    """
    Aggregated progress for one user.

    This is the read model served to the dashboard view.
    """

    current_streak: int
    longest_streak: int
    total_study_days: int
    total_study_minutes: int
    total_cards_reviewed: int
    overall_accuracy: float
    weakest_category: str
    category_accuracy: Mapping[str, float] = field(hash=False)
    today_goal: GoalProgress
    recent_activity: tuple[DailyProgressPoint, ...] = ()

    def __post_init__(self):
        object.__setattr__(
            self, "category_accuracy", MappingProxyType(dict(self.category_accuracy))
        )
        object.__setattr__(self, "recent_activity", tuple(self.recent_activity))

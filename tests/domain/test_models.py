from datetime import date

import pytest

from studyhub.domain.exam.models import PerformanceBand, QuestionCategory, ScoreResult
from studyhub.domain.progress.models import (
    ActivityRecord,
    DailyGoal,
    DailyProgressPoint,
    GoalProgress,
    ProgressDashboard,
)
from studyhub.domain.scheduling.models import (
    ReviewButton,
    ReviewResult,
    ReviewState,
    is_correct_quality,
)


@pytest.mark.parametrize(
    "percent, band",
    [
        (100.0, PerformanceBand.EXCELLENT),
        (80.0, PerformanceBand.EXCELLENT),
        (79.9, PerformanceBand.GOOD),
        (70.0, PerformanceBand.GOOD),
        (69.9, PerformanceBand.PASSING),
        (60.0, PerformanceBand.PASSING),
        (59.9, PerformanceBand.NEEDS_IMPROVEMENT),
        (0.0, PerformanceBand.NEEDS_IMPROVEMENT),
    ],
)
def test_performance_band_thresholds(percent, band):
    assert PerformanceBand.from_percent(percent) is band


def test_performance_band_metadata():
    assert PerformanceBand.EXCELLENT.range_label == "80%+"
    assert PerformanceBand.NEEDS_IMPROVEMENT.range_label == "Below 60%"
    assert "review" in PerformanceBand.PASSING.message


def test_review_button_qualities():
    assert [int(b) for b in ReviewButton] == [1, 2, 4, 5]
    assert not is_correct_quality(ReviewButton.HARD)
    assert is_correct_quality(ReviewButton.GOOD)
    assert is_correct_quality(3)


def test_review_state_defaults():
    state = ReviewState()

    assert (state.interval_days, state.repetitions, state.ease_factor) == (0, 0, 2.5)


def test_review_result_to_state():
    result = ReviewResult(
        new_interval=6, new_ease_factor=2.6, new_repetitions=2, next_review_date=date(2026, 1, 7)
    )

    assert result.to_state() == ReviewState(interval_days=6, repetitions=2, ease_factor=2.6)
    assert result.is_mastered is False


def test_score_result_incorrect_count():
    result = ScoreResult(
        raw_score=7,
        total_questions=10,
        score_percent=70.0,
        category_breakdown={},
        performance_band=PerformanceBand.GOOD,
        avg_time_per_question_seconds=0.0,
    )

    assert result.incorrect_count == 3


def test_question_category_is_a_string():
    assert QuestionCategory.CARDIOLOGY == "CARDIOLOGY"


def test_value_objects_are_immutable():
    record = ActivityRecord(category="CARDIOLOGY", activity_date=date(2026, 1, 1))

    with pytest.raises(AttributeError):
        record.total_count = 5  # type: ignore[misc]
    assert DailyGoal() == DailyGoal(target_cards_per_day=20, target_minutes_per_day=30)


def test_score_result_collections_are_read_only():
    breakdown = {"CARDIOLOGY": 50.0}
    result = ScoreResult(
        raw_score=1,
        total_questions=2,
        score_percent=50.0,
        category_breakdown=breakdown,
        performance_band=PerformanceBand.NEEDS_IMPROVEMENT,
        avg_time_per_question_seconds=0.0,
        incorrect_question_ids=["q2"],
    )
    breakdown["CARDIOLOGY"] = 0.0

    assert result.category_breakdown == {"CARDIOLOGY": 50.0}
    assert result.incorrect_question_ids == ("q2",)
    with pytest.raises(TypeError):
        result.category_breakdown["CARDIOLOGY"] = 100.0
    assert hash(result) == hash(result)


def test_dashboard_collections_are_read_only():
    day = date(2026, 3, 15)
    goal = GoalProgress(20, 30, 0, 0, False, False, 0.0, 0.0)
    dashboard = ProgressDashboard(
        current_streak=0,
        longest_streak=0,
        total_study_days=0,
        total_study_minutes=0,
        total_cards_reviewed=0,
        overall_accuracy=0.0,
        weakest_category="N/A",
        category_accuracy={"CARDIOLOGY": 0.0},
        today_goal=goal,
        recent_activity=[DailyProgressPoint(day, 0, 0, 0.0, False)],
    )

    assert isinstance(dashboard.recent_activity, tuple)
    with pytest.raises(TypeError):
        dashboard.category_accuracy["NEUROLOGY"] = 10.0
    assert hash(dashboard) == hash(dashboard)

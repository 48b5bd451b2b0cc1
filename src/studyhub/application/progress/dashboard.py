"""
Dashboard assembly from a user's activity log.

This is a pure computation module with no I/O.
"""

from collections.abc import Sequence
from datetime import date

from studyhub.domain.constants import ACTIVITY_WINDOW_DAYS
from studyhub.domain.progress.models import ActivityRecord, DailyGoal, ProgressDashboard

from .goals import build_daily_points, goal_progress_for_day
from .performance import PerformanceAnalyzer
from .streaks import StreakTracker


def build_dashboard(
    logs: Sequence[ActivityRecord],
    goal: DailyGoal,
    today: date,
    window_days: int = ACTIVITY_WINDOW_DAYS,
    streaks: StreakTracker | None = None,
    analyzer: PerformanceAnalyzer | None = None,
) -> ProgressDashboard:
    """
    Compose streaks, accuracy, today's goal and the recent activity trend.

    Study dates are the distinct activity dates of ``logs``.
    """
    streaks = streaks or StreakTracker()
    analyzer = analyzer or PerformanceAnalyzer()
    study_dates = {record.activity_date for record in logs}

    return ProgressDashboard(
        current_streak=streaks.current_streak(study_dates, today),
        longest_streak=streaks.longest_streak(study_dates),
        total_study_days=streaks.total_study_days(study_dates),
        total_study_minutes=analyzer.total_study_minutes(logs),
        total_cards_reviewed=analyzer.total_items_reviewed(logs),
        overall_accuracy=analyzer.overall_accuracy(logs),
        weakest_category=analyzer.weakest_category(logs),
        category_accuracy=analyzer.category_accuracy(logs),
        today_goal=goal_progress_for_day(logs, goal, today),
        recent_activity=build_daily_points(logs, goal, today, days=window_days),
    )

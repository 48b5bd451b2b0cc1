"""
Daily goal progress and the day-by-day activity trend.
"""

from collections.abc import Sequence
from datetime import date, timedelta

from studyhub.application.utils.numbers import percent
from studyhub.domain.constants import ACTIVITY_WINDOW_DAYS
from studyhub.domain.progress.models import (
    ActivityRecord,
    DailyGoal,
    DailyProgressPoint,
    GoalProgress,
)


def _capped_percent(done: int, target: int) -> float:
    if target <= 0:
        return 0.0
    return percent(done, target, cap=100.0)


def build_goal_progress(goal: DailyGoal, cards_today: int, minutes_today: int) -> GoalProgress:
    """Compare today's totals against the goal; percentages are capped at 100."""
    return GoalProgress(
        target_cards_per_day=goal.target_cards_per_day,
        target_minutes_per_day=goal.target_minutes_per_day,
        cards_reviewed_today=cards_today,
        minutes_studied_today=minutes_today,
        card_goal_met=cards_today >= goal.target_cards_per_day,
        time_goal_met=minutes_today >= goal.target_minutes_per_day,
        card_goal_percent=_capped_percent(cards_today, goal.target_cards_per_day),
        time_goal_percent=_capped_percent(minutes_today, goal.target_minutes_per_day),
    )


def goal_progress_for_day(
    logs: Sequence[ActivityRecord], goal: DailyGoal, day: date
) -> GoalProgress:
    day_logs = [record for record in logs if record.activity_date == day]
    return build_goal_progress(
        goal,
        cards_today=sum(record.total_count for record in day_logs),
        minutes_today=sum(record.duration_minutes for record in day_logs),
    )


def build_daily_points(
    logs: Sequence[ActivityRecord],
    goal: DailyGoal,
    today: date,
    days: int = ACTIVITY_WINDOW_DAYS,
) -> list[DailyProgressPoint]:
    """
    One point per calendar day, oldest first, ending at ``today``.

    Days without activity are included with zero totals. A day meets the
    goal if either the card target or the minute target was reached.
    """
    first_day = today - timedelta(days=days - 1)
    by_day: dict[date, list[ActivityRecord]] = {}
    for record in logs:
        if first_day <= record.activity_date <= today:
            by_day.setdefault(record.activity_date, []).append(record)

    points = []
    for offset in range(days):
        day = first_day + timedelta(days=offset)
        day_logs = by_day.get(day, [])
        cards = sum(record.total_count for record in day_logs)
        minutes = sum(record.duration_minutes for record in day_logs)
        correct = sum(record.correct_count for record in day_logs)
        points.append(
            DailyProgressPoint(
                date=day,
                cards_reviewed=cards,
                minutes_studied=minutes,
                accuracy=percent(correct, cards),
                goal_met=(
                    cards >= goal.target_cards_per_day
                    or minutes >= goal.target_minutes_per_day
                ),
            )
        )
    return points

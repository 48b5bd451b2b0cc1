"""
Progress Service: application layer orchestrator for study analytics.

Coordinates fetching activity from the repository and building the dashboard.
"""

import logging
from datetime import date

from studyhub.domain.constants import (
    ACTIVITY_WINDOW_DAYS,
    DEFAULT_TARGET_CARDS_PER_DAY,
    DEFAULT_TARGET_MINUTES_PER_DAY,
)
from studyhub.domain.progress.models import DailyGoal, GoalProgress, ProgressDashboard
from studyhub.domain.progress.ports import ProgressRepository

from .dashboard import build_dashboard
from .goals import goal_progress_for_day

logger = logging.getLogger(__name__)


class ProgressService:
    """
    Application service for a user's progress dashboard and goal.

    Follows Dependency Inversion: depends on the ProgressRepository abstraction.
    """

    def __init__(
        self,
        progress_repo: ProgressRepository,
        default_goal: DailyGoal | None = None,
        window_days: int = ACTIVITY_WINDOW_DAYS,
    ):
        """
        Args:
            progress_repo: The repository (port) for activity and goals.
            default_goal: Goal used for users who never set one.
            window_days: Number of days in the activity trend.
        """
        self._repo = progress_repo
        self._default_goal = default_goal or DailyGoal(
            target_cards_per_day=DEFAULT_TARGET_CARDS_PER_DAY,
            target_minutes_per_day=DEFAULT_TARGET_MINUTES_PER_DAY,
        )
        self._window_days = window_days

    async def _goal_for(self, user_id: str) -> DailyGoal:
        return await self._repo.get_daily_goal(user_id) or self._default_goal

    async def get_dashboard(self, user_id: str, today: date) -> ProgressDashboard:
        logs = await self._repo.get_activity(user_id)
        goal = await self._goal_for(user_id)

        dashboard = build_dashboard(logs, goal, today, window_days=self._window_days)
        logger.debug(
            "Dashboard built: user_id=%s, records=%d, current_streak=%d",
            user_id,
            len(logs),
            dashboard.current_streak,
        )
        return dashboard

    async def get_goal_progress(self, user_id: str, today: date) -> GoalProgress:
        logs = await self._repo.get_activity(user_id)
        goal = await self._goal_for(user_id)
        return goal_progress_for_day(logs, goal, today)

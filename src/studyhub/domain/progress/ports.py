"""
Ports (interfaces) for progress data retrieval.

These define the contract that infrastructure adapters must implement.
"""

from abc import ABC, abstractmethod

from .models import ActivityRecord, DailyGoal


class ProgressRepository(ABC):
    """
    Port for fetching a user's activity log and goal settings.
    """

    @abstractmethod
    async def get_activity(self, user_id: str) -> list[ActivityRecord]:
        """
        Fetch every activity record of the user.

        Returns:
            List of ActivityRecord objects, in any order.
        """
        pass

    @abstractmethod
    async def get_daily_goal(self, user_id: str) -> DailyGoal | None:
        """
        Fetch the user's goal settings, or None if they never set one.
        """
        pass

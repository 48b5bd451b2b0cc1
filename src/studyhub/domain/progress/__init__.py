# Domain Progress Package
from .models import (
    ActivityRecord,
    DailyGoal,
    DailyProgressPoint,
    GoalProgress,
    ProgressDashboard,
)
from .ports import ProgressRepository

__all__ = [
    "ActivityRecord",
    "DailyGoal",
    "GoalProgress",
    "DailyProgressPoint",
    "ProgressDashboard",
    "ProgressRepository",
]

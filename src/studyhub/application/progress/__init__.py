# Application Progress Package
from .dashboard import build_dashboard
from .goals import build_daily_points, build_goal_progress, goal_progress_for_day
from .performance import PerformanceAnalyzer
from .service import ProgressService
from .streaks import StreakTracker

__all__ = [
    "StreakTracker",
    "PerformanceAnalyzer",
    "ProgressService",
    "build_dashboard",
    "build_goal_progress",
    "build_daily_points",
    "goal_progress_for_day",
]

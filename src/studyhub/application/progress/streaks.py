"""
Study streak tracking over the set of days a user studied.

This is a pure computation module with no I/O.
"""

from collections.abc import Iterable
from datetime import date, timedelta

ONE_DAY = timedelta(days=1)


class StreakTracker:
    """
    Computes consecutive-day streaks.

    A streak is a run of calendar days with at least one study activity.
    Dates are deduplicated first, so several activities on one day count once.
    """

    def current_streak(self, dates: Iterable[date], today: date) -> int:
        """
        Length of the run ending at the most recent study day.

        Not having studied yet today does not break the streak; a gap of
        two or more days since the last study day does.
        """
        descending = sorted(set(dates), reverse=True)
        if not descending:
            return 0

        most_recent = descending[0]
        if most_recent < today - ONE_DAY:
            return 0

        streak = 1
        for previous, current in zip(descending, descending[1:]):
            if current != previous - ONE_DAY:
                break
            streak += 1
        return streak

    def longest_streak(self, dates: Iterable[date]) -> int:
        """Longest run anywhere in history, active or not."""
        ascending = sorted(set(dates))
        if not ascending:
            return 0

        longest = 1
        run = 1
        for previous, current in zip(ascending, ascending[1:]):
            if current == previous + ONE_DAY:
                run += 1
                longest = max(longest, run)
            else:
                run = 1
        return longest

    def total_study_days(self, dates: Iterable[date]) -> int:
        return len(set(dates))

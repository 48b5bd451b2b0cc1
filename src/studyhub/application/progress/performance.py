"""
Per-category performance analysis of activity logs.

This is a pure computation module with no I/O.
"""

from collections.abc import Sequence

from studyhub.application.utils.numbers import percent
from studyhub.domain.constants import NO_DATA_CATEGORY
from studyhub.domain.progress.models import ActivityRecord


class PerformanceAnalyzer:
    """
    Aggregates accuracy and volume figures from a user's activity records.

    Stateless; input records are never modified.
    """

    def category_accuracy(self, logs: Sequence[ActivityRecord]) -> dict[str, float]:
        """
        Percent correct per category, keyed in order of first appearance.

        A category whose records sum to zero attempted items reports 0.0.
        """
        totals: dict[str, list[int]] = {}
        for record in logs:
            counts = totals.setdefault(record.category, [0, 0])
            counts[0] += record.correct_count
            counts[1] += record.total_count
        return {category: percent(correct, total) for category, (correct, total) in totals.items()}

    def weakest_category(self, logs: Sequence[ActivityRecord]) -> str:
        """
        Category with the lowest accuracy, or "N/A" without data.

        Ties go to the lexicographically smallest category name.
        """
        accuracy = self.category_accuracy(logs)
        if not accuracy:
            return NO_DATA_CATEGORY
        return min(accuracy.items(), key=lambda item: (item[1], str(item[0])))[0]

    def overall_accuracy(self, logs: Sequence[ActivityRecord]) -> float:
        correct = sum(record.correct_count for record in logs)
        return percent(correct, self.total_items_reviewed(logs))

    def total_items_reviewed(self, logs: Sequence[ActivityRecord]) -> int:
        return sum(record.total_count for record in logs)

    def total_study_minutes(self, logs: Sequence[ActivityRecord]) -> int:
        return sum(record.duration_minutes for record in logs)

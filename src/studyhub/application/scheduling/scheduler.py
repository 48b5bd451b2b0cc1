"""
SM-2 spaced repetition scheduler.

This is a pure computation module with no I/O.

    if quality >= 3:
        repetitions == 0 -> interval = 1
        repetitions == 1 -> interval = 6
        otherwise        -> interval = round(interval * ease_factor)
        repetitions += 1
    else:
        repetitions = 0, interval = 1

    ease_factor += 0.1 - (5 - q) * (0.08 + (5 - q) * 0.02), floored at 1.3
    next_review_date = today + interval days
"""

from datetime import date, timedelta

from studyhub.application.utils.numbers import round_half_up_int
from studyhub.domain.constants import (
    FIRST_INTERVAL_DAYS,
    MAX_QUALITY,
    MIN_EASE_FACTOR,
    MIN_QUALITY,
    SECOND_INTERVAL_DAYS,
)
from studyhub.domain.exceptions import InvalidArgumentError
from studyhub.domain.scheduling.models import ReviewResult, ReviewState, is_correct_quality


class SpacedRepetitionScheduler:
    """
    Computes the next review for one card from its current state.

    Stateless and side-effect free; the caller persists the result.
    """

    def calculate_next_review(
        self, state: ReviewState, quality: int, today: date
    ) -> ReviewResult:
        """
        Args:
            state: Scheduling state before this review.
            quality: Recall grade 0-5 (see ReviewButton for the UI mapping).
            today: Reference date the next review is counted from.

        Raises:
            InvalidArgumentError: If quality is not an integer in [0, 5].
        """
        self._validate_quality(quality)

        if is_correct_quality(quality):
            new_interval = self._next_correct_interval(state)
            new_repetitions = state.repetitions + 1
        else:
            # Full reset, not just a short interval
            new_interval = FIRST_INTERVAL_DAYS
            new_repetitions = 0

        new_ease_factor = self._next_ease_factor(state.ease_factor, quality)

        return ReviewResult(
            new_interval=new_interval,
            new_ease_factor=new_ease_factor,
            new_repetitions=new_repetitions,
            next_review_date=today + timedelta(days=new_interval),
        )

    def _validate_quality(self, quality: int) -> None:
        if isinstance(quality, bool) or not isinstance(quality, int):
            raise InvalidArgumentError(f"Quality must be an integer, got: {quality!r}")
        if quality < MIN_QUALITY or quality > MAX_QUALITY:
            raise InvalidArgumentError(
                f"Quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got: {quality}"
            )

    def _next_correct_interval(self, state: ReviewState) -> int:
        if state.repetitions == 0:
            return FIRST_INTERVAL_DAYS
        if state.repetitions == 1:
            return SECOND_INTERVAL_DAYS
        return round_half_up_int(state.interval_days * state.ease_factor)

    def _next_ease_factor(self, ease_factor: float, quality: int) -> float:
        miss = MAX_QUALITY - quality
        updated = ease_factor + (0.1 - miss * (0.08 + miss * 0.02))
        return max(MIN_EASE_FACTOR, updated)

"""
Review Service: application layer orchestrator for flashcard reviews.

Loads the stored review state, runs the scheduler, persists the result and
notifies the activity log.
"""

import logging
from dataclasses import dataclass
from datetime import date

from studyhub.domain.progress.models import ActivityRecord
from studyhub.domain.scheduling.models import ReviewResult, ReviewState, is_correct_quality
from studyhub.domain.scheduling.ports import ActivitySink, ReviewStateRepository

from .messages import build_review_message
from .scheduler import SpacedRepetitionScheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReviewOutcome:
    result: ReviewResult
    message: str


class ReviewService:
    """
    Application service for submitting flashcard reviews.

    Depends on the ReviewStateRepository and ActivitySink ports,
    not on concrete storage or transport.
    """

    def __init__(
        self,
        state_repo: ReviewStateRepository,
        activity_sink: ActivitySink | None = None,
        scheduler: SpacedRepetitionScheduler | None = None,
    ):
        """
        Args:
            state_repo: The repository (port) holding per-card review state.
            activity_sink: Optional activity log; reviews are not logged without one.
            scheduler: Optional custom scheduler; uses default if not provided.
        """
        self._repo = state_repo
        self._sink = activity_sink
        self._scheduler = scheduler or SpacedRepetitionScheduler()

    async def submit_review(
        self,
        user_id: str,
        card_id: str,
        category: str,
        quality: int,
        today: date,
    ) -> ReviewOutcome:
        """
        Run SM-2 for one card and persist the new schedule.

        A card the user has never reviewed starts from the default state.

        Raises:
            InvalidArgumentError: If quality is outside [0, 5]. Nothing is persisted.
        """
        state = await self._repo.get_state(user_id, card_id) or ReviewState()
        result = self._scheduler.calculate_next_review(state, quality, today)

        await self._repo.save_result(user_id, card_id, result, quality)
        await self._log_activity(user_id, category, quality, today)

        logger.debug(
            "Review submitted: card_id=%s, user_id=%s, quality=%s, next_review=%s",
            card_id,
            user_id,
            quality,
            result.next_review_date,
        )
        return ReviewOutcome(result=result, message=build_review_message(result, today))

    async def _log_activity(
        self, user_id: str, category: str, quality: int, today: date
    ) -> None:
        # Fire-and-forget: a review succeeds even if the activity log is down.
        if self._sink is None:
            return
        record = ActivityRecord(
            category=category,
            activity_date=today,
            duration_minutes=0,
            correct_count=1 if is_correct_quality(quality) else 0,
            total_count=1,
        )
        try:
            await self._sink.log_activity(user_id, record)
        except Exception as e:
            logger.warning(f"Failed to log review activity: {e}")

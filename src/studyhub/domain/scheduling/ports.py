"""
Ports (interfaces) for review persistence and activity logging.

Application services depend on these abstractions, not concrete implementations.
"""

from abc import ABC, abstractmethod

from studyhub.domain.progress.models import ActivityRecord

from .models import ReviewResult, ReviewState


class ReviewStateRepository(ABC):
    """
    Port for loading and storing per-(user, card) review state.

    Implementations are responsible for serializing concurrent reviews of
    the same card (row-level or optimistic locking).
    """

    @abstractmethod
    async def get_state(self, user_id: str, card_id: str) -> ReviewState | None:
        """
        Fetch the stored state, or None if the user has never reviewed the card.
        """
        pass

    @abstractmethod
    async def save_result(
        self, user_id: str, card_id: str, result: ReviewResult, quality: int
    ) -> None:
        """
        Persist a review outcome onto the (user, card) record.
        """
        pass


class ActivitySink(ABC):
    """
    Port for the external activity log fed after each review.
    """

    @abstractmethod
    async def log_activity(self, user_id: str, record: ActivityRecord) -> None:
        pass

# Application Scheduling Package
from .messages import build_review_message
from .scheduler import SpacedRepetitionScheduler
from .service import ReviewOutcome, ReviewService

__all__ = ["SpacedRepetitionScheduler", "ReviewService", "ReviewOutcome", "build_review_message"]

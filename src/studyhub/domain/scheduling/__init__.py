# Domain Scheduling Package
from .models import ReviewButton, ReviewResult, ReviewState, is_correct_quality
from .ports import ActivitySink, ReviewStateRepository

__all__ = [
    "ReviewButton",
    "ReviewState",
    "ReviewResult",
    "is_correct_quality",
    "ReviewStateRepository",
    "ActivitySink",
]

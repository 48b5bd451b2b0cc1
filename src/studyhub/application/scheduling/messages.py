"""Human readable summaries of a scheduled review."""

from datetime import date

from studyhub.domain.constants import MASTERY_INTERVAL_DAYS
from studyhub.domain.scheduling.models import ReviewResult


def build_review_message(result: ReviewResult, today: date) -> str:
    days_until_next = (result.next_review_date - today).days
    if days_until_next <= 0:
        return "Review again today"
    if days_until_next == 1:
        return "Review tomorrow"
    if days_until_next < 7:
        return f"Review in {days_until_next} days"
    if days_until_next < MASTERY_INTERVAL_DAYS:
        return f"Review in {days_until_next // 7} week(s)"
    return f"Card mastered! Review in {days_until_next} days"

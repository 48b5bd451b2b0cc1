"""
Exam scorer for completed exam sessions.

This is a pure computation module with no I/O.
"""

from collections.abc import Sequence

from studyhub.application.utils.numbers import percent
from studyhub.domain.exam.models import ExamAnswerRecord, PerformanceBand, ScoreResult
from studyhub.domain.exceptions import InvalidArgumentError


class ExamScorer:
    """
    Computes a ScoreResult from the answers of one exam session.

    Stateless and side-effect free: identical answers always give an identical result.
    """

    def score(self, answers: Sequence[ExamAnswerRecord] | None) -> ScoreResult:
        """
        Score a completed exam.

        Raises:
            InvalidArgumentError: If answers is None or empty.
        """
        if not answers:
            raise InvalidArgumentError("Cannot score an exam with no answers")

        raw_score = sum(1 for a in answers if a.is_correct)
        score_percent = percent(raw_score, len(answers))

        return ScoreResult(
            raw_score=raw_score,
            total_questions=len(answers),
            score_percent=score_percent,
            category_breakdown=self._category_breakdown(answers),
            performance_band=PerformanceBand.from_percent(score_percent),
            avg_time_per_question_seconds=self._avg_time(answers),
            incorrect_question_ids=tuple(a.question_id for a in answers if not a.is_correct),
        )

    def _category_breakdown(self, answers: Sequence[ExamAnswerRecord]) -> dict[str, float]:
        """
        Percent correct per category, for categories present in the answers only.
        """
        totals: dict[str, list[int]] = {}
        for answer in answers:
            counts = totals.setdefault(answer.category, [0, 0])
            counts[0] += 1 if answer.is_correct else 0
            counts[1] += 1
        return {category: percent(correct, total) for category, (correct, total) in totals.items()}

    def _avg_time(self, answers: Sequence[ExamAnswerRecord]) -> float:
        """
        Mean seconds per question over timed answers; untimed answers are skipped.
        """
        timed = [a.time_spent_seconds for a in answers if a.time_spent_seconds is not None]
        if not timed:
            return 0.0
        return sum(timed) / len(timed)

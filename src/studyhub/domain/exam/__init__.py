# Domain Exam Package
from .models import ExamAnswerRecord, PerformanceBand, QuestionCategory, ScoreResult

__all__ = ["ExamAnswerRecord", "PerformanceBand", "QuestionCategory", "ScoreResult"]

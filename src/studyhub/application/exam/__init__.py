# Application Exam Package
from .scorer import ExamScorer

__all__ = ["ExamScorer"]

"""Centralized constants for studyhub.

All thresholds and defaults live here so every layer
imports from a single source of truth.
"""

# ---------- SM-2 ----------
MIN_EASE_FACTOR = 1.3
DEFAULT_EASE_FACTOR = 2.5
MIN_QUALITY = 0
MAX_QUALITY = 5
CORRECT_QUALITY_THRESHOLD = 3  # quality >= 3 counts as a correct recall
FIRST_INTERVAL_DAYS = 1
SECOND_INTERVAL_DAYS = 6
MASTERY_INTERVAL_DAYS = 21

# ---------- Exam Scoring ----------
EXCELLENT_THRESHOLD = 80.0
GOOD_THRESHOLD = 70.0
PASSING_THRESHOLD = 60.0

# ---------- Rounding ----------
PERCENT_DIGITS = 1

# ---------- Progress ----------
NO_DATA_CATEGORY = "N/A"
FLASHCARD_REVIEW = "FLASHCARD_REVIEW"
DEFAULT_TARGET_CARDS_PER_DAY = 20
DEFAULT_TARGET_MINUTES_PER_DAY = 30
ACTIVITY_WINDOW_DAYS = 30
MAX_ACTIVITY_WINDOW_DAYS = 365

"""studyhub: spaced repetition, exam scoring and study progress calculators."""

from studyhub.consts import VERSION

__version__ = VERSION

from datetime import date

import pytest

from studyhub.application.progress.performance import PerformanceAnalyzer
from studyhub.domain.progress.models import ActivityRecord

DAY = date(2026, 3, 1)


@pytest.fixture
def analyzer():
    return PerformanceAnalyzer()


def record(category, correct, total, minutes=0):
    return ActivityRecord(
        category=category,
        activity_date=DAY,
        duration_minutes=minutes,
        correct_count=correct,
        total_count=total,
    )


@pytest.fixture
def logs():
    return [
        record("CARDIOLOGY", 8, 10, minutes=20),
        record("PHARMACOLOGY", 9, 10, minutes=15),
        record("CARDIOLOGY", 2, 10, minutes=5),
        record("NEUROLOGY", 0, 0, minutes=10),
    ]


def test_category_accuracy(analyzer, logs):
    assert analyzer.category_accuracy(logs) == {
        "CARDIOLOGY": 50.0,
        "PHARMACOLOGY": 90.0,
        "NEUROLOGY": 0.0,
    }


def test_category_accuracy_keeps_first_seen_order(analyzer, logs):
    assert list(analyzer.category_accuracy(logs)) == ["CARDIOLOGY", "PHARMACOLOGY", "NEUROLOGY"]


def test_category_accuracy_rounds_half_up(analyzer):
    assert analyzer.category_accuracy([record("EENT", 2, 3)]) == {"EENT": 66.7}


def test_weakest_category(analyzer, logs):
    assert analyzer.weakest_category(logs) == "NEUROLOGY"


def test_weakest_category_without_zero_total(analyzer, logs):
    assert analyzer.weakest_category(logs[:3]) == "CARDIOLOGY"


def test_weakest_category_tie_is_lexicographic(analyzer):
    logs = [record("CARDIOLOGY", 1, 2), record("ANATOMY", 5, 10), record("PHARMACOLOGY", 9, 10)]

    assert analyzer.weakest_category(logs) == "ANATOMY"


def test_weakest_category_without_data(analyzer):
    assert analyzer.weakest_category([]) == "N/A"


def test_overall_accuracy(analyzer, logs):
    # 19 / 30 = 63.33
    assert analyzer.overall_accuracy(logs) == 63.3


def test_overall_accuracy_without_items(analyzer):
    assert analyzer.overall_accuracy([]) == 0.0
    assert analyzer.overall_accuracy([record("NEUROLOGY", 0, 0)]) == 0.0


def test_totals(analyzer, logs):
    assert analyzer.total_items_reviewed(logs) == 30
    assert analyzer.total_study_minutes(logs) == 50


def test_empty_logs(analyzer):
    assert analyzer.category_accuracy([]) == {}
    assert analyzer.total_items_reviewed([]) == 0
    assert analyzer.total_study_minutes([]) == 0


def test_analysis_is_idempotent_and_leaves_input_alone(analyzer, logs):
    snapshot = list(logs)

    first = analyzer.category_accuracy(logs), analyzer.overall_accuracy(logs)
    second = analyzer.category_accuracy(logs), analyzer.overall_accuracy(logs)

    assert first == second
    assert logs == snapshot


def test_accuracy_rounds_ties_up(analyzer):
    logs = [record("CARDIOLOGY", 23, 80), record("PHARMACOLOGY", 41, 80)]

    assert analyzer.category_accuracy(logs) == {"CARDIOLOGY": 28.8, "PHARMACOLOGY": 51.3}
    assert analyzer.overall_accuracy([record("CARDIOLOGY", 51, 80)]) == 63.8

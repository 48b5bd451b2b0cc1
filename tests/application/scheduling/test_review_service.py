from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from studyhub.application.scheduling.service import ReviewService
from studyhub.domain.exceptions import InvalidArgumentError
from studyhub.domain.progress.models import ActivityRecord
from studyhub.domain.scheduling.models import ReviewButton, ReviewState


@pytest.fixture
def mock_repo():
    return AsyncMock()


@pytest.fixture
def mock_sink():
    return AsyncMock()


@pytest.mark.asyncio
async def test_first_review_starts_from_default_state(mock_repo, mock_sink, today):
    mock_repo.get_state.return_value = None
    service = ReviewService(state_repo=mock_repo, activity_sink=mock_sink)

    outcome = await service.submit_review("u1", "c1", "CARDIOLOGY", ReviewButton.EASY, today)

    assert outcome.result.new_interval == 1
    assert outcome.result.new_repetitions == 1
    assert outcome.message == "Review tomorrow"
    mock_repo.get_state.assert_awaited_once_with("u1", "c1")
    mock_repo.save_result.assert_awaited_once_with("u1", "c1", outcome.result, ReviewButton.EASY)


@pytest.mark.asyncio
async def test_review_uses_stored_state(mock_repo, today):
    mock_repo.get_state.return_value = ReviewState(interval_days=6, repetitions=2, ease_factor=2.5)
    service = ReviewService(state_repo=mock_repo)

    outcome = await service.submit_review("u1", "c1", "CARDIOLOGY", 5, today)

    assert outcome.result.new_interval == 15
    assert outcome.result.next_review_date == today + timedelta(days=15)
    assert outcome.message == "Review in 2 week(s)"


@pytest.mark.asyncio
async def test_review_logs_activity(mock_repo, mock_sink, today):
    mock_repo.get_state.return_value = None
    service = ReviewService(state_repo=mock_repo, activity_sink=mock_sink)

    await service.submit_review("u1", "c1", "PHARMACOLOGY", ReviewButton.HARD, today)

    mock_sink.log_activity.assert_awaited_once_with(
        "u1",
        ActivityRecord(
            category="PHARMACOLOGY",
            activity_date=today,
            duration_minutes=0,
            correct_count=0,
            total_count=1,
        ),
    )


@pytest.mark.asyncio
async def test_correct_review_logs_one_correct(mock_repo, mock_sink, today):
    mock_repo.get_state.return_value = None
    service = ReviewService(state_repo=mock_repo, activity_sink=mock_sink)

    await service.submit_review("u1", "c1", "PHARMACOLOGY", 3, today)

    record = mock_sink.log_activity.await_args.args[1]
    assert record.correct_count == 1
    assert record.total_count == 1


@pytest.mark.asyncio
async def test_activity_sink_failure_does_not_fail_review(mock_repo, mock_sink, today, caplog):
    mock_repo.get_state.return_value = None
    mock_sink.log_activity.side_effect = ConnectionError("progress service down")
    service = ReviewService(state_repo=mock_repo, activity_sink=mock_sink)

    outcome = await service.submit_review("u1", "c1", "CARDIOLOGY", 4, today)

    assert outcome.result.new_interval == 1
    mock_repo.save_result.assert_awaited_once()
    assert "progress service down" in caplog.text


@pytest.mark.asyncio
async def test_invalid_quality_persists_nothing(mock_repo, mock_sink, today):
    mock_repo.get_state.return_value = None
    service = ReviewService(state_repo=mock_repo, activity_sink=mock_sink)

    with pytest.raises(InvalidArgumentError):
        await service.submit_review("u1", "c1", "CARDIOLOGY", 6, today)

    mock_repo.save_result.assert_not_awaited()
    mock_sink.log_activity.assert_not_awaited()


@pytest.mark.asyncio
async def test_repository_errors_propagate(mock_repo, today):
    mock_repo.get_state.side_effect = RuntimeError("db unavailable")
    service = ReviewService(state_repo=mock_repo)

    with pytest.raises(RuntimeError, match="db unavailable"):
        await service.submit_review("u1", "c1", "CARDIOLOGY", 5, today)

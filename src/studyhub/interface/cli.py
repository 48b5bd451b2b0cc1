"""studyhub CLI: review scheduling, exam scoring and progress analytics."""

import json
import logging
import sys
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from studyhub.application.config import resolve_config
from studyhub.application.exam.scorer import ExamScorer
from studyhub.application.progress.dashboard import build_dashboard
from studyhub.application.progress.performance import PerformanceAnalyzer
from studyhub.application.progress.streaks import StreakTracker
from studyhub.application.scheduling.messages import build_review_message
from studyhub.application.scheduling.scheduler import SpacedRepetitionScheduler
from studyhub.domain.constants import DEFAULT_EASE_FACTOR
from studyhub.domain.exceptions import InvalidArgumentError
from studyhub.domain.progress.models import DailyGoal
from studyhub.domain.scheduling.models import ReviewButton, ReviewState
from studyhub.interface._common import (
    InputFileError,
    _resolve_with_overrides,
    load_activity,
    load_answers,
    load_dates,
    to_json,
)

# ---------------------------------------------------------------------------
# Root app
# ---------------------------------------------------------------------------

app = typer.Typer(
    help="studyhub: spaced repetition, exam scoring and study progress.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

config_app = typer.Typer(help="Manage studyhub configuration.")
app.add_typer(config_app, name="config")

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


class RatingChoice(str, Enum):
    again = "again"
    hard = "hard"
    good = "good"
    easy = "easy"


DateOption = Annotated[
    datetime | None,
    typer.Option(formats=["%Y-%m-%d"], help="Reference date (YYYY-MM-DD). Defaults to today."),
]


def _today(value: datetime | None) -> date:
    return value.date() if value else date.today()


def _fail(message: str) -> NoReturn:
    typer.secho(message, fg="red", err=True)
    raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Global callback
# ---------------------------------------------------------------------------


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Enable debug logging."
        ),
    ] = 0,
):
    """Global settings for studyhub."""
    ctx.ensure_object(dict)
    ctx.obj["verbose_bonus"] = verbose
    config = _resolve_with_overrides(verbose=verbose or None)
    logging.getLogger().setLevel(config.log_level)


# ---------------------------------------------------------------------------
# Flashcards
# ---------------------------------------------------------------------------


@app.command()
def review(
    quality: Annotated[
        int | None, typer.Option("--quality", "-q", help="Recall quality, 0-5.")
    ] = None,
    rating: Annotated[
        RatingChoice | None,
        typer.Option(help="Rating button instead of a raw quality."),
    ] = None,
    interval: Annotated[int, typer.Option(help="Current interval in days.")] = 0,
    repetitions: Annotated[int, typer.Option(help="Consecutive correct reviews.")] = 0,
    ease: Annotated[float, typer.Option(help="Current ease factor.")] = DEFAULT_EASE_FACTOR,
    today: DateOption = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
):
    """[bold green]Schedule[/bold green] the next review of a card (SM-2)."""
    if (quality is None) == (rating is None):
        _fail("Pass exactly one of --quality or --rating.")
    if rating is not None:
        quality = int(ReviewButton[rating.value.upper()])

    ref = _today(today)
    state = ReviewState(interval_days=interval, repetitions=repetitions, ease_factor=ease)
    try:
        result = SpacedRepetitionScheduler().calculate_next_review(state, quality, ref)
    except InvalidArgumentError as e:
        _fail(str(e))

    message = build_review_message(result, ref)
    if json_output:
        typer.echo(to_json(result, is_mastered=result.is_mastered, message=message))
        return

    typer.echo(f"Interval: {result.new_interval} day(s)")
    typer.echo(f"Ease factor: {result.new_ease_factor:.2f}")
    typer.echo(f"Repetitions: {result.new_repetitions}")
    typer.echo(f"Next review: {result.next_review_date.isoformat()}")
    typer.secho(message, fg="green" if result.is_mastered else None)


# ---------------------------------------------------------------------------
# Exams
# ---------------------------------------------------------------------------


@app.command()
def score(
    path: Annotated[Path, typer.Argument(help="YAML/JSON list of exam answers.")],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
):
    """Score a completed exam session."""
    try:
        result = ExamScorer().score(load_answers(path))
    except (InputFileError, InvalidArgumentError) as e:
        _fail(str(e))

    if json_output:
        typer.echo(to_json(result, incorrect_count=result.incorrect_count))
        return

    band = result.performance_band
    typer.echo(f"Score: {result.raw_score}/{result.total_questions} ({result.score_percent}%)")
    typer.echo(f"Band: {band.name} ({band.range_label}) {band.message}")
    typer.echo(f"Avg time per question: {result.avg_time_per_question_seconds:.1f}s")
    for category, pct in result.category_breakdown.items():
        typer.echo(f"  {category}: {pct}%")
    if result.incorrect_question_ids:
        typer.secho(f"Incorrect: {result.incorrect_count}", fg="yellow")


# ---------------------------------------------------------------------------
# Progress
# ---------------------------------------------------------------------------


@app.command()
def streak(
    path: Annotated[Path, typer.Argument(help="YAML/JSON list of study dates.")],
    today: DateOption = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
):
    """Show current and longest study streaks."""
    try:
        dates = load_dates(path)
    except InputFileError as e:
        _fail(str(e))

    tracker = StreakTracker()
    summary = {
        "current_streak": tracker.current_streak(dates, _today(today)),
        "longest_streak": tracker.longest_streak(dates),
        "total_study_days": tracker.total_study_days(dates),
    }
    if json_output:
        typer.echo(json.dumps(summary, indent=2))
        return

    typer.echo(f"Current streak: {summary['current_streak']} day(s)")
    typer.echo(f"Longest streak: {summary['longest_streak']} day(s)")
    typer.echo(f"Study days: {summary['total_study_days']}")


@app.command()
def analyze(
    path: Annotated[Path, typer.Argument(help="YAML/JSON list of activity records.")],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
):
    """Per-category accuracy of an activity log."""
    try:
        logs = load_activity(path)
    except InputFileError as e:
        _fail(str(e))

    analyzer = PerformanceAnalyzer()
    summary = {
        "overall_accuracy": analyzer.overall_accuracy(logs),
        "total_items_reviewed": analyzer.total_items_reviewed(logs),
        "total_study_minutes": analyzer.total_study_minutes(logs),
        "weakest_category": analyzer.weakest_category(logs),
        "category_accuracy": analyzer.category_accuracy(logs),
    }
    if json_output:
        typer.echo(json.dumps(summary, indent=2))
        return

    typer.echo(
        f"Overall accuracy: {summary['overall_accuracy']}% "
        f"over {summary['total_items_reviewed']} item(s)"
    )
    typer.echo(f"Study time: {summary['total_study_minutes']} min")
    typer.echo(f"Weakest category: {summary['weakest_category']}")
    for category, pct in summary["category_accuracy"].items():
        typer.echo(f"  {category}: {pct}%")


@app.command()
def dashboard(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="YAML/JSON list of activity records.")],
    today: DateOption = None,
    cards: Annotated[int | None, typer.Option(help="Daily card target.")] = None,
    minutes: Annotated[int | None, typer.Option(help="Daily minute target.")] = None,
    window: Annotated[int | None, typer.Option(help="Days of activity trend.")] = None,
):
    """Print the full progress dashboard as JSON."""
    config = _resolve_with_overrides(
        default_target_cards_per_day=cards,
        default_target_minutes_per_day=minutes,
        activity_window_days=window,
        verbose=ctx.obj.get("verbose_bonus") or None,
    )
    try:
        logs = load_activity(path)
    except InputFileError as e:
        _fail(str(e))

    goal = DailyGoal(
        target_cards_per_day=config.default_target_cards_per_day,
        target_minutes_per_day=config.default_target_minutes_per_day,
    )
    result = build_dashboard(logs, goal, _today(today), window_days=config.activity_window_days)
    logger.debug("Dashboard built from %d record(s)", len(logs))
    typer.echo(to_json(result))


# ---------------------------------------------------------------------------
# Config subgroup
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show():
    """Display final resolved configuration."""
    config = resolve_config()
    typer.echo(json.dumps(config.model_dump(), indent=2))


def main():
    app()

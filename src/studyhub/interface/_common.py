"""Shared helpers for CLI commands: config overrides, input files and JSON output."""

import json
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from studyhub.application.config import AppConfig, resolve_config
from studyhub.domain.constants import FLASHCARD_REVIEW
from studyhub.domain.exam.models import ExamAnswerRecord
from studyhub.domain.progress.models import ActivityRecord


class InputFileError(Exception):
    """Raised when a CLI input file is missing or malformed."""


def _resolve_with_overrides(**overrides: Any) -> AppConfig:
    """Resolve config with CLI overrides; None values fall through to lower layers."""
    return resolve_config(overrides)


def _load_list(path: Path) -> list[Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise InputFileError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise InputFileError(f"Invalid YAML/JSON in {path}: {e}") from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise InputFileError(f"{path} must contain a list, got {type(data).__name__}")
    return data


def _as_date(value: Any) -> date:
    # YAML turns bare ISO dates into date objects; JSON leaves them as strings
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError as e:
            raise InputFileError(f"Invalid date: {value!r}") from e
    raise InputFileError(f"Invalid date: {value!r}")


def _require_mapping(item: Any, index: int, path: Path) -> dict:
    if not isinstance(item, dict):
        raise InputFileError(f"{path}: entry {index} must be a mapping")
    return item


def load_answers(path: Path) -> list[ExamAnswerRecord]:
    answers = []
    for i, item in enumerate(_load_list(path)):
        item = _require_mapping(item, i, path)
        try:
            is_correct = item["is_correct"]
            seconds = item.get("time_spent_seconds")
            # Strings such as "false" are truthy, so only real booleans are accepted
            if not isinstance(is_correct, bool):
                raise InputFileError(
                    f"{path}: entry {i} has a non-boolean is_correct: {is_correct!r}"
                )
            answers.append(
                ExamAnswerRecord(
                    question_id=item["question_id"],
                    category=str(item["category"]),
                    is_correct=is_correct,
                    time_spent_seconds=None if seconds is None else int(seconds),
                )
            )
        except KeyError as e:
            raise InputFileError(f"{path}: entry {i} is missing {e.args[0]!r}") from e
        except (TypeError, ValueError) as e:
            raise InputFileError(
                f"{path}: entry {i} has a non-integer time_spent_seconds: {e}"
            ) from e
    return answers


def load_dates(path: Path) -> list[date]:
    return [_as_date(item) for item in _load_list(path)]


def load_activity(path: Path) -> list[ActivityRecord]:
    records = []
    for i, item in enumerate(_load_list(path)):
        item = _require_mapping(item, i, path)
        try:
            records.append(
                ActivityRecord(
                    category=str(item["category"]),
                    activity_date=_as_date(item["activity_date"]),
                    duration_minutes=int(item.get("duration_minutes", 0)),
                    correct_count=int(item.get("correct_count", 0)),
                    total_count=int(item.get("total_count", 0)),
                    activity_type=str(item.get("activity_type", FLASHCARD_REVIEW)),
                )
            )
        except KeyError as e:
            raise InputFileError(f"{path}: entry {i} is missing {e.args[0]!r}") from e
        except (TypeError, ValueError) as e:
            raise InputFileError(f"{path}: entry {i} has a non-integer count: {e}") from e
    return records


def _plain(obj: Any) -> Any:
    if is_dataclass(obj):
        return {f.name: _plain(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, Mapping):
        return {key: _plain(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_plain(item) for item in obj]
    return obj


def _json_default(obj: Any) -> Any:
    if isinstance(obj, Enum):
        return obj.name
    return str(obj)


def to_json(obj: Any, **extra: Any) -> str:
    """Serialize a dataclass (plus extra top-level keys) as indented JSON."""
    data = _plain(obj)
    data.update(extra)
    return json.dumps(data, indent=2, default=_json_default)

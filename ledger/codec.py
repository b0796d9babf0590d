"""JSON encoding/decoding for stored workout records.

The stored layout is a JSON array of `{"id", "name", "calories"}` objects with
no version field, matching what earlier browser-only builds wrote to local
storage.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from .records import WorkoutRecord


class RecordDecodeError(ValueError):
    """Raised when stored text is not a valid workout record sequence."""


def encode_records(records: Iterable[WorkoutRecord]) -> str:
    """Encode records into their stored JSON text.

    Args:
        records: Records in ledger order.

    Returns:
        JSON array text.
    """

    payload = [{"id": record.id, "name": record.name, "calories": record.calories} for record in records]
    return json.dumps(payload, separators=(",", ":"))


def decode_records(text: str) -> tuple[WorkoutRecord, ...]:
    """Decode stored JSON text into records.

    Args:
        text: Text previously produced by `encode_records`.

    Returns:
        Records in stored order.

    Raises:
        RecordDecodeError: When the text is malformed or any item violates the
            record invariants.
    """

    try:
        payload = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise RecordDecodeError(f"Stored workouts are not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise RecordDecodeError(f"Stored workouts must be a JSON array, got {type(payload).__name__}.")

    records: list[WorkoutRecord] = []
    seen: set[int] = set()
    for index, item in enumerate(payload):
        record = _decode_record(item, index=index)
        if record.id in seen:
            raise RecordDecodeError(f"Duplicate workout id {record.id} at index {index}.")
        seen.add(record.id)
        records.append(record)
    return tuple(records)


def _decode_record(item: Any, *, index: int) -> WorkoutRecord:
    """Decode and validate one stored record."""

    if not isinstance(item, dict):
        raise RecordDecodeError(f"Workout at index {index} is not an object.")
    missing = [key for key in ("id", "name", "calories") if key not in item]
    if missing:
        raise RecordDecodeError(f"Workout at index {index} is missing {', '.join(missing)}.")

    workout_id = item["id"]
    name = item["name"]
    calories = item["calories"]
    if not _is_strict_int(workout_id):
        raise RecordDecodeError(f"Workout at index {index} has a non-integer id: {workout_id!r}.")
    if not isinstance(name, str) or not name.strip():
        raise RecordDecodeError(f"Workout at index {index} has an empty or non-text name.")
    if not _is_strict_int(calories) or calories <= 0:
        raise RecordDecodeError(f"Workout at index {index} has invalid calories: {calories!r}.")
    return WorkoutRecord(id=workout_id, name=name.strip(), calories=calories)


def _is_strict_int(value: object) -> bool:
    # bool is an int subclass; stored flags are never valid ids or calories.
    return isinstance(value, int) and not isinstance(value, bool)

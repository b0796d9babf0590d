"""Workout records and the ordered in-memory ledger."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WorkoutRecord:
    """A single user-entered workout.

    Args:
        id: Identifier unique within a Ledger.
        name: Trimmed, non-empty workout label.
        calories: Calories burned (strictly positive).
    """

    id: int
    name: str
    calories: int


class Ledger:
    """Ordered sequence of WorkoutRecords in insertion order."""

    def __init__(self, records: Iterable[WorkoutRecord] = ()) -> None:
        """Initialize the ledger.

        Args:
            records: Optional initial records, kept in the given order.
        """

        self._records: list[WorkoutRecord] = list(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[WorkoutRecord]:
        return iter(tuple(self._records))

    def __contains__(self, workout_id: object) -> bool:
        return any(record.id == workout_id for record in self._records)

    def append(self, record: WorkoutRecord) -> None:
        """Insert a record at the end of the ledger.

        Callers are responsible for validating the record and its id.
        """

        self._records.append(record)

    def remove(self, workout_id: int) -> bool:
        """Remove the record with the given id.

        Args:
            workout_id: Identifier of the record to remove.

        Returns:
            True when a record was removed, False when the id was not present.
        """

        remaining = [record for record in self._records if record.id != workout_id]
        removed = len(remaining) != len(self._records)
        self._records = remaining
        return removed

    def total_calories(self) -> int:
        """Return the sum of calories across all records (0 when empty)."""

        return sum(record.calories for record in self._records)

    def all(self) -> tuple[WorkoutRecord, ...]:
        """Return an immutable snapshot of the current records."""

        return tuple(self._records)

    def max_id(self) -> int | None:
        """Return the largest record id, or None for an empty ledger."""

        if not self._records:
            return None
        return max(record.id for record in self._records)

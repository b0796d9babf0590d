"""List projection of the workout ledger."""

from __future__ import annotations

from dataclasses import dataclass

from ledger.records import WorkoutRecord


@dataclass(frozen=True, slots=True)
class ListEntry:
    """One visible row in the workouts list."""

    id: int
    name: str
    calories: int

    @property
    def calories_label(self) -> str:
        return f"{self.calories} Calories"

    @property
    def text(self) -> str:
        return f"{self.name} — {self.calories_label}"


class ListRenderer:
    """Keep one display entry per ledger record, in ledger order."""

    def __init__(self) -> None:
        self._entries: list[ListEntry] = []

    @property
    def entries(self) -> tuple[ListEntry, ...]:
        return tuple(self._entries)

    def ids(self) -> tuple[int, ...]:
        return tuple(entry.id for entry in self._entries)

    def render(self, record: WorkoutRecord) -> ListEntry:
        """Append a display entry for `record` and return it."""

        entry = ListEntry(id=record.id, name=record.name, calories=record.calories)
        self._entries.append(entry)
        return entry

    def remove(self, workout_id: int) -> None:
        """Drop the entry for `workout_id`; no-op when it is not displayed."""

        self._entries = [entry for entry in self._entries if entry.id != workout_id]

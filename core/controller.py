"""Workout session controller.

`WorkoutSession` owns the ledger for one client session and is the only code
that mutates it. User actions arrive as explicit command objects so the
transitions can be exercised without a request or a rendering surface.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from core.charting.render import ChartRenderer
from core.listing import ListRenderer
from core.persistence import WorkoutPersistence
from ledger.ids import MonotonicIdGenerator
from ledger.records import Ledger, WorkoutRecord
from ledger.validation import WorkoutValidationError, validate_workout_input

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddWorkout:
    """Form submission carrying raw name/calories text."""

    name: str | None
    calories: str | None


@dataclass(frozen=True, slots=True)
class DeleteWorkout:
    """Activation of a record's delete control."""

    workout_id: int


WorkoutCommand = AddWorkout | DeleteWorkout


class WorkoutSession:
    """Coordinate the ledger with persistence and both renderers."""

    def __init__(
        self,
        *,
        ledger: Ledger,
        persistence: WorkoutPersistence,
        list_renderer: ListRenderer,
        chart_renderer: ChartRenderer,
        ids: MonotonicIdGenerator,
    ) -> None:
        """Initialize the session.

        Prefer `WorkoutSession.start`, which loads the ledger and performs the
        initial render.
        """

        self._ledger = ledger
        self.persistence = persistence
        self.list_renderer = list_renderer
        self.chart_renderer = chart_renderer
        self._ids = ids

    @classmethod
    def start(
        cls,
        *,
        persistence: WorkoutPersistence,
        list_renderer: ListRenderer,
        chart_renderer: ChartRenderer,
        clock: Callable[[], int] | None = None,
    ) -> WorkoutSession:
        """Load stored workouts and render them.

        Args:
            persistence: Adapter used to load and later save the ledger.
            list_renderer: Receives one entry per loaded record.
            chart_renderer: Initialized with the full loaded ledger.
            clock: Optional epoch-milliseconds clock for id generation.

        Returns:
            A started WorkoutSession.

        Raises:
            StoredWorkoutsCorruptError: When stored workouts cannot be decoded.
        """

        ledger = Ledger(persistence.load())
        ids = MonotonicIdGenerator(floor=ledger.max_id(), clock=clock)
        session = cls(
            ledger=ledger,
            persistence=persistence,
            list_renderer=list_renderer,
            chart_renderer=chart_renderer,
            ids=ids,
        )
        for record in ledger:
            list_renderer.render(record)
        chart_renderer.init(ledger.all())
        return session

    @property
    def records(self) -> tuple[WorkoutRecord, ...]:
        return self._ledger.all()

    @property
    def total_calories(self) -> int:
        return self._ledger.total_calories()

    def dispatch(self, command: WorkoutCommand) -> WorkoutRecord | None:
        """Run the transition mapped to `command`.

        Returns:
            The created record for AddWorkout; None for DeleteWorkout.

        Raises:
            WorkoutValidationError: When an AddWorkout carries invalid input.
            TypeError: For unknown command types.
        """

        if isinstance(command, AddWorkout):
            return self.add(command.name, command.calories)
        if isinstance(command, DeleteWorkout):
            self.delete(command.workout_id)
            return None
        raise TypeError(f"Unsupported workout command: {type(command).__name__}")

    def add(self, name: str | None, calories: str | None) -> WorkoutRecord:
        """Validate raw inputs and append a new workout.

        Raises:
            WorkoutValidationError: When validation fails; nothing is changed.
        """

        try:
            cleaned = validate_workout_input(name, calories)
        except WorkoutValidationError as exc:
            logger.warning("Rejected workout input (%s=%r)", exc.field, exc.raw_value)
            raise

        record = WorkoutRecord(id=self._ids.next_id(), name=cleaned.name, calories=cleaned.calories)
        self._ledger.append(record)
        self.list_renderer.render(record)
        self._synchronize()
        logger.info("Added workout %s (%r, %d kcal)", record.id, record.name, record.calories)
        return record

    def delete(self, workout_id: int) -> None:
        """Remove a workout by id; unknown ids leave the ledger unchanged."""

        if self._ledger.remove(workout_id):
            logger.info("Deleted workout %s", workout_id)
        else:
            logger.warning("Delete requested for unknown workout %s", workout_id)
        self.list_renderer.remove(workout_id)
        self._synchronize()

    def _synchronize(self) -> None:
        snapshot = self._ledger.all()
        self.persistence.save(snapshot)
        self.chart_renderer.refresh(snapshot)

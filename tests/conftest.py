"""Pytest fixtures shared across workout tracker tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from core.listing import ListRenderer
from core.persistence import WorkoutPersistence
from core.storage import MappingKeyValueStore
from ledger.records import WorkoutRecord


class RecordingChartRenderer:
    """ChartRenderer fake that remembers every series it was given."""

    def __init__(self) -> None:
        self.init_calls: list[tuple[WorkoutRecord, ...]] = []
        self.refresh_calls: list[tuple[WorkoutRecord, ...]] = []

    def init(self, records: Sequence[WorkoutRecord]) -> None:
        self.init_calls.append(tuple(records))

    def refresh(self, records: Sequence[WorkoutRecord]) -> None:
        self.refresh_calls.append(tuple(records))

    @property
    def current(self) -> tuple[WorkoutRecord, ...]:
        if self.refresh_calls:
            return self.refresh_calls[-1]
        return self.init_calls[-1]


class CountingStore(MappingKeyValueStore):
    """Dict-backed store that counts writes."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        super().__init__(self.data)
        self.writes = 0

    def set(self, key: str, value: str) -> None:
        self.writes += 1
        super().set(key, value)


class StepClock:
    """Deterministic epoch-milliseconds clock advancing by one step per call."""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> int:
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def store() -> CountingStore:
    """Return an empty write-counting store."""

    return CountingStore()


@pytest.fixture
def persistence(store: CountingStore) -> WorkoutPersistence:
    """Return a persistence adapter over the `store` fixture."""

    return WorkoutPersistence(store, key="workouts")


@pytest.fixture
def list_renderer() -> ListRenderer:
    return ListRenderer()


@pytest.fixture
def chart_renderer() -> RecordingChartRenderer:
    return RecordingChartRenderer()


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Fail collection unless each test is marked either `unit` or `integration`.

    Ledger, codec and renderer tests run without a database and are `unit`;
    anything driving the Django test client or session rows is `integration`.
    Marking a test with both, or with neither, is rejected.
    """

    invalid: list[str] = []
    for item in items:
        speeds = [name for name in ("unit", "integration") if item.get_closest_marker(name) is not None]
        if len(speeds) != 1:
            invalid.append(f"{item.nodeid} (markers={speeds or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Mark every test with exactly one of `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Tests to fix:\n{joined}"
        )

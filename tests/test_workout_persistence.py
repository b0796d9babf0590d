"""Unit tests for the workout persistence adapter and key-value store."""

from __future__ import annotations

import pytest
from django.test import override_settings

from core.persistence import StoredWorkoutsCorruptError, WorkoutPersistence, configured_storage_key
from core.storage import MappingKeyValueStore
from ledger.records import WorkoutRecord

pytestmark = pytest.mark.unit


def test_load_returns_empty_when_key_is_absent(persistence) -> None:
    """Nothing stored yet means an empty ledger, not an error."""

    assert persistence.load() == ()


def test_save_then_load_round_trips(persistence, store) -> None:
    """A saved sequence loads back unchanged."""

    records = (
        WorkoutRecord(id=1, name="Running", calories=300),
        WorkoutRecord(id=2, name="Cycling", calories=450),
    )
    persistence.save(records)
    assert persistence.load() == records
    assert store.writes == 1


def test_save_fully_replaces_previous_content(persistence, store) -> None:
    """Every save overwrites the whole key."""

    persistence.save([WorkoutRecord(id=1, name="Running", calories=300)])
    persistence.save([WorkoutRecord(id=2, name="Cycling", calories=450)])
    assert [record.id for record in persistence.load()] == [2]
    assert list(store.data) == ["workouts"]


def test_corrupt_content_raises_and_is_left_in_place(persistence, store) -> None:
    """Unreadable content surfaces an error and is not discarded."""

    store.data["workouts"] = "{broken"
    with pytest.raises(StoredWorkoutsCorruptError) as excinfo:
        persistence.load()
    assert excinfo.value.key == "workouts"
    assert store.data["workouts"] == "{broken"


def test_non_text_content_is_reported_as_corrupt() -> None:
    """Values that are not text cannot be decoded."""

    persistence = WorkoutPersistence(MappingKeyValueStore({"workouts": 42}))
    with pytest.raises(StoredWorkoutsCorruptError):
        persistence.load()


def test_clear_removes_the_key(persistence, store) -> None:
    persistence.save([WorkoutRecord(id=1, name="Running", calories=300)])
    persistence.clear()
    assert "workouts" not in store.data
    persistence.clear()


def test_custom_key_isolates_storage() -> None:
    """Adapters on different keys do not see each other's workouts."""

    backing: dict[str, str] = {}
    first = WorkoutPersistence(MappingKeyValueStore(backing), key="a")
    second = WorkoutPersistence(MappingKeyValueStore(backing), key="b")
    first.save([WorkoutRecord(id=1, name="Running", calories=300)])
    assert second.load() == ()


@override_settings(WORKOUTS_STORAGE_KEY="my-workouts")
def test_configured_storage_key_reads_settings() -> None:
    assert configured_storage_key() == "my-workouts"


@override_settings(WORKOUTS_STORAGE_KEY="")
def test_configured_storage_key_falls_back_to_default() -> None:
    assert configured_storage_key() == "workouts"

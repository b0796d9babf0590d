"""Persistence adapter between the workout ledger and a key-value store."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from django.conf import settings

from core.storage import KeyValueStore
from ledger.codec import RecordDecodeError, decode_records, encode_records
from ledger.records import WorkoutRecord

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "workouts"


class StoredWorkoutsCorruptError(RuntimeError):
    """Raised when the stored workouts cannot be decoded."""

    def __init__(self, *, key: str, reason: str) -> None:
        """Initialize the error.

        Args:
            key: Store key that holds the unreadable content.
            reason: Decoder diagnostic.
        """

        super().__init__(f"Stored workouts under {key!r} are unreadable: {reason}")
        self.key = key
        self.reason = reason


def configured_storage_key() -> str:
    """Return the store key configured via `WORKOUTS_STORAGE_KEY`."""

    return getattr(settings, "WORKOUTS_STORAGE_KEY", DEFAULT_STORAGE_KEY) or DEFAULT_STORAGE_KEY


class WorkoutPersistence:
    """Load and save the full workout sequence under a single key."""

    def __init__(self, store: KeyValueStore, *, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> tuple[WorkoutRecord, ...]:
        """Read the stored workouts.

        Returns:
            Stored records in order; an empty tuple when nothing is stored.

        Raises:
            StoredWorkoutsCorruptError: When stored text cannot be decoded.
        """

        raw = self.store.get(self.key)
        if raw is None:
            return ()
        try:
            return decode_records(raw)
        except RecordDecodeError as exc:
            raise StoredWorkoutsCorruptError(key=self.key, reason=str(exc)) from exc

    def save(self, records: Iterable[WorkoutRecord]) -> None:
        """Overwrite the stored workouts with the full sequence."""

        snapshot = tuple(records)
        self.store.set(self.key, encode_records(snapshot))
        logger.debug("Saved %d workouts under %r", len(snapshot), self.key)

    def clear(self) -> None:
        """Remove the stored workouts entirely."""

        self.store.delete(self.key)
        logger.info("Cleared stored workouts under %r", self.key)

"""
Fake Implementations for Testing.

This package provides in-memory fake implementations of the storage
interfaces for fast, isolated testing. No file system access required.

Features:
- Fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Failure injection for persistence error paths
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeBlobStore, FakeClock, create_store

    store = create_store()
    workout = store.add_workout("Push Day")
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from application.services import DEFAULT_BLOB_KEY, WorkoutStore
from tests.fakes.blob_store import FakeBlobStore


class FakeClock:
    """Deterministic clock advancing by a fixed step on every call."""

    def __init__(
        self,
        start: datetime = datetime(2024, 3, 4, 18, 0, tzinfo=timezone.utc),
        step: timedelta = timedelta(minutes=1),
    ):
        self._next = start
        self._step = step

    def __call__(self) -> datetime:
        now = self._next
        self._next = now + self._step
        return now


# =============================================================================
# Factory Functions
# =============================================================================


def create_store(
    *,
    blob_store: Optional[FakeBlobStore] = None,
    key: str = DEFAULT_BLOB_KEY,
    clock: Optional[FakeClock] = None,
) -> WorkoutStore:
    """
    Create a WorkoutStore backed by fakes.

    Args:
        blob_store: Storage to use (a fresh FakeBlobStore by default)
        key: Blob name of the document
        clock: Timestamp source (a fresh FakeClock by default)

    Returns:
        Store with an empty collection (load() is not called)
    """
    return WorkoutStore(
        blob_store=blob_store if blob_store is not None else FakeBlobStore(),
        key=key,
        clock=clock or FakeClock(),
    )


def create_populated_store(
    *,
    blob_store: Optional[FakeBlobStore] = None,
    num_workouts: int = 2,
    exercises_per_workout: int = 2,
    logs_per_exercise: int = 2,
) -> WorkoutStore:
    """
    Create a store filled through the public operations.

    Workout i is named "Workout {i+1}", its exercises "Exercise {j+1}", and
    log k of each exercise uses sets=3, reps=5+k, weight=100+10*k.
    """
    store = create_store(blob_store=blob_store)
    for i in range(num_workouts):
        workout = store.add_workout(f"Workout {i + 1}")
        for j in range(exercises_per_workout):
            for k in range(logs_per_exercise):
                store.add_exercise_with_log(
                    workout.id,
                    f"Exercise {j + 1}",
                    sets=3,
                    reps=5 + k,
                    weight=100.0 + 10 * k,
                )
            if logs_per_exercise == 0:
                store.add_exercise(workout.id, f"Exercise {j + 1}")
    return store


__all__ = [
    "FakeBlobStore",
    "FakeClock",
    "create_store",
    "create_populated_store",
]

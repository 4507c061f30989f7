"""
Converters: persisted JSON document <-> list of domain Workouts.

The document is a single JSON array of workout objects:

    [
      {
        "id": "...",
        "name": "Push Day",
        "date": "2024-03-04T18:00:00+00:00",
        "exercises": [
          {"id": "...", "name": "Bench Press", "history": [
            {"id": "...", "date": "...", "sets": 3, "reps": 8, "weight": 135.0}
          ]}
        ]
      }
    ]

Documents written by the original mobile app (numeric dates, upper-case
UUIDs) decode into the same models.
"""

from typing import Iterable, List

from pydantic import TypeAdapter, ValidationError

from domain.models import Workout

_WORKOUT_LIST = TypeAdapter(List[Workout])


class WorkoutDecodeError(ValueError):
    """Raised when a persisted document cannot be turned into workouts."""


def encode_workouts(workouts: Iterable[Workout]) -> bytes:
    """
    Serialize the full workout collection.

    Args:
        workouts: Workouts in display order.

    Returns:
        UTF-8 encoded JSON array.
    """
    return _WORKOUT_LIST.dump_json(list(workouts), indent=2)


def decode_workouts(data: bytes) -> List[Workout]:
    """
    Deserialize a persisted document.

    Args:
        data: Raw document bytes. Empty or whitespace-only input is treated
            as an empty collection.

    Returns:
        Workouts in stored order.

    Raises:
        WorkoutDecodeError: If the bytes are not valid JSON or do not match
            the workout schema.
    """
    if not data.strip():
        return []
    try:
        return _WORKOUT_LIST.validate_json(data)
    except ValidationError as e:
        raise WorkoutDecodeError(
            f"Invalid workout document ({e.error_count()} errors): {e}"
        ) from e

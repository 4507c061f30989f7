"""
Domain converters for the persisted workout document.

- encode_workouts: List[Workout] -> JSON bytes
- decode_workouts: JSON bytes -> List[Workout]

All converters are pure functions with no side effects.
"""

from domain.converters.json_codec import (
    WorkoutDecodeError,
    decode_workouts,
    encode_workouts,
)

__all__ = [
    "encode_workouts",
    "decode_workouts",
    "WorkoutDecodeError",
]

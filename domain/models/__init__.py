"""
Domain models for the fitness tracker.

These models are pure pydantic types with no knowledge of storage:
- Workout: The aggregate root, a named and dated list of exercises
- Exercise: A named movement with an append-only history
- ExerciseLog: One recorded performance (sets x reps at a weight)

The whole collection of workouts is persisted as a single JSON document.

Usage:
    >>> from domain.models import Workout, Exercise, ExerciseLog

    >>> workout = Workout(
    ...     name="Push Day",
    ...     exercises=[
    ...         Exercise(
    ...             name="Bench Press",
    ...             history=[ExerciseLog(sets=3, reps=8, weight=135.0)],
    ...         )
    ...     ],
    ... )

    >>> # Serialize to JSON
    >>> json_str = workout.model_dump_json(indent=2)

    >>> # Deserialize from JSON
    >>> workout = Workout.model_validate_json(json_str)
"""

from domain.models.exercise import Exercise
from domain.models.exercise_log import WEIGHT_UNIT, ExerciseLog
from domain.models.workout import Workout

__all__ = [
    "Workout",
    "Exercise",
    "ExerciseLog",
    "WEIGHT_UNIT",
]

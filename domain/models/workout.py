"""
Workout aggregate - the root entity of the persisted document.
"""

import uuid
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from domain.models._dates import coerce_datetime, utc_now
from domain.models.exercise import Exercise


class Workout(BaseModel):
    """
    A named, dated collection of exercises performed together.

    A Workout exclusively owns its exercises, which in turn own their
    histories; there are no cross references between workouts.

    Unlike ExerciseLog, Workout has identity and changes over time. Changes
    go through domain methods that return new instances, so a snapshot
    handed out by the store is never modified behind the caller's back.

    Examples:
        >>> workout = Workout(name="Push Day")
        >>> workout = workout.with_exercise(Exercise(name="Bench Press"))
        >>> workout.exercise_count
        1

        >>> # Serialize to JSON
        >>> json_str = workout.model_dump_json()

        >>> # Deserialize from JSON
        >>> workout = Workout.model_validate_json(json_str)
    """

    # Identity
    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier (UUID string)",
    )
    name: str = Field(..., min_length=1, description="Workout name")
    date: datetime = Field(
        default_factory=utc_now, description="When the workout was created"
    )

    # Structure
    exercises: Tuple[Exercise, ...] = Field(
        default_factory=tuple, description="Exercises in insertion order"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank names."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Workout name must not be blank")
        return stripped

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        """Accept ISO strings, naive datetimes and legacy numeric dates."""
        return coerce_datetime(v)

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def exercise_count(self) -> int:
        """Get number of exercises in the workout."""
        return len(self.exercises)

    @property
    def total_logs(self) -> int:
        """
        Get total number of logs across all exercises.

        Returns:
            Total log count.
        """
        return sum(exercise.log_count for exercise in self.exercises)

    @property
    def exercise_names(self) -> List[str]:
        """Exercise names in order."""
        return [exercise.name for exercise in self.exercises]

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def find_exercise(self, exercise_id: str) -> Optional[Exercise]:
        """Find an exercise by id."""
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        return None

    def find_exercise_by_name(self, name: str) -> Optional[Exercise]:
        """
        Find the first exercise whose name equals ``name``.

        Surrounding whitespace is ignored; the comparison is otherwise exact.

        Args:
            name: Exercise name to look for.

        Returns:
            Matching exercise or None.
        """
        wanted = name.strip()
        for exercise in self.exercises:
            if exercise.name == wanted:
                return exercise
        return None

    # -------------------------------------------------------------------------
    # Domain Methods (return new instances for immutability)
    # -------------------------------------------------------------------------

    def with_exercise(self, exercise: Exercise) -> "Workout":
        """
        Return a new Workout with the exercise appended.

        Args:
            exercise: Exercise to add at the end of the list.

        Returns:
            New Workout instance.
        """
        return self.model_copy(update={"exercises": (*self.exercises, exercise)})

    def replace_exercise(self, exercise: Exercise) -> "Workout":
        """
        Return a new Workout with the exercise sharing ``exercise.id`` replaced.

        Position in the list is preserved.

        Raises:
            KeyError: If no exercise has that id.
        """
        exercises = list(self.exercises)
        for index, current in enumerate(exercises):
            if current.id == exercise.id:
                exercises[index] = exercise
                return self.model_copy(update={"exercises": tuple(exercises)})
        raise KeyError(exercise.id)

    def without_exercise(self, exercise_id: str) -> "Workout":
        """
        Return a new Workout with the given exercise (and its history) removed.

        Raises:
            KeyError: If no exercise has that id.
        """
        remaining = [e for e in self.exercises if e.id != exercise_id]
        if len(remaining) == len(self.exercises):
            raise KeyError(exercise_id)
        return self.model_copy(update={"exercises": tuple(remaining)})

    def without_exercises_at(self, indexes: Iterable[int]) -> "Workout":
        """
        Return a new Workout with the exercises at ``indexes`` removed.

        Remaining exercises keep their relative order and shift left.

        Raises:
            IndexError: If any index is outside the exercise list.
        """
        doomed = set(indexes)
        for index in doomed:
            if index < 0 or index >= len(self.exercises):
                raise IndexError(index)
        remaining = [e for i, e in enumerate(self.exercises) if i not in doomed]
        return self.model_copy(update={"exercises": tuple(remaining)})

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"Workout({self.name!r}, {self.exercise_count} exercises, "
            f"{self.total_logs} logs)"
        )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "name": "Push Day",
                    "date": "2024-03-04T18:00:00+00:00",
                    "exercises": [
                        {
                            "id": "0b7c8f3a-55e1-4d8e-9d43-1a3c5e7f9b21",
                            "name": "Bench Press",
                            "history": [
                                {
                                    "id": "6f1c2a9e-3b0d-4c55-9a57-0d7b2c1e4f10",
                                    "date": "2024-03-04T18:30:00+00:00",
                                    "sets": 3,
                                    "reps": 8,
                                    "weight": 135.0,
                                }
                            ],
                        }
                    ],
                }
            ]
        },
    }

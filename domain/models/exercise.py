"""
Exercise entity - a named movement holding an append-only log history.
"""

import uuid
from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from domain.models.exercise_log import ExerciseLog


class Exercise(BaseModel):
    """
    A named movement tracked within a workout.

    The history is chronological by construction: logs are appended at
    the tail and never reordered, updated or removed.

    Examples:
        >>> bench = Exercise(name="Bench Press")
        >>> bench = bench.with_log(ExerciseLog(sets=3, reps=8, weight=135.0))
        >>> bench.log_count
        1
    """

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier (UUID string)",
    )
    name: str = Field(..., min_length=1, description="Exercise name")
    history: Tuple[ExerciseLog, ...] = Field(
        default_factory=tuple, description="Logged performances, oldest first"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank names."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Exercise name must not be blank")
        return stripped

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def log_count(self) -> int:
        """Number of logs recorded for this exercise."""
        return len(self.history)

    @property
    def latest_log(self) -> Optional[ExerciseLog]:
        """Most recently appended log, or None for a new exercise."""
        return self.history[-1] if self.history else None

    @property
    def max_weight(self) -> Optional[float]:
        """Heaviest weight logged, or None when there is no history."""
        if not self.history:
            return None
        return max(log.weight for log in self.history)

    # -------------------------------------------------------------------------
    # Domain Methods (return new instances for immutability)
    # -------------------------------------------------------------------------

    def with_log(self, log: ExerciseLog) -> "Exercise":
        """
        Return a new Exercise with the log appended to its history.

        Args:
            log: Log to append.

        Returns:
            New Exercise instance.
        """
        return self.model_copy(update={"history": (*self.history, log)})

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"Exercise({self.name!r}, {self.log_count} logs)"

    model_config = {"frozen": True}

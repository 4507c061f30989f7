"""
ExerciseLog value object - one recorded performance of an exercise.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from domain.models._dates import coerce_datetime, utc_now

# Unit shown next to logged weights
WEIGHT_UNIT = "lbs"


class ExerciseLog(BaseModel):
    """
    Value object representing sets x reps at a given weight.

    Logs are immutable once created; an exercise's history only ever
    grows by appending new logs at the tail.

    Examples:
        >>> log = ExerciseLog(sets=3, reps=8, weight=135.0)
        >>> str(log)
        '3x8 @ 135.0 lbs'
        >>> log.volume
        3240.0
    """

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier (UUID string)",
    )
    date: datetime = Field(
        default_factory=utc_now, description="When the log was recorded"
    )
    sets: int = Field(..., ge=0, description="Number of sets performed")
    reps: int = Field(..., ge=0, description="Reps per set")
    weight: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Weight lifted per rep"
    )

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        """Accept ISO strings, naive datetimes and legacy numeric dates."""
        return coerce_datetime(v)

    @property
    def volume(self) -> float:
        """Total load moved (sets * reps * weight)."""
        return self.sets * self.reps * self.weight

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"{self.sets}x{self.reps} @ {self.weight:.1f} {WEIGHT_UNIT}"

    model_config = {
        "frozen": True,  # Make immutable (value object semantics)
        "json_schema_extra": {
            "examples": [
                {
                    "id": "6F1C2A9E-3B0D-4C55-9A57-0D7B2C1E4F10",
                    "date": "2024-03-04T18:30:00+00:00",
                    "sets": 3,
                    "reps": 8,
                    "weight": 135.0,
                }
            ]
        },
    }

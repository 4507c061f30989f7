"""
Application services for the fitness tracker.

- WorkoutStore: authoritative workout collection, persisted on every change
- ProgressionService: weight progression and history summaries per exercise
"""

from application.services.progression import (
    ExerciseSummary,
    ProgressionService,
    WeightPoint,
    calculate_1rm,
    calculate_1rm_brzycki,
    calculate_1rm_epley,
    summarize_exercise,
    weight_progression,
)
from application.services.workout_store import DEFAULT_BLOB_KEY, WorkoutStore

__all__ = [
    # Store
    "WorkoutStore",
    "DEFAULT_BLOB_KEY",
    # Progression
    "ProgressionService",
    "ExerciseSummary",
    "WeightPoint",
    "calculate_1rm",
    "calculate_1rm_brzycki",
    "calculate_1rm_epley",
    "summarize_exercise",
    "weight_progression",
]

"""
Domain layer for the fitness tracker.

This package contains pure domain models and converters that are
independent of storage and presentation concerns.
"""

from domain.models import Exercise, ExerciseLog, Workout

__all__ = [
    "Exercise",
    "ExerciseLog",
    "Workout",
]

"""
Exercise progression: the weight chart series and history summaries.

Estimated one-rep maxes are computed per logged set from its weight and
reps. Weights are in the same unit they were logged in (lbs).
"""
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Dict, List, Optional
import logging

from domain.models import Exercise

if TYPE_CHECKING:
    from application.services.workout_store import WorkoutStore

logger = logging.getLogger(__name__)

# Brzycki's denominator (37 - reps) reaches zero here
BRZYCKI_REP_LIMIT = 37
BRZYCKI_CAP_FACTOR = 2.5


# =============================================================================
# Estimated 1RM
# =============================================================================


def calculate_1rm_brzycki(weight: float, reps: int) -> float:
    """
    Brzycki estimate: ``weight * 36 / (37 - reps)``.

    A set of zero reps estimates nothing (0.0) and a single rep is its own
    max. From BRZYCKI_REP_LIMIT reps on the estimate is a flat
    ``weight * BRZYCKI_CAP_FACTOR``.
    """
    if reps <= 0:
        return 0.0
    if reps == 1:
        return float(weight)
    if reps >= BRZYCKI_REP_LIMIT:
        return float(weight) * BRZYCKI_CAP_FACTOR
    return weight * 36.0 / (BRZYCKI_REP_LIMIT - reps)


def calculate_1rm_epley(weight: float, reps: int) -> float:
    """Epley estimate: ``weight * (1 + reps / 30)``, same edge cases as Brzycki."""
    if reps <= 0:
        return 0.0
    if reps == 1:
        return float(weight)
    return weight * (1.0 + reps / 30.0)


_ESTIMATORS: Dict[str, Callable[[float, int], float]] = {
    "brzycki": calculate_1rm_brzycki,
    "epley": calculate_1rm_epley,
}

ONE_RM_FORMULAS = tuple(_ESTIMATORS)


def calculate_1rm(weight: float, reps: int, formula: str = "brzycki") -> float:
    """
    Estimated 1RM for one logged set, rounded to 0.1.

    Args:
        weight: Weight of the set
        reps: Reps completed in the set
        formula: One of ONE_RM_FORMULAS

    Raises:
        ValueError: If the formula is not known
    """
    try:
        estimator = _ESTIMATORS[formula]
    except KeyError:
        raise ValueError(
            f"Unknown 1RM formula '{formula}'. Must be one of: {ONE_RM_FORMULAS}"
        ) from None
    return round(estimator(weight, reps), 1)


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass
class WeightPoint:
    """One point on the weight progression chart."""
    date: datetime
    weight: float


@dataclass
class ExerciseSummary:
    """Aggregated history for a single exercise."""
    exercise_id: str
    exercise_name: str
    total_logs: int
    one_rm_formula: str
    max_weight: Optional[float] = None
    latest_weight: Optional[float] = None
    total_volume: float = 0.0
    best_estimated_1rm: Optional[float] = None
    first_logged_at: Optional[datetime] = None
    last_logged_at: Optional[datetime] = None


# =============================================================================
# Pure helpers
# =============================================================================


def weight_progression(exercise: Exercise) -> List[WeightPoint]:
    """
    Build the weight-over-time series for an exercise.

    Points follow history order, which is chronological by construction.
    """
    return [WeightPoint(date=log.date, weight=log.weight) for log in exercise.history]


def summarize_exercise(exercise: Exercise, formula: str = "brzycki") -> ExerciseSummary:
    """
    Summarize an exercise's history.

    Args:
        exercise: Exercise to summarize
        formula: 1RM formula ("brzycki" or "epley")

    Returns:
        ExerciseSummary; weight fields are None when there is no history
    """
    if formula not in ONE_RM_FORMULAS:
        raise ValueError(
            f"Unknown 1RM formula '{formula}'. Must be one of: {ONE_RM_FORMULAS}"
        )

    summary = ExerciseSummary(
        exercise_id=exercise.id,
        exercise_name=exercise.name,
        total_logs=exercise.log_count,
        one_rm_formula=formula,
    )
    if not exercise.history:
        return summary

    summary.max_weight = exercise.max_weight
    summary.latest_weight = exercise.history[-1].weight
    summary.total_volume = round(sum(log.volume for log in exercise.history), 2)
    summary.best_estimated_1rm = max(
        calculate_1rm(log.weight, log.reps, formula) for log in exercise.history
    )
    summary.first_logged_at = exercise.history[0].date
    summary.last_logged_at = exercise.history[-1].date
    return summary


# =============================================================================
# Progression Service
# =============================================================================


class ProgressionService:
    """
    Service for exercise progression tracking on top of the workout store.

    Lookups go through the store, so unknown ids raise NotFoundError.
    """

    def __init__(self, store: "WorkoutStore"):
        """
        Initialize the progression service.

        Args:
            store: Workout store to read exercises from
        """
        self._store = store

    def weight_progression(self, workout_id: str, exercise_id: str) -> List[WeightPoint]:
        """Get the chart series for one exercise."""
        exercise = self._store.get_exercise(workout_id, exercise_id)
        return weight_progression(exercise)

    def summary(
        self,
        workout_id: str,
        exercise_id: str,
        formula: str = "brzycki",
    ) -> ExerciseSummary:
        """Get the history summary for one exercise."""
        exercise = self._store.get_exercise(workout_id, exercise_id)
        summary = summarize_exercise(exercise, formula)
        logger.debug(
            "Summarized %s: %d logs, max weight %s",
            exercise.name,
            summary.total_logs,
            summary.max_weight,
        )
        return summary

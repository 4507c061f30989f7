"""
Workout Store.

Holds the authoritative in-memory list of workouts and keeps the persisted
document consistent with it. Every successful mutation is followed by
exactly one synchronous write of the whole collection (full-document
overwrite); there is no batching and no incremental persistence.

Persistence failures never undo a mutation: the error is logged and kept on
``last_persistence_error``, and the in-memory state stays authoritative for
the rest of the session.
"""

import logging
import uuid
from datetime import datetime
from typing import Any, Callable, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from application.exceptions import NotFoundError, PersistenceError, ValidationError
from application.ports import BlobStore
from domain.converters import WorkoutDecodeError, decode_workouts, encode_workouts
from domain.models import Exercise, ExerciseLog, Workout
from domain.models._dates import utc_now

logger = logging.getLogger(__name__)

DEFAULT_BLOB_KEY = "workouts.json"

ModelT = TypeVar("ModelT", bound=BaseModel)


def _new_id() -> str:
    return str(uuid.uuid4())


class WorkoutStore:
    """
    Store for workouts, exercises and exercise logs.

    Lookups are by id everywhere except ``add_exercise`` and
    ``add_exercise_with_log``, which find-or-create an exercise by name
    within a workout.

    Dependencies are injected via constructor for testability.

    Usage:
        >>> store = WorkoutStore(blob_store=FileBlobStore(data_dir))
        >>> store.load()
        >>> workout = store.add_workout("Push Day")
        >>> bench = store.add_exercise_with_log(
        ...     workout.id, "Bench Press", sets=3, reps=8, weight=135.0
        ... )
    """

    def __init__(
        self,
        blob_store: BlobStore,
        *,
        key: str = DEFAULT_BLOB_KEY,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        """
        Initialize the store with an empty collection.

        Args:
            blob_store: Storage the collection is persisted into
            key: Blob name of the persisted document
            clock: Source of creation timestamps (defaults to UTC now)
            id_factory: Source of new identifiers (defaults to UUID4 strings)
        """
        self._blob_store = blob_store
        self._key = key
        self._clock = clock or utc_now
        self._id_factory = id_factory or _new_id
        self._workouts: List[Workout] = []
        self._save_count = 0
        self.last_persistence_error: Optional[PersistenceError] = None

    @property
    def key(self) -> str:
        """Blob name of the persisted document."""
        return self._key

    @property
    def save_count(self) -> int:
        """Number of successful writes since the store was created."""
        return self._save_count

    # =========================================================================
    # Loading
    # =========================================================================

    def load(self) -> None:
        """
        Replace the in-memory collection with the persisted document.

        Never raises: a missing document or one that cannot be read or
        decoded leaves the store with an empty collection. Loading does not
        write anything back.
        """
        try:
            data = self._blob_store.read(self._key)
        except PersistenceError as e:
            logger.error("Error loading workouts from %s: %s", self._key, e)
            self._workouts = []
            return

        if data is None:
            logger.info("No saved workouts at %s, starting empty", self._key)
            self._workouts = []
            return

        try:
            workouts = decode_workouts(data)
        except WorkoutDecodeError as e:
            logger.error("Error decoding workouts from %s: %s", self._key, e)
            self._workouts = []
            return

        self._workouts = workouts
        logger.info("Loaded %d workouts from %s", len(workouts), self._key)

    # =========================================================================
    # Queries
    # =========================================================================

    def list_workouts(self) -> List[Workout]:
        """Return a snapshot of all workouts in display order."""
        return list(self._workouts)

    def get_workout(self, workout_id: str) -> Workout:
        """
        Get a single workout by id.

        Raises:
            NotFoundError: If no workout has that id
        """
        return self._workouts[self._workout_index(workout_id)]

    def get_exercise(self, workout_id: str, exercise_id: str) -> Exercise:
        """
        Get an exercise by id within a workout.

        Raises:
            NotFoundError: If either id does not resolve
        """
        return self._require_exercise(self.get_workout(workout_id), exercise_id)

    # =========================================================================
    # Workouts
    # =========================================================================

    def add_workout(self, name: str) -> Workout:
        """
        Append a new, empty workout.

        Args:
            name: Workout name (must not be blank)

        Returns:
            The created workout with a fresh id and the current timestamp

        Raises:
            ValidationError: If the name is blank
        """
        workout = self._build(
            Workout,
            "workout",
            id=self._id_factory(),
            name=name,
            date=self._clock(),
            exercises=(),
        )
        self._commit([*self._workouts, workout])
        logger.info("Added workout %s (%s)", workout.id, workout.name)
        return workout

    def delete_workout(self, workout_id: str) -> None:
        """
        Delete a workout together with all of its exercises and their logs.

        Raises:
            NotFoundError: If no workout has that id
        """
        index = self._workout_index(workout_id)
        remaining = [*self._workouts[:index], *self._workouts[index + 1:]]
        self._commit(remaining)
        logger.info("Deleted workout %s", workout_id)

    def delete_workouts_at(self, indexes: Iterable[int]) -> None:
        """
        Delete workouts by list position (swipe-to-delete).

        Remaining workouts keep their order and shift left. All positions
        are removed in a single write.

        Raises:
            NotFoundError: If any index is out of range
        """
        doomed = set(indexes)
        for index in doomed:
            if index < 0 or index >= len(self._workouts):
                raise NotFoundError(
                    f"No workout at position {index}",
                    entity="workout",
                    entity_id=str(index),
                )
        if not doomed:
            return
        remaining = [w for i, w in enumerate(self._workouts) if i not in doomed]
        self._commit(remaining)
        logger.info("Deleted %d workouts by position", len(doomed))

    # =========================================================================
    # Exercises
    # =========================================================================

    def add_exercise(self, workout_id: str, name: str) -> Exercise:
        """
        Find an exercise by name in a workout, creating it if absent.

        Calling this twice with the same name returns the same exercise.
        Nothing is written when the exercise already exists.

        Args:
            workout_id: Owning workout id
            name: Exercise name (must not be blank)

        Returns:
            The existing or newly created exercise

        Raises:
            ValidationError: If the name is blank
            NotFoundError: If the workout does not exist
        """
        name = self._require_name(name, "exercise")
        index = self._workout_index(workout_id)
        workout = self._workouts[index]

        existing = workout.find_exercise_by_name(name)
        if existing is not None:
            return existing

        exercise = self._build(
            Exercise, "exercise", id=self._id_factory(), name=name, history=()
        )
        self._replace_workout(index, workout.with_exercise(exercise))
        logger.info("Added exercise %s (%s) to workout %s", exercise.id, name, workout_id)
        return exercise

    def add_exercise_with_log(
        self,
        workout_id: str,
        name: str,
        sets: int,
        reps: int,
        weight: float,
    ) -> Exercise:
        """
        Find-or-create an exercise by name and append a new log to it.

        Args:
            workout_id: Owning workout id
            name: Exercise name (must not be blank)
            sets: Sets performed (>= 0)
            reps: Reps per set (>= 0)
            weight: Weight lifted (>= 0)

        Returns:
            The exercise including the new log

        Raises:
            ValidationError: If the name is blank or a number is invalid
            NotFoundError: If the workout does not exist
        """
        name = self._require_name(name, "exercise")
        log = self._new_log(sets, reps, weight)
        index = self._workout_index(workout_id)
        workout = self._workouts[index]

        existing = workout.find_exercise_by_name(name)
        if existing is not None:
            exercise = existing.with_log(log)
            updated = workout.replace_exercise(exercise)
        else:
            exercise = self._build(
                Exercise, "exercise", id=self._id_factory(), name=name, history=(log,)
            )
            updated = workout.with_exercise(exercise)

        self._replace_workout(index, updated)
        logger.info(
            "Logged %s for exercise %s in workout %s", log, exercise.id, workout_id
        )
        return exercise

    def delete_exercise(self, workout_id: str, exercise_id: str) -> None:
        """
        Delete an exercise and its history from a workout.

        Raises:
            NotFoundError: If either id does not resolve
        """
        index = self._workout_index(workout_id)
        workout = self._workouts[index]
        self._require_exercise(workout, exercise_id)
        self._replace_workout(index, workout.without_exercise(exercise_id))
        logger.info("Deleted exercise %s from workout %s", exercise_id, workout_id)

    def delete_exercises_at(self, workout_id: str, indexes: Iterable[int]) -> None:
        """
        Delete exercises from a workout by list position.

        Raises:
            NotFoundError: If the workout does not exist or an index is
                out of range
        """
        index = self._workout_index(workout_id)
        workout = self._workouts[index]
        positions = set(indexes)
        if not positions:
            return
        try:
            updated = workout.without_exercises_at(positions)
        except IndexError as e:
            raise NotFoundError(
                f"No exercise at position {e.args[0]} in workout {workout_id}",
                entity="exercise",
                entity_id=str(e.args[0]),
            ) from e
        self._replace_workout(index, updated)
        logger.info(
            "Deleted %d exercises by position from workout %s",
            len(positions),
            workout_id,
        )

    # =========================================================================
    # Logs
    # =========================================================================

    def add_log(
        self,
        workout_id: str,
        exercise_id: str,
        sets: int,
        reps: int,
        weight: float,
    ) -> ExerciseLog:
        """
        Append a log to an exercise identified by id.

        Args:
            workout_id: Owning workout id
            exercise_id: Exercise id within that workout
            sets: Sets performed (>= 0)
            reps: Reps per set (>= 0)
            weight: Weight lifted (>= 0)

        Returns:
            The new log, timestamped now

        Raises:
            ValidationError: If a number is invalid
            NotFoundError: If either id does not resolve
        """
        log = self._new_log(sets, reps, weight)
        index = self._workout_index(workout_id)
        workout = self._workouts[index]
        exercise = self._require_exercise(workout, exercise_id)

        self._replace_workout(index, workout.replace_exercise(exercise.with_log(log)))
        logger.info("Logged %s for exercise %s", log, exercise_id)
        return log

    # =========================================================================
    # Internals
    # =========================================================================

    def _workout_index(self, workout_id: str) -> int:
        for index, workout in enumerate(self._workouts):
            if workout.id == workout_id:
                return index
        raise NotFoundError(
            f"Workout not found: {workout_id}", entity="workout", entity_id=workout_id
        )

    @staticmethod
    def _require_exercise(workout: Workout, exercise_id: str) -> Exercise:
        exercise = workout.find_exercise(exercise_id)
        if exercise is None:
            raise NotFoundError(
                f"Exercise {exercise_id} not found in workout {workout.id}",
                entity="exercise",
                entity_id=exercise_id,
            )
        return exercise

    @staticmethod
    def _require_name(name: Any, entity: str) -> str:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError(
                f"Invalid {entity}", errors=[f"{entity} name is required"]
            )
        return name.strip()

    def _new_log(self, sets: int, reps: int, weight: float) -> ExerciseLog:
        return self._build(
            ExerciseLog,
            "log",
            id=self._id_factory(),
            date=self._clock(),
            sets=sets,
            reps=reps,
            weight=weight,
        )

    @staticmethod
    def _build(model: Type[ModelT], entity: str, **fields: Any) -> ModelT:
        """Construct a domain model, translating pydantic errors."""
        try:
            return model(**fields)
        except PydanticValidationError as e:
            errors = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise ValidationError(f"Invalid {entity}", errors=errors) from e

    def _replace_workout(self, index: int, workout: Workout) -> None:
        workouts = list(self._workouts)
        workouts[index] = workout
        self._commit(workouts)

    def _commit(self, workouts: List[Workout]) -> None:
        """Swap in the new collection, then persist it."""
        self._workouts = workouts
        self._persist()

    def _persist(self) -> bool:
        """
        Write the whole collection, replacing the previous document.

        Returns:
            True if the write succeeded
        """
        try:
            data = encode_workouts(self._workouts)
            self._blob_store.write(self._key, data)
        except PersistenceError as e:
            self._record_failure(e)
            return False
        except ValueError as e:
            error = PersistenceError(f"Could not encode workouts: {e}")
            error.__cause__ = e
            self._record_failure(error)
            return False

        self._save_count += 1
        self.last_persistence_error = None
        logger.debug(
            "Saved %d workouts to %s (%d bytes)",
            len(self._workouts),
            self._key,
            len(data),
        )
        return True

    def _record_failure(self, error: PersistenceError) -> None:
        self.last_persistence_error = error
        logger.error(
            "Error saving workouts to %s: %s", self._key, error, exc_info=error
        )

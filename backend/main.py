"""
Composition root for the fitness tracker.

The presentation layer owns exactly one WorkoutStore for the lifetime of the
process. create_store() wires it up from settings and loads the persisted
document once; there is no teardown, the last successful save is
authoritative.

Usage:
    from backend.main import create_store
    from backend.settings import Settings

    # Default store (uses get_settings())
    store = create_store()

    # Test store with custom settings
    test_settings = Settings(environment="test", data_dir=tmp_path, _env_file=None)
    store = create_store(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk

from application.ports import BlobStore
from application.services import WorkoutStore
from backend.settings import Settings, get_settings
from infrastructure.storage import FileBlobStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_store(
    settings: Optional[Settings] = None,
    blob_store: Optional[BlobStore] = None,
) -> WorkoutStore:
    """
    Create and load a WorkoutStore.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.
        blob_store: Optional storage override. Defaults to a FileBlobStore
                    rooted at settings.data_dir.

    Returns:
        A store holding the persisted collection (empty if none could be read).
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)
    _init_sentry(settings)

    if blob_store is None:
        blob_store = FileBlobStore(settings.data_path)

    store = WorkoutStore(blob_store=blob_store, key=settings.workouts_file_name)
    store.load()
    logger.info(
        "Workout store ready (%s): %d workouts",
        settings.environment,
        len(store.list_workouts()),
    )
    return store


def _configure_logging(settings: Settings) -> None:
    """Configure root logging at the configured level."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(settings.log_level)


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
        )
        logger.info("Sentry initialized for fitness tracker")

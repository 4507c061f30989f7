"""
Infrastructure Storage Layer.

This package provides the file-system implementation of the BlobStore
interface defined in application.ports.

Usage:
    from infrastructure.storage import FileBlobStore
    from application.services import WorkoutStore

    store = WorkoutStore(blob_store=FileBlobStore("~/.fitness"))
    store.load()
"""

from infrastructure.storage.file_blob_store import FileBlobStore

__all__ = [
    "FileBlobStore",
]

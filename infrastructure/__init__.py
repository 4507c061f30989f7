"""
Infrastructure Layer for the fitness tracker.

This package contains concrete implementations of the storage interfaces:
- storage/: Local file system blob store
"""

from infrastructure.storage import FileBlobStore

__all__ = [
    "FileBlobStore",
]

"""
Blob Store Interface (Port).

This module defines the abstract interface for the raw storage the workout
store persists into: whole byte blobs addressed by a name inside a private
storage area. Implementations may use the local file system, memory, or any
other key-value backend.
"""
from typing import Optional, Protocol


class BlobStore(Protocol):
    """
    Abstract interface for named blob storage.

    Writes always replace the previous content in full; there is no append
    or partial update.
    """

    def read(self, key: str) -> Optional[bytes]:
        """
        Read a blob.

        Args:
            key: Blob name (e.g., "workouts.json")

        Returns:
            Stored bytes, or None if nothing has been written under the key

        Raises:
            PersistenceError: If the blob exists but cannot be read
        """
        ...

    def write(self, key: str, data: bytes) -> None:
        """
        Replace a blob's content.

        Args:
            key: Blob name
            data: Full new content

        Raises:
            PersistenceError: If the content could not be stored
        """
        ...

    def exists(self, key: str) -> bool:
        """
        Check whether a blob has been written under the key.

        Args:
            key: Blob name

        Returns:
            True if a blob exists
        """
        ...

"""
File System Blob Store Implementation.

This module implements the BlobStore protocol on top of a private directory
in local storage. Each key maps to one file directly under the root.
"""
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Optional, Union
import logging

from application.exceptions import PersistenceError
from application.ports.blob_store import BlobStore

logger = logging.getLogger(__name__)


def _validate_key(key: str) -> str:
    """Keys are plain file names; reject anything that could escape the root."""
    if not key or key in (".", "..") or "/" in key or "\\" in key:
        raise ValueError(f"Invalid blob key: {key!r}")
    return key


class FileBlobStore(BlobStore):
    """
    File-backed implementation of BlobStore.

    Writes are atomic: content goes to a temporary file in the same
    directory which then replaces the target, so a crash mid-write leaves
    the previous document intact.
    """

    def __init__(self, root: Union[str, Path]):
        """
        Initialize with the storage directory.

        The directory is created lazily on first write.

        Args:
            root: Directory holding the blobs
        """
        self._root = Path(root).expanduser()

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, key: str) -> Path:
        """Resolve the file backing a key."""
        return self._root / _validate_key(key)

    def read(self, key: str) -> Optional[bytes]:
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise PersistenceError(f"Could not read {path}: {e}") from e

    def write(self, key: str, data: bytes) -> None:
        path = self.path_for(key)
        temp_path: Optional[Path] = None
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                "wb", dir=self._root, prefix=f".{key}.", suffix=".tmp", delete=False
            ) as tmp:
                temp_path = Path(tmp.name)
                tmp.write(data)
            temp_path.replace(path)
        except OSError as e:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise PersistenceError(f"Could not write {path}: {e}") from e
        logger.debug("Wrote %d bytes to %s", len(data), path)

    def exists(self, key: str) -> bool:
        return self.path_for(key).is_file()

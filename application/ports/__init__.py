"""
Storage Interfaces (Ports) for the fitness tracker.

This package defines abstract interfaces that decouple the workout store
from storage infrastructure. Implementations are provided in the
infrastructure layer (and as in-memory fakes under tests/fakes).

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the store needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import BlobStore

    class WorkoutStore:
        def __init__(self, blob_store: BlobStore):
            self._blob_store = blob_store
"""

from application.ports.blob_store import BlobStore

__all__ = [
    "BlobStore",
]

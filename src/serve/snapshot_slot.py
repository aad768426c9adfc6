"""Shared post index snapshot reference.

This module holds the single published index that readers query.
The lock guards only the reference itself, never a query.
"""

from __future__ import annotations

import threading

from core.errors import InkwellNotReadyError
from core.logging_config import get_logger
from store.post_index import PostIndex

_LOGGER = get_logger(__name__)


class SnapshotSlot:
    """Atomically swappable holder of the current sealed index."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._index: PostIndex | None = None
        self._generation = 0

    def current(self) -> PostIndex:
        """Return the published snapshot.

        Callers keep the returned index for the whole query so a
        concurrent swap never changes what they observe.

        Raises:
            InkwellNotReadyError: If nothing has been published yet.
        """
        with self._lock:
            index = self._index
        if index is None:
            raise InkwellNotReadyError(
                "No post index has been published yet. Wait for the initial ingest to finish."
            )
        return index

    def publish(self, index: PostIndex) -> int:
        """Seal and install a new snapshot, replacing the previous one.

        Args:
            index: Fully built index.

        Returns:
            Generation number of the published snapshot.
        """
        index.seal()
        with self._lock:
            self._index = index
            self._generation += 1
            generation = self._generation
        _LOGGER.info("snapshot_published", generation=generation, post_count=len(index))
        return generation

    @property
    def is_ready(self) -> bool:
        with self._lock:
            return self._index is not None

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

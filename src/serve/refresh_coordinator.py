"""Periodic post index refresh.

This module owns the only write path to the shared snapshot slot.
Each cycle fetches the source, builds a brand-new index, and swaps
it in; failures keep serving the last good snapshot.
"""

from __future__ import annotations

import tempfile
import threading
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Callable

from core.config import InkwellConfig
from core.constants import FETCH_DIR_PREFIX
from core.errors import InkwellError, InkwellFetchError
from core.logging_config import get_logger
from ingest.pipeline import ingest_directory
from ingest.remote_source import fetch_source
from serve.refresh_schedule import seconds_until_next_run
from serve.snapshot_slot import SnapshotSlot
from store.post_index import PostIndex

_LOGGER = get_logger(__name__)

SourceFetcher = Callable[[str, Path, InkwellConfig], Path]
IndexBuilder = Callable[[Path, InkwellConfig], PostIndex]


class RefreshState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    BUILDING = "building"
    SWAPPING = "swapping"


class RefreshCoordinator:
    """Single-writer refresh loop for a snapshot slot.

    Refreshes run at process start and then daily at ``config.refresh_at``
    local time on a daemon thread. At most one refresh is in flight.
    """

    def __init__(
        self,
        config: InkwellConfig,
        slot: SnapshotSlot | None = None,
        fetcher: SourceFetcher = fetch_source,
        builder: IndexBuilder = ingest_directory,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._config = config
        self._slot = slot or SnapshotSlot()
        self._fetcher = fetcher
        self._builder = builder
        self._clock = clock or datetime.now
        self._in_flight = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._state = RefreshState.IDLE

    @property
    def slot(self) -> SnapshotSlot:
        return self._slot

    @property
    def state(self) -> RefreshState:
        return self._state

    def bootstrap(self) -> int:
        """Run the initial ingestion; the service is not ready until it succeeds.

        Returns:
            Generation of the published snapshot.

        Raises:
            InkwellError: If fetching or building fails, or a refresh is in flight.
        """
        if not self._in_flight.acquire(blocking=False):
            raise InkwellError("A refresh is already in progress; bootstrap must run first.")
        try:
            return self._run_cycle()
        finally:
            self._in_flight.release()

    def refresh_once(self) -> bool:
        """Run one refresh cycle, keeping the current snapshot on failure.

        Returns:
            True if a new snapshot was published.
        """
        if not self._in_flight.acquire(blocking=False):
            _LOGGER.warning("refresh_skipped", reason="refresh already in progress")
            return False
        try:
            self._run_cycle()
        except InkwellFetchError as error:
            _LOGGER.error(
                "refresh_fetch_failed", source_uri=self._config.source_uri, error=str(error)
            )
            return False
        except InkwellError as error:
            _LOGGER.error(
                "refresh_build_failed", source_uri=self._config.source_uri, error=str(error)
            )
            return False
        finally:
            self._in_flight.release()
        return True

    def start(self) -> None:
        """Bootstrap the slot and start the scheduled refresh thread.

        Raises:
            InkwellError: If the initial ingestion fails.
        """
        if self._thread is not None:
            return
        self.bootstrap()
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run_loop, name="inkwell-refresh", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        """Signal the refresh thread to exit and wait for it."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def wait(self) -> None:
        """Block until ``stop`` is called from another thread."""
        self._stop.wait()

    def _run_loop(self) -> None:
        while True:
            delay = seconds_until_next_run(self._clock(), self._config.refresh_at)
            _LOGGER.info("refresh_scheduled", seconds_until_run=round(delay, 1))
            if self._stop.wait(delay):
                return
            try:
                self.refresh_once()
            except Exception:
                # Keep the loop alive; the next tick retries.
                _LOGGER.exception("refresh_crashed", source_uri=self._config.source_uri)

    def _run_cycle(self) -> int:
        try:
            with tempfile.TemporaryDirectory(prefix=FETCH_DIR_PREFIX) as work_dir:
                self._state = RefreshState.FETCHING
                source_root = self._fetcher(
                    self._config.source_uri, Path(work_dir) / "source", self._config
                )
                self._state = RefreshState.BUILDING
                index = self._builder(source_root, self._config)
            self._state = RefreshState.SWAPPING
            return self._slot.publish(index)
        finally:
            self._state = RefreshState.IDLE

"""Python SDK for post index operations.

This module exposes high-level APIs for loading a local source tree
and running the refresh loop against a remote source.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from core.config import InkwellConfig
from core.types import Navigation
from ingest.pipeline import ingest_directory
from serve.refresh_coordinator import RefreshCoordinator
from serve.snapshot_slot import SnapshotSlot
from store.navigation import build_navigation
from store.post_index import PostIndex


class InkwellClient:
    """Primary SDK entry point."""

    def __init__(self, config: InkwellConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or InkwellConfig.from_env()

    @property
    def config(self) -> InkwellConfig:
        return self._config

    def load(self, source_dir: str, copy_assets: bool = False) -> PostIndex:
        """Build a sealed index from a local source tree.

        Args:
            source_dir: Directory containing ``posts/`` and ``resources/``.
            copy_assets: Whether to copy resources into the static directory.

        Returns:
            Sealed post index.

        Raises:
            InkwellIOError: If the tree cannot be read.
            InkwellParseError: If a post is malformed.
        """
        return ingest_directory(Path(source_dir).expanduser(), self._config, copy_assets)

    def navigation(self, source_dir: str) -> Navigation:
        """Build navigation summaries for a local source tree."""
        return build_navigation(self.load(source_dir))

    def coordinator(self, source_uri: str | None = None) -> RefreshCoordinator:
        """Create a refresh coordinator with its own snapshot slot.

        Args:
            source_uri: Optional override of the configured source.

        Returns:
            Coordinator that has not been started yet.
        """
        config = self._config
        if source_uri:
            config = replace(config, source_uri=source_uri)
        return RefreshCoordinator(config, SnapshotSlot())

    def with_static_dir(self, static_dir: str) -> "InkwellClient":
        """Clone the client with a different static asset directory.

        Args:
            static_dir: New static asset directory.

        Returns:
            New SDK client instance.
        """
        updated_config = replace(self._config, static_dir=Path(static_dir).expanduser())
        return InkwellClient(updated_config)

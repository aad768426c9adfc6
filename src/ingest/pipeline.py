"""Ingest orchestration for one local source tree.

This module coordinates resource materialization, post loading,
and index construction into a sealed snapshot ready to publish.
"""

from __future__ import annotations

from pathlib import Path

from core.config import InkwellConfig
from core.logging_config import get_logger
from ingest.resource_sync import copy_resources
from ingest.source_loader import SourceLayout, load_posts
from store.post_index import PostIndex, build_post_index

_LOGGER = get_logger(__name__)


def ingest_directory(root: Path, config: InkwellConfig, copy_assets: bool = True) -> PostIndex:
    """Build a sealed post index from a local source tree.

    Args:
        root: Source root containing ``posts/`` and optionally ``resources/``.
        config: Runtime configuration.
        copy_assets: Whether to copy resources into the static directory.

    Returns:
        Sealed post index.

    Raises:
        InkwellIOError: If the tree or a file cannot be read, or copying fails.
        InkwellParseError: If any post is malformed.
    """
    layout = SourceLayout.from_root(root)
    if copy_assets:
        _materialize_resources(layout, config)
    posts = load_posts(layout, config.static_prefix)
    index = build_post_index(posts)
    _LOGGER.info(
        "ingest_completed",
        source_root=str(root),
        input_count=len(posts),
        post_count=len(index),
        tag_count=len(index.get_all_tags_with_count()),
    )
    return index


def _materialize_resources(layout: SourceLayout, config: InkwellConfig) -> None:
    if not layout.has_resources:
        _LOGGER.warning("resources_missing", resources_dir=str(layout.resources))
        return
    copy_resources(layout.resources, config.static_dir)

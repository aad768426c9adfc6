"""Public SDK surface for Inkwell.

This module provides a stable import path for library users.
It re-exports the client, the index, and the refresh primitives.
"""

from __future__ import annotations

from core.config import InkwellConfig
from core.errors import (
    InkwellError,
    InkwellFetchError,
    InkwellIOError,
    InkwellNotFoundError,
    InkwellNotReadyError,
    InkwellParseError,
    InkwellStoreError,
)
from core.types import Navigation, Post, PostHeader, Series
from ingest.document_parser import parse_document, parse_post
from ingest.pipeline import ingest_directory
from serve.refresh_coordinator import RefreshCoordinator, RefreshState
from serve.snapshot_slot import SnapshotSlot
from store.blog_sdk import InkwellClient
from store.navigation import build_navigation
from store.post_index import PostIndex, build_post_index
from transforms.markdown_render import transform_body

__all__ = [
    "InkwellClient",
    "InkwellConfig",
    "InkwellError",
    "InkwellFetchError",
    "InkwellIOError",
    "InkwellNotFoundError",
    "InkwellNotReadyError",
    "InkwellParseError",
    "InkwellStoreError",
    "Navigation",
    "Post",
    "PostHeader",
    "PostIndex",
    "RefreshCoordinator",
    "RefreshState",
    "Series",
    "SnapshotSlot",
    "build_navigation",
    "build_post_index",
    "ingest_directory",
    "parse_document",
    "parse_post",
    "transform_body",
]

"""Unit tests for local source ingestion."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import InkwellConfig
from core.errors import InkwellIOError, InkwellStoreError
from ingest.pipeline import ingest_directory
from tests.fixture_paths import fixture_path
from tests.post_builders import dated_front_matter, write_post


def test_ingest_directory_builds_sealed_index(config: InkwellConfig) -> None:
    """Ingest returns a sealed index over every fixture post."""
    index = ingest_directory(fixture_path("blog_valid"), config)

    assert len(index) == 3 and index.sealed


def test_ingest_directory_copies_resources(config: InkwellConfig) -> None:
    """Resources are materialized into the configured static directory."""
    ingest_directory(fixture_path("blog_valid"), config)

    assert (config.static_dir / "img" / "diagram.svg").is_file()


def test_ingest_directory_can_skip_resource_copy(config: InkwellConfig) -> None:
    """Resource copying is optional for read-only inspection."""
    ingest_directory(fixture_path("blog_valid"), config, copy_assets=False)

    assert not config.static_dir.exists()


def test_ingest_directory_tolerates_missing_resources(
    config: InkwellConfig, tmp_path: Path
) -> None:
    """A tree without resources still loads its posts."""
    source = tmp_path / "source"
    write_post(source / "posts", "a.md", dated_front_matter("alpha", "2024-05-01"), "A")

    index = ingest_directory(source, config)

    assert index.slugs() == ["alpha"]


def test_ingest_directory_rejects_insert_after_build(config: InkwellConfig, make_post) -> None:
    """Built indexes are immutable."""
    index = ingest_directory(fixture_path("blog_valid"), config, copy_assets=False)

    with pytest.raises(InkwellStoreError):
        index.insert(make_post("late", index.get_by_slug("borrowing").date))


def test_ingest_directory_raises_for_missing_root(config: InkwellConfig, tmp_path: Path) -> None:
    """A missing root aborts ingestion."""
    with pytest.raises(InkwellIOError):
        ingest_directory(tmp_path / "missing", config)

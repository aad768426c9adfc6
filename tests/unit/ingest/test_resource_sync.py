"""Unit tests for resource materialization."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import InkwellIOError
from ingest.resource_sync import copy_resources
from tests.fixture_paths import fixture_path


def test_copy_resources_preserves_structure(tmp_path: Path) -> None:
    """Nested resource files keep their relative paths."""
    static_dir = tmp_path / "static" / "misc"

    copied = copy_resources(fixture_path("blog_valid/resources"), static_dir)

    assert copied == 2
    assert (static_dir / "img" / "diagram.svg").is_file()
    assert (static_dir / "notes.txt").read_text(encoding="utf-8") == "Ownership notes.\n"


def test_copy_resources_overwrites_existing_files(tmp_path: Path) -> None:
    """A refresh replaces stale copies of a resource."""
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    (static_dir / "notes.txt").write_text("stale", encoding="utf-8")

    copy_resources(fixture_path("blog_valid/resources"), static_dir)

    assert (static_dir / "notes.txt").read_text(encoding="utf-8") == "Ownership notes.\n"


def test_copy_resources_raises_when_target_is_a_file(tmp_path: Path) -> None:
    """Copy failures surface as IO errors."""
    blocked_target = tmp_path / "static"
    blocked_target.write_text("not a dir", encoding="utf-8")

    with pytest.raises(InkwellIOError):
        copy_resources(fixture_path("blog_valid/resources"), blocked_target)

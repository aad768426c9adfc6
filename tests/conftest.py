"""Shared pytest fixtures for Inkwell tests."""

from __future__ import annotations

import sys
from dataclasses import replace
from datetime import date
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
for import_root in (SRC_PATH, PROJECT_ROOT):
    if str(import_root) not in sys.path:
        sys.path.insert(0, str(import_root))

from core.config import InkwellConfig  # noqa: E402
from core.types import Post, PostHeader, Series  # noqa: E402


@pytest.fixture
def config(tmp_path: Path) -> InkwellConfig:
    """Config whose static directory lives under the test temp dir."""
    return replace(InkwellConfig.from_env(), static_dir=tmp_path / "static" / "misc")


@pytest.fixture
def make_post():
    """Factory for post records with sensible defaults."""

    def _make_post(
        slug: str,
        day: date,
        tags: tuple[str, ...] = (),
        series: Series | None = None,
        title: str | None = None,
    ) -> Post:
        header = PostHeader(
            title=title or slug.replace("-", " ").title(),
            slug=slug,
            tags=tags,
            date=day,
            series=series,
        )
        return Post(header=header, body=f"<p>{slug}</p>\n")

    return _make_post


"""Helpers that write post source trees for tests."""

from __future__ import annotations

from pathlib import Path


def write_post(posts_dir: Path, file_name: str, front_matter: str, body: str) -> Path:
    """Write one post document with a front-matter block.

    Args:
        posts_dir: Target posts directory, created if missing.
        file_name: Post file name.
        front_matter: YAML header text without delimiters.
        body: Markdown body.

    Returns:
        Written file path.
    """
    posts_dir.mkdir(parents=True, exist_ok=True)
    path = posts_dir / file_name
    path.write_text(f"---\n{front_matter.strip()}\n---\n{body}", encoding="utf-8")
    return path


def dated_front_matter(slug: str, day: str, tags: str = "[]") -> str:
    """Build a minimal valid header for a slug and ISO date."""
    return f"title: {slug}\nslug: {slug}\ntags: {tags}\ndate: {day}\n"

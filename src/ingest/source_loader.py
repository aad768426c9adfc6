"""Post source tree loading.

This module validates a source directory layout and turns every post
file under ``posts/`` into a parsed, rendered post record.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.constants import POSTS_DIR_NAME, RESOURCES_DIR_NAME
from core.errors import InkwellIOError
from core.logging_config import get_logger
from core.types import Post
from ingest.document_parser import parse_post

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class SourceLayout:
    """Resolved directories of one post source tree.

    Attributes:
        root: Source root directory.
        posts: Directory holding post documents.
        resources: Directory holding static resources.
    """

    root: Path
    posts: Path
    resources: Path

    @classmethod
    def from_root(cls, root: Path) -> "SourceLayout":
        """Validate a source root and resolve its subdirectories.

        Args:
            root: Candidate source root.

        Returns:
            Resolved layout.

        Raises:
            InkwellIOError: If root is not a directory or ``posts/`` is missing.
        """
        if not root.is_dir():
            raise InkwellIOError(str(root), "not a directory")
        posts = root / POSTS_DIR_NAME
        if not posts.is_dir():
            raise InkwellIOError(
                str(posts),
                f"missing '{POSTS_DIR_NAME}' directory; the source root must contain one",
            )
        return cls(root=root, posts=posts, resources=root / RESOURCES_DIR_NAME)

    @property
    def has_resources(self) -> bool:
        return self.resources.is_dir()


def load_posts(layout: SourceLayout, static_prefix: str) -> list[Post]:
    """Parse every post file directly under the layout's posts directory.

    Args:
        layout: Validated source layout.
        static_prefix: Static asset URL prefix for relative links.

    Returns:
        Posts ordered by file name.

    Raises:
        InkwellIOError: If the directory or a file cannot be read.
        InkwellParseError: If any post is malformed.
    """
    posts = [
        parse_post(_read_post_file(path), str(path), static_prefix)
        for path in list_post_files(layout.posts)
    ]
    _LOGGER.info("posts_loaded", posts_dir=str(layout.posts), post_count=len(posts))
    return posts


def list_post_files(posts_dir: Path) -> list[Path]:
    """List regular, non-hidden files in a posts directory without recursion.

    Args:
        posts_dir: Directory to enumerate.

    Returns:
        File paths sorted by name.

    Raises:
        InkwellIOError: If the directory cannot be listed.
    """
    try:
        entries = sorted(posts_dir.iterdir())
    except OSError as error:
        raise InkwellIOError(str(posts_dir), str(error)) from error
    return [path for path in entries if path.is_file() and not path.name.startswith(".")]


def _read_post_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise InkwellIOError(str(path), str(error)) from error

"""In-memory multi-index post store.

This module holds the authoritative slug mapping plus tag, series,
and year/month indexes built from accepted posts only. A store is
populated by sequential inserts, then sealed before it is published.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from core.errors import InkwellNotFoundError, InkwellStoreError
from core.logging_config import get_logger
from core.types import Post

_LOGGER = get_logger(__name__)


class PostIndex:
    """Multi-index over one immutable collection of posts.

    Secondary indexes map a key to an ordered, duplicate-free list of
    slugs, and every indexed slug exists in the primary mapping.
    """

    def __init__(self) -> None:
        self._by_slug: dict[str, Post] = {}
        self._by_tag: dict[str, list[str]] = {}
        self._by_series: dict[str, list[str]] = {}
        self._by_year_month: dict[tuple[int, int], list[str]] = {}
        self._sealed = False

    def insert(self, post: Post) -> None:
        """Add a post to the primary mapping and every secondary index.

        The first post inserted for a slug wins; later posts with the same
        slug are ignored.

        Args:
            post: Parsed post record.

        Raises:
            InkwellStoreError: If the index has been sealed.
        """
        if self._sealed:
            raise InkwellStoreError(
                f"Cannot insert post '{post.slug}' into a sealed index. "
                "Build a new index for each ingestion cycle."
            )
        existing = self._by_slug.get(post.slug)
        if existing is None:
            self._by_slug[post.slug] = post
        elif existing != post:
            _LOGGER.warning("duplicate_slug_ignored", slug=post.slug, title=post.title)
            return
        for tag in post.tags:
            _append_unique(self._by_tag, tag, post.slug)
        if post.series is not None:
            _append_unique(self._by_series, post.series.title, post.slug)
        _append_unique(self._by_year_month, post.year_month, post.slug)

    def seal(self) -> None:
        """Freeze the index against further inserts."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def __len__(self) -> int:
        return len(self._by_slug)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def slugs(self) -> list[str]:
        """Return every slug in insertion order."""
        return list(self._by_slug)

    def get_by_slug(self, slug: str) -> Post:
        """Return the post for an exact slug.

        Raises:
            InkwellNotFoundError: If no post has the slug.
        """
        post = self._by_slug.get(slug)
        if post is None:
            raise InkwellNotFoundError(slug)
        return post

    def get_by_tag(self, tag: str) -> list[Post]:
        """Return posts carrying a tag in index-append order."""
        return self._resolve(self._by_tag.get(tag, ()))

    def get_by_series(self, series_title: str) -> list[Post]:
        """Return posts of a series in index-append order."""
        return self._resolve(self._by_series.get(series_title, ()))

    def get_by_year_month(self, year: int, month: int | None = None) -> list[Post]:
        """Return posts of a year, or of one month when given.

        Args:
            year: Calendar year.
            month: Optional one-based month.

        Returns:
            Matching posts, newest first with slug order on equal dates.
        """
        slugs = [
            slug
            for (bucket_year, bucket_month), bucket_slugs in self._by_year_month.items()
            if bucket_year == year and (month is None or bucket_month == month)
            for slug in bucket_slugs
        ]
        return _newest_first(self._resolve(slugs))

    def get_last_n(self, n: int) -> list[Post]:
        """Return up to ``n`` posts, newest first with slug order on equal dates."""
        if n <= 0:
            return []
        return _newest_first(self._by_slug.values())[:n]

    def get_by_keyword(self, keyword: str) -> list[Post]:
        """Return posts whose title or a tag contains the keyword.

        Matching is case-insensitive and unranked; results are newest first.
        """
        needle = keyword.strip().casefold()
        if not needle:
            return []
        matches = [
            post
            for post in self._by_slug.values()
            if needle in post.title.casefold()
            or any(needle in tag.casefold() for tag in post.tags)
        ]
        return _newest_first(matches)

    def get_all_tags_with_count(self) -> list[tuple[str, int]]:
        """Return each distinct tag with its post count, most used first."""
        counts = [(tag, len(slugs)) for tag, slugs in self._by_tag.items()]
        return sorted(counts, key=lambda item: (-item[1], item[0]))

    def get_all_dates_with_count(self) -> list[tuple[tuple[int, int], int]]:
        """Return each ``(year, month)`` bucket with its post count, newest first."""
        counts = Counter(post.year_month for post in self._by_slug.values())
        return sorted(counts.items(), key=lambda item: item[0], reverse=True)

    def _resolve(self, slugs: Iterable[str]) -> list[Post]:
        return [self._by_slug[slug] for slug in slugs]


def build_post_index(posts: Iterable[Post]) -> PostIndex:
    """Build and seal a fresh index from posts.

    Args:
        posts: Parsed posts in load order.

    Returns:
        Sealed post index.
    """
    index = PostIndex()
    for post in posts:
        index.insert(post)
    index.seal()
    return index


def _append_unique(index: dict, key: object, slug: str) -> None:
    slugs = index.setdefault(key, [])
    if slug not in slugs:
        slugs.append(slug)


def _newest_first(posts: Iterable[Post]) -> list[Post]:
    by_slug = sorted(posts, key=lambda post: post.slug)
    return sorted(by_slug, key=lambda post: post.date, reverse=True)

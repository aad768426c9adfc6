"""Shared typed models.

This module defines immutable data models used by ingest, store,
navigation, and refresh layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Series:
    """Series membership declared in a post header.

    Attributes:
        title: Shared series title, used as the series index key.
        ep: Episode number inside the series.
    """

    title: str
    ep: int


@dataclass(frozen=True)
class PostHeader:
    """Decoded front-matter of one post.

    Attributes:
        title: Display title.
        slug: Unique URL-safe identifier.
        tags: Ordered tags as written in the source.
        date: Publication date.
        series: Optional series membership.
    """

    title: str
    slug: str
    tags: tuple[str, ...]
    date: date
    series: Series | None = None


@dataclass(frozen=True)
class Post:
    """Canonical post record stored in the index.

    Attributes:
        header: Decoded front-matter.
        body: Rendered display content derived from the raw body.
    """

    header: PostHeader
    body: str

    @property
    def slug(self) -> str:
        return self.header.slug

    @property
    def title(self) -> str:
        return self.header.title

    @property
    def tags(self) -> tuple[str, ...]:
        return self.header.tags

    @property
    def date(self) -> date:
        return self.header.date

    @property
    def series(self) -> Series | None:
        return self.header.series

    @property
    def year_month(self) -> tuple[int, int]:
        """Archive bucket key of the post."""
        return self.header.date.year, self.header.date.month


@dataclass(frozen=True)
class MonthArchive:
    """One month entry in the date navigation.

    Attributes:
        name: English month name.
        month: One-based month number.
        count: Number of posts in the month.
    """

    name: str
    month: int
    count: int


@dataclass(frozen=True)
class YearArchive:
    """One year of the date navigation with its months ascending."""

    year: int
    months: tuple[MonthArchive, ...]


@dataclass(frozen=True)
class Navigation:
    """Sidebar summary derived from one index snapshot.

    Attributes:
        tags_with_count: Tags with post counts, most used first.
        dates_by_year: Archive years, newest first.
    """

    tags_with_count: tuple[tuple[str, int], ...]
    dates_by_year: tuple[YearArchive, ...]

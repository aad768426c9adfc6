"""Navigation summaries for the serving layer.

This module derives tag and archive sidebars from one index snapshot.
"""

from __future__ import annotations

from core.constants import MONTH_NAMES
from core.types import MonthArchive, Navigation, YearArchive
from store.post_index import PostIndex


def build_navigation(index: PostIndex) -> Navigation:
    """Build tag and date navigation for a snapshot.

    Args:
        index: Post index snapshot.

    Returns:
        Tags by descending count and archive years newest first.
    """
    months_by_year: dict[int, list[MonthArchive]] = {}
    for (year, month), count in index.get_all_dates_with_count():
        months_by_year.setdefault(year, []).append(
            MonthArchive(name=month_name(month), month=month, count=count)
        )
    dates_by_year = tuple(
        YearArchive(
            year=year,
            months=tuple(sorted(months_by_year[year], key=lambda item: item.month)),
        )
        for year in sorted(months_by_year, reverse=True)
    )
    return Navigation(
        tags_with_count=tuple(index.get_all_tags_with_count()),
        dates_by_year=dates_by_year,
    )


def month_name(month: int) -> str:
    """Return the English month name, or ``Unknown`` outside 1..12."""
    if 1 <= month <= len(MONTH_NAMES):
        return MONTH_NAMES[month - 1]
    return "Unknown"

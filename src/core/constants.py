"""Core constants used across Inkwell modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_SOURCE_URI = "https://github.com/softwarecowboy/blog"
DEFAULT_STATIC_DIR = Path("static/misc")
DEFAULT_STATIC_PREFIX = "/static/misc/"
DEFAULT_REFRESH_AT = "00:00"
POSTS_DIR_NAME = "posts"
RESOURCES_DIR_NAME = "resources"
FRONT_MATTER_DELIMITER = "---"
FRONT_MATTER_PART_COUNT = 3
MAX_SERIES_EPISODE = 255
DEFAULT_LATEST_POST_COUNT = 10
FETCH_DIR_PREFIX = "inkwell-source-"
GIT_CLONE_DEPTH = 1
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

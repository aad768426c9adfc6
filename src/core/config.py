"""Runtime configuration model for Inkwell.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
import os
from pathlib import Path

from core.constants import (
    DEFAULT_REFRESH_AT,
    DEFAULT_SOURCE_URI,
    DEFAULT_STATIC_DIR,
    DEFAULT_STATIC_PREFIX,
)
from core.errors import InkwellConfigError


@dataclass(frozen=True)
class InkwellConfig:
    """Validated runtime configuration.

    Attributes:
        source_uri: Remote post source (git URL, s3:// prefix, or local dir).
        static_dir: Directory that receives copied resource files.
        static_prefix: URL prefix relative asset links are rewritten to.
        refresh_at: Local time of day for the scheduled refresh.
        s3_region: Optional default AWS region for S3 sources.
        s3_profile: Optional AWS profile for boto3 session initialization.
    """

    source_uri: str
    static_dir: Path
    static_prefix: str
    refresh_at: time
    s3_region: str | None
    s3_profile: str | None

    @classmethod
    def from_env(cls) -> "InkwellConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            InkwellConfigError: If environment values are invalid.
        """
        source_uri = os.getenv("INKWELL_SOURCE_URI", DEFAULT_SOURCE_URI).strip()
        if not source_uri:
            raise InkwellConfigError(
                "Invalid INKWELL_SOURCE_URI value: expected a non-empty source location. "
                "Set it to a git URL, an s3:// prefix, or a local directory."
            )
        static_dir_value = os.getenv("INKWELL_STATIC_DIR", str(DEFAULT_STATIC_DIR))
        static_prefix = _parse_static_prefix(
            os.getenv("INKWELL_STATIC_PREFIX", DEFAULT_STATIC_PREFIX)
        )
        refresh_at = parse_refresh_at(os.getenv("INKWELL_REFRESH_AT", DEFAULT_REFRESH_AT))
        return cls(
            source_uri=source_uri,
            static_dir=Path(static_dir_value).expanduser(),
            static_prefix=static_prefix,
            refresh_at=refresh_at,
            s3_region=os.getenv("INKWELL_S3_REGION"),
            s3_profile=os.getenv("INKWELL_S3_PROFILE"),
        )


def parse_refresh_at(raw_value: str) -> time:
    """Parse an ``HH:MM`` refresh time.

    Args:
        raw_value: Raw string from environment or CLI.

    Returns:
        Parsed local time of day.

    Raises:
        InkwellConfigError: If value is not a valid ``HH:MM`` time.
    """
    try:
        hour_text, minute_text = raw_value.strip().split(":")
        return time(hour=int(hour_text), minute=int(minute_text))
    except ValueError as error:
        raise InkwellConfigError(
            "Invalid INKWELL_REFRESH_AT value: "
            f"expected HH:MM, got '{raw_value}'. "
            "Set INKWELL_REFRESH_AT to a 24-hour time such as 00:00."
        ) from error


def _parse_static_prefix(raw_value: str) -> str:
    """Normalize the static asset URL prefix.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Prefix with leading and trailing slashes.

    Raises:
        InkwellConfigError: If value is blank.
    """
    stripped = raw_value.strip().strip("/")
    if not stripped:
        raise InkwellConfigError(
            "Invalid INKWELL_STATIC_PREFIX value: expected a URL path such as /static/misc/."
        )
    return f"/{stripped}/"

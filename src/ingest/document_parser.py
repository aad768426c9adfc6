"""Post document parsing.

This module splits a raw post into front-matter and body and decodes
the YAML header into a typed record. It never touches the filesystem.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Mapping, cast

import yaml

from core.constants import (
    FRONT_MATTER_DELIMITER,
    FRONT_MATTER_PART_COUNT,
    MAX_SERIES_EPISODE,
)
from core.errors import InkwellParseError
from core.types import Post, PostHeader, Series
from transforms.markdown_render import transform_body


def parse_document(content: str, location: str) -> tuple[PostHeader, str]:
    """Split and decode one raw post.

    Args:
        content: Full document text.
        location: Path or label used in error messages.

    Returns:
        Pair of decoded header and raw markdown body.

    Raises:
        InkwellParseError: If sections are missing or the header is invalid.
    """
    parts = content.split(FRONT_MATTER_DELIMITER, FRONT_MATTER_PART_COUNT - 1)
    if len(parts) < 2:
        raise InkwellParseError(
            location,
            "Missing YAML frontmatter (expected content between --- markers)",
        )
    if len(parts) < FRONT_MATTER_PART_COUNT:
        raise InkwellParseError(location, "Missing markdown content after frontmatter")
    header = _decode_header(parts[1], location)
    return header, parts[2]


def parse_post(content: str, location: str, static_prefix: str) -> Post:
    """Parse a raw post and render its body.

    Args:
        content: Full document text.
        location: Path or label used in error messages.
        static_prefix: Static asset URL prefix for relative links.

    Returns:
        Immutable post record.

    Raises:
        InkwellParseError: If the document is malformed.
    """
    header, raw_body = parse_document(content, location)
    return Post(header=header, body=transform_body(raw_body, static_prefix))


def _decode_header(front_matter: str, location: str) -> PostHeader:
    try:
        payload = cast(object, yaml.safe_load(front_matter))
    except (yaml.YAMLError, ValueError) as error:
        # Out-of-range unquoted dates fail inside the YAML constructor.
        raise InkwellParseError(location, f"Failed to parse YAML: {error}") from error
    if not isinstance(payload, Mapping):
        raise InkwellParseError(
            location, "Frontmatter must be a YAML mapping with title, slug, tags and date"
        )
    return PostHeader(
        title=_required_string(payload, "title", location),
        slug=_required_string(payload, "slug", location),
        tags=_parse_tags(payload, location),
        date=_parse_date(payload.get("date"), location),
        series=_parse_series(payload.get("series"), location),
    )


def _required_string(payload: Mapping[str, object], key: str, location: str) -> str:
    value = payload.get(key)
    if value is None:
        raise InkwellParseError(location, f"missing field `{key}`")
    if not isinstance(value, str) or not value.strip():
        raise InkwellParseError(location, f"field `{key}` must be a non-empty string")
    return value.strip()


def _parse_tags(payload: Mapping[str, object], location: str) -> tuple[str, ...]:
    if "tags" not in payload:
        raise InkwellParseError(location, "missing field `tags`")
    value = payload["tags"]
    if not isinstance(value, list):
        raise InkwellParseError(location, "field `tags` must be a list of strings")
    tags: list[str] = []
    for tag in value:
        if not isinstance(tag, str):
            raise InkwellParseError(location, "field `tags` must be a list of strings")
        tags.append(tag)
    return tuple(tags)


def _parse_date(value: object, location: str) -> date:
    if value is None:
        raise InkwellParseError(location, "missing field `date`")
    # datetime subclasses date; timestamps with a time part are rejected.
    if isinstance(value, datetime):
        raise InkwellParseError(location, "field `date` must be a calendar date (YYYY-MM-DD)")
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as error:
            raise InkwellParseError(
                location, f"field `date` is not a valid YYYY-MM-DD date: '{value}'"
            ) from error
    raise InkwellParseError(location, "field `date` must be a calendar date (YYYY-MM-DD)")


def _parse_series(value: object, location: str) -> Series | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise InkwellParseError(location, "field `series` must be a mapping with title and ep")
    title = _required_string(value, "title", location)
    episode = value.get("ep")
    if isinstance(episode, bool) or not isinstance(episode, int):
        raise InkwellParseError(location, "field `series.ep` must be an integer")
    if not 0 <= episode <= MAX_SERIES_EPISODE:
        raise InkwellParseError(
            location, f"field `series.ep` must be between 0 and {MAX_SERIES_EPISODE}"
        )
    return Series(title=title, ep=episode)

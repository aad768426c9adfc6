"""Relative asset link rewriting transform.

This module points relative markdown link and image targets at the
static asset namespace so rendered posts resolve copied resources.
"""

from __future__ import annotations

import re

_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")


def rewrite_relative_links(body: str, static_prefix: str) -> str:
    """Rewrite relative ``[label](target)`` targets onto a static prefix.

    Args:
        body: Raw markdown body.
        static_prefix: URL prefix ending with a slash, e.g. ``/static/misc/``.

    Returns:
        Markdown with every relative target prefixed and absolute targets kept.
    """

    def _replace(match: re.Match[str]) -> str:
        label, target = match.group(1), match.group(2)
        if is_absolute_target(target):
            return match.group(0)
        return f"[{label}]({static_prefix}{target})"

    return _LINK_PATTERN.sub(_replace, body)


def is_absolute_target(target: str) -> bool:
    """Return whether a link target starts with a URI scheme or a slash."""
    return target.startswith("/") or _SCHEME_PATTERN.match(target) is not None

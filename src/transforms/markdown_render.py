"""Markdown to HTML rendering transform.

This module renders post bodies into display HTML and composes the
full body transform applied before a post is stored.
"""

from __future__ import annotations

from functools import lru_cache

from markdown_it import MarkdownIt
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from transforms.asset_links import rewrite_relative_links


def render_markdown(text: str) -> str:
    """Render markdown into HTML.

    Args:
        text: Markdown source.

    Returns:
        HTML fragment with tables, strikethrough, footnotes and task lists.
    """
    return _markdown_parser().render(text)


def transform_body(raw_body: str, static_prefix: str) -> str:
    """Apply link rewriting then rendering to a raw post body.

    Args:
        raw_body: Markdown body following the front-matter.
        static_prefix: Static asset URL prefix for relative targets.

    Returns:
        Final display HTML.
    """
    return render_markdown(rewrite_relative_links(raw_body, static_prefix))


@lru_cache(maxsize=1)
def _markdown_parser() -> MarkdownIt:
    # Rendering is read-only after setup, so one shared parser is safe.
    return (
        MarkdownIt("commonmark", {"html": True})
        .enable("table")
        .enable("strikethrough")
        .use(footnote_plugin)
        .use(tasklists_plugin)
    )

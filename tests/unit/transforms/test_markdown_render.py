"""Unit tests for markdown rendering."""

from __future__ import annotations

from transforms.markdown_render import render_markdown, transform_body


def test_render_markdown_produces_html_heading() -> None:
    """Headings render to HTML heading tags."""
    assert render_markdown("# Title") == "<h1>Title</h1>\n"


def test_render_markdown_supports_tables_and_strikethrough() -> None:
    """Table and strikethrough extensions are enabled."""
    html = render_markdown("~~old~~\n\n| a | b |\n| - | - |\n| 1 | 2 |\n")

    assert "<s>old</s>" in html and "<table>" in html


def test_render_markdown_supports_task_lists() -> None:
    """Task list items render with checkboxes."""
    html = render_markdown("- [x] done\n- [ ] todo\n")

    assert 'type="checkbox"' in html


def test_transform_body_rewrites_before_rendering() -> None:
    """Relative images end up under the static prefix in the HTML."""
    html = transform_body("![diagram](img/diagram.svg)", "/static/misc/")

    assert 'src="/static/misc/img/diagram.svg"' in html


def test_transform_body_keeps_absolute_links() -> None:
    """Absolute links survive the full transform."""
    html = transform_body("[site](https://x.example/y.png)", "/static/misc/")

    assert 'href="https://x.example/y.png"' in html

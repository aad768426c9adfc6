"""Unit tests for post document parsing."""

from __future__ import annotations

from datetime import date

import pytest

from core.errors import InkwellParseError
from core.types import Series
from ingest.document_parser import parse_document, parse_post
from transforms.markdown_render import transform_body

VALID_DOCUMENT = """---
title: Example Title
slug: example-title
tags:
  - rust
  - web
date: 2024-01-05
series:
  title: Building a Blog
  ep: 2
---
Body with [img](pic.png).
"""


def test_parse_document_decodes_header_fields() -> None:
    """Every header field should be decoded into typed values."""
    header, _ = parse_document(VALID_DOCUMENT, "example.md")

    assert header.title == "Example Title"
    assert header.slug == "example-title"
    assert header.tags == ("rust", "web")
    assert header.date == date(2024, 1, 5)
    assert header.series == Series(title="Building a Blog", ep=2)


def test_parse_document_returns_raw_body() -> None:
    """The body is everything after the closing delimiter."""
    _, body = parse_document(VALID_DOCUMENT, "example.md")

    assert body == "\nBody with [img](pic.png).\n"


def test_parse_document_keeps_later_delimiters_in_body() -> None:
    """Horizontal rules after the header stay part of the body."""
    content = "---\ntitle: T\nslug: t\ntags: []\ndate: 2024-02-02\n---\nabove\n\n---\n\nbelow\n"

    _, body = parse_document(content, "rule.md")

    assert "---" in body and body.endswith("below\n")


def test_parse_document_raises_for_missing_tags() -> None:
    """Tags must be present even when the post has none."""
    with pytest.raises(InkwellParseError) as error_info:
        parse_document("---\ntitle: T\nslug: t\ndate: 2024-02-02\n---\nx", "t.md")

    assert error_info.value.reason == "missing field `tags`"


def test_parse_document_accepts_empty_tags_without_series() -> None:
    """An empty tag list is valid and series defaults to none."""
    content = "---\ntitle: T\nslug: t\ntags: []\ndate: 2024-02-02\n---\nx"

    header, _ = parse_document(content, "t.md")

    assert header.tags == () and header.series is None


def test_parse_document_accepts_quoted_iso_date() -> None:
    """A quoted ISO date string is parsed as a calendar date."""
    content = '---\ntitle: T\nslug: t\ntags: []\ndate: "2023-12-31"\n---\nx'

    header, _ = parse_document(content, "t.md")

    assert header.date == date(2023, 12, 31)


def test_parse_document_raises_without_delimiter() -> None:
    """Input with no front-matter delimiter never yields a record."""
    with pytest.raises(InkwellParseError) as error_info:
        parse_document("# Only a body\n", "bare.md")

    assert error_info.value.location == "bare.md"


def test_parse_document_raises_without_body_section() -> None:
    """A header that is never closed leaves no body section."""
    with pytest.raises(InkwellParseError):
        parse_document("---\ntitle: T\nslug: t\ntags: []\ndate: 2024-01-01\n", "open.md")


@pytest.mark.parametrize("missing", ["title", "slug", "tags", "date"])
def test_parse_document_raises_for_missing_required_field(missing: str) -> None:
    """Every header field except series is required."""
    fields = {"title": "T", "slug": "t", "tags": "[]", "date": "2024-01-01"}
    del fields[missing]
    header_text = "\n".join(f"{key}: {value}" for key, value in fields.items())

    with pytest.raises(InkwellParseError) as error_info:
        parse_document(f"---\n{header_text}\n---\nbody", "t.md")

    assert missing in error_info.value.reason


def test_parse_document_raises_for_malformed_date() -> None:
    """Dates must be real YYYY-MM-DD calendar dates."""
    with pytest.raises(InkwellParseError):
        parse_document("---\ntitle: T\nslug: t\ntags: []\ndate: 2024-13-45\n---\nbody", "t.md")


def test_parse_document_raises_for_invalid_yaml() -> None:
    """YAML syntax errors surface as parse errors."""
    with pytest.raises(InkwellParseError):
        parse_document("---\ntitle: [unclosed\n---\nbody", "t.md")


def test_parse_document_raises_for_non_integer_episode() -> None:
    """Series episode numbers must be integers."""
    content = (
        "---\ntitle: T\nslug: t\ntags: []\ndate: 2024-01-01\n"
        "series:\n  title: S\n  ep: two\n---\nx"
    )

    with pytest.raises(InkwellParseError):
        parse_document(content, "t.md")


def test_parse_post_stores_transformed_body() -> None:
    """The stored body equals the transform of the raw body."""
    post = parse_post(VALID_DOCUMENT, "example.md", "/static/misc/")

    assert post.body == transform_body("\nBody with [img](pic.png).\n", "/static/misc/")
    assert 'href="/static/misc/pic.png"' in post.body

"""Inkwell CLI entry points.
This module exposes commands for loading, querying, and refreshing posts.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from core.config import InkwellConfig
from core.constants import DEFAULT_LATEST_POST_COUNT
from core.errors import InkwellError
from core.types import Post
from store.blog_sdk import InkwellClient
from store.post_index import PostIndex


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="inkwell", description="Inkwell post index CLI")
    parser.add_argument("--static-dir", help="Override INKWELL_STATIC_DIR for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_load_command(subparsers)
    _add_posts_command(subparsers)
    _add_tags_command(subparsers)
    _add_dates_command(subparsers)
    _add_watch_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Inkwell CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "posts" and args.month is not None and args.year is None:
        parser.error("posts: --month requires --year")
    try:
        client = _build_client(args.static_dir)
        if args.command == "load":
            return _run_load_command(client, args)
        if args.command == "posts":
            return _run_posts_command(client, args)
        if args.command == "tags":
            return _run_tags_command(client, args)
        if args.command == "dates":
            return _run_dates_command(client, args)
        if args.command == "watch":
            return _run_watch_command(client, args)
    except InkwellError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(static_dir: str | None) -> InkwellClient:
    """Build SDK client with optional static-dir override.

    Args:
        static_dir: Optional override path.

    Returns:
        Configured SDK client.
    """
    client = InkwellClient(InkwellConfig.from_env())
    if static_dir:
        client = client.with_static_dir(static_dir)
    return client


def _run_load_command(client: InkwellClient, args: argparse.Namespace) -> int:
    """Handle load command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    index = client.load(args.source, copy_assets=args.copy_resources)
    print(f"posts={len(index)}")
    print(f"tags={len(index.get_all_tags_with_count())}")
    print(f"months={len(index.get_all_dates_with_count())}")
    return 0


def _run_posts_command(client: InkwellClient, args: argparse.Namespace) -> int:
    """Handle posts command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    index = client.load(args.source)
    for post in _select_posts(index, args):
        print(f"{post.slug}\t{post.date.isoformat()}\t{post.title}")
    return 0


def _select_posts(index: PostIndex, args: argparse.Namespace) -> list[Post]:
    """Dispatch a posts query onto the matching index lookup."""
    if args.slug:
        return [index.get_by_slug(args.slug)]
    if args.tag:
        return index.get_by_tag(args.tag)
    if args.series:
        return index.get_by_series(args.series)
    if args.year is not None:
        return index.get_by_year_month(args.year, args.month)
    if args.keyword:
        return index.get_by_keyword(args.keyword)
    return index.get_last_n(args.latest)


def _run_tags_command(client: InkwellClient, args: argparse.Namespace) -> int:
    """Handle tags command."""
    navigation = client.navigation(args.source)
    for tag, count in navigation.tags_with_count:
        print(f"{tag}\t{count}")
    return 0


def _run_dates_command(client: InkwellClient, args: argparse.Namespace) -> int:
    """Handle dates command."""
    navigation = client.navigation(args.source)
    for year_archive in navigation.dates_by_year:
        for month_archive in year_archive.months:
            print(f"{year_archive.year}\t{month_archive.name}\t{month_archive.count}")
    return 0


def _run_watch_command(client: InkwellClient, args: argparse.Namespace) -> int:
    """Handle watch command.

    Bootstraps the index from the source, then keeps refreshing on the
    configured schedule until interrupted.
    """
    coordinator = client.coordinator(args.source)
    coordinator.start()
    print(f"ready posts={len(coordinator.slot.current())}")
    try:
        coordinator.wait()
    except KeyboardInterrupt:
        pass
    finally:
        coordinator.stop()
    return 0


def _add_load_command(subparsers: Any) -> None:
    """Register load subcommand."""
    parser = subparsers.add_parser("load", help="Load a local source tree and print counts")
    parser.add_argument("source", help="Directory containing posts/ and resources/")
    parser.add_argument(
        "--copy-resources",
        action="store_true",
        help="Copy resources/ into the static directory",
    )


def _add_posts_command(subparsers: Any) -> None:
    """Register posts subcommand."""
    parser = subparsers.add_parser("posts", help="Query posts from a local source tree")
    parser.add_argument("source", help="Directory containing posts/")
    query = parser.add_mutually_exclusive_group()
    query.add_argument("--slug", help="Exact slug lookup")
    query.add_argument("--tag", help="Posts carrying a tag")
    query.add_argument("--series", help="Posts in a series, by series title")
    query.add_argument("--year", type=int, help="Posts from a year")
    query.add_argument("--keyword", help="Posts whose title or tags contain a keyword")
    query.add_argument(
        "--latest",
        type=int,
        default=DEFAULT_LATEST_POST_COUNT,
        help="Newest N posts (default query)",
    )
    parser.add_argument("--month", type=int, help="Month filter used with --year")


def _add_tags_command(subparsers: Any) -> None:
    """Register tags subcommand."""
    parser = subparsers.add_parser("tags", help="List tags with post counts")
    parser.add_argument("source", help="Directory containing posts/")


def _add_dates_command(subparsers: Any) -> None:
    """Register dates subcommand."""
    parser = subparsers.add_parser("dates", help="List archive months with post counts")
    parser.add_argument("source", help="Directory containing posts/")


def _add_watch_command(subparsers: Any) -> None:
    """Register watch subcommand."""
    parser = subparsers.add_parser(
        "watch",
        help="Ingest a remote source and refresh it on a daily schedule",
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="git URL, s3:// prefix, or local directory; defaults to INKWELL_SOURCE_URI",
    )

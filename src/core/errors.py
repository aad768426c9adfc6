"""Inkwell exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class InkwellError(Exception):
    """Base exception for all Inkwell failures."""


class InkwellConfigError(InkwellError):
    """Raised for invalid runtime configuration."""


class InkwellParseError(InkwellError):
    """Raised when a post document cannot be parsed.

    Attributes:
        location: File path or label of the offending document.
        reason: Human-readable parse failure reason.
    """

    def __init__(self, location: str, reason: str) -> None:
        self.location = location
        self.reason = reason
        super().__init__(f"Failed to parse post structure from {location}: {reason}")


class InkwellIOError(InkwellError):
    """Raised for unreadable files, directories, and failed copies.

    Attributes:
        location: Path that could not be read or written.
        cause: Short description of the underlying failure.
    """

    def __init__(self, location: str, cause: str) -> None:
        self.location = location
        self.cause = cause
        super().__init__(f"Failed to access {location}: {cause}")


class InkwellFetchError(InkwellError):
    """Raised when the remote post source cannot be fetched."""


class InkwellStoreError(InkwellError):
    """Raised for post index misuse."""


class InkwellNotFoundError(InkwellStoreError):
    """Raised when a slug lookup misses.

    Attributes:
        slug: Requested slug.
    """

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Post '{slug}' not found. Check the slug or refresh the index.")


class InkwellNotReadyError(InkwellError):
    """Raised when no post index snapshot has been published yet."""

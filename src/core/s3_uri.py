"""S3 URI parsing helpers.

This module parses ``s3://`` post source locations for the fetch layer.
A bare bucket is accepted and means the whole bucket.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import InkwellFetchError

S3_SCHEME = "s3://"


@dataclass(frozen=True)
class S3Location:
    """Parsed S3 location model."""

    bucket: str
    prefix: str


def is_s3_uri(uri: str) -> bool:
    """Return whether a source location points at S3."""
    return uri.startswith(S3_SCHEME)


def parse_s3_uri(uri: str) -> S3Location:
    """Parse and validate an S3 URI.

    Args:
        uri: URI in format ``s3://bucket`` or ``s3://bucket/prefix``.

    Returns:
        Parsed bucket and prefix pair; prefix is empty for a whole bucket.

    Raises:
        InkwellFetchError: If the bucket name is missing.
    """
    stripped_uri = uri.removeprefix(S3_SCHEME)
    bucket, _, prefix = stripped_uri.partition("/")
    if not bucket:
        raise InkwellFetchError(
            f"Invalid S3 URI '{uri}': expected s3://bucket/prefix. Provide a bucket name."
        )
    return S3Location(bucket=bucket, prefix=prefix.strip("/"))

"""Remote post source fetching.

This module materializes a post source into a local working directory.
Sources may be S3 prefixes, local directories, or git repositories.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from core.config import InkwellConfig
from core.constants import GIT_CLONE_DEPTH
from core.errors import InkwellFetchError
from core.logging_config import get_logger
from core.s3_uri import S3Location, is_s3_uri, parse_s3_uri

_LOGGER = get_logger(__name__)


def fetch_source(source_uri: str, destination: Path, config: InkwellConfig) -> Path:
    """Fetch a post source into a local directory.

    Args:
        source_uri: ``s3://`` prefix, local directory, or git repository URL.
        destination: Directory to create and fill; must not already exist.
        config: Runtime configuration for S3 session defaults.

    Returns:
        The populated destination directory.

    Raises:
        InkwellFetchError: If the source cannot be fetched.
    """
    if is_s3_uri(source_uri):
        _download_s3_prefix(parse_s3_uri(source_uri), destination, config)
    elif Path(source_uri).expanduser().is_dir():
        _copy_local_directory(Path(source_uri).expanduser(), destination)
    else:
        _clone_git_repository(source_uri, destination)
    _LOGGER.info("source_fetched", source_uri=source_uri, destination=str(destination))
    return destination


def _clone_git_repository(repo_url: str, destination: Path) -> None:
    """Shallow-clone a git repository.

    Args:
        repo_url: Repository URL or path understood by git.
        destination: Clone target directory.

    Raises:
        InkwellFetchError: If git is missing or the clone fails.
    """
    _LOGGER.info("git_clone_started", repo_url=repo_url, destination=str(destination))
    command = ["git", "clone", "--depth", str(GIT_CLONE_DEPTH), repo_url, str(destination)]
    try:
        subprocess.run(command, check=True, capture_output=True, text=True)
    except FileNotFoundError as error:
        raise InkwellFetchError(
            "Failed to clone repository: git executable not found. "
            "Install git or use an s3:// or local directory source."
        ) from error
    except subprocess.CalledProcessError as error:
        raise InkwellFetchError(
            f"Failed to clone repository {repo_url}: {error.stderr.strip() or error}. "
            "Check the repository URL and network access."
        ) from error


def _copy_local_directory(source_dir: Path, destination: Path) -> None:
    try:
        shutil.copytree(source_dir, destination)
    except OSError as error:
        raise InkwellFetchError(
            f"Failed to copy local source {source_dir} into {destination}: {error}."
        ) from error


def _download_s3_prefix(location: S3Location, destination: Path, config: InkwellConfig) -> None:
    """Download every object under an S3 prefix.

    Args:
        location: Source bucket and prefix.
        destination: Local directory receiving objects by relative key.
        config: Runtime config with optional session settings.

    Raises:
        InkwellFetchError: If listing or downloading fails.
    """
    s3_client = _create_s3_client(config)
    try:
        object_keys = _list_s3_keys(s3_client, location)
        if not object_keys:
            raise InkwellFetchError(
                f"No objects found under s3://{location.bucket}/{location.prefix}. "
                "Upload posts/ and resources/ under the prefix and retry."
            )
        destination.mkdir(parents=True, exist_ok=False)
        for key in object_keys:
            relative_key = key[len(location.prefix) :].lstrip("/") if location.prefix else key
            target_file = _resolve_download_target(destination, relative_key, location)
            target_file.parent.mkdir(parents=True, exist_ok=True)
            s3_client.download_file(location.bucket, key, str(target_file))
    except (BotoCoreError, ClientError, OSError) as error:
        raise InkwellFetchError(
            f"Failed to download s3://{location.bucket}/{location.prefix}: {error}. "
            "Check AWS credentials and retry."
        ) from error


def _resolve_download_target(destination: Path, relative_key: str, location: S3Location) -> Path:
    """Map an object key under the destination, rejecting keys that escape it.

    Raises:
        InkwellFetchError: If the key resolves outside the destination.
    """
    target_file = (destination / relative_key).resolve()
    if not target_file.is_relative_to(destination.resolve()):
        raise InkwellFetchError(
            f"Refusing to download s3://{location.bucket}/{location.prefix} key "
            f"'{relative_key}': it resolves outside {destination}. "
            "Remove path traversal segments from the object key."
        )
    return target_file


def _create_s3_client(config: InkwellConfig) -> Any:
    session_kwargs: dict[str, str] = {}
    if config.s3_profile:
        session_kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        session_kwargs["region_name"] = config.s3_region
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")


def _list_s3_keys(s3_client: Any, location: S3Location) -> list[str]:
    """List object keys under an S3 prefix, skipping directory markers."""
    paginator = s3_client.get_paginator("list_objects_v2")
    prefix = f"{location.prefix}/" if location.prefix else ""
    pages = paginator.paginate(Bucket=location.bucket, Prefix=prefix)
    keys: list[str] = []
    for page in pages:
        for obj in page.get("Contents", []):
            key = obj["Key"]
            if not key.endswith("/"):
                keys.append(key)
    return sorted(keys)

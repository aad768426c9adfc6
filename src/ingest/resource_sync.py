"""Static resource materialization.

This module copies a source tree's resource files into the static
asset directory so rewritten post links resolve when served.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from core.errors import InkwellIOError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def copy_resources(resources_dir: Path, static_dir: Path) -> int:
    """Recursively copy resource files, preserving relative structure.

    Existing files at the destination are overwritten.

    Args:
        resources_dir: Source resources directory.
        static_dir: Destination static asset directory.

    Returns:
        Number of files copied.

    Raises:
        InkwellIOError: If a file cannot be read or written.
    """
    copied_count = 0
    try:
        static_dir.mkdir(parents=True, exist_ok=True)
        for source_file in sorted(resources_dir.rglob("*")):
            if not source_file.is_file():
                continue
            target_file = static_dir / source_file.relative_to(resources_dir)
            target_file.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source_file, target_file)
            copied_count += 1
    except OSError as error:
        raise InkwellIOError(
            str(resources_dir), f"failed to copy resources into {static_dir}: {error}"
        ) from error
    _LOGGER.info(
        "resources_copied",
        resources_dir=str(resources_dir),
        static_dir=str(static_dir),
        file_count=copied_count,
    )
    return copied_count

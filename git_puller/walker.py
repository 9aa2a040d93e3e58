"""Directory traversal that finds repository roots."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .logger import get_logger


def find_repositories(
    root: Path | str,
    metadata_dir: str = ".git",
    logger: logging.Logger | None = None,
) -> Iterator[Path]:
    """
    Yield every repository root under root, depth first.

    A directory is a repository root when it contains a directory named
    metadata_dir. Nothing below a repository root is visited, so nested
    repositories are never reported. Entries that cannot be read are logged
    and skipped.

    The generator is lazy: the caller can act on each root before the walk
    moves on.
    """
    logger = logger or get_logger()

    def _on_error(error: OSError) -> None:
        logger.error(f"Error accessing path: {error}")

    for dirpath, dirnames, _filenames in os.walk(root, onerror=_on_error):
        marker = os.path.join(dirpath, metadata_dir)
        # A symlinked marker does not count
        if metadata_dir in dirnames and os.path.isdir(marker) and not os.path.islink(marker):
            logger.debug(f"Found repository: {dirpath}")
            # Don't descend into the repository
            dirnames[:] = []
            yield Path(dirpath)

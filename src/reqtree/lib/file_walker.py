"""Recursive file discovery for document descriptors and item files.

The walker is parameterized by a path predicate. Directory pruning is a
separate predicate so that hidden directories are never descended into,
rather than descended into and filtered afterwards.
"""

import os
from collections.abc import Callable
from pathlib import Path

from reqtree.lib.logging_config import get_logger

logger = get_logger(__name__)

PathPredicate = Callable[[Path], bool]


def _log_walk_error(error: OSError) -> None:
    logger.warning(
        f"Skipping unreadable directory {error.filename}: {error.strerror}"
    )


def walk_files(
    root: str | Path,
    predicate: PathPredicate,
    skip_dir: PathPredicate | None = None,
) -> list[Path]:
    """Recursively collect files under ``root`` accepted by ``predicate``.

    The root directory itself is always scanned, even if ``skip_dir`` would
    reject it. Unreadable directories and a missing root yield no files and
    are logged at WARNING. Symbolic links to directories are not followed.

    Args:
        root: Directory to search
        predicate: Called with each file path; True keeps the file
        skip_dir: Called with each sub-directory path; True prunes it

    Returns:
        Sorted list of matching file paths
    """
    discovered: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        current = Path(dirpath)
        if skip_dir is not None:
            # Pruning dirnames in place stops os.walk from descending
            kept = [d for d in dirnames if not skip_dir(current / d)]
            for pruned in set(dirnames) - set(kept):
                logger.debug(f"Skipping directory: {current / pruned}")
            dirnames[:] = kept

        for filename in filenames:
            file_path = current / filename
            if predicate(file_path):
                discovered.append(file_path)

    # Sort for deterministic ordering
    return sorted(discovered)


def is_hidden_dir(path: Path, marker: str = ".") -> bool:
    """Return True if ``path`` is a directory whose name starts with ``marker``."""
    return path.name.startswith(marker) and path.is_dir()


def is_document_descriptor(path: Path, descriptor_name: str = ".doorstop.yml") -> bool:
    """Return True if ``path`` is a document descriptor file."""
    return path.name == descriptor_name and path.is_file()


def is_item_file(path: Path, prefix: str, extension: str = ".yml") -> bool:
    """Return True if ``path`` is an item file belonging to ``prefix``.

    Args:
        path: Candidate file path
        prefix: Document prefix the file name must start with
        extension: Item file extension the file name must end with

    Returns:
        True for a regular file named ``<prefix>...<extension>``
    """
    name = path.name
    return name.startswith(prefix) and name.endswith(extension) and path.is_file()

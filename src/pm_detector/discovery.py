"""Filesystem probes: lock files, marker files and upward manifest search."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .errors import AmbiguousLockFilesError
from .models.package_manager import LOCK_FILES, PACKAGE_MANAGERS, PackageManager

logger = logging.getLogger(__name__)


def is_file(path: Path) -> bool:
    """Return True if ``path`` exists and is a regular file; errors count as absent."""
    try:
        return path.is_file()
    except OSError:
        return False


def find_up(filename: str, start: Path) -> Path | None:
    """Return the nearest ``filename`` in ``start`` or one of its ancestors."""
    directory = start.resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / filename
        if is_file(candidate):
            return candidate
    return None


def has_lock_file(package_manager: PackageManager, directory: Path) -> bool:
    return is_file(directory / LOCK_FILES[package_manager])


def find_lock_file(directory: Path) -> PackageManager | None:
    """Return the package manager whose lock file is in ``directory``, if any.

    The three lock files are checked concurrently. More than one lock file is a
    misconfigured project and raises AmbiguousLockFilesError.
    """
    with ThreadPoolExecutor(max_workers=len(PACKAGE_MANAGERS)) as pool:
        present = list(pool.map(lambda pm: has_lock_file(pm, directory), PACKAGE_MANAGERS))

    detected = [pm for pm, found in zip(PACKAGE_MANAGERS, present) if found]
    logger.debug("Lock files in %s: %s", directory, [pm.value for pm in detected])

    if len(detected) > 1:
        raise AmbiguousLockFilesError(detected, directory)

    return detected[0] if detected else None

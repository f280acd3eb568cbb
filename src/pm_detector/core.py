"""Core detection entrypoints.

``detect_package_structure`` gathers the structural signals for a directory and
``which_package_manager`` reduces them, together with the caller's
preferences, to a single package manager.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterable
from pathlib import Path

from .discovery import find_lock_file, is_file
from .models.package_manager import MANIFEST_FILE, PACKAGE_MANAGERS, PackageManager
from .models.package_structure import PackageStructure, WorkspaceRoot
from .parsers import package_json
from .workspace import classify_workspace_root, locate_workspace_root

logger = logging.getLogger(__name__)

DEFAULT_VERSION_CHECK_TIMEOUT = 10.0


def detect_package_structure(cwd: Path | str | None = None) -> PackageStructure:
    """Return the package structure governing ``cwd`` (default: current directory).

    Precedence:
    1. a single lock file next to cwd's package.json;
    2. cwd's package.json (or pnpm-workspace.yaml) declaring a workspace;
    3. an ancestor workspace root listing cwd as a member;
    4. otherwise every package manager is possible.

    Raises AmbiguousLockFilesError when the authoritative directory holds lock
    files for more than one package manager.
    """
    directory = Path.cwd() if cwd is None else Path(cwd).resolve()
    manifest_path = directory / MANIFEST_FILE
    manifest = package_json.load(manifest_path) if is_file(manifest_path) else None
    field = package_json.parse_package_manager_field(manifest)

    if manifest is not None:
        lock_file = find_lock_file(directory)
        if lock_file:
            logger.debug("%s has its own %s lock file", directory, lock_file.value)
            return PackageStructure.from_lock_file(lock_file, package_manager_field=field)

        classification = classify_workspace_root(directory, manifest)
        if isinstance(classification, WorkspaceRoot):
            return PackageStructure(
                compatible_package_managers=classification.compatible_package_managers,
                package_manager_field=field,
            )

    ancestor = locate_workspace_root(directory)
    if ancestor is not None:
        logger.debug("%s is a member of the workspace at %s", directory, ancestor.root)
        return PackageStructure(
            lock_file=ancestor.lock_file,
            compatible_package_managers=ancestor.compatible_package_managers,
            package_manager_field=ancestor.package_manager_field or field,
            workspace_root=ancestor.root,
        )

    return PackageStructure(
        compatible_package_managers=PACKAGE_MANAGERS,
        package_manager_field=field,
    )


def is_executable_available(
    package_manager: PackageManager, timeout: float = DEFAULT_VERSION_CHECK_TIMEOUT
) -> bool:
    """Run ``<pm> --version`` and report whether it exited with status 0."""
    try:
        result = subprocess.run(
            [package_manager.value, "--version"],
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        logger.debug("%s --version failed: %s", package_manager.value, exc)
        return False

    if result.returncode != 0:
        logger.debug("%s --version exited with %s", package_manager.value, result.returncode)
        return False

    logger.debug("%s %s is available", package_manager.value, result.stdout.strip())
    return True


def which_package_manager(
    cwd: Path | str | None = None,
    preferred: Iterable[PackageManager | str] = (),
    check_executable: bool = False,
    ignore_package_manager_field: bool = False,
    version_check_timeout: float = DEFAULT_VERSION_CHECK_TIMEOUT,
) -> PackageManager | None:
    """Choose the package manager for ``cwd``, or None when it cannot be determined.

    Params:
        cwd: directory to inspect (default: current directory)
        preferred: package managers to fall back to, in order, when the
            structure leaves more than one candidate
        check_executable: only accept a preferred package manager whose
            ``--version`` command succeeds
        ignore_package_manager_field: do not let the manifest's
            ``packageManager`` field pick among the candidates
        version_check_timeout: seconds allowed for each ``--version`` run

    A single structural candidate always wins, even over a ``packageManager``
    field or preference naming another package manager.
    """
    preferences = [PackageManager.parse(pm) for pm in preferred]
    structure = detect_package_structure(cwd)
    candidates = structure.compatible_package_managers or ()

    if len(candidates) == 1:
        return candidates[0]

    field = structure.package_manager_field
    if field is not None and not ignore_package_manager_field:
        for candidate in candidates:
            if candidate.value == field.name:
                logger.debug("Using packageManager field %s@%s", field.name, field.version)
                return candidate

    for package_manager in preferences:
        if package_manager not in candidates:
            continue
        if not check_executable:
            return package_manager
        if is_executable_available(package_manager, timeout=version_check_timeout):
            return package_manager

    return None

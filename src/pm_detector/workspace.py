"""Workspace root classification and upward workspace search."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .discovery import find_lock_file, find_up, is_file
from .matching import matches
from .models.package_manager import MANIFEST_FILE, PNPM_WORKSPACE_FILE, PackageManager
from .models.package_structure import (
    AncestorWorkspace,
    NotWorkspaceRoot,
    WorkspaceClassification,
    WorkspaceRoot,
)
from .parsers import package_json

logger = logging.getLogger(__name__)

# pnpm members are not read from pnpm-workspace.yaml; every directory below the root counts.
PNPM_WORKSPACES = ("**",)


@dataclass(frozen=True)
class Compatible:
    workspaces: tuple[str, ...]


@dataclass(frozen=True)
class Incompatible:
    pass


WorkspaceCompatibility = Compatible | Incompatible


def _glob_list(value: Any) -> tuple[str, ...] | None:
    """Return the string globs of an array field, or None when it is not an array."""
    if not isinstance(value, list):
        return None
    return tuple(item for item in value if isinstance(item, str))


def declares_workspaces(manifest: dict[str, Any]) -> bool:
    """True when ``workspaces`` is present and not a falsy scalar; ``[]`` and ``{}`` count."""
    return manifest.get("workspaces") not in (None, False, 0, "")


def check_npm_workspace_root(manifest: dict[str, Any]) -> WorkspaceCompatibility:
    """npm only understands ``workspaces`` as an array of globs."""
    workspaces = _glob_list(manifest.get("workspaces"))
    return Incompatible() if workspaces is None else Compatible(workspaces)


def check_yarn_workspace_root(manifest: dict[str, Any]) -> WorkspaceCompatibility:
    """yarn requires ``private: true``; ``workspaces`` may be an array or ``{packages: [...]}``."""
    if manifest.get("private") is not True:
        return Incompatible()

    field = manifest.get("workspaces")
    workspaces = _glob_list(field)
    if workspaces is None and isinstance(field, dict):
        workspaces = _glob_list(field.get("packages"))
    return Incompatible() if workspaces is None else Compatible(workspaces)


_WORKSPACE_CHECKS = (
    (PackageManager.NPM, check_npm_workspace_root),
    (PackageManager.YARN, check_yarn_workspace_root),
)


def classify_workspace_root(
    directory: Path, manifest: dict[str, Any] | None = None
) -> WorkspaceClassification:
    """Decide whether ``directory`` is a workspace root and for which package managers.

    A pnpm-workspace.yaml makes the directory a pnpm root regardless of the
    manifest. Otherwise the ``workspaces`` field is read the npm way and the
    yarn way; each compatible reading adds its package manager, and the globs
    of the last compatible reading (npm is read first, then yarn) are kept.
    Both readings give the same globs whenever both are compatible.
    """
    if is_file(directory / PNPM_WORKSPACE_FILE):
        logger.debug("%s is a pnpm workspace root", directory)
        return WorkspaceRoot((PackageManager.PNPM,), PNPM_WORKSPACES)

    if manifest is None:
        manifest = package_json.load(directory / MANIFEST_FILE) or {}

    if not declares_workspaces(manifest):
        return NotWorkspaceRoot()

    compatible: list[PackageManager] = []
    workspaces: tuple[str, ...] = ()
    for package_manager, check in _WORKSPACE_CHECKS:
        result = check(manifest)
        if isinstance(result, Compatible):
            compatible.append(package_manager)
            workspaces = result.workspaces

    logger.debug(
        "%s is a workspace root for %s with globs %s",
        directory,
        [pm.value for pm in compatible],
        list(workspaces),
    )
    return WorkspaceRoot(tuple(compatible), workspaces)


def relative_posix_path(directory: Path, root: Path) -> str:
    return Path(os.path.relpath(directory, root)).as_posix()


def locate_workspace_root(directory: Path) -> AncestorWorkspace | None:
    """Find the workspace root above ``directory`` that lists it as a member.

    Only the nearest enclosing package.json is considered. If it is not a
    workspace root, or its globs do not cover ``directory``, there is no
    governing workspace.
    """
    directory = directory.resolve()
    manifest_path = find_up(MANIFEST_FILE, directory.parent)
    if manifest_path is None:
        return None

    root = manifest_path.parent
    manifest = package_json.load(manifest_path) or {}
    classification = classify_workspace_root(root, manifest)
    if not isinstance(classification, WorkspaceRoot):
        logger.debug("Nearest manifest %s is not a workspace root", manifest_path)
        return None

    relative = relative_posix_path(directory, root)
    if not matches(relative, classification.workspaces):
        logger.debug("%s is not a member of the workspace at %s", relative, root)
        return None

    lock_file = find_lock_file(root)
    compatible = (lock_file,) if lock_file else classification.compatible_package_managers
    return AncestorWorkspace(
        root=root,
        compatible_package_managers=compatible,
        lock_file=lock_file,
        package_manager_field=package_json.parse_package_manager_field(manifest),
    )

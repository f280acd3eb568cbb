"""Data models for package manager detection."""

from __future__ import annotations

from .package_manager import (
    LOCK_FILES,
    MANIFEST_FILE,
    PACKAGE_MANAGERS,
    PNPM_WORKSPACE_FILE,
    PackageManager,
)
from .package_structure import (
    AncestorWorkspace,
    NotWorkspaceRoot,
    PackageManagerField,
    PackageStructure,
    WorkspaceClassification,
    WorkspaceRoot,
)

__all__ = [
    "AncestorWorkspace",
    "LOCK_FILES",
    "MANIFEST_FILE",
    "NotWorkspaceRoot",
    "PACKAGE_MANAGERS",
    "PNPM_WORKSPACE_FILE",
    "PackageManager",
    "PackageManagerField",
    "PackageStructure",
    "WorkspaceClassification",
    "WorkspaceRoot",
]

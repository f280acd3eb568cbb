"""Immutable descriptors produced by package structure detection."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from packaging.version import InvalidVersion, Version

from .package_manager import PackageManager


@dataclass(frozen=True)
class PackageManagerField:
    """The ``packageManager`` declaration of a manifest, e.g. ``yarn@4.1.0``."""

    name: str
    version: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package manager name must be non-empty")

    @property
    def parsed_version(self) -> Version | None:
        """Return the version as a ``packaging`` Version, or None if it does not parse."""
        if not self.version:
            return None
        try:
            return Version(self.version)
        except InvalidVersion:
            return None

    def to_dict(self) -> dict[str, object]:
        parsed = self.parsed_version
        return {
            "name": self.name,
            "version": self.version,
            "normalizedVersion": str(parsed) if parsed is not None else None,
        }


@dataclass(frozen=True)
class PackageStructure:
    """Structural signals gathered for one directory."""

    lock_file: PackageManager | None = None
    compatible_package_managers: tuple[PackageManager, ...] | None = None
    package_manager_field: PackageManagerField | None = None
    workspace_root: Path | None = None

    def __post_init__(self) -> None:
        if self.lock_file is not None and self.compatible_package_managers != (self.lock_file,):
            raise ValueError("A lock file restricts compatible package managers to its own kind")
        if self.compatible_package_managers is not None and len(
            set(self.compatible_package_managers)
        ) != len(self.compatible_package_managers):
            raise ValueError("Compatible package managers must be unique")

    @classmethod
    def from_lock_file(
        cls,
        lock_file: PackageManager,
        *,
        package_manager_field: PackageManagerField | None = None,
        workspace_root: Path | None = None,
    ) -> PackageStructure:
        return cls(
            lock_file=lock_file,
            compatible_package_managers=(lock_file,),
            package_manager_field=package_manager_field,
            workspace_root=workspace_root,
        )

    def to_dict(self) -> dict[str, object]:
        compatible = self.compatible_package_managers
        return {
            "lockFile": self.lock_file.lock_file if self.lock_file else None,
            "compatiblePackageManagers": [pm.value for pm in compatible] if compatible is not None else None,
            "packageManagerField": self.package_manager_field.to_dict()
            if self.package_manager_field
            else None,
            "workspaceRoot": str(self.workspace_root) if self.workspace_root else None,
        }


@dataclass(frozen=True)
class WorkspaceRoot:
    """A directory whose manifest (or pnpm marker) declares workspace members."""

    compatible_package_managers: tuple[PackageManager, ...]
    workspaces: tuple[str, ...]


@dataclass(frozen=True)
class NotWorkspaceRoot:
    """A directory that declares no workspace members."""


WorkspaceClassification = WorkspaceRoot | NotWorkspaceRoot


@dataclass(frozen=True)
class AncestorWorkspace:
    """An enclosing workspace root that claims the queried directory as a member."""

    root: Path
    compatible_package_managers: tuple[PackageManager, ...]
    lock_file: PackageManager | None
    package_manager_field: PackageManagerField | None

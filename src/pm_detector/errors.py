"""Exceptions raised while detecting a package manager."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .models.package_manager import PACKAGE_MANAGERS, PackageManager


class PackageManagerError(RuntimeError):
    """Base class for detection failures."""


class AmbiguousLockFilesError(PackageManagerError):
    """Raised when lock files of more than one package manager share a directory."""

    def __init__(self, package_managers: Iterable[PackageManager], directory: Path | None = None):
        found = set(package_managers)
        self.package_managers: tuple[PackageManager, ...] = tuple(
            pm for pm in PACKAGE_MANAGERS if pm in found
        )
        self.directory = directory
        names = ", ".join(pm.value for pm in self.package_managers)
        super().__init__(f"Lock files for multiple package managers found: {names}")


class ManifestError(PackageManagerError):
    """Raised when a package.json exists but cannot be used as a manifest."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Invalid manifest {path}: {reason}")

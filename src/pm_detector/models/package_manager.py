"""Package manager kinds and their lock file names."""

from __future__ import annotations

from enum import Enum


class PackageManager(str, Enum):
    """The JavaScript package managers that can be detected."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"

    def __str__(self) -> str:
        return self.value

    @property
    def lock_file(self) -> str:
        return LOCK_FILES[self]

    @classmethod
    def parse(cls, value: PackageManager | str) -> PackageManager:
        """Coerce a name such as ``"yarn"`` into a member, raising ValueError otherwise."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            known = ", ".join(pm.value for pm in cls)
            raise ValueError(f"Unknown package manager: {value!r} (expected one of {known})") from None


# Canonical (alphabetical) order used for probing and for reporting ambiguity.
PACKAGE_MANAGERS: tuple[PackageManager, ...] = (
    PackageManager.NPM,
    PackageManager.PNPM,
    PackageManager.YARN,
)

LOCK_FILES: dict[PackageManager, str] = {
    PackageManager.NPM: "package-lock.json",
    PackageManager.PNPM: "pnpm-lock.yaml",
    PackageManager.YARN: "yarn.lock",
}

MANIFEST_FILE = "package.json"
PNPM_WORKSPACE_FILE = "pnpm-workspace.yaml"

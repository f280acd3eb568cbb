"""Report building and schema-friendly output."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .models.package_manager import PackageManager
from .models.package_structure import PackageStructure

REPORT_VERSION = "1"


def build_report(
    structure: PackageStructure,
    package_manager: PackageManager | None,
    cwd: Path,
) -> dict[str, Any]:
    """Combine the detected structure and the chosen package manager.

    ``packageManager`` is null when no package manager could be determined.
    """
    return {
        "version": REPORT_VERSION,
        "cwd": str(cwd),
        "packageManager": package_manager.value if package_manager else None,
        "structure": structure.to_dict(),
    }

"""pm-detector core package.

Detects which JavaScript package manager (npm, pnpm or yarn) governs a
directory, taking lock files, workspace declarations and the manifest's
``packageManager`` field into account.
"""

from .core import detect_package_structure, which_package_manager
from .errors import AmbiguousLockFilesError, ManifestError, PackageManagerError
from .models import PackageManager, PackageManagerField, PackageStructure

__all__ = [
    "AmbiguousLockFilesError",
    "ManifestError",
    "PackageManager",
    "PackageManagerError",
    "PackageManagerField",
    "PackageStructure",
    "detect_package_structure",
    "which_package_manager",
]

"""Read package.json and extract the fields that describe package management."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import ManifestError
from ..models.package_structure import PackageManagerField


def load(path: Path) -> dict[str, Any] | None:
    """Return the parsed manifest at ``path``, or None when the file is absent."""
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise ManifestError(path, f"cannot be read ({exc})") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestError(path, f"invalid JSON ({exc})") from exc

    if not isinstance(data, dict):
        raise ManifestError(path, "must be a JSON object")

    return data


def parse_package_manager_field(manifest: dict[str, Any] | None) -> PackageManagerField | None:
    """Parse ``"packageManager": "<name>@<version>"``.

    Splits on the first ``@``. The name is not checked against the known
    package managers; that happens when it is compared with the candidates.
    """
    if not manifest:
        return None

    value = manifest.get("packageManager")
    if not isinstance(value, str):
        return None

    name, _, version = value.strip().partition("@")
    if not name:
        return None

    return PackageManagerField(name=name, version=version or None)

"""Human-readable summary rendering."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a short text block describing the detection result."""
    structure = report.get("structure", {})
    compatible = structure.get("compatiblePackageManagers")
    field = structure.get("packageManagerField")

    lines = []
    lines.append(f"Directory: {report.get('cwd', '')}")
    lines.append(f"Package manager: {report.get('packageManager') or '(undetermined)'}")
    lines.append(f"Lock file: {structure.get('lockFile') or '(none)'}")
    lines.append(f"Compatible: {', '.join(compatible) if compatible else '(none)'}")

    if structure.get("workspaceRoot"):
        lines.append(f"Workspace root: {structure['workspaceRoot']}")

    if field:
        declared = field["name"] + (f"@{field['version']}" if field.get("version") else "")
        normalized = field.get("normalizedVersion")
        if field.get("version") and normalized is None:
            declared += " (unparseable version)"
        elif normalized is not None and normalized != field.get("version"):
            declared += f" (version {normalized})"
        lines.append(f"packageManager field: {declared}")

    return "\n".join(lines) + "\n"

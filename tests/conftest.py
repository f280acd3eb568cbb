from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


def write_tree(root: Path, files: dict[str, Any]) -> Path:
    """Write ``files`` under ``root``; dict/list values are serialised as JSON."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, (dict, list)):
            path.write_text(json.dumps(content), encoding="utf-8")
        else:
            path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_project(tmp_path):
    """Return a helper that writes a project tree into a fresh directory."""

    def _make(files: dict[str, Any]) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        return write_tree(root, files).resolve()

    return _make

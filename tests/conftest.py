"""Pytest configuration for dua."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_repo_on_path() -> None:
    """Make the repository importable without an editable install."""
    repo_root = Path(__file__).resolve().parent.parent
    path_str = str(repo_root)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)


_ensure_repo_on_path()


def make_tree(base: Path, layout: dict) -> Path:
    """Create files and directories under ``base``.

    ``layout`` maps names to either an int (a file of that many bytes) or a
    nested dict (a directory).
    """
    base.mkdir(parents=True, exist_ok=True)
    for name, spec in layout.items():
        p = base / name
        if isinstance(spec, dict):
            make_tree(p, spec)
        else:
            p.write_bytes(b"x" * spec)
    return base


@pytest.fixture
def tree(tmp_path):
    def _make(layout: dict, name: str = "root") -> Path:
        return make_tree(tmp_path / name, layout)
    return _make

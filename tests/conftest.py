"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree with files, dirs, hidden and symlinked entries.

    Layout:
        root/
            Maat.rs
            notes.MD
            README
            .hidden
            src/
                lib.rs
            docs/
            link_to_src -> src
            link_to_notes -> notes.MD
            dangling -> missing.txt
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "Maat.rs").write_text("fn main() {}\n")
    (root / "notes.MD").write_text("# notes\n")
    (root / "README").write_text("readme\n")
    (root / ".hidden").write_text("secret\n")
    (root / "src").mkdir()
    (root / "src" / "lib.rs").write_text("pub fn f() {}\n")
    (root / "docs").mkdir()
    os.symlink(root / "src", root / "link_to_src")
    os.symlink(root / "notes.MD", root / "link_to_notes")
    os.symlink(root / "missing.txt", root / "dangling")
    return root


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home

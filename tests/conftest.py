"""Shared fixtures for cargo_self_version tests."""

from pathlib import Path

import pytest


@pytest.fixture
def write_manifest(tmp_path: Path):
    """Return a helper that writes a Cargo.toml into a temp crate dir."""

    def _write(content: str, name: str = "Cargo.toml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write

"""Steps for locating, reading and querying a Cargo manifest."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from .types import ErrorType, ManifestError, VersionNotStringError

MANIFEST_FILENAME = "Cargo.toml"


def resolve_manifest_path(path: str | Path | None = None) -> Path:
    """Resolve the manifest location from an optional file or directory.

    Args:
        path: Path to the manifest itself or to the directory holding it.
            If None, the current working directory is used.

    Returns:
        ``<dir>/Cargo.toml`` for a directory, the argument unchanged for
        anything else.
    """
    if path is None:
        return Path.cwd() / MANIFEST_FILENAME

    candidate = Path(path)
    if candidate.is_dir():
        return candidate / MANIFEST_FILENAME
    return candidate


def ensure_manifest_exists(path: Path) -> None:
    """Raise ManifestError if nothing exists at ``path``."""
    if not path.exists():
        raise ManifestError(
            f"path does not exist: {path}",
            ErrorType.PATH_NOT_FOUND,
            path=path,
        )


def read_manifest_text(path: Path) -> str:
    """Read the manifest as UTF-8 text.

    Raises:
        ManifestError: On any I/O or decoding failure.
    """
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(
            f"error while reading {path}: {e}",
            ErrorType.READ_ERROR,
            path=path,
        ) from e


def parse_manifest(text: str, path: Path) -> dict[str, Any]:
    """Parse manifest text as TOML.

    ``path`` is only used to give the error message some context.

    Raises:
        ManifestError: If the text is not valid TOML.
    """
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(
            f"error while parsing {path}: {e}",
            ErrorType.PARSE_ERROR,
            path=path,
        ) from e


def find_package_table(document: dict[str, Any]) -> dict[str, Any] | None:
    """Return the ``[package]`` table, or None if missing or not a table."""
    package = document.get("package")
    if not isinstance(package, dict):
        return None
    return package


def lookup_version(document: dict[str, Any]) -> str | None:
    """Return ``package.version`` from a parsed manifest.

    Missing keys are a normal outcome and give None.

    Raises:
        VersionNotStringError: If the version exists but is not a string.

    Examples:
        >>> lookup_version({"package": {"version": "1.2.3"}})
        '1.2.3'

        >>> lookup_version({"dependencies": {"foo": "1.0"}}) is None
        True
    """
    package = find_package_table(document)
    if package is None:
        return None

    version = package.get("version")
    if version is None:
        return None
    if not isinstance(version, str):
        raise VersionNotStringError(version)
    return version

"""Main reader module that runs the manifest lookup steps in order."""

from __future__ import annotations

from pathlib import Path

from .manifest import (
    ensure_manifest_exists,
    find_package_table,
    lookup_version,
    parse_manifest,
    read_manifest_text,
    resolve_manifest_path,
)
from .types import ManifestError, VersionLookup


def read_version(
    path: str | Path | None = None,
    *,
    raise_on_error: bool = True,
) -> str | None:
    """Read ``package.version`` from a Cargo manifest.

    Args:
        path: Path to the Cargo.toml file or the directory holding it.
            If None, Cargo.toml in the current working directory is used.
        raise_on_error: Whether to raise ManifestError when the manifest
            is missing, unreadable or invalid. If False, returns None.

    Returns:
        The version string, or None if the manifest has no
        ``package.version``.

    Raises:
        ManifestError: If the manifest cannot be used and raise_on_error
            is True.
        VersionNotStringError: If ``package.version`` is not a string.
            This is raised regardless of raise_on_error.

    Examples:
        >>> read_version("Cargo.toml")
        '1.2.3'

        >>> read_version("missing/Cargo.toml", raise_on_error=False)
        None
    """
    try:
        result = read_version_with_metadata(path)
    except ManifestError:
        if raise_on_error:
            raise
        return None

    return result.version


def read_version_with_metadata(path: str | Path | None = None) -> VersionLookup:
    """Read ``package.version`` and report where and how it was found.

    Args:
        path: Path to the Cargo.toml file or the directory holding it.

    Returns:
        VersionLookup with the resolved path and lookup details.

    Examples:
        >>> result = read_version_with_metadata("Cargo.toml")
        >>> result.found
        True
        >>> result.version
        '1.2.3'
    """
    manifest_path = resolve_manifest_path(path)
    ensure_manifest_exists(manifest_path)

    text = read_manifest_text(manifest_path)
    document = parse_manifest(text, manifest_path)

    return VersionLookup(
        path=manifest_path,
        version=lookup_version(document),
        package_found=find_package_table(document) is not None,
    )

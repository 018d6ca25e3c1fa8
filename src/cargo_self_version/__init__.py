"""cargo-self-version: print the current version from a Cargo.toml.

Basic usage:
    >>> from cargo_self_version import read_version
    >>> read_version("path/to/crate")
    '1.2.3'

With metadata:
    >>> from cargo_self_version import read_version_with_metadata
    >>> result = read_version_with_metadata("path/to/crate/Cargo.toml")
    >>> print(result.path, result.found)
    path/to/crate/Cargo.toml True

Missing manifests raise ManifestError unless told otherwise:
    >>> read_version("nowhere", raise_on_error=False)
    None
"""

from .manifest import MANIFEST_FILENAME, lookup_version, resolve_manifest_path
from .reader import read_version, read_version_with_metadata
from .types import (
    ErrorType,
    ManifestError,
    VersionLookup,
    VersionNotStringError,
)

__version__ = "0.1.0"

__all__ = [
    # Main API
    "read_version",
    "read_version_with_metadata",
    "resolve_manifest_path",
    "lookup_version",
    "MANIFEST_FILENAME",
    # Types
    "VersionLookup",
    "ManifestError",
    "ErrorType",
    "VersionNotStringError",
    # Metadata
    "__version__",
]

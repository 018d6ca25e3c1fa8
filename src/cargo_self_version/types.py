"""Type definitions for cargo-self-version."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ErrorType(Enum):
    """Classification of reported manifest errors."""

    PATH_NOT_FOUND = "path_not_found"
    READ_ERROR = "read_error"
    PARSE_ERROR = "parse_error"


class ManifestError(Exception):
    """Exception raised when a manifest cannot be located, read or parsed."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        path: Path | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path

    def __repr__(self) -> str:
        return f"ManifestError({self.error_type.value!r}, {self.message!r})"


class VersionNotStringError(TypeError):
    """Raised when ``package.version`` holds something other than a string.

    This is not a reportable error: nothing in the package catches it.
    """

    def __init__(self, value: object) -> None:
        super().__init__(f"version is not in string format: {value!r}")
        self.value = value


@dataclass
class VersionLookup:
    """Result of looking up ``package.version`` in a manifest."""

    path: Path
    version: str | None = None
    package_found: bool = False

    def __post_init__(self) -> None:
        if self.version is not None and not self.package_found:
            raise ValueError("A version cannot be found without a package table")

    @property
    def found(self) -> bool:
        return self.version is not None

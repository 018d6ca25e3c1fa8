"""Command-line interface for cargo-self-version."""

from __future__ import annotations

import argparse
import sys
import traceback
from collections.abc import Callable

import orjson

from . import __version__
from .reader import read_version_with_metadata
from .types import ManifestError, VersionLookup, VersionNotStringError

SUBCOMMAND = "self-version"

EXIT_OK = 0
EXIT_ERROR = 1
# Same code a panicking cargo subcommand exits with.
EXIT_ABORT = 101

_EPILOG = """
Examples:
  cargo self-version
  cargo self-version -c path/to/crate
  pkg_ver=$(cargo self-version) && git tag "$pkg_ver"
  gh release create --title "v$(cargo self-version)" "$(cargo self-version)"
"""


def main(args: list[str] | None = None) -> int:
    """Entry point for the standalone ``self-version`` command.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    parser = argparse.ArgumentParser(
        prog=SUBCOMMAND,
        description="Retrieve the current version from a Cargo.toml file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_EPILOG,
    )
    _add_arguments(parser)

    return _execute(parser.parse_args(args))


def cargo_main(args: list[str] | None = None) -> int:
    """Entry point for the ``cargo self-version`` subcommand.

    Cargo runs ``cargo-self-version self-version [ARGS]``, so the
    subcommand name is required as the first argument.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    parser = argparse.ArgumentParser(
        prog="cargo",
        description="Cargo subcommand wrapper for self-version.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {SUBCOMMAND} {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subcommand = subparsers.add_parser(
        SUBCOMMAND,
        prog=f"cargo {SUBCOMMAND}",
        help="Retrieve the current version from a Cargo.toml file",
        description="Retrieve the current version from a Cargo.toml file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_EPILOG,
    )
    _add_arguments(subcommand)

    return _execute(parser.parse_args(args))


def run() -> None:
    """Console-script entry point for ``self-version``."""
    sys.exit(_abort_on_invalid_version(main))


def cargo_run() -> None:
    """Console-script entry point for ``cargo-self-version``."""
    sys.exit(_abort_on_invalid_version(cargo_main))


def _add_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the options shared by both invocation shapes."""
    parser.add_argument(
        "-c",
        "--cargo-toml-path",
        type=str,
        default=None,
        help=(
            "Path to either the Cargo.toml file or the folder where it is "
            "located (default: Cargo.toml in the current directory)"
        ),
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the manifest path and version as a JSON object",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show lookup metadata on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )


def _execute(args: argparse.Namespace) -> int:
    """Look up the version and write it out. Shared by both commands."""
    try:
        result = read_version_with_metadata(args.cargo_toml_path)
    except ManifestError as e:
        print(e.message)
        return EXIT_ERROR

    if args.json:
        print(_format_json(result))
    elif result.version is not None:
        print(result.version, end="")

    if args.verbose:
        _print_metadata(result)

    return EXIT_OK


def _abort_on_invalid_version(entry: Callable[[list[str] | None], int]) -> int:
    """Run an entry point, turning a non-string version into an abort."""
    try:
        return entry(None)
    except VersionNotStringError:
        traceback.print_exc()
        return EXIT_ABORT


def _format_json(result: VersionLookup) -> str:
    """Format a lookup result as compact JSON."""
    data = {"path": str(result.path), "version": result.version}
    return orjson.dumps(data).decode("utf-8")


def _print_metadata(result: object) -> None:
    """Print lookup metadata to stderr."""
    if not isinstance(result, VersionLookup):
        return

    print("\n--- Metadata ---", file=sys.stderr)
    print(f"Manifest: {result.path}", file=sys.stderr)
    print(f"Package table: {'found' if result.package_found else 'missing'}", file=sys.stderr)
    print(f"Version: {'found' if result.found else 'missing'}", file=sys.stderr)


if __name__ == "__main__":
    run()

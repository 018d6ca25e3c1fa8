"""Allow ``python -m cargo_self_version``."""

from .cli import run

run()

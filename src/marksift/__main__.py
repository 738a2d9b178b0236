"""Allow running as ``python -m marksift``."""

from .cli import cli

cli()

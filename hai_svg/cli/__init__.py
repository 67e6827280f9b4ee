"""Command-line interface for hai-svg."""

from hai_svg.cli.main import cli

__all__ = ["cli"]

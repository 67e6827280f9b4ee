"""CLI commands for hai-svg."""

from hai_svg.cli.commands.render import render
from hai_svg.cli.commands.shapes import shapes
from hai_svg.cli.commands.template import template

__all__ = ["render", "shapes", "template"]

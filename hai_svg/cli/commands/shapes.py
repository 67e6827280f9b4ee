"""Shapes command - list the shapes a scene may use."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from hai_svg.scene import SHAPES

console = Console()


@click.command()
def shapes() -> None:
    """List scene shapes and their parameters."""
    table = Table(title="Scene Shapes")
    table.add_column("Shape", style="cyan")
    table.add_column("Required", style="green")
    table.add_column("Optional", style="yellow")
    table.add_column("Description", style="dim")

    for name, spec in SHAPES.items():
        table.add_row(
            name,
            ", ".join(spec.required),
            ", ".join(spec.optional) or "-",
            spec.description,
        )

    console.print(table)

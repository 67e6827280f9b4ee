"""Template command - write an example scene file."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

console = Console()

SCENE_TEMPLATE = """\
# hai-svg scene
# Render with: hai-svg render {name} -o output.svg
# Run `hai-svg shapes` for the parameters of each shape.

width: 200
height: 120
attributes:
  viewBox: 0 0 200 120

elements:
  - shape: rect
    width: 180
    height: 100
    x: 10
    y: 10
    rx: 8
    attributes:
      fill: none
      stroke: black

  - shape: circle
    r: 20
    cx: 50
    cy: 60
    attributes:
      fill: steelblue

  - shape: polygon
    points: [[100, 80], [120, 40], [140, 80]]

  # Path items: a letter ("Z"), a letter with operands ([C, ...]),
  # or a bare [x, y] pair tagged with `letter` (default L).
  - shape: path
    commands:
      - [M, 150, 30]
      - [170, 50]
      - [A, 10, 10, 0, 0, 1, 150, 70]
      - Z
    attributes:
      fill: none
      stroke: darkred

  - shape: text
    content: hai-svg
    x: 20
    y: 110
"""


@click.command()
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path), default="scene.yaml")
@click.option("--force", "-f", is_flag=True, help="Overwrite without asking")
def template(output: Path, force: bool) -> None:
    """Write an example scene file.

    OUTPUT: Destination YAML file (default: scene.yaml).
    """
    if output.exists() and not force:
        if not click.confirm(f"{output} exists. Overwrite?", default=False):
            console.print("[yellow]Aborted[/yellow]")
            return

    output.write_text(SCENE_TEMPLATE.format(name=output.name), encoding="utf-8")
    console.print(f"[green]Created[/green] {output}")

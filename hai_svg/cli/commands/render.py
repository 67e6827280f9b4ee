"""Render command - turn a YAML scene into SVG text."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import click
from rich.console import Console

from hai_svg.config import Config
from hai_svg.exceptions import SceneError
from hai_svg.scene import load_scene

console = Console()


@click.command()
@click.argument("scene", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output SVG file (default: print to stdout)",
)
@click.option(
    "--legacy-whitespace",
    is_flag=True,
    help="Keep the padded whitespace of older output",
)
@click.pass_context
def render(
    ctx: click.Context,
    scene: Path,
    output: Path | None,
    legacy_whitespace: bool,
) -> None:
    """Render a scene file to SVG.

    SCENE: YAML file describing the document and its elements.
    """
    obj = ctx.obj or {}
    config: Config = obj.get("config") or Config.load()
    if legacy_whitespace:
        config = dataclasses.replace(config, legacy_whitespace=True)

    try:
        document = load_scene(scene, config)
    except SceneError as e:
        console.print(f"[red]Error in {scene}:[/red] {e}")
        raise SystemExit(1) from e

    svg = document.serialize(legacy_whitespace=config.legacy_whitespace)

    if output is None:
        click.echo(svg)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(svg, encoding="utf-8")
    console.print(f"[green]Wrote[/green] {output} ({len(document)} elements)")

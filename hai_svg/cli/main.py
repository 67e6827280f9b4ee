"""Entry point for the ``hai-svg`` command."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from hai_svg import __version__
from hai_svg.cli.commands import render, shapes, template
from hai_svg.config import LOG_LEVELS, Config
from hai_svg.exceptions import ConfigError

console = Console()


def setup_logging(level: str) -> None:
    """Route hai_svg logging through rich on stderr."""
    logger = logging.getLogger("hai_svg")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(level)


@click.group()
@click.version_option(__version__, prog_name="hai-svg")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default: ./hai-svg.yaml if present)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (overrides config)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """Build SVG documents from YAML scene descriptions."""
    ctx.ensure_object(dict)

    try:
        config = Config.load(config_path)
    except (FileNotFoundError, ConfigError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    level = (log_level or config.log_level).upper()
    setup_logging(level)

    ctx.obj["config"] = config
    ctx.obj["log_level"] = level


cli.add_command(render)
cli.add_command(shapes)
cli.add_command(template)


if __name__ == "__main__":
    cli()

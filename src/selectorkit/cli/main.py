"""selectorkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace

import click

from selectorkit import __version__
from selectorkit.config import LOG_LEVELS, SelectorKitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (default: $SELECTORKIT_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """selectorkit - build CSS selectors from ordered parts."""
    try:
        config = SelectorKitConfig.from_env()
    except ValueError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)
    if log_level:
        config = replace(config, log_level=log_level.upper())
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build, combine  # noqa: E402
from selectorkit.cli.rect import rect  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
cli.add_command(rect)

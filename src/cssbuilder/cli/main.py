"""cssbuilder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import BuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """cssbuilder - build CSS selectors from ordered fragments."""
    config = BuilderConfig(log_level="DEBUG" if verbose else "WARNING")
    logging.basicConfig(level=getattr(logging, config.log_level))
    ctx.obj = config


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402

cli.add_command(build)

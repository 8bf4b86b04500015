"""Entry point for the ``rangepick`` command."""

from __future__ import annotations

from typing import Any

import click

from rangepick import __version__
from rangepick.commands import register_commands
from rangepick.commands._context import AppContext
from rangepick.config.settings import RangepickSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="rangepick")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the selected range or status.")
@click.option("-v", "--verbose", is_flag=True, help="Show error details and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Use this rangepick.toml instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: Any) -> None:
    """Calendar grids, range selection, constraint checks and timezone math."""
    ctx.obj = AppContext(RangepickSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

"""Subcommand modules for rangepick.

Provides register_commands() which defers imports until registration
so ``rangepick --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the tz group and the standalone commands on the root group."""
    from rangepick.commands.grid import grid
    from rangepick.commands.nav import nav
    from rangepick.commands.preset import preset
    from rangepick.commands.select import select, validate
    from rangepick.commands.time_cmd import time_cmd
    from rangepick.commands.tz import tz

    cli.add_command(tz)

    cli.add_command(grid)
    cli.add_command(select)
    cli.add_command(validate)
    cli.add_command(preset)
    cli.add_command(nav)
    cli.add_command(time_cmd)

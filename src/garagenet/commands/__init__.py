"""Subcommand modules for garagenet.

Provides register_commands() which uses deferred imports to keep
``garagenet --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from garagenet.commands.auth import auth_mode
    from garagenet.commands.create import create, validate
    from garagenet.commands.location import location
    from garagenet.commands.schema import schema

    cli.add_command(create)
    cli.add_command(validate)
    cli.add_command(schema)
    cli.add_command(location)
    cli.add_command(auth_mode)

"""Root CLI group for garagenet with global flags and command registration."""

from __future__ import annotations

import click

from garagenet import __version__
from garagenet.commands import register_commands
from garagenet.commands._context import AppContext
from garagenet.config.settings import GarageNetSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="garagenet")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--endpoint", default=None, metavar="URL", help="Override the GraphQL endpoint.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    endpoint: str | None,
) -> None:
    """garagenet: Veteran's Garage Network directory client."""
    settings = GarageNetSettings.from_cli(
        config_path=config_path,
        endpoint=endpoint,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

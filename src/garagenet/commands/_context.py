"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy client-selector construction and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from garagenet.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from garagenet.config.settings import GarageNetSettings
    from garagenet.infrastructure.client import ClientSelector
    from garagenet.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The client selector is built on first use so ``--help``, ``schema``
    and ``validate`` never need API configuration.
    """

    def __init__(self, settings: GarageNetSettings) -> None:
        self.settings = settings
        self._clients: ClientSelector | None = None

        from garagenet.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def clients(self) -> ClientSelector:
        """Client selector wired to the configured endpoint and session."""
        if self._clients is None:
            from garagenet.infrastructure.client import ClientSelector, graphql_client_factory
            from garagenet.infrastructure.identity import SettingsIdentityProvider

            auth = self.settings.auth
            api = self.settings.api
            self._clients = ClientSelector(
                SettingsIdentityProvider(
                    id_token=auth.id_token,
                    username=auth.username,
                    user_id=auth.user_id,
                ),
                graphql_client_factory(api.endpoint, api.api_key, timeout=api.timeout),
            )
        return self._clients

    @property
    def interactive(self) -> bool:
        """True when prompts may fire: no ``--no-interact``/``--json`` and a TTY stdin."""
        import sys

        return (
            not self.settings.no_interact
            and not self.settings.json_output
            and sys.stdin.isatty()
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

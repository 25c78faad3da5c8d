"""Command: report which credential mode the next request would use."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from garagenet.commands._base import GarageCommand
from garagenet.services.result import ServiceResult

if TYPE_CHECKING:
    from garagenet.commands._context import AppContext


@click.command(
    "auth-mode",
    cls=GarageCommand,
    examples="""\
  garagenet auth-mode
  GARAGENET_AUTH__ID_TOKEN=eyJ... garagenet --json auth-mode""",
)
@click.pass_obj
def auth_mode(app: AppContext) -> None:
    """Show whether requests go out as the signed-in user or with the API key."""
    clients = app.clients
    identity = clients.current_identity()
    data: dict[str, object] = {"auth_mode": clients.auth_mode().value}
    if identity is not None:
        data["username"] = identity.username
    app.emit(ServiceResult(ok=True, op="auth_mode", data=data))

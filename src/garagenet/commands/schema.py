"""Command: print the JSON schema of an entity's create shape."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from garagenet.commands._base import GarageCommand, entity_argument
from garagenet.domain.entities import json_schema

if TYPE_CHECKING:
    from garagenet.domain.types import EntityName


@click.command(
    cls=GarageCommand,
    examples="""\
  garagenet schema garage
  garagenet schema event-registration > registration.schema.json""",
)
@entity_argument()
def schema(entity: EntityName) -> None:
    """Print the JSON schema for ENTITY."""
    click.echo(json.dumps(json_schema(entity), indent=2))

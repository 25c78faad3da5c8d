"""Command: capture a single Location value through the location dialog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from garagenet.commands._base import GarageCommand
from garagenet.commands._drafts import (
    apply_assignments,
    file_and_set_options,
    load_draft_file,
    prompt_for_errors,
)
from garagenet.domain.validation import validate_location
from garagenet.services.location import LocationDialog

if TYPE_CHECKING:
    from garagenet.commands._context import AppContext


@click.command(
    cls=GarageCommand,
    examples="""\
  garagenet location --set name="Combat Customs HQ" --set lat=41.9276 --set long=-74.0004
  garagenet location --set name="Gas stop" --set type=LANDMARK --set stop=true \\
      --set lat=42.1 --set long=-73.9""",
)
@file_and_set_options
@click.pass_obj
def location(app: AppContext, draft_file: Any, assignments: tuple[str, ...]) -> None:
    """Capture a waypoint (name, type, stop flag, coordinates)."""
    dialog = LocationDialog()
    dialog.open(load_draft_file(draft_file))
    apply_assignments(dialog, assignments)
    if app.interactive:
        check = validate_location(dialog.draft)
        if not check.ok:
            prompt_for_errors(dialog, check.errors)
    app.emit(dialog.confirm())

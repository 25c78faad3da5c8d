"""Commands: create and validate entity records through their forms."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from garagenet.commands._base import GarageCommand, entity_argument
from garagenet.commands._drafts import (
    apply_assignments,
    apply_list_edits,
    file_and_set_options,
    list_options,
    load_draft_file,
    prompt_for_errors,
)
from garagenet.services.forms import FormController, get_form
from garagenet.services.result import ServiceResult, validation_failure

if TYPE_CHECKING:
    from garagenet.commands._context import AppContext
    from garagenet.domain.types import EntityName


def _build_form(
    entity: EntityName,
    draft_file: Any,
    assignments: tuple[str, ...],
    adds: tuple[str, ...],
    toggles: tuple[str, ...],
) -> FormController:
    form = get_form(entity)
    form.update(load_draft_file(draft_file))
    apply_list_edits(form, adds, ())
    apply_assignments(form, assignments)
    apply_list_edits(form, (), toggles)
    return form


@click.command(
    cls=GarageCommand,
    examples="""\
  garagenet create garage --file garage.json
  garagenet create garage --set name="Combat Customs" --set address.state=NY \\
      --set contacts.0.name="J Smith" --set contacts.0.phone=5551234567 \\
      --toggle specialties=Choppers --toggle amenities=Welding
  garagenet create part --set name=Carburetor --set category=ENGINE --set condition=NEW \\
      --set cost='$150' --set garageId=garage123
  garagenet --json create event --file event.json""",
)
@entity_argument()
@file_and_set_options
@list_options
@click.pass_obj
def create(
    app: AppContext,
    entity: EntityName,
    draft_file: Any,
    assignments: tuple[str, ...],
    adds: tuple[str, ...],
    toggles: tuple[str, ...],
) -> None:
    """Create an ENTITY record in the directory.

    ENTITY is one of: garage, club, project, part, project-part, event,
    ride, event-registration.
    """
    form = _build_form(entity, draft_file, assignments, adds, toggles)
    if app.interactive:
        check = form.validate()
        if not check.ok:
            prompt_for_errors(form, check.errors)
    app.emit(form.submit(app.clients))


@click.command(
    cls=GarageCommand,
    examples="""\
  garagenet validate club --file club.json
  garagenet validate garage --set name="Combat Customs" --set contacts.0.phone=555""",
)
@entity_argument()
@file_and_set_options
@list_options
@click.pass_obj
def validate(
    app: AppContext,
    entity: EntityName,
    draft_file: Any,
    assignments: tuple[str, ...],
    adds: tuple[str, ...],
    toggles: tuple[str, ...],
) -> None:
    """Check an ENTITY draft without creating anything."""
    form = _build_form(entity, draft_file, assignments, adds, toggles)
    result = form.validate()
    op = f"validate_{form.op.removeprefix('create_')}"
    if not result.ok:
        app.emit(validation_failure(op, result.messages()))
        return
    from garagenet.domain.payloads import to_create_payload

    app.emit(
        ServiceResult(
            ok=True,
            op=op,
            data={"entity": entity.value, "payload": to_create_payload(result.value)},
        )
    )

"""Shared draft-input options: ``--file``, ``--set``, ``--add``, ``--toggle``.

Input is applied in a fixed order: file, added items, assignments,
toggles.  ``--set`` values stay strings unless they are JSON literals
(``true``, ``false``, ``null``) or JSON arrays/objects/quoted strings;
numeric fields coerce strings themselves, so ``--set zip=01234`` keeps
its leading zero.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeVar

import click

from garagenet.domain.paths import FieldPath
from garagenet.services.base import DraftService
from garagenet.services.forms import FormController

F = TypeVar("F", bound=Callable[..., Any])

_JSON_LITERALS = {"true": True, "false": False, "null": None}


def parse_value(raw: str) -> Any:
    if raw in _JSON_LITERALS:
        return _JSON_LITERALS[raw]
    if raw[:1] in ("[", "{", '"'):
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise click.BadParameter(f"Invalid JSON value {raw!r}: {exc.msg}") from exc
    return raw


def parse_assignment(raw: str, option: str = "--set") -> tuple[FieldPath, str]:
    """Split ``path=value`` into a structured path and the raw value."""
    path, sep, value = raw.partition("=")
    if not sep or not path.strip():
        raise click.BadParameter(f"Expected PATH=VALUE, got {raw!r}", param_hint=option)
    try:
        return FieldPath.parse(path.strip()), value
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint=option) from exc


def file_and_set_options(func: F) -> F:
    func = click.option(
        "--set",
        "assignments",
        multiple=True,
        metavar="PATH=VALUE",
        help="Set a draft field (repeatable, e.g. --set contacts.0.phone=5551234567).",
    )(func)
    func = click.option(
        "--file",
        "draft_file",
        type=click.File("r", encoding="utf-8"),
        default=None,
        help="JSON object with draft values ('-' for stdin).",
    )(func)
    return func


def list_options(func: F) -> F:
    func = click.option(
        "--toggle",
        "toggles",
        multiple=True,
        metavar="FIELD=VALUE",
        help="Toggle a value in a selection list (e.g. --toggle specialties=Choppers).",
    )(func)
    func = click.option(
        "--add",
        "adds",
        multiple=True,
        metavar="FIELD",
        help="Append a blank item to a repeatable list (e.g. --add contacts).",
    )(func)
    return func


def load_draft_file(draft_file: Any) -> dict[str, Any]:
    if draft_file is None:
        return {}
    try:
        data = json.load(draft_file)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Invalid JSON: {exc.msg}", param_hint="--file") from exc
    if not isinstance(data, dict):
        raise click.BadParameter("Expected a JSON object", param_hint="--file")
    return data


def apply_assignments(service: DraftService, assignments: tuple[str, ...]) -> None:
    for raw in assignments:
        path, value = parse_assignment(raw)
        try:
            service.set_value(path, parse_value(value))
        except (KeyError, IndexError, TypeError) as exc:
            raise click.BadParameter(f"Cannot set {path}: {exc}", param_hint="--set") from exc


def apply_list_edits(
    form: FormController,
    adds: tuple[str, ...],
    toggles: tuple[str, ...],
) -> None:
    for field_name in adds:
        try:
            form.add_item(field_name)
        except (KeyError, TypeError, ValueError) as exc:
            raise click.BadParameter(str(exc), param_hint="--add") from exc
    for raw in toggles:
        path, value = parse_assignment(raw, "--toggle")
        try:
            form.toggle(path, value)
        except (KeyError, TypeError, ValueError) as exc:
            raise click.BadParameter(str(exc), param_hint="--toggle") from exc


def prompt_for_errors(service: DraftService, errors: dict[FieldPath, str]) -> None:
    """Ask once for each failing field whose draft value is plain text or a number."""
    for path, message in sorted(errors.items()):
        try:
            current = service.get_value(path)
        except (KeyError, IndexError):
            current = ""
        if not isinstance(current, (str, int, float)) or isinstance(current, bool):
            continue
        raw = click.prompt(f"{path} ({message})", default=str(current), show_default=False)
        service.set_value(path, parse_value(raw))

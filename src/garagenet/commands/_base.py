"""Custom Click base class with --examples support, plus entity arguments.

GarageCommand accepts an ``examples`` parameter.  When ``--examples``
is passed, the command prints usage examples and exits.
"""

from __future__ import annotations

import re
from typing import Any

import click

from garagenet.domain.types import EntityName


def entity_slug(entity: EntityName) -> str:
    """CLI spelling of an entity: ``ProjectPart`` -> ``project-part``."""
    return "-".join(word.lower() for word in re.findall(r"[A-Z][a-z]*", entity.value))


ENTITY_CHOICES: dict[str, EntityName] = {entity_slug(e): e for e in EntityName}


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class GarageCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def entity_argument() -> Any:
    """``ENTITY`` positional argument resolved to an :class:`EntityName`."""

    def _convert(_ctx: click.Context, _param: click.Parameter, value: str) -> EntityName:
        return ENTITY_CHOICES[value]

    return click.argument(
        "entity",
        metavar="ENTITY",
        type=click.Choice(sorted(ENTITY_CHOICES), case_sensitive=False),
        callback=_convert,
    )

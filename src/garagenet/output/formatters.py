"""Human and JSON rendering of ServiceResult.

Human mode prints a status line, the key fields of the result, and for
validation failures one line per offending field so the message sits
next to the field it belongs to.  JSON mode dumps the result verbatim.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.text import Text

from garagenet.output.console import create_console, get_output, style_for_code

if TYPE_CHECKING:
    from rich.console import Console

    from garagenet.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags relevant to rendering."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _render_quiet(result)
    return _render_human(result, verbose=settings.verbose)


def _render_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    record_id = result.data.get("id")
    return str(record_id) if record_id else f"OK: {result.op}"


def _value_text(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def _field(console: Console, key: str, value: Any) -> None:
    k = (f"  {key}: ", "gn.key")
    if key == "id" or key.endswith("Id"):
        v = (_value_text(value), "gn.id")
    elif key == "auth_mode":
        v = (_value_text(value), "gn.mode")
    else:
        v = (_value_text(value), "")
    console.print(Text.assemble(k, v), soft_wrap=True)


def _render_human(result: ServiceResult, *, verbose: bool) -> str:
    console = create_console()
    if result.ok:
        console.print(Text("OK", style="gn.ok"), Text(f"  {result.op}", style="gn.op"))
        for key, value in result.data.items():
            if key == "payload" and result.op.startswith("create_") and not verbose:
                continue
            _field(console, key, value)
    else:
        err = result.error
        msg = err.message if err else "Unknown error"
        console.print(
            Text("ERROR", style=style_for_code(err.code if err else None)),
            Text(f"  {result.op}", style="gn.op"),
            Text(f" - {msg}"),
        )
        for path, field_msg in result.field_errors.items():
            console.print(Text.assemble((f"  {path}", "gn.path"), f": {field_msg}"))
        if verbose and err and err.detail:
            for key, value in err.detail.items():
                if key != "errors":
                    _field(console, key, value)
    if verbose and result.meta:
        for key, value in result.meta.items():
            _field(console, key, value)
    return get_output(console).rstrip("\n")

"""Rich console and theme used by the human formatter.

Output is rendered into a StringIO buffer and returned as a string, so
commands decide where it goes (stdout or stderr).  Rich drops colour on
its own when the buffer is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GARAGENET_THEME = Theme(
    {
        "gn.ok": "bold green",
        "gn.error": "bold red",
        "gn.invalid": "bold yellow",
        "gn.busy": "yellow",
        "gn.op": "bold cyan",
        "gn.key": "dim",
        "gn.id": "bold blue",
        "gn.path": "magenta",
        "gn.mode": "cyan",
    }
)

# Failures the user fixes by editing the draft read differently from
# failures of the service itself.
_CODE_STYLES: dict[str, str] = {
    "VALIDATION_FAILED": "gn.invalid",
    "SUBMIT_IN_PROGRESS": "gn.busy",
    "DIALOG_CLOSED": "gn.busy",
}


def style_for_code(code: str | None) -> str:
    """Theme style for the ERROR label of a failed result."""
    return _CODE_STYLES.get(code or "", "gn.error")


def create_console(*, no_color: bool = False, width: int = 120) -> Console:
    return Console(
        file=StringIO(),
        theme=GARAGENET_THEME,
        no_color=no_color,
        highlight=False,
        width=width,
    )


def get_output(console: Console) -> str:
    """Everything printed to *console* so far."""
    buffer = console.file
    if not isinstance(buffer, StringIO):
        raise TypeError("console was not created by create_console()")
    return buffer.getvalue()

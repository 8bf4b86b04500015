"""Rich Console factory and theme for rangepick output.

Consoles render into a StringIO buffer so renderers stay pure
``ServiceResult -> str`` functions.  Off a TTY (tests, pipes) Rich
drops the color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RANGE_THEME = Theme(
    {
        "rp.ok": "bold green",
        "rp.error": "bold red",
        "rp.warning": "bold yellow",
        "rp.op": "bold cyan",
        "rp.key": "dim",
        "rp.header": "bold",
        "rp.day": "none",
        "rp.day.other": "dim",
        "rp.day.selected": "bold reverse",
        "rp.day.range": "on blue",
        "rp.day.disabled": "strike dim",
        "rp.day.blackout": "red strike",
        "rp.day.today": "underline",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=RANGE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def day_style(cell: dict[str, object]) -> str:
    """Rich style for a serialized day cell; the strongest flag wins."""
    if cell.get("is_selected"):
        return "rp.day.selected"
    if cell.get("is_blackout"):
        return "rp.day.blackout"
    if cell.get("is_disabled"):
        return "rp.day.disabled"
    if cell.get("is_in_range"):
        return "rp.day.range"
    if not cell.get("is_current_month"):
        return "rp.day.other"
    return "rp.day"

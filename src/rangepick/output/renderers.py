"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import calendar
import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from rangepick.output.console import create_console, day_style, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from rangepick.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    rng = result.data.get("normalized") or result.data.get("range")
    if isinstance(rng, dict) and rng.get("start"):
        return f"{rng['start']} {rng.get('end') or ''}".rstrip()
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="rp.ok")
    op = Text(f"  {result.op}", style="rp.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="rp.key")
    console.print(k, Text(str(value)), end="")
    console.print()


def _render_errors(console: Console, errors: list[dict[str, Any]]) -> None:
    for err in errors:
        console.print(
            Text("  ✗ ", style="rp.error"),
            Text(f"[{err['field']}] ", style="rp.warning"),
            Text(err["message"]),
            end="",
        )
        console.print()


def _day_label(cell: dict[str, Any]) -> Text:
    """Day number with plain-text markers that survive no-color output."""
    day = str(int(cell["date"][-2:]))
    if cell["is_selected"]:
        label = f"[{day}]"
    elif cell["is_blackout"]:
        label = f"{day}x"
    elif cell["is_disabled"]:
        label = f"({day})"
    elif cell["is_in_range"]:
        label = f"·{day}·"
    else:
        label = day
    text = Text(label, style=day_style(cell))
    if cell["is_today"]:
        text.stylize("rp.day.today")
    return text


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rp.error")
    op = Text(f"  {result.op}", style="rp.op")
    console.print(label, op, Text(" — "), msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Grid renderer ─────────────────────────────────────────────────────


def _render_month(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    title = f"{calendar.month_name[d['month']]} {d['year']}"
    table = Table(title=title, show_header=True, show_lines=False, pad_edge=False)
    for label in d["weekdays"]:
        table.add_column(label, justify="right", style="rp.header", no_wrap=True)
    for week in d["weeks"]:
        table.add_row(*(_day_label(cell) for cell in week))
    console.print(table)
    console.print(Text("  [d] selected  ·d· in range  (d) disabled  dx blackout", style="dim"))
    if verbose:
        _field(console, "range", json.dumps(d.get("range"), separators=(",", ":")))


# ── Selection renderers ───────────────────────────────────────────────


def _render_selection(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render select/preset/time/validate/navigate results."""
    _status_line(console, result)
    d = result.data
    for key in ("key", "focus", "action", "consumed", "preset", "picked"):
        if d.get(key) is not None:
            _field(console, key, d[key])
    rng = d.get("normalized") if result.op == "validate" else d.get("range")
    if isinstance(rng, dict):
        _field(console, "phase", rng.get("phase"))
        _field(console, "start", rng.get("start") or "—")
        _field(console, "end", rng.get("end") or "—")
    if d.get("blackout_in_range"):
        _field(console, "blackout_in_range", ", ".join(d["blackout_in_range"]))
    errors = d.get("errors") or []
    if errors:
        console.print()
        _render_errors(console, errors)
    elif "valid" in d:
        _field(console, "valid", d["valid"])


def _render_item_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_presets / list_timezones results as a table."""
    items: list[dict[str, Any]] = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    columns = list(items[0]) if items else []
    for col in columns:
        table.add_column(col.replace("_", " ").title(), no_wrap=True)
    for item in items:
        table.add_row(*(str(item.get(col) or "") for col in columns))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} items")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose and result.meta:
        for key, value in result.meta.items():
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "render_month": _render_month,
    "select_date": _render_selection,
    "apply_preset": _render_selection,
    "set_time": _render_selection,
    "validate": _render_selection,
    "navigate": _render_selection,
    "list_presets": _render_item_table,
    "list_timezones": _render_item_table,
}

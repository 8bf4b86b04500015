"""Keyboard navigation policy for the calendar focus date.

Maps a key name to a focus delta.  Only Enter/Space and Escape carry an
action beyond moving focus; unknown keys are reported as not consumed so
the caller can let them propagate.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from rangepick.domain.dates import add_days, add_months, weekday_index
from rangepick.domain.types import NavAction


@dataclass(frozen=True)
class NavOutcome:
    """Result of one key press."""

    focus: datetime
    action: NavAction | None
    consumed: bool


_MOVES: dict[str, Callable[[datetime], datetime]] = {
    "arrowleft": lambda d: add_days(d, -1),
    "arrowright": lambda d: add_days(d, 1),
    "arrowup": lambda d: add_days(d, -7),
    "arrowdown": lambda d: add_days(d, 7),
    "home": lambda d: add_days(d, -weekday_index(d)),
    "end": lambda d: add_days(d, 6 - weekday_index(d)),
    "pageup": lambda d: add_months(d, -1),
    "pagedown": lambda d: add_months(d, 1),
}

_ACTIONS: dict[str, NavAction] = {
    "enter": NavAction.SELECT,
    " ": NavAction.SELECT,
    "space": NavAction.SELECT,
    "spacebar": NavAction.SELECT,
    "escape": NavAction.CLOSE,
    "esc": NavAction.CLOSE,
}

_ALIASES: dict[str, str] = {
    "left": "arrowleft",
    "right": "arrowright",
    "up": "arrowup",
    "down": "arrowdown",
}


def _normalize_key(key: str) -> str:
    if key == " ":
        return key
    name = key.strip().casefold().replace("_", "").replace("-", "")
    return _ALIASES.get(name, name)


def navigate(key: str, focus: datetime) -> NavOutcome:
    """Apply *key* to the current *focus* date."""
    name = _normalize_key(key)
    move = _MOVES.get(name)
    if move is not None:
        return NavOutcome(focus=move(focus), action=NavAction.MOVE, consumed=True)
    action = _ACTIONS.get(name)
    if action is not None:
        return NavOutcome(focus=focus, action=action, consumed=True)
    return NavOutcome(focus=focus, action=None, consumed=False)


def known_keys() -> list[str]:
    """Canonical key names the policy consumes."""
    return [*_MOVES, *(k for k in _ACTIONS if k != " ")]

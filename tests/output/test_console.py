"""Tests for the Rich console factory and day styles."""

import pytest

from rangepick.output.console import create_console, day_style, get_output


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console()
        console.print("[rp.ok]OK[/rp.ok]")
        assert get_output(console).strip() == "OK"

    def test_width(self) -> None:
        assert create_console(width=40).width == 40


class TestDayStyle:
    BASE = {
        "is_current_month": True,
        "is_selected": False,
        "is_blackout": False,
        "is_disabled": False,
        "is_in_range": False,
    }

    @pytest.mark.parametrize(
        ("flags", "expected"),
        [
            ({}, "rp.day"),
            ({"is_current_month": False}, "rp.day.other"),
            ({"is_in_range": True}, "rp.day.range"),
            ({"is_in_range": True, "is_disabled": True}, "rp.day.disabled"),
            ({"is_disabled": True, "is_blackout": True}, "rp.day.blackout"),
            ({"is_selected": True, "is_blackout": True}, "rp.day.selected"),
        ],
    )
    def test_strongest_flag_wins(self, flags: dict[str, bool], expected: str) -> None:
        assert day_style({**self.BASE, **flags}) == expected

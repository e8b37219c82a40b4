from __future__ import annotations

import curses

import pytest

from typedefender.core.errors import ViewportTooSmallError
from typedefender.core.events import Backspace, CharInsert, Escape, Navigate, Submit
from typedefender.ui.screens import Menu
from typedefender.ui.terminal import check_viewport, display_width, translate_key


class FakeWindow:
    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols

    def getmaxyx(self) -> tuple[int, int]:
        return self.rows, self.cols


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("a", CharInsert("a")),
        ("한", CharInsert("한")),
        ("\x1b", Escape()),
        ("\n", Submit()),
        (curses.KEY_ENTER, Submit()),
        (curses.KEY_RIGHT, Submit()),
        (curses.KEY_BACKSPACE, Backspace()),
        ("\x7f", Backspace()),
        (curses.KEY_UP, Navigate(delta=-1)),
        (curses.KEY_DOWN, Navigate(delta=1)),
        (curses.KEY_F1, None),
        ("\t", None),
    ],
)
def test_translate_key(key, expected) -> None:
    assert translate_key(key) == expected


def test_menu_wraps_both_ways() -> None:
    menu = Menu(items=("Afrikaans", "English", "Korean"))
    assert menu.current == "Afrikaans"

    menu.move(-1)
    assert menu.current == "Korean"

    menu.move(1)
    menu.move(1)
    assert menu.current == "English"


def test_menu_needs_items() -> None:
    with pytest.raises(ValueError):
        Menu(items=())


def test_viewport_below_minimum_is_rejected() -> None:
    with pytest.raises(ViewportTooSmallError) as e:
        check_viewport(FakeWindow(46, 120), min_rows=47)
    assert e.value.rows == 46
    assert e.value.min_rows == 47
    assert "at least 47 lines" in str(e.value)


def test_viewport_at_minimum_passes() -> None:
    assert check_viewport(FakeWindow(47, 120), min_rows=47) == (47, 120)


def test_display_width_counts_wide_glyphs_twice() -> None:
    assert display_width("cat") == 3
    assert display_width("고양이") == 6
    assert display_width("") == 0

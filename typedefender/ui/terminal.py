from __future__ import annotations

import curses
import unicodedata

from typedefender.config import GameSettings
from typedefender.core.errors import ViewportTooSmallError
from typedefender.core.events import Backspace, CharInsert, Escape, InputEvent, Navigate, Submit
from typedefender.game_loop import Frame

TITLE = "Type Defender"

# Colour pairs, by how far a word has travelled.
PAIR_SAFE = 1
PAIR_WARN = 2
PAIR_DANGER = 3
PAIR_TITLE = 4

_ESCAPE_KEYS = {"\x1b", 27}
_SUBMIT_KEYS = {"\n", "\r", curses.KEY_ENTER, 10, 13, curses.KEY_RIGHT}
_BACKSPACE_KEYS = {curses.KEY_BACKSPACE, "\b", "\x7f", 127, 8}


def translate_key(key: str | int) -> InputEvent | None:
    """Map a curses key (str from get_wch, or a KEY_* int) to an input event."""

    if key in _ESCAPE_KEYS:
        return Escape()
    if key in _SUBMIT_KEYS:
        return Submit()
    if key in _BACKSPACE_KEYS:
        return Backspace()
    if key == curses.KEY_UP:
        return Navigate(delta=-1)
    if key == curses.KEY_DOWN:
        return Navigate(delta=1)
    if isinstance(key, str) and len(key) == 1 and key.isprintable():
        return CharInsert(char=key)
    return None


def display_width(text: str) -> int:
    """Terminal cells taken by `text`; wide (e.g. Hangul) glyphs count twice."""
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)


def check_viewport(stdscr: curses.window, *, min_rows: int) -> tuple[int, int]:
    rows, cols = stdscr.getmaxyx()
    if rows < min_rows:
        raise ViewportTooSmallError(rows=rows, min_rows=min_rows)
    return rows, cols


def init_colors() -> None:
    if not curses.has_colors():
        return
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(PAIR_SAFE, curses.COLOR_GREEN, -1)
    curses.init_pair(PAIR_WARN, curses.COLOR_YELLOW, -1)
    curses.init_pair(PAIR_DANGER, curses.COLOR_RED, -1)
    curses.init_pair(PAIR_TITLE, curses.COLOR_CYAN, -1)


def progress_attr(progress: float) -> int:
    if not curses.has_colors():
        return curses.A_BOLD if progress >= 0.8 else curses.A_NORMAL
    if progress < 0.5:
        return curses.color_pair(PAIR_SAFE)
    if progress < 0.8:
        return curses.color_pair(PAIR_WARN)
    return curses.color_pair(PAIR_DANGER)


def put(win: curses.window, y: int, x: int, text: str, attr: int = curses.A_NORMAL) -> None:
    """addstr clipped to the window; never writes the bottom-right cell."""

    rows, cols = win.getmaxyx()
    if y < 0 or y >= rows or x < 0 or x >= cols:
        return
    limit = cols - x - (1 if y == rows - 1 else 0)
    if limit <= 0:
        return
    win.addstr(y, x, text[:limit], attr)


def draw_box(win: curses.window, *, top: int, left: int, height: int, width: int, title: str = "") -> None:
    if height < 2 or width < 2:
        return
    put(win, top, left, "+" + "-" * (width - 2) + "+")
    for y in range(top + 1, top + height - 1):
        put(win, y, left, "|")
        put(win, y, left + width - 1, "|")
    put(win, top + height - 1, left, "+" + "-" * (width - 2) + "+")
    if title:
        put(win, top, left + 2, f" {title} ", curses.color_pair(PAIR_TITLE) if curses.has_colors() else curses.A_BOLD)


class CursesRenderer:
    """Draws a game frame: one row per lane, then input / score / wpm panes."""

    def __init__(self, stdscr: curses.window, settings: GameSettings):
        self.stdscr = stdscr
        self.settings = settings

    def render(self, frame: Frame) -> None:
        scr = self.stdscr
        _, cols = check_viewport(scr, min_rows=self.settings.min_viewport_rows)
        scr.erase()

        lane_count = len(frame.lanes)
        field_height = lane_count + 2
        draw_box(scr, top=1, left=1, height=field_height, width=cols - 2, title=TITLE)

        # Inner width minus the border and a one-cell gutter.
        track = cols - 2 - 3
        for i, lane in enumerate(frame.lanes):
            if lane is None:
                continue
            column = int(lane.progress * max(track - display_width(lane.text), 0))
            put(scr, 2 + i, 2 + column, lane.text, progress_attr(lane.progress))

        bottom = 1 + field_height
        input_width = (cols - 2) // 2
        side_width = (cols - 2 - input_width) // 2
        draw_box(scr, top=bottom, left=1, height=3, width=input_width, title="Input")
        draw_box(scr, top=bottom, left=1 + input_width, height=3, width=side_width, title="Score")
        draw_box(scr, top=bottom, left=1 + input_width + side_width, height=3, width=side_width, title="WPM")

        visible = max(input_width - 3, 1)
        text = frame.input_text[-visible:]
        put(scr, bottom + 1, 2, text)
        put(scr, bottom + 1, 2 + input_width, f"{frame.score:.1f}")
        put(scr, bottom + 1, 2 + input_width + side_width, f"{frame.wpm:.1f}")
        scr.move(bottom + 1, min(2 + display_width(text), cols - 1))
        scr.refresh()


class CursesInput:
    """Keyboard input source with a bounded poll."""

    def __init__(self, stdscr: curses.window):
        self.stdscr = stdscr
        stdscr.keypad(True)

    def poll(self, timeout: float) -> InputEvent | None:
        self.stdscr.timeout(max(int(timeout * 1000), 0))
        try:
            key = self.stdscr.get_wch()
        except curses.error:
            # No key before the deadline.
            return None
        return translate_key(key)

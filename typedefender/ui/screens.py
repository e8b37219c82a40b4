from __future__ import annotations

import curses
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from typedefender.assets.registry import Language
from typedefender.config import GameSettings
from typedefender.core.events import Escape, Navigate, Submit
from typedefender.core.state import SessionState
from typedefender.game_loop import GameLoop, SessionOutcome, SessionResult
from typedefender.ui.terminal import (
    TITLE,
    CursesInput,
    CursesRenderer,
    check_viewport,
    draw_box,
    init_colors,
    put,
)

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Welcome to Type Defender!",
    "Type out the moving words before they reach the edge of the terminal.",
    "",
    "Controls:",
    " - Esc:   Quit game",
    " - Enter: Clear text input",
    "",
    "Note: for composed characters such as 한글, press Enter or Right-Arrow to complete a word.",
)


@dataclass(slots=True)
class Menu:
    """Selectable list that wraps around at both ends."""

    items: tuple[str, ...]
    selected: int = 0

    def __post_init__(self) -> None:
        if not self.items:
            raise ValueError("Menu needs at least one item")

    def move(self, delta: int) -> None:
        self.selected = (self.selected + delta) % len(self.items)

    @property
    def current(self) -> str:
        return self.items[self.selected]


def _draw_menu(scr: curses.window, menu: Menu, *, top: int, left: int, title: str) -> None:
    put(scr, top, left, title)
    for i, item in enumerate(menu.items):
        prefix = ">> " if i == menu.selected else "   "
        put(scr, top + 1 + i, left, prefix + item, curses.A_BOLD if i == menu.selected else curses.A_NORMAL)


def _run_menu(
    scr: curses.window,
    source: CursesInput,
    menu: Menu,
    *,
    settings: GameSettings,
    header: Sequence[str],
    title: str,
) -> str | None:
    """Show a menu until Enter (returns the item) or Esc (returns None)."""

    while True:
        _, cols = check_viewport(scr, min_rows=settings.min_viewport_rows)
        scr.erase()
        draw_box(scr, top=1, left=1, height=settings.min_viewport_rows - 2, width=cols - 2, title=TITLE)
        for i, line in enumerate(header):
            put(scr, 4 + i, 5, line)
        _draw_menu(scr, menu, top=6 + len(header), left=5, title=title)
        scr.refresh()

        event = source.poll(settings.poll_timeout)
        if isinstance(event, Escape):
            return None
        if isinstance(event, Navigate):
            menu.move(event.delta)
        elif isinstance(event, Submit):
            return menu.current


class CursesScreens:
    """The three screens of the shell, drawn with curses."""

    def __init__(self, stdscr: curses.window, settings: GameSettings):
        self.stdscr = stdscr
        self.settings = settings
        curses.curs_set(1)
        init_colors()
        self.input = CursesInput(stdscr)
        check_viewport(stdscr, min_rows=settings.min_viewport_rows)

    def home(self, languages: Sequence[Language]) -> Language | None:
        by_name = {lang.display_name: lang for lang in languages}
        menu = Menu(items=tuple(by_name))
        if self.settings.language.display_name in by_name:
            menu.selected = menu.items.index(self.settings.language.display_name)
        picked = _run_menu(
            self.stdscr,
            self.input,
            menu,
            settings=self.settings,
            header=HELP_TEXT,
            title="Select your language of choice:",
        )
        return None if picked is None else by_name[picked]

    def game(self, state: SessionState) -> SessionResult:
        check_viewport(self.stdscr, min_rows=state.settings.min_viewport_rows)
        self.stdscr.erase()
        loop = GameLoop(state, renderer=CursesRenderer(self.stdscr, state.settings), input_source=self.input)
        return loop.run()

    def end(self, result: SessionResult) -> bool:
        headline = "You cleared every word!" if result.outcome == SessionOutcome.won else "Game Over!"
        header = [headline, "", f"Score: {result.score:.1f}"]
        if result.escaped_word:
            header.append(f"'{result.escaped_word}' got through.")
        picked = _run_menu(
            self.stdscr,
            self.input,
            Menu(items=("Play again?", "Exit")),
            settings=self.settings,
            header=header,
            title="Options:",
        )
        return picked == "Play again?"

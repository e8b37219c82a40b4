from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CharInsert:
    char: str


@dataclass(frozen=True, slots=True)
class Backspace:
    pass


@dataclass(frozen=True, slots=True)
class Submit:
    pass


@dataclass(frozen=True, slots=True)
class Escape:
    pass


@dataclass(frozen=True, slots=True)
class Navigate:
    # -1 = up, +1 = down
    delta: int


InputEvent = CharInsert | Backspace | Submit | Escape | Navigate


@dataclass(slots=True)
class InputBuffer:
    """Text the player is currently typing."""

    value: str = ""

    def insert(self, char: str) -> None:
        self.value += char

    def backspace(self) -> None:
        self.value = self.value[:-1]

    def reset(self) -> None:
        self.value = ""

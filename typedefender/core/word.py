from __future__ import annotations

from dataclasses import dataclass

# Distance a word travels before it escapes.
TRACK_LENGTH = 100.0

# Slack for float accumulation of `x` (0.1 added 1000 times lands just short of 100).
_ESCAPE_EPSILON = 1e-9


@dataclass(slots=True, eq=False)
class Word:
    """A spawned, moving, typeable word.

    `text` is stored lowercased and never changes. `x` only grows while the word
    is live; once `found` is set the word no longer moves.
    """

    text: str
    lane: int
    speed: float
    x: float = 0.0
    found: bool = False

    @property
    def progress(self) -> float:
        return self.x / TRACK_LENGTH

    @property
    def escaped(self) -> bool:
        return self.x >= TRACK_LENGTH - _ESCAPE_EPSILON

    @property
    def live(self) -> bool:
        return not self.found

    def advance(self) -> None:
        if self.found:
            return
        self.x += self.speed

from __future__ import annotations

from dataclasses import dataclass

from typedefender.core.spawner import reset_countdown, spawn
from typedefender.core.state import SessionState
from typedefender.core.word import Word


@dataclass(frozen=True, slots=True)
class Continue:
    pass


@dataclass(frozen=True, slots=True)
class Escaped:
    """A word reached the edge: the round is lost."""

    word: Word


@dataclass(frozen=True, slots=True)
class Cleared:
    """Word bank exhausted and every word matched: the round is won."""

    score: float


TickResult = Continue | Escaped | Cleared

CONTINUE = Continue()


def tick(state: SessionState) -> TickResult:
    """Advance the simulation by one fixed step."""

    state.ticks += 1
    state.prune_found()

    if state.cleared:
        return Cleared(score=state.score)

    state.spawn_countdown -= 1
    if state.spawn_countdown <= 0:
        # Once the bank is empty the remaining words just play out.
        if state.bank:
            spawn(state)
        reset_countdown(state)

    for word in state.words:
        if not word.live:
            continue
        word.advance()
        if word.escaped:
            return Escaped(word=word)

    state.lanes.check_consistency(state.words)
    return CONTINUE

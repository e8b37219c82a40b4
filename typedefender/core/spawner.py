from __future__ import annotations

import logging

from typedefender.core.errors import WordBankExhaustedError
from typedefender.core.state import SessionState
from typedefender.core.word import Word

logger = logging.getLogger(__name__)


def spawn_speed(state: SessionState) -> float:
    s = state.settings
    jitter = state.rng.uniform(-s.speed_jitter, s.speed_jitter) if s.speed_jitter else 0.0
    return max(state.curve.base_speed(state.score) + jitter, s.speed_floor)


def spawn(state: SessionState) -> Word | None:
    """Put a random unused word into a random free lane.

    Returns None when every lane is taken. An empty word bank is a configuration
    problem (the list is too short for the session) and raises.
    """

    if not state.bank:
        raise WordBankExhaustedError("No more words left.")

    free = state.lanes.free_lanes()
    if not free:
        logger.debug("spawn skipped: no free lane")
        return None

    lane = state.rng.choice(free)
    text = state.bank.take_random().lower()
    word = Word(text=text, lane=lane, speed=spawn_speed(state))
    state.lanes.occupy(word)
    state.words.append(word)
    logger.debug("spawned %r lane=%d speed=%.4f remaining=%d", text, lane, word.speed, state.bank.remaining)
    return word


def reset_countdown(state: SessionState) -> None:
    state.wpm = state.curve.wpm(state.score)
    state.spawn_countdown = state.curve.spawn_interval(state.score)

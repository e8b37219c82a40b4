from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from typedefender.core.clock import Cleared, Escaped, tick
from typedefender.core.events import Backspace, CharInsert, Escape, InputBuffer, InputEvent, Submit
from typedefender.core.matcher import resolve
from typedefender.core.state import SessionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LaneView:
    text: str
    progress: float


@dataclass(frozen=True, slots=True)
class Frame:
    """Snapshot handed to the renderer once per frame."""

    lanes: tuple[LaneView | None, ...]
    score: float
    wpm: float
    input_text: str

    @property
    def live_count(self) -> int:
        return sum(1 for lane in self.lanes if lane is not None)


class RenderSink(Protocol):
    def render(self, frame: Frame) -> None:  # pragma: no cover
        ...


class InputSource(Protocol):
    def poll(self, timeout: float) -> InputEvent | None:  # pragma: no cover
        ...


class SessionOutcome(StrEnum):
    won = "won"
    lost = "lost"
    quit = "quit"


@dataclass(frozen=True, slots=True)
class SessionResult:
    outcome: SessionOutcome
    score: float
    ticks: int
    escaped_word: str | None = None


def build_frame(state: SessionState, buffer: InputBuffer) -> Frame:
    lanes = tuple(None if w is None else LaneView(text=w.text, progress=w.progress) for w in state.lanes)
    return Frame(lanes=lanes, score=state.score, wpm=state.wpm, input_text=buffer.value)


def apply_input(state: SessionState, buffer: InputBuffer, event: InputEvent) -> None:
    """Feed one edit event into the buffer. Escape is handled by the caller."""

    if isinstance(event, CharInsert):
        # Words never contain spaces, so space is not an edit.
        if event.char.isspace() or not event.char.isprintable():
            return
        buffer.insert(event.char)
    elif isinstance(event, Backspace):
        buffer.backspace()
    elif isinstance(event, Submit):
        # Enter commits whatever is composed (IME input) and clears the buffer.
        resolve(state, buffer.value)
        buffer.reset()


class GameLoop:
    """Single-threaded frame driver: update, draw, poll input, sleep."""

    def __init__(
        self,
        state: SessionState,
        *,
        renderer: RenderSink,
        input_source: InputSource,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        max_frames: int | None = None,
    ):
        self.state = state
        self.renderer = renderer
        self.input_source = input_source
        self.buffer = InputBuffer()
        self._clock = clock
        self._sleep = sleep
        self._max_frames = max_frames

    def _result(self, outcome: SessionOutcome, *, escaped_word: str | None = None) -> SessionResult:
        logger.info("session %s score=%.1f ticks=%d", outcome.value, self.state.score, self.state.ticks)
        return SessionResult(
            outcome=outcome,
            score=self.state.score,
            ticks=self.state.ticks,
            escaped_word=escaped_word,
        )

    def step(self) -> SessionResult | None:
        """Run one frame without pacing. Returns a result once the session ends."""

        state = self.state
        outcome = tick(state)
        if isinstance(outcome, Escaped):
            return self._result(SessionOutcome.lost, escaped_word=outcome.word.text)
        if isinstance(outcome, Cleared):
            return self._result(SessionOutcome.won)

        if self.buffer.value and resolve(state, self.buffer.value):
            self.buffer.reset()

        self.renderer.render(build_frame(state, self.buffer))

        event = self.input_source.poll(state.settings.poll_timeout)
        if isinstance(event, Escape):
            return self._result(SessionOutcome.quit)
        if event is not None:
            apply_input(state, self.buffer, event)
        return None

    def run(self) -> SessionResult:
        frame_seconds = self.state.settings.frame_seconds
        frames = 0
        while True:
            started = self._clock()
            result = self.step()
            if result is not None:
                return result

            frames += 1
            if self._max_frames is not None and frames >= self._max_frames:
                return self._result(SessionOutcome.quit)

            remaining = frame_seconds - (self._clock() - started)
            if remaining > 0:
                self._sleep(remaining)

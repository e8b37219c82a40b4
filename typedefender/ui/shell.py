from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import Protocol

from typedefender.assets.registry import GameAssets, Language
from typedefender.config import GameSettings
from typedefender.core.state import SessionState
from typedefender.fsm import SessionFSM, SessionPhase
from typedefender.game_loop import SessionOutcome, SessionResult

logger = logging.getLogger(__name__)


class Screens(Protocol):
    def home(self, languages: Sequence[Language]) -> Language | None:  # pragma: no cover
        ...

    def game(self, state: SessionState) -> SessionResult:  # pragma: no cover
        ...

    def end(self, result: SessionResult) -> bool:  # pragma: no cover
        ...


def new_session(*, assets: GameAssets, settings: GameSettings, language: Language, index: int = 0) -> SessionState:
    """Fresh word bank and lane table for one round."""

    session_settings = settings.model_copy(update={"language": language})
    seed = None if settings.seed is None else settings.seed + index
    return SessionState.new(
        words=assets.load_words(language),
        settings=session_settings,
        rng=random.Random(seed),
    )


def run_shell(
    screens: Screens,
    *,
    assets: GameAssets,
    settings: GameSettings,
    skip_home: bool = False,
) -> SessionFSM:
    """Drive home -> game -> end screens until the player exits."""

    fsm = SessionFSM()
    result: SessionResult | None = None
    while not fsm.finished:
        phase = fsm.phase
        if phase == SessionPhase.home_select:
            language = settings.language if skip_home else screens.home(assets.languages)
            if language is None:
                fsm.quit()
            else:
                fsm.start(language=language)

        elif phase == SessionPhase.playing:
            if fsm.language is None:
                raise RuntimeError("Session started without a language")
            state = new_session(assets=assets, settings=settings, language=fsm.language, index=fsm.sessions_played)
            logger.info("session start language=%s words=%d", fsm.language.value, state.bank.remaining)
            result = screens.game(state)
            if result.outcome == SessionOutcome.won:
                fsm.win(score=result.score)
            elif result.outcome == SessionOutcome.lost:
                fsm.lose(score=result.score)
            else:
                fsm.last_score = result.score
                fsm.quit()

        else:
            if result is None:
                raise RuntimeError(f"No session result in phase {phase.value}")
            if screens.end(result):
                fsm.replay()
            else:
                fsm.quit()
    return fsm

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass, field

from typedefender.config import GameSettings
from typedefender.core.difficulty import DifficultyCurve, RewardShape
from typedefender.core.lanes import LaneTable
from typedefender.core.scoring import ScoreTracker
from typedefender.core.word import Word
from typedefender.core.word_bank import WordBank


@dataclass(slots=True)
class SessionState:
    """Everything one game session mutates, passed explicitly to each component."""

    settings: GameSettings
    bank: WordBank
    lanes: LaneTable
    scorer: ScoreTracker
    curve: DifficultyCurve
    rng: random.Random
    words: list[Word] = field(default_factory=list)
    spawn_countdown: int = 0
    wpm: float = 0.0
    ticks: int = 0

    @staticmethod
    def new(
        *,
        words: Iterable[str],
        settings: GameSettings | None = None,
        rng: random.Random | None = None,
    ) -> "SessionState":
        settings = settings or GameSettings()
        rng = rng or random.Random(settings.seed)
        curve = DifficultyCurve.from_settings(settings)
        return SessionState(
            settings=settings,
            bank=WordBank(words, rng=rng),
            lanes=LaneTable(settings.lane_count),
            scorer=ScoreTracker(reward=RewardShape.from_settings(settings)),
            curve=curve,
            rng=rng,
            spawn_countdown=settings.initial_spawn_countdown,
            wpm=curve.wpm(0.0),
        )

    @property
    def language(self) -> str:
        return self.settings.language.value

    @property
    def score(self) -> float:
        return self.scorer.score

    def live_words(self) -> list[Word]:
        return [w for w in self.words if w.live]

    def prune_found(self) -> None:
        """Forget matched words; their lanes were already released."""
        self.words = [w for w in self.words if w.live]

    @property
    def cleared(self) -> bool:
        return not self.bank and not self.live_words()

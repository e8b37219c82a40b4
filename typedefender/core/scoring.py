from __future__ import annotations

import logging
from dataclasses import dataclass, field

from typedefender.core.difficulty import RewardShape

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScoreTracker:
    reward: RewardShape
    score: float = 0.0
    matches: int = 0
    history: list[float] = field(default_factory=list)

    def award(self, progress: float, speed: float) -> float:
        """Add the reward for one matched word and return it."""

        delta = self.reward(progress, speed)
        self.score += delta
        self.matches += 1
        self.history.append(delta)
        logger.debug("award progress=%.3f speed=%.4f delta=%.2f score=%.2f", progress, speed, delta, self.score)
        return delta

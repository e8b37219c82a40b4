from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typedefender.config import GameSettings


@dataclass(frozen=True, slots=True)
class DifficultyCurve:
    """Score-driven difficulty.

    Both spawn cadence and word speed hang off the same words-per-minute value,
    which rises with score and flattens out toward `max_wpm`.
    """

    min_wpm: float
    max_wpm: float
    score_scale: float
    tick_rate: int
    speed_divisor: float

    @staticmethod
    def from_settings(settings: "GameSettings") -> "DifficultyCurve":
        return DifficultyCurve(
            min_wpm=settings.min_wpm,
            max_wpm=settings.max_wpm,
            score_scale=settings.score_scale,
            tick_rate=settings.tick_rate,
            speed_divisor=settings.speed_divisor,
        )

    def wpm(self, score: float) -> float:
        score = max(score, 0.0)
        saturation = 1.0 - math.exp(-score / self.score_scale)
        return self.min_wpm + (self.max_wpm - self.min_wpm) * saturation

    def base_speed(self, score: float) -> float:
        return self.wpm(score) / self.tick_rate / self.speed_divisor

    def spawn_interval(self, score: float) -> int:
        """Ticks between two spawns at the given score."""
        return max(1, round((60.0 / self.wpm(score)) * self.tick_rate))


@dataclass(frozen=True, slots=True)
class RewardShape:
    """Reward for a kill, steeply favouring words matched early."""

    constant: float
    exponent: float

    @staticmethod
    def from_settings(settings: "GameSettings") -> "RewardShape":
        return RewardShape(constant=settings.reward_constant, exponent=settings.reward_exponent)

    def __call__(self, progress: float, speed: float) -> float:
        headroom = min(max(1.0 - progress, 0.0), 1.0)
        return self.constant * headroom**self.exponent * max(speed, 0.0)

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from typedefender.assets.registry import Language
from typedefender.core.errors import ConfigurationError

ENV_PREFIX = "TYPEDEFENDER_"

# Headroom subtracted from the frame budget when polling for input.
POLL_MARGIN_SECONDS = 0.005


class GameSettings(BaseModel):
    """Tunable knobs for a session.

    The difficulty and reward constants are game balance, not contracts, so they
    all live here rather than in the simulation code.
    """

    model_config = ConfigDict(frozen=True)

    language: Language = Language.english
    tick_rate: int = Field(30, ge=1, le=240)
    lane_count: int = Field(40, ge=1, le=200)
    min_viewport_rows: int = Field(47, ge=1)
    initial_spawn_countdown: int = Field(20, ge=1)

    # Words-per-minute curve: min_wpm at score 0, saturating toward max_wpm.
    min_wpm: float = Field(30.0, gt=0)
    max_wpm: float = Field(120.0, gt=0)
    score_scale: float = Field(600.0, gt=0)

    # Per-tick speed derived from wpm, plus symmetric jitter, clamped to the floor.
    speed_divisor: float = Field(20.0, gt=0)
    speed_jitter: float = Field(0.02, ge=0)
    speed_floor: float = Field(0.01, gt=0)

    # delta = reward_constant * (1 - progress) ** reward_exponent * speed
    reward_constant: float = Field(500.0, ge=0)
    reward_exponent: float = Field(3.0, ge=1)

    seed: int | None = None

    @field_validator("language", mode="before")
    @classmethod
    def _normalize_language(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().casefold()
        return v

    @model_validator(mode="after")
    def _check_wpm_range(self) -> "GameSettings":
        if self.max_wpm < self.min_wpm:
            raise ValueError("max_wpm must be >= min_wpm")
        return self

    @property
    def frame_seconds(self) -> float:
        return 1.0 / self.tick_rate

    @property
    def poll_timeout(self) -> float:
        return max(self.frame_seconds - POLL_MARGIN_SECONDS, 0.0)


def build_settings(values: Mapping[str, Any]) -> GameSettings:
    try:
        return GameSettings.model_validate(dict(values))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


def settings_from_env(*, overrides: Mapping[str, Any] | None = None) -> GameSettings:
    """Read `TYPEDEFENDER_<FIELD>` variables, then apply explicit overrides.

    Example:
        TYPEDEFENDER_TICK_RATE=60 TYPEDEFENDER_LANGUAGE=korean type-defender
    """

    values: dict[str, Any] = {}
    for name in GameSettings.model_fields:
        raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None and raw.strip():
            values[name] = raw.strip()
    for k, v in (overrides or {}).items():
        if v is not None:
            values[k] = v
    return build_settings(values)

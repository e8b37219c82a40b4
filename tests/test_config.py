from __future__ import annotations

import pytest

from typedefender.assets.registry import Language
from typedefender.config import GameSettings, build_settings, settings_from_env
from typedefender.core.errors import ConfigurationError


def test_defaults() -> None:
    s = GameSettings()
    assert s.tick_rate == 30
    assert s.lane_count == 40
    assert s.min_viewport_rows == 47
    assert s.language == Language.english
    assert s.frame_seconds == pytest.approx(1 / 30)
    assert s.poll_timeout == pytest.approx(1 / 30 - 0.005)


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TYPEDEFENDER_TICK_RATE", "60")
    monkeypatch.setenv("TYPEDEFENDER_LANGUAGE", " Korean ")
    monkeypatch.setenv("TYPEDEFENDER_REWARD_EXPONENT", "2.5")

    s = settings_from_env()

    assert s.tick_rate == 60
    assert s.language == Language.korean
    assert s.reward_exponent == 2.5


def test_overrides_win_over_env_and_none_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TYPEDEFENDER_TICK_RATE", "60")
    s = settings_from_env(overrides={"tick_rate": 45, "seed": None, "language": "afrikaans"})
    assert s.tick_rate == 45
    assert s.seed is None
    assert s.language == Language.afrikaans


def test_invalid_env_value_is_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TYPEDEFENDER_TICK_RATE", "0")
    with pytest.raises(ConfigurationError) as e:
        settings_from_env()
    assert "tick_rate" in str(e.value)


def test_unknown_language_rejected() -> None:
    with pytest.raises(ConfigurationError):
        build_settings({"language": "klingon"})


def test_wpm_range_must_be_ordered() -> None:
    with pytest.raises(ConfigurationError) as e:
        build_settings({"min_wpm": 100, "max_wpm": 50})
    assert "max_wpm" in str(e.value)

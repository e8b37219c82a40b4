from __future__ import annotations

import pytest

from typedefender.config import GameSettings
from typedefender.core.difficulty import DifficultyCurve, RewardShape
from typedefender.core.scoring import ScoreTracker


def _curve() -> DifficultyCurve:
    return DifficultyCurve.from_settings(GameSettings())


def test_wpm_starts_at_minimum_and_saturates() -> None:
    curve = _curve()
    assert curve.wpm(0.0) == pytest.approx(30.0)
    assert curve.wpm(1e9) == pytest.approx(120.0)

    values = [curve.wpm(s) for s in range(0, 5000, 50)]
    assert values == sorted(values)
    assert all(v <= 120.0 for v in values)

    # Growth flattens out: later increments are smaller than early ones.
    assert curve.wpm(600) - curve.wpm(0) > curve.wpm(3000) - curve.wpm(2400)


def test_negative_score_is_treated_as_zero() -> None:
    assert _curve().wpm(-50.0) == pytest.approx(30.0)


def test_spawn_interval_from_wpm() -> None:
    curve = _curve()
    # (60 / 30 wpm) * 30 ticks/s
    assert curve.spawn_interval(0.0) == 60
    assert curve.spawn_interval(1e9) == 15


def test_base_speed_follows_wpm() -> None:
    curve = _curve()
    assert curve.base_speed(0.0) == pytest.approx(30.0 / 30 / 20)
    assert curve.base_speed(1000.0) > curve.base_speed(0.0)


def test_reward_favors_early_kills() -> None:
    reward = RewardShape(constant=500.0, exponent=3.0)
    assert reward(0.0, 0.1) == pytest.approx(50.0)
    assert reward(0.5, 0.1) == pytest.approx(6.25)
    assert reward(0.9, 0.1) < reward(0.5, 0.1) < reward(0.1, 0.1)
    # Cubic: halfway through is worth an eighth of an instant kill.
    assert reward(0.5, 1.0) == pytest.approx(reward(0.0, 1.0) / 8)


def test_reward_never_negative() -> None:
    reward = RewardShape(constant=500.0, exponent=3.0)
    assert reward(1.2, 0.1) == 0.0
    assert reward(-0.5, 0.1) == pytest.approx(50.0)


def test_score_tracker_is_additive() -> None:
    tracker = ScoreTracker(reward=RewardShape(constant=500.0, exponent=3.0))
    d1 = tracker.award(0.0, 0.1)
    d2 = tracker.award(0.5, 0.1)

    assert tracker.score == pytest.approx(d1 + d2)
    assert tracker.matches == 2
    assert tracker.history == [d1, d2]

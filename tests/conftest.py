from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import pytest

from typedefender.config import GameSettings
from typedefender.core.state import SessionState
from typedefender.core.word import Word


@pytest.fixture(scope="session", autouse=True)
def _init_assets_from_test_fixtures() -> None:
    """Initialize word lists from `tests/assets` so tests never read the real ones."""

    from typedefender.assets.singleton import init_assets, reset_assets_for_tests

    reset_assets_for_tests()
    init_assets(project_root=Path(__file__).resolve().parent)


@pytest.fixture()
def make_state() -> Callable[..., SessionState]:
    """Seeded SessionState factory; keyword arguments override GameSettings fields."""

    def _make(words: Iterable[str], **overrides: Any) -> SessionState:
        settings = GameSettings.model_validate({"seed": 1234, **overrides})
        return SessionState.new(words=words, settings=settings, rng=random.Random(settings.seed))

    return _make


@pytest.fixture()
def place() -> Callable[..., Word]:
    """Put a word straight into a lane, bypassing the spawner."""

    def _place(state: SessionState, text: str, *, lane: int, speed: float = 0.1, x: float = 0.0) -> Word:
        word = Word(text=text, lane=lane, speed=speed, x=x)
        state.lanes.occupy(word)
        state.words.append(word)
        return word

    return _place

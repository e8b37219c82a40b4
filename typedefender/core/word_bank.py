from __future__ import annotations

import random
from collections.abc import Iterable

from typedefender.core.errors import WordBankExhaustedError


class WordBank:
    """Pool of words not yet spawned this session. Removal is destructive."""

    __slots__ = ("_words", "_rng")

    def __init__(self, words: Iterable[str], *, rng: random.Random | None = None):
        self._words: list[str] = [w for w in words if w]
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self._words)

    def __bool__(self) -> bool:
        return bool(self._words)

    @property
    def remaining(self) -> int:
        return len(self._words)

    def take_random(self) -> str:
        if not self._words:
            raise WordBankExhaustedError("No more words left.")
        idx = self._rng.randrange(len(self._words))
        # Order doesn't matter, so swap-remove instead of shifting the list.
        self._words[idx], self._words[-1] = self._words[-1], self._words[idx]
        return self._words.pop()

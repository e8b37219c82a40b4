from __future__ import annotations

from collections.abc import Iterable, Iterator

from typedefender.core.errors import InvariantViolationError
from typedefender.core.word import Word

DEFAULT_LANE_COUNT = 40


class LaneTable:
    """Fixed set of lanes, each free or owned by exactly one live word.

    Lanes hold a reference to their occupying word, so lookups by lane never
    scan the word list.
    """

    __slots__ = ("_slots",)

    def __init__(self, size: int = DEFAULT_LANE_COUNT):
        if size <= 0:
            raise ValueError("size must be > 0")
        self._slots: list[Word | None] = [None] * size

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[Word | None]:
        return iter(self._slots)

    def __getitem__(self, lane: int) -> Word | None:
        return self._slots[lane]

    def free_lanes(self) -> list[int]:
        return [i for i, w in enumerate(self._slots) if w is None]

    def occupied_count(self) -> int:
        return sum(1 for w in self._slots if w is not None)

    def flags(self) -> list[int]:
        """Occupancy view: 1 for an occupied lane, 0 for a free one."""
        return [0 if w is None else 1 for w in self._slots]

    def occupy(self, word: Word) -> None:
        current = self._slots[word.lane]
        if current is not None:
            raise InvariantViolationError(f"Lane {word.lane} already occupied by {current.text!r}")
        self._slots[word.lane] = word

    def release(self, word: Word) -> None:
        if self._slots[word.lane] is not word:
            raise InvariantViolationError(f"Lane {word.lane} is not owned by {word.text!r}")
        self._slots[word.lane] = None

    def check_consistency(self, words: Iterable[Word]) -> None:
        """Raise if occupancy and the live words disagree."""

        live = [w for w in words if w.live]
        for idx, w in enumerate(self._slots):
            if w is None:
                continue
            if w.found or w.lane != idx:
                raise InvariantViolationError(f"Lane {idx} is marked occupied without a live word")
        for w in live:
            if self._slots[w.lane] is not w:
                raise InvariantViolationError(f"Live word {w.text!r} is not registered in lane {w.lane}")
        if len(live) != self.occupied_count():
            raise InvariantViolationError(
                f"{self.occupied_count()} occupied lanes for {len(live)} live words"
            )

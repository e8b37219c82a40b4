from __future__ import annotations


class GameError(RuntimeError):
    """Base class for fatal conditions raised out of the simulation core."""


class ConfigurationError(GameError):
    """The session cannot start or continue because of how it was set up."""


class WordBankExhaustedError(ConfigurationError):
    pass


class ViewportTooSmallError(ConfigurationError):
    def __init__(self, *, rows: int, min_rows: int):
        super().__init__(f"Console should be at least {min_rows} lines tall (got {rows})")
        self.rows = rows
        self.min_rows = min_rows


class InvariantViolationError(GameError):
    """Internal state no longer adds up; this is a bug, not a user error."""

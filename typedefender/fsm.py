from __future__ import annotations

from enum import StrEnum

from statemachine import State, StateMachine

from typedefender.assets.registry import Language


class SessionPhase(StrEnum):
    home_select = "home_select"
    playing = "playing"
    won = "won"
    lost = "lost"
    exited = "exited"


class SessionFSM(StateMachine):
    """Screen flow for the terminal shell.

    home_select -> playing -> won | lost -> home_select (replay); quitting is
    allowed from every screen and is final.
    """

    home_select = State(SessionPhase.home_select.value, value=SessionPhase.home_select.value, initial=True)
    playing = State(SessionPhase.playing.value, value=SessionPhase.playing.value)
    won = State(SessionPhase.won.value, value=SessionPhase.won.value)
    lost = State(SessionPhase.lost.value, value=SessionPhase.lost.value)
    exited = State(SessionPhase.exited.value, value=SessionPhase.exited.value, final=True)

    start = home_select.to(playing)
    win = playing.to(won)
    lose = playing.to(lost)
    replay = won.to(home_select) | lost.to(home_select)
    quit = home_select.to(exited) | playing.to(exited) | won.to(exited) | lost.to(exited)

    def __init__(self) -> None:
        self.language: Language | None = None
        self.last_score: float = 0.0
        self.sessions_played: int = 0
        super().__init__()

    @property
    def phase(self) -> SessionPhase:
        return SessionPhase(str(self.current_state.value))

    @property
    def finished(self) -> bool:
        return self.phase == SessionPhase.exited

    def before_start(self, language: Language) -> None:
        self.language = language
        self.last_score = 0.0

    def before_win(self, score: float) -> None:
        self.last_score = score
        self.sessions_played += 1

    def before_lose(self, score: float) -> None:
        self.last_score = score
        self.sessions_played += 1

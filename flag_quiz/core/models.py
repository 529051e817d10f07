"""Domain models for the flag quiz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class SessionPhase(Enum):
    """Stage of round progression that drives what the renderer may show."""

    AWAITING_GUESS = auto()
    SHOWING_RESULT = auto()
    GAME_OVER = auto()


@dataclass(frozen=True, slots=True)
class GuessResult:
    """Feedback for the most recent guess."""

    is_correct: bool
    chosen_country: str

    @classmethod
    def correct(cls, country: str) -> GuessResult:
        return cls(is_correct=True, chosen_country=country)

    @classmethod
    def incorrect(cls, country: str) -> GuessResult:
        return cls(is_correct=False, chosen_country=country)


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Immutable snapshot of a quiz session returned to renderers."""

    options: tuple[str, ...]
    target_country: str
    score: int
    round: int
    total_rounds: int
    last_result: GuessResult | None
    phase: SessionPhase

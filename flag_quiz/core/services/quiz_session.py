"""Service owning the state machine of a single flag quiz session."""

from __future__ import annotations

from collections.abc import Iterable
import logging
import random

from flag_quiz.constants.quiz_constants import DEFAULT_COUNTRIES, OPTIONS_PER_ROUND, TOTAL_ROUNDS
from flag_quiz.core.models import GuessResult, SessionPhase, SessionSnapshot

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when an intent is not allowed in the current phase or has a bad argument."""


class QuizSession:
    """Manages rounds, scoring and phase transitions of one game.

    The renderer drives the session through three intents:

    * ``submit_guess`` while awaiting a guess,
    * ``acknowledge_result`` once the feedback has been dismissed,
    * ``restart`` from any phase.

    Rejected intents raise ``InvalidInputError`` and leave the state untouched.
    """

    def __init__(
        self,
        pool: Iterable[str] = DEFAULT_COUNTRIES,
        total_rounds: int = TOTAL_ROUNDS,
        seed: int | None = None,
    ) -> None:
        self._pool: tuple[str, ...] = self._validate_pool(pool)
        if isinstance(total_rounds, bool) or not isinstance(total_rounds, int) or total_rounds < 1:
            raise ValueError("Total rounds must be a positive integer.")
        self._total_rounds: int = total_rounds

        self._shuffle_rng = random.Random(seed)
        self._options: tuple[str, ...] = ()
        self._correct_index: int = 0
        self._score: int = 0
        self._round: int = 1
        self._last_result: GuessResult | None = None
        self._phase: SessionPhase = SessionPhase.AWAITING_GUESS

        self.restart()

    @staticmethod
    def _validate_pool(pool: Iterable[str]) -> tuple[str, ...]:
        countries = tuple(pool)
        for country in countries:
            if not isinstance(country, str) or not country.strip():
                raise ValueError("Country identifiers must be non-empty strings.")
        if len(set(countries)) != len(countries):
            raise ValueError("Country pool must not contain duplicates.")
        if len(countries) < OPTIONS_PER_ROUND:
            raise ValueError(f"Country pool needs at least {OPTIONS_PER_ROUND} countries.")
        return countries

    # --- Read-only state ---

    @property
    def pool(self) -> tuple[str, ...]:
        return self._pool

    @property
    def options(self) -> tuple[str, ...]:
        return self._options

    @property
    def correct_index(self) -> int:
        return self._correct_index

    @property
    def target_country(self) -> str:
        return self._options[self._correct_index]

    @property
    def score(self) -> int:
        return self._score

    @property
    def round(self) -> int:
        return self._round

    @property
    def total_rounds(self) -> int:
        return self._total_rounds

    @property
    def last_result(self) -> GuessResult | None:
        return self._last_result

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def is_game_over(self) -> bool:
        return self._phase is SessionPhase.GAME_OVER

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            options=self._options,
            target_country=self.target_country,
            score=self._score,
            round=self._round,
            total_rounds=self._total_rounds,
            last_result=self._last_result,
            phase=self._phase,
        )

    # --- Intents ---

    def submit_guess(self, option_index: int) -> GuessResult:
        """Evaluate the tapped option and move on to showing the result."""
        self._require_phase(SessionPhase.AWAITING_GUESS, "submit a guess")
        if (
            isinstance(option_index, bool)
            or not isinstance(option_index, int)
            or not 0 <= option_index < len(self._options)
        ):
            logger.warning("Rejected guess with option index %r", option_index)
            raise InvalidInputError(
                f"Option index must be between 0 and {len(self._options) - 1}, got {option_index!r}."
            )

        chosen = self._options[option_index]
        if option_index == self._correct_index:
            self._score += 1
            self._last_result = GuessResult.correct(chosen)
        else:
            self._last_result = GuessResult.incorrect(chosen)

        self._set_phase(SessionPhase.SHOWING_RESULT)
        return self._last_result

    def acknowledge_result(self) -> None:
        """Advance to the next round, or finish the game after the last one."""
        self._require_phase(SessionPhase.SHOWING_RESULT, "acknowledge a result")
        if self._round >= self._total_rounds:
            self._set_phase(SessionPhase.GAME_OVER)
            logger.info("Game over with score %d of %d", self._score, self._total_rounds)
            return

        self._round += 1
        self._start_round()
        self._set_phase(SessionPhase.AWAITING_GUESS)

    def restart(self) -> None:
        """Reset the session in place so renderers keep their reference."""
        self._score = 0
        self._round = 1
        self._last_result = None
        self._start_round()
        self._set_phase(SessionPhase.AWAITING_GUESS)

    # --- Configuration ---

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._shuffle_rng.seed(seed)

    # --- Internals ---

    def _start_round(self) -> None:
        self._options = tuple(self._shuffle_rng.sample(self._pool, OPTIONS_PER_ROUND))
        self._correct_index = self._shuffle_rng.randrange(OPTIONS_PER_ROUND)
        logger.debug("Round %d options: %s (target %s)", self._round, self._options, self.target_country)

    def _require_phase(self, expected: SessionPhase, action: str) -> None:
        if self._phase is not expected:
            logger.warning("Cannot %s while in phase %s", action, self._phase.name)
            raise InvalidInputError(f"Cannot {action} while the session is in phase {self._phase.name}.")

    def _set_phase(self, phase: SessionPhase) -> None:
        if phase is not self._phase:
            logger.debug("Phase %s -> %s (round %d)", self._phase.name, phase.name, self._round)
        self._phase = phase

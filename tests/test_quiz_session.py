"""Tests for QuizSession round progression, scoring and phase transitions."""

import pytest

from flag_quiz.constants.quiz_constants import DEFAULT_COUNTRIES, OPTIONS_PER_ROUND, TOTAL_ROUNDS
from flag_quiz.core.models import GuessResult, SessionPhase, SessionSnapshot
from flag_quiz.core.services.quiz_session import InvalidInputError, QuizSession


@pytest.fixture
def session():
    return QuizSession(seed=1234)


def wrong_index(session):
    return next(i for i in range(OPTIONS_PER_ROUND) if i != session.correct_index)


def assert_valid_round(session):
    assert len(session.options) == OPTIONS_PER_ROUND
    assert len(set(session.options)) == OPTIONS_PER_ROUND
    assert set(session.options) <= set(session.pool)
    assert 0 <= session.correct_index < OPTIONS_PER_ROUND


def play_round(session, correct):
    index = session.correct_index if correct else wrong_index(session)
    session.submit_guess(index)
    session.acknowledge_result()


class TestNewSession:

    def test_starts_awaiting_first_guess(self, session):
        assert session.round == 1
        assert session.score == 0
        assert session.phase is SessionPhase.AWAITING_GUESS
        assert session.last_result is None
        assert session.total_rounds == TOTAL_ROUNDS == 8
        assert_valid_round(session)

    def test_default_pool_is_the_eleven_countries(self, session):
        assert session.pool == DEFAULT_COUNTRIES
        assert len(session.pool) == 11

    def test_target_country_is_the_correct_option(self, session):
        assert session.target_country == session.options[session.correct_index]


class TestSubmitGuess:

    def test_correct_guess_scores_and_shows_result(self, session):
        options = session.options
        result = session.submit_guess(session.correct_index)

        assert session.score == 1
        assert result == GuessResult.correct(session.target_country)
        assert session.last_result == result
        assert result.is_correct
        assert session.phase is SessionPhase.SHOWING_RESULT
        assert session.round == 1
        assert session.options == options

    def test_incorrect_guess_reports_chosen_country(self, session):
        index = wrong_index(session)
        chosen = session.options[index]
        options = session.options

        session.submit_guess(index)

        assert session.score == 0
        assert session.last_result == GuessResult.incorrect(chosen)
        assert not session.last_result.is_correct
        assert session.phase is SessionPhase.SHOWING_RESULT
        assert session.round == 1
        assert session.options == options

    @pytest.mark.parametrize("bad_index", [-1, 3, 5, 100, True, 1.0, "0", None])
    def test_rejects_invalid_index_without_mutation(self, session, bad_index):
        before = session.snapshot()

        with pytest.raises(InvalidInputError):
            session.submit_guess(bad_index)

        assert session.snapshot() == before

    def test_rejects_second_guess_while_showing_result(self, session):
        session.submit_guess(session.correct_index)
        before = session.snapshot()

        with pytest.raises(InvalidInputError):
            session.submit_guess(session.correct_index)

        assert session.snapshot() == before
        assert session.score == 1

    def test_invalid_input_error_is_a_value_error(self, session):
        with pytest.raises(ValueError):
            session.submit_guess(5)


class TestAcknowledgeResult:

    def test_advances_round_below_total(self, session):
        session.submit_guess(session.correct_index)
        session.acknowledge_result()

        assert session.round == 2
        assert session.phase is SessionPhase.AWAITING_GUESS
        assert session.score == 1
        assert_valid_round(session)

    def test_last_round_ends_game_without_incrementing(self, session):
        for _ in range(TOTAL_ROUNDS - 1):
            play_round(session, correct=True)
        assert session.round == TOTAL_ROUNDS

        session.submit_guess(session.correct_index)
        session.acknowledge_result()

        assert session.phase is SessionPhase.GAME_OVER
        assert session.is_game_over
        assert session.round == TOTAL_ROUNDS
        assert session.score == TOTAL_ROUNDS

    def test_rejected_while_awaiting_guess(self, session):
        before = session.snapshot()

        with pytest.raises(InvalidInputError):
            session.acknowledge_result()

        assert session.snapshot() == before

    def test_rejected_after_game_over(self, session):
        for _ in range(TOTAL_ROUNDS):
            play_round(session, correct=False)
        before = session.snapshot()

        with pytest.raises(InvalidInputError):
            session.acknowledge_result()
        with pytest.raises(InvalidInputError):
            session.submit_guess(0)

        assert session.snapshot() == before

    def test_keeps_last_result_after_advancing(self, session):
        session.submit_guess(session.correct_index)
        result = session.last_result
        session.acknowledge_result()

        assert session.last_result == result


class TestFullGame:

    def test_game_over_after_exactly_total_rounds(self, session):
        for played in range(1, TOTAL_ROUNDS + 1):
            assert session.phase is SessionPhase.AWAITING_GUESS
            play_round(session, correct=played % 2 == 0)
        assert session.phase is SessionPhase.GAME_OVER
        assert session.score == TOTAL_ROUNDS // 2

    def test_invariants_hold_across_a_game(self, session):
        previous_score = 0
        while not session.is_game_over:
            assert_valid_round(session)
            assert 1 <= session.round <= TOTAL_ROUNDS
            session.submit_guess(session.correct_index if session.round % 3 else wrong_index(session))
            assert session.score >= previous_score
            assert session.score <= session.round
            previous_score = session.score
            session.acknowledge_result()
        assert session.score <= session.round

    def test_custom_round_count(self):
        session = QuizSession(total_rounds=2, seed=7)
        play_round(session, correct=True)
        play_round(session, correct=True)

        assert session.is_game_over
        assert session.round == 2


class TestRestart:

    def test_restart_from_game_over(self, session):
        for _ in range(TOTAL_ROUNDS):
            play_round(session, correct=True)

        session.restart()

        assert session.phase is SessionPhase.AWAITING_GUESS
        assert session.round == 1
        assert session.score == 0
        assert session.last_result is None
        assert_valid_round(session)

    def test_restart_mid_round_while_showing_result(self, session):
        session.submit_guess(session.correct_index)
        session.restart()

        assert session.phase is SessionPhase.AWAITING_GUESS
        assert session.score == 0
        assert session.last_result is None

    def test_restart_twice_equals_once(self, session):
        play_round(session, correct=True)
        session.restart()
        once = session.snapshot()
        session.restart()
        twice = session.snapshot()

        for snapshot in (once, twice):
            assert snapshot.score == 0
            assert snapshot.round == 1
            assert snapshot.phase is SessionPhase.AWAITING_GUESS
            assert snapshot.last_result is None
        assert len(twice.options) == OPTIONS_PER_ROUND

    def test_restart_keeps_identity(self, session):
        original_id = id(session)
        session.restart()
        assert id(session) == original_id


class TestSnapshot:

    def test_snapshot_mirrors_state(self, session):
        session.submit_guess(session.correct_index)
        snapshot = session.snapshot()

        assert isinstance(snapshot, SessionSnapshot)
        assert snapshot.options == session.options
        assert snapshot.target_country == session.target_country
        assert snapshot.score == 1
        assert snapshot.round == 1
        assert snapshot.total_rounds == TOTAL_ROUNDS
        assert snapshot.last_result == session.last_result
        assert snapshot.phase is SessionPhase.SHOWING_RESULT

    def test_snapshot_is_immutable(self, session):
        snapshot = session.snapshot()
        with pytest.raises(AttributeError):
            snapshot.score = 10

    def test_snapshot_does_not_follow_later_changes(self, session):
        snapshot = session.snapshot()
        session.submit_guess(session.correct_index)

        assert snapshot.phase is SessionPhase.AWAITING_GUESS
        assert snapshot.score == 0


class TestShuffling:

    def test_same_seed_gives_same_rounds(self):
        first = QuizSession(seed=42)
        second = QuizSession(seed=42)

        for _ in range(TOTAL_ROUNDS):
            assert first.options == second.options
            assert first.correct_index == second.correct_index
            play_round(first, correct=True)
            play_round(second, correct=True)

    def test_set_shuffle_seed_makes_restart_reproducible(self, session):
        session.set_shuffle_seed(99)
        session.restart()
        first = (session.options, session.correct_index)

        session.set_shuffle_seed(99)
        session.restart()

        assert (session.options, session.correct_index) == first

    def test_every_option_position_can_be_correct(self):
        session = QuizSession(seed=3)
        seen = set()
        for _ in range(200):
            seen.add(session.correct_index)
            session.restart()
        assert seen == {0, 1, 2}

    def test_minimal_pool_uses_all_countries(self):
        session = QuizSession(pool=["Chad", "Peru", "Fiji"], seed=5)
        for _ in range(TOTAL_ROUNDS):
            assert sorted(session.options) == ["Chad", "Fiji", "Peru"]
            play_round(session, correct=False)


class TestConstruction:

    @pytest.mark.parametrize(
        "pool",
        [
            [],
            ["France", "Spain"],
            ["France", "Spain", "France"],
            ["France", "Spain", ""],
            ["France", "Spain", "   "],
            ["France", "Spain", 3],
        ],
    )
    def test_rejects_invalid_pool(self, pool):
        with pytest.raises(ValueError):
            QuizSession(pool=pool)

    @pytest.mark.parametrize("total_rounds", [0, -1, 2.5, True])
    def test_rejects_invalid_round_count(self, total_rounds):
        with pytest.raises(ValueError):
            QuizSession(total_rounds=total_rounds)

    def test_accepts_any_iterable_pool(self):
        session = QuizSession(pool=iter(["Chad", "Peru", "Fiji", "Cuba"]))
        assert session.pool == ("Chad", "Peru", "Fiji", "Cuba")

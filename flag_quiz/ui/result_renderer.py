"""Text rendering helpers for round prompts and result alerts."""

from __future__ import annotations

from flag_quiz.constants.ui_constants import (
    END_GAME_MESSAGE_TEMPLATE,
    RESULT_CORRECT_TITLE,
    RESULT_INCORRECT_TITLE_TEMPLATE,
    RESULT_MESSAGE_TEMPLATE,
    ROUND_LABEL_TEMPLATE,
    SCORE_LABEL_TEMPLATE,
)
from flag_quiz.core.models import GuessResult, SessionSnapshot


def render_result_title(result: GuessResult) -> str:
    if result.is_correct:
        return RESULT_CORRECT_TITLE
    return RESULT_INCORRECT_TITLE_TEMPLATE.format(country=result.chosen_country)


def render_result_message(snapshot: SessionSnapshot) -> str:
    return RESULT_MESSAGE_TEMPLATE.format(score=snapshot.score)


def render_end_game_message(snapshot: SessionSnapshot) -> str:
    return END_GAME_MESSAGE_TEMPLATE.format(score=snapshot.score)


def render_score_label(snapshot: SessionSnapshot) -> str:
    return SCORE_LABEL_TEMPLATE.format(score=snapshot.score)


def render_round_label(snapshot: SessionSnapshot) -> str:
    return ROUND_LABEL_TEMPLATE.format(round=snapshot.round, total_rounds=snapshot.total_rounds)

"""Qt UI components for the flag quiz."""

from .dialog_helpers import (
    show_error,
    show_game_over_alert,
    show_info,
    show_result_alert,
)
from .flag_images import flag_image_path, load_flag_icon
from .flag_quiz_window import FlagQuizWindow
from .result_renderer import (
    render_end_game_message,
    render_result_message,
    render_result_title,
    render_round_label,
    render_score_label,
)

__all__ = [
    "FlagQuizWindow",
    "flag_image_path",
    "load_flag_icon",
    "render_end_game_message",
    "render_result_message",
    "render_result_title",
    "render_round_label",
    "render_score_label",
    "show_error",
    "show_game_over_alert",
    "show_info",
    "show_result_alert",
]

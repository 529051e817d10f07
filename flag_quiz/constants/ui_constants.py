"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Guess the Flag"
HEADLINE_TEXT: str = "Guess the Flag"
PROMPT_TEXT: str = "Tap the flag of"

SCORE_LABEL_TEMPLATE: str = "Score: {score}"
ROUND_LABEL_TEMPLATE: str = "Round: {round} of {total_rounds}"

RESULT_CORRECT_TITLE: str = "Correct"
RESULT_INCORRECT_TITLE_TEMPLATE: str = "Wrong! That's the flag of {country}"
RESULT_MESSAGE_TEMPLATE: str = "Your score is {score}"
RESULT_CONTINUE_BUTTON: str = "Continue"

END_GAME_TITLE: str = "End Game"
END_GAME_MESSAGE_TEMPLATE: str = "Your final score is {score}"
END_GAME_RESTART_BUTTON: str = "Restart"

MENU_BUTTON_RESTART: str = "Restart"
MENU_BUTTON_SETTINGS: str = "Settings"
MENU_BUTTON_ABOUT: str = "About"
MENU_BUTTON_HELP: str = "Help"

FLAG_IMAGE_SUFFIX: str = ".png"
FLAG_ICON_WIDTH: int = 200
FLAG_ICON_HEIGHT: int = 100
FADED_FLAG_OPACITY: float = 0.25
PULSE_START_SCALE: float = 0.7

DEFAULT_UI_FONT_SIZE: int = 10
DEFAULT_GAME_FONT_SIZE: int = 14

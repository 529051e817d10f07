"""Qt main window rendering a flag quiz session."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QEasingCurve, QPropertyAnimation, QSize, Qt
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsOpacityEffect,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from flag_quiz.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from flag_quiz.constants.quiz_constants import OPTIONS_PER_ROUND
from flag_quiz.constants.ui_constants import (
    DEFAULT_GAME_FONT_SIZE,
    DEFAULT_UI_FONT_SIZE,
    END_GAME_RESTART_BUTTON,
    END_GAME_TITLE,
    FADED_FLAG_OPACITY,
    FLAG_ICON_HEIGHT,
    FLAG_ICON_WIDTH,
    HEADLINE_TEXT,
    MENU_BUTTON_ABOUT,
    MENU_BUTTON_HELP,
    MENU_BUTTON_RESTART,
    MENU_BUTTON_SETTINGS,
    PROMPT_TEXT,
    PULSE_START_SCALE,
    RESULT_CONTINUE_BUTTON,
    WINDOW_TITLE,
)
from flag_quiz.core.models import SessionPhase, SessionSnapshot
from flag_quiz.core.services.quiz_session import InvalidInputError, QuizSession
from flag_quiz.styling.styles import Styles
from flag_quiz.ui.dialog_helpers import show_error, show_game_over_alert, show_info, show_result_alert
from flag_quiz.ui.flag_images import DEFAULT_FLAG_DIRECTORY, load_flag_icon
from flag_quiz.ui.result_renderer import (
    render_end_game_message,
    render_result_message,
    render_result_title,
    render_round_label,
    render_score_label,
)
from flag_quiz.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class FlagQuizWindow(QMainWindow):
    """Main Qt window that renders session snapshots and forwards taps as intents."""

    def __init__(self, session: QuizSession, flag_directory: Path | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.session = session
        self.flag_directory = flag_directory or DEFAULT_FLAG_DIRECTORY

        self._ui_font_size: int = DEFAULT_UI_FONT_SIZE
        self._game_font_size: int = DEFAULT_GAME_FONT_SIZE
        self._shuffle_seed: int | None = None

        self.flag_buttons: list[QPushButton] = []
        self._opacity_effects: list[QGraphicsOpacityEffect] = []
        self._fade_animations: list[QPropertyAnimation] = []
        self._pulse_animation: QPropertyAnimation | None = None

        self._build_ui()
        self._apply_styles()
        self._refresh_view()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        central_widget.setObjectName("centralWidget")
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_menu_buttons(root_layout)
        root_layout.addStretch()

        self.headline_label = QLabel(HEADLINE_TEXT, self)
        self.headline_label.setObjectName("headlineLabel")
        self.headline_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.headline_label)

        self._build_flag_card(root_layout)
        root_layout.addStretch()

        self.score_label = QLabel("", self)
        self.score_label.setObjectName("scoreLabel")
        self.score_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.score_label)

        self.round_label = QLabel("", self)
        self.round_label.setObjectName("roundLabel")
        self.round_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.round_label)

    def _build_menu_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.restart_button = QPushButton(MENU_BUTTON_RESTART, self)
        self.restart_button.clicked.connect(self._handle_restart)
        button_row.addWidget(self.restart_button)

        button_row.addStretch()

        self.settings_button = QPushButton(MENU_BUTTON_SETTINGS, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        self.about_button = QPushButton(MENU_BUTTON_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(MENU_BUTTON_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        layout.addLayout(button_row)

    def _build_flag_card(self, layout: QVBoxLayout) -> None:
        card = QFrame(self)
        card.setObjectName("flagCard")
        card_layout = QVBoxLayout()
        card_layout.setSpacing(15)
        card_layout.setContentsMargins(20, 20, 20, 20)
        card.setLayout(card_layout)

        self.prompt_label = QLabel(PROMPT_TEXT, card)
        self.prompt_label.setObjectName("promptLabel")
        self.prompt_label.setAlignment(Qt.AlignCenter)
        card_layout.addWidget(self.prompt_label)

        self.target_label = QLabel("", card)
        self.target_label.setAlignment(Qt.AlignCenter)
        card_layout.addWidget(self.target_label)

        for index in range(OPTIONS_PER_ROUND):
            button = QPushButton(card)
            button.setObjectName("flagButton")
            button.setIconSize(QSize(FLAG_ICON_WIDTH, FLAG_ICON_HEIGHT))
            button.setMinimumHeight(FLAG_ICON_HEIGHT + 16)
            # Bind the index now; a bare lambda would capture the loop variable.
            button.clicked.connect(lambda _checked=False, i=index: self._handle_flag_tapped(i))

            effect = QGraphicsOpacityEffect(button)
            effect.setOpacity(1.0)
            button.setGraphicsEffect(effect)

            card_layout.addWidget(button, alignment=Qt.AlignHCenter)
            self.flag_buttons.append(button)
            self._opacity_effects.append(effect)

        layout.addWidget(card)

    # --- Intents ---

    def _handle_flag_tapped(self, option_index: int) -> None:
        try:
            result = self.session.submit_guess(option_index)
        except InvalidInputError as exc:
            show_error(self, "Guess rejected", str(exc))
            return

        logger.info(
            "Round %d: guessed %s (%s)",
            self.session.round,
            result.chosen_country,
            "correct" if result.is_correct else "wrong",
        )
        self._refresh_view()

        snapshot = self.session.snapshot()
        show_result_alert(
            self,
            render_result_title(result),
            render_result_message(snapshot),
            RESULT_CONTINUE_BUTTON,
            font_point_size=self._game_font_size,
        )
        self._handle_result_dismissed()

    def _handle_result_dismissed(self) -> None:
        try:
            self.session.acknowledge_result()
        except InvalidInputError as exc:
            show_error(self, "Cannot continue", str(exc))
            return
        self._refresh_view()

        if self.session.phase is SessionPhase.GAME_OVER:
            show_game_over_alert(
                self,
                END_GAME_TITLE,
                render_end_game_message(self.session.snapshot()),
                END_GAME_RESTART_BUTTON,
                font_point_size=self._game_font_size,
            )
            self._handle_restart()

    def _handle_restart(self) -> None:
        self.session.restart()
        logger.info("Game restarted")
        self._refresh_view()

    # --- Rendering ---

    def _refresh_view(self) -> None:
        snapshot = self.session.snapshot()
        self.target_label.setText(snapshot.target_country)
        self.score_label.setText(render_score_label(snapshot))
        self.round_label.setText(render_round_label(snapshot))

        awaiting_guess = snapshot.phase is SessionPhase.AWAITING_GUESS
        for index, button in enumerate(self.flag_buttons):
            self._render_flag_button(button, snapshot.options[index])
            button.setEnabled(awaiting_guess)

        self._render_flag_opacity(snapshot)

    def _render_flag_button(self, button: QPushButton, country: str) -> None:
        icon = load_flag_icon(country, self.flag_directory)
        if icon is None:
            button.setIcon(QIcon())
            button.setText(country)
        else:
            button.setIcon(icon)
            button.setText("")
        # Keep the name reachable when only the image is shown.
        button.setToolTip(country)

    def _render_flag_opacity(self, snapshot: SessionSnapshot) -> None:
        result = snapshot.last_result
        for animation in self._fade_animations:
            animation.stop()
        self._fade_animations = []
        if self._pulse_animation is not None:
            self._pulse_animation.stop()
            self._pulse_animation = None
        for button in self.flag_buttons:
            button.setIconSize(QSize(FLAG_ICON_WIDTH, FLAG_ICON_HEIGHT))

        if snapshot.phase is SessionPhase.AWAITING_GUESS or result is None or not result.is_correct:
            for effect in self._opacity_effects:
                effect.setOpacity(1.0)
            return

        chosen_index = snapshot.options.index(result.chosen_country)
        for index, effect in enumerate(self._opacity_effects):
            if index == chosen_index:
                effect.setOpacity(1.0)
                continue
            animation = QPropertyAnimation(effect, b"opacity")
            animation.setDuration(600)
            animation.setStartValue(effect.opacity())
            animation.setEndValue(FADED_FLAG_OPACITY)
            animation.setEasingCurve(QEasingCurve.OutBack)
            animation.start()
            self._fade_animations.append(animation)

        self._pulse_animation = self._pulse_flag(self.flag_buttons[chosen_index])

    def _pulse_flag(self, button: QPushButton) -> QPropertyAnimation:
        full_size = QSize(FLAG_ICON_WIDTH, FLAG_ICON_HEIGHT)
        animation = QPropertyAnimation(button, b"iconSize")
        animation.setDuration(1000)
        animation.setStartValue(full_size * PULSE_START_SCALE)
        animation.setEndValue(full_size)
        animation.setEasingCurve(QEasingCurve.OutElastic)
        animation.start()
        return animation

    # --- Menu actions ---

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._game_font_size,
            self._shuffle_seed,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._game_font_size = dialog.get_game_font_size()
            self._shuffle_seed = dialog.get_shuffle_seed()

            self.session.set_shuffle_seed(self._shuffle_seed)

            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())

        ui_style = f"font-size: {self._ui_font_size}pt;"
        for button in (self.restart_button, self.settings_button, self.about_button, self.help_button):
            button.setStyleSheet(ui_style)

        font_size = self._game_font_size
        self.headline_label.setStyleSheet(Styles.get_headline_style(font_size))
        self.prompt_label.setStyleSheet(Styles.get_prompt_style(font_size))
        self.target_label.setStyleSheet(Styles.get_target_style(font_size))
        self.score_label.setStyleSheet(Styles.get_score_style(font_size))
        self.round_label.setStyleSheet(Styles.get_round_style(font_size))
        for button in self.flag_buttons:
            button.setStyleSheet(f"font-size: {font_size}pt;")

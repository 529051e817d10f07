"""Application entry point for Guess the Flag."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from flag_quiz.core.services.quiz_session import QuizSession
from flag_quiz.ui.flag_quiz_window import FlagQuizWindow
from flag_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, create a quiz session, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting Guess the Flag")

    session = QuizSession()
    logger.info("Session ready: %d countries, %d rounds", len(session.pool), session.total_rounds)

    app = QApplication(sys.argv)
    window = FlagQuizWindow(session=session)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

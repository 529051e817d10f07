"""Helper functions for common dialog patterns in the game window."""

from __future__ import annotations

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QMessageBox, QWidget


def _apply_optional_font(widget: QWidget, font_point_size: int | None) -> None:
    """Apply font size to a widget when requested."""
    if font_point_size is None or font_point_size <= 0:
        return

    font: QFont = widget.font()
    font.setPointSize(font_point_size)
    widget.setFont(font)
    widget.setStyleSheet(
        f"QLabel {{ font-size: {font_point_size}pt; }}\n"
        f"QPushButton {{ font-size: {font_point_size}pt; }}"
    )


def _show_single_action_alert(
    parent: QWidget,
    title: str,
    message: str,
    button_text: str,
    font_point_size: int | None,
) -> None:
    msg_box = QMessageBox(parent)
    msg_box.setWindowTitle(title)
    msg_box.setText(title)
    msg_box.setInformativeText(message)
    button = msg_box.addButton(button_text, QMessageBox.ButtonRole.AcceptRole)
    msg_box.setDefaultButton(button)
    msg_box.setEscapeButton(button)
    _apply_optional_font(msg_box, font_point_size)
    msg_box.exec()


def show_result_alert(
    parent: QWidget,
    title: str,
    message: str,
    button_text: str,
    *,
    font_point_size: int | None = None,
) -> None:
    """Show the feedback for a guess and block until it is dismissed.

    Args:
        parent: Parent widget for the dialog
        title: "Correct" or the wrong-answer headline
        message: Current score text
        button_text: Label of the only button
    """
    _show_single_action_alert(parent, title, message, button_text, font_point_size)


def show_game_over_alert(
    parent: QWidget,
    title: str,
    message: str,
    button_text: str,
    *,
    font_point_size: int | None = None,
) -> None:
    """Show the final score and block until the player restarts.

    Args:
        parent: Parent widget for the dialog
        title: End-of-game headline
        message: Final score text
        button_text: Label of the only button
    """
    _show_single_action_alert(parent, title, message, button_text, font_point_size)


def show_error(parent: QWidget, title: str, message: str) -> None:
    """Show error dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Error message
    """
    QMessageBox.critical(parent, title, message)


def show_info(
    parent: QWidget,
    title: str,
    message: str,
    *,
    font_point_size: int | None = None,
) -> None:
    """Show information dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Information message
    """
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    msg_box.setStandardButtons(QMessageBox.Ok)
    _apply_optional_font(msg_box, font_point_size)
    msg_box.exec()

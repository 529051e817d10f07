"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        # Both stops share one position so the two colors meet at a hard edge.
        return f"""
            QMainWindow {{
                background: qradialgradient(cx: 0.5, cy: 0, radius: 1, fx: 0.5, fy: 0,
                    stop: 0 {ColorPalette.BACKGROUND_TOP.get(theme)},
                    stop: 0.45 {ColorPalette.BACKGROUND_TOP.get(theme)},
                    stop: 0.451 {ColorPalette.BACKGROUND_BOTTOM.get(theme)},
                    stop: 1 {ColorPalette.BACKGROUND_BOTTOM.get(theme)});
            }}
            QWidget#centralWidget {{
                background: transparent;
                font-family: 'Segoe UI', 'Roboto', sans-serif;
            }}
            QLabel#headlineLabel, QLabel#scoreLabel, QLabel#roundLabel {{
                color: {ColorPalette.TEXT_ON_BACKGROUND.get(theme)};
                background: transparent;
            }}
            QFrame#flagCard {{
                background-color: {ColorPalette.CARD_BG.get(theme)};
                border-radius: 20px;
            }}
            QFrame#flagCard QLabel {{
                background: transparent;
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QLabel#promptLabel {{
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton#flagButton {{
                border-radius: 30px;
                padding: 8px;
            }}
        """

    @staticmethod
    def get_headline_style(font_size: int) -> str:
        return f"font-size: {font_size + 12}pt; font-weight: bold;"

    @staticmethod
    def get_prompt_style(font_size: int) -> str:
        return f"font-size: {font_size}pt; font-weight: 800;"

    @staticmethod
    def get_target_style(font_size: int) -> str:
        return f"font-size: {font_size + 12}pt; font-weight: 600;"

    @staticmethod
    def get_score_style(font_size: int) -> str:
        return f"font-size: {font_size + 6}pt; font-weight: bold;"

    @staticmethod
    def get_round_style(font_size: int) -> str:
        return f"font-size: {max(8, font_size - 4)}pt;"

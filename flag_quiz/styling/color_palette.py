"""Color palette for the flag quiz supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    # Background gradient stops
    BACKGROUND_TOP = ThemeColors(
        light="#1A3373",      # Navy
        dark="#0D1A3A"        # Deep navy
    )

    BACKGROUND_BOTTOM = ThemeColors(
        light="#C22642",      # Crimson
        dark="#611321"        # Dark crimson
    )

    # Card behind the prompt and flags
    CARD_BG = ThemeColors(
        light="#F2F2F2",      # Frosted white
        dark="#2D2D2D"        # Dark gray
    )

    # Text colors
    TEXT_ON_BACKGROUND = ThemeColors(
        light="#FFFFFF",      # White
        dark="#F5F5F5"        # WhiteSmoke
    )

    TEXT_PRIMARY = ThemeColors(
        light="#000000",      # Black
        dark="#F5F5F5"        # WhiteSmoke
    )

    TEXT_SECONDARY = ThemeColors(
        light="#666666",      # Dark Gray
        dark="#AAAAAA"        # Light Gray
    )

    # Borders and buttons
    BORDER_PRIMARY = ThemeColors(
        light="#D1D1D1",      # Gray
        dark="#555555"        # Dark Gray
    )

    BUTTON_SECONDARY_BG = ThemeColors(
        light="#F5F5F5",      # WhiteSmoke
        dark="#3A3A3A"        # Dark Gray
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#E8E8E8",      # Light Gray
        dark="#505050"        # Medium Gray
    )

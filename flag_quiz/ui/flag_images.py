"""Lookup of flag image files by country identifier."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtGui import QIcon

from flag_quiz.constants.ui_constants import FLAG_IMAGE_SUFFIX

DEFAULT_FLAG_DIRECTORY: Path = Path(__file__).resolve().parents[1] / "data" / "flags"


def flag_image_path(country: str, directory: Path = DEFAULT_FLAG_DIRECTORY) -> Path | None:
    """Return the image file for a country, or None when no image is available."""
    candidate = directory / f"{country}{FLAG_IMAGE_SUFFIX}"
    if candidate.is_file():
        return candidate
    return None


def load_flag_icon(country: str, directory: Path = DEFAULT_FLAG_DIRECTORY) -> QIcon | None:
    path = flag_image_path(country, directory)
    if path is None:
        return None
    icon = QIcon(str(path))
    if icon.isNull():
        return None
    return icon

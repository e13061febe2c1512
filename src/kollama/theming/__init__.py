"""
Theming helpers.

Background contrast classification and icon asset selection so the panel
icon stays readable on the current theme.
"""

from .contrast import (
    ColorContrast,
    get_background_color_contrast,
    get_background_color_contrast_from_hex,
)
from .icon_paths import ICON_ASSET_DIR, choose_icon_path

__all__ = [
    "ColorContrast",
    "get_background_color_contrast",
    "get_background_color_contrast_from_hex",
    "ICON_ASSET_DIR",
    "choose_icon_path",
]

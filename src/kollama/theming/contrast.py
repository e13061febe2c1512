"""
Background color contrast classification.

Classifies a background color as ``dark`` or ``light`` from its luma so the
plasmoid can pick a readable icon variant.
"""

import logging
import math
import re
from enum import Enum
from typing import Optional

from PyQt6.QtGui import QColor

logger = logging.getLogger(__name__)

# Rec. 709 luma weights
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)
LUMA_THRESHOLD = 128

_HEX_PREFIX = re.compile(r"\s*([+-]?)([0-9a-fA-F]+)")


class ColorContrast(str, Enum):
    """Contrast category of a background color."""
    DARK = "dark"
    LIGHT = "light"

    def __str__(self) -> str:
        return self.value


def _parse_channel(pair: str) -> float:
    """Parse the leading hex digits of a channel pair, NaN if there are none."""
    match = _HEX_PREFIX.match(pair)
    if not match:
        return math.nan
    sign, digits = match.groups()
    value = int(digits, 16)
    return -value if sign == "-" else value


def get_background_color_contrast_from_hex(hex_color: Optional[str]) -> ColorContrast:
    """
    Classify a ``#rrggbb`` color string.

    Args:
        hex_color: Color string, ``#`` followed by six hex digits

    Returns:
        ColorContrast: DARK if luma > 128, LIGHT otherwise. Missing or short
        input is LIGHT. Digits are not validated; an unparseable channel
        makes the luma NaN, which also classifies as LIGHT.
    """
    if not hex_color or len(hex_color) < 7:
        return ColorContrast.LIGHT

    hex_digits = str(hex_color)[1:]
    r, g, b = (_parse_channel(hex_digits[i:i + 2]) for i in (0, 2, 4))
    luma = LUMA_WEIGHTS[0] * r + LUMA_WEIGHTS[1] * g + LUMA_WEIGHTS[2] * b
    if math.isnan(luma):
        logger.debug(f"Unparseable color {hex_color!r}, assuming light background")
    return ColorContrast.DARK if luma > LUMA_THRESHOLD else ColorContrast.LIGHT


def get_background_color_contrast(color: QColor) -> ColorContrast:
    """
    Classify a QColor, e.g. the theme's window background.

    Invalid colors classify as LIGHT.
    """
    if color is None or not color.isValid():
        return ColorContrast.LIGHT
    return get_background_color_contrast_from_hex(color.name())

"""Icon asset selection for the panel icon."""

from typing import Any, Mapping, Union

from kollama.protocols import PlasmoidConfig
from .contrast import ColorContrast

ICON_ASSET_DIR = "assets"

# Forced icon variants in priority order: (config field, asset name)
_FORCED_ICONS = (
    ("use_filled_dark_icon", "logo-filled-dark.svg"),
    ("use_filled_light_icon", "logo-filled-light.svg"),
    ("use_outlined_dark_icon", "logo-outlined-dark.svg"),
    ("use_outlined_light_icon", "logo-outlined-light.svg"),
)


def choose_icon_path(config: Union[PlasmoidConfig, Mapping[str, Any], None],
                     color_contrast: Union[ColorContrast, str]) -> str:
    """
    Choose the icon asset for the current configuration and background.

    Forced variants win in the order filled-dark, filled-light,
    outlined-dark, outlined-light. ``use_outlined_icon`` picks the outlined
    icon for ``color_contrast``; otherwise the filled icon for
    ``color_contrast`` is used.

    Args:
        config: PlasmoidConfig or host option mapping (camelCase keys)
        color_contrast: ``dark`` or ``light``

    Returns:
        str: Relative asset path such as ``assets/logo-filled-dark.svg``
    """
    if not isinstance(config, PlasmoidConfig):
        config = PlasmoidConfig.from_mapping(config)

    for field_name, asset in _FORCED_ICONS:
        if getattr(config, field_name):
            return f"{ICON_ASSET_DIR}/{asset}"

    contrast = str(color_contrast)
    if config.use_outlined_icon:
        return f"{ICON_ASSET_DIR}/logo-outlined-{contrast}.svg"
    return f"{ICON_ASSET_DIR}/logo-filled-{contrast}.svg"

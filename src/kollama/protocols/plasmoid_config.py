"""Plasmoid configuration flags.

Mirrors the options the plasmoid exposes in its settings page.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass
class PlasmoidConfig:
    """Configuration flags read by the plasmoid helpers.

    Attributes:
        debug_logs: Emit debug/info messages from ``debug_log``
        use_filled_dark_icon: Always show the filled dark icon
        use_filled_light_icon: Always show the filled light icon
        use_outlined_dark_icon: Always show the outlined dark icon
        use_outlined_light_icon: Always show the outlined light icon
        use_outlined_icon: Show the outlined icon matching the background
        server_url: Ollama server base URL, default server when None
    """

    debug_logs: bool = False
    use_filled_dark_icon: bool = False
    use_filled_light_icon: bool = False
    use_outlined_dark_icon: bool = False
    use_outlined_light_icon: bool = False
    use_outlined_icon: bool = False
    server_url: Optional[str] = None

    # Host (QML) option names for each field
    HOST_KEYS = {
        "debugLogs": "debug_logs",
        "useFilledDarkIcon": "use_filled_dark_icon",
        "useFilledLightIcon": "use_filled_light_icon",
        "useOutlinedDarkIcon": "use_outlined_dark_icon",
        "useOutlinedLightIcon": "use_outlined_light_icon",
        "useOutlinedIcon": "use_outlined_icon",
        "ollamaServerUrl": "server_url",
    }

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> 'PlasmoidConfig':
        """
        Build a config from the host's option mapping.

        Accepts both the host's camelCase names and the field names.
        Unknown keys are ignored.

        Args:
            mapping: Option name to value, may be None

        Returns:
            PlasmoidConfig: Config with unspecified flags left at defaults
        """
        if not mapping:
            return cls()

        field_names = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in mapping.items():
            name = cls.HOST_KEYS.get(key, key)
            if name not in field_names:
                logger.debug(f"Ignoring unknown plasmoid option: {key}")
                continue
            kwargs[name] = value if name == "server_url" else bool(value)
        return cls(**kwargs)


# Global config instance (set by the host)
_plasmoid_config: Optional[PlasmoidConfig] = None


def set_plasmoid_config(config: Optional[PlasmoidConfig]) -> None:
    """Set the host configuration, or None when running outside a host."""
    global _plasmoid_config
    _plasmoid_config = config


def get_plasmoid_config() -> Optional[PlasmoidConfig]:
    """Get the host configuration, None if no host registered one."""
    return _plasmoid_config

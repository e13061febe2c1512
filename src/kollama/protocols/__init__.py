"""
Host-facing protocols and configuration.

Configuration the plasmoid host hands to the helpers, and the protocol for
objects that can override the debug-log flag.
"""

from .plasmoid_config import PlasmoidConfig, set_plasmoid_config, get_plasmoid_config
from .config_override import ConfigOverride, ConfigProvider, read_flag

__all__ = [
    "PlasmoidConfig",
    "set_plasmoid_config",
    "get_plasmoid_config",
    "ConfigOverride",
    "ConfigProvider",
    "read_flag",
]

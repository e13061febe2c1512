"""
kollama: presentation helpers for the K-Ollama desktop plasmoid.

Small, stateless helpers used by the plasmoid UI when talking to a local
Ollama server.

Architecture:
- Tier 1 (Core): Caret checks, server URL assembly, model labels
- Tier 2 (Protocols): Host configuration dataclass and registry
- Tier 3 (Theming): Background contrast and icon selection
- Tier 4 (Services): Config-gated debug logger
"""

__version__ = "0.1.0"

from kollama.core import (
    DEFAULT_SERVER_URL,
    build_server_url,
    caret_is_on_first_line,
    get_server_url,
    parse_text_to_combo_box,
)
from kollama.protocols import PlasmoidConfig, get_plasmoid_config, set_plasmoid_config
from kollama.theming import (
    ColorContrast,
    choose_icon_path,
    get_background_color_contrast,
    get_background_color_contrast_from_hex,
)
from kollama.services import DebugLogger, LogCall, debug_log, debug_log_set_test_config

__all__ = [
    "__version__",
    "DEFAULT_SERVER_URL",
    "build_server_url",
    "caret_is_on_first_line",
    "get_server_url",
    "parse_text_to_combo_box",
    "PlasmoidConfig",
    "get_plasmoid_config",
    "set_plasmoid_config",
    "ColorContrast",
    "choose_icon_path",
    "get_background_color_contrast",
    "get_background_color_contrast_from_hex",
    "DebugLogger",
    "LogCall",
    "debug_log",
    "debug_log_set_test_config",
]

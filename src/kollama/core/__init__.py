"""
Core text and URL utilities.

Pure functions with no Qt or host dependencies. Inputs that are missing or
malformed degrade to documented defaults instead of raising.
"""

from .caret import caret_is_on_first_line
from .server_url import DEFAULT_SERVER_URL, build_server_url, get_server_url
from .model_label import parse_text_to_combo_box

__all__ = [
    "caret_is_on_first_line",
    "DEFAULT_SERVER_URL",
    "build_server_url",
    "get_server_url",
    "parse_text_to_combo_box",
]

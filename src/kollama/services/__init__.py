"""
Service layer.

Config-gated logging for plasmoid messages.
"""

from .debug_logger import (
    DebugLogger,
    LogCall,
    LogLevel,
    debug_log,
    debug_log_set_test_config,
    get_default_logger,
)

__all__ = [
    "DebugLogger",
    "LogCall",
    "LogLevel",
    "debug_log",
    "debug_log_set_test_config",
    "get_default_logger",
]

"""
Config-gated debug logging for plasmoid messages.

``warn`` and ``error`` messages are always emitted. ``debug`` and ``info``
messages are emitted only while the ``debugLogs`` option is on. The option is
read from a test override when one is installed, otherwise from the host
configuration. Logging must never break the UI, so every internal fault is
swallowed after being reported to this module's logger.

Usage:
    debug_log("debug", "Fetched models:", count)
    debug_log("error", "Request failed", status)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from kollama.protocols import ConfigOverride, ConfigProvider, get_plasmoid_config, read_flag

logger = logging.getLogger(__name__)

PLASMOID_LOGGER_NAME = "kollama.plasmoid"


class LogLevel(Enum):
    """Levels accepted by ``debug_log``."""
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @classmethod
    def parse(cls, name: str) -> Optional['LogLevel']:
        """Parse a lower-cased level name, None for unknown names."""
        try:
            return cls(name)
        except ValueError:
            return None


# Levels that need ``debugLogs`` to be emitted; unknown levels are not gated
GATED_LEVELS = (LogLevel.DEBUG, LogLevel.INFO)


@dataclass(frozen=True)
class LogCall:
    """An emitted log call: the lower-cased level name and message args."""
    level: str
    args: Tuple[Any, ...]

    @property
    def message(self) -> str:
        return " ".join(str(arg) for arg in self.args)


class DebugLogger:
    """
    Emits plasmoid log messages gated on the ``debugLogs`` option.

    Collaborators are injected so tests can control gating without a host:

        debug_logger = DebugLogger(config_provider=lambda: PlasmoidConfig(debug_logs=True))
        call = debug_logger.log("debug", "hello")
        assert call.message == "hello"

    Args:
        config_provider: Returns the host config, defaults to ``get_plasmoid_config``
        override: Object or mapping with a nested ``configuration`` whose
            ``debugLogs`` flag takes precedence over the host config
        sink: Logger receiving the messages, defaults to ``kollama.plasmoid``
    """

    def __init__(self, config_provider: Optional[ConfigProvider] = None,
                 override: Optional[ConfigOverride] = None,
                 sink: Optional[logging.Logger] = None):
        self._config_provider = config_provider or get_plasmoid_config
        self.override = override
        self.sink = sink or logging.getLogger(PLASMOID_LOGGER_NAME)
        self.last_call: Optional[LogCall] = None

    def set_override(self, override: Optional[ConfigOverride]) -> None:
        """Install or replace the override; None falls back to the host config."""
        self.override = override

    def debug_logs_enabled(self) -> bool:
        """Resolve the ``debugLogs`` option (override first, then host config)."""
        configuration = read_flag(self.override, "configuration") if self.override else None
        # Any configuration present decides, even one without ``debugLogs``
        if configuration is not None:
            return bool(read_flag(configuration, "debugLogs", "debug_logs"))

        config = self._config_provider()
        if config is None:
            return False
        return bool(config.debug_logs)

    def log(self, level: Any = None, *args: Any) -> Optional[LogCall]:
        """
        Emit ``args`` at ``level`` if the gate allows it.

        Returns:
            LogCall for an emitted message, None when suppressed or when an
            internal fault occurred. Never raises.
        """
        try:
            name = str(level or LogLevel.DEBUG.value).lower()
            log_level = LogLevel.parse(name)
            if log_level in GATED_LEVELS and not self.debug_logs_enabled():
                return None

            call = LogCall(level=name, args=tuple(args))
            self.last_call = call

            if log_level is LogLevel.WARN:
                self.sink.warning(call.message)
            elif log_level is LogLevel.ERROR:
                self.sink.error(call.message)
            else:
                self.sink.info(call.message)
            return call
        except Exception:
            logger.debug("Plasmoid log call failed", exc_info=True)
            return None


_default_logger = DebugLogger()


def get_default_logger() -> DebugLogger:
    """Get the logger used by ``debug_log``."""
    return _default_logger


def debug_log(level: Any = None, *args: Any) -> Optional[LogCall]:
    """Log through the default DebugLogger. See ``DebugLogger.log``."""
    return _default_logger.log(level, *args)


def debug_log_set_test_config(override: Optional[ConfigOverride]) -> None:
    """
    Install a stubbed plasmoid configuration for the default logger.

    Example:
        debug_log_set_test_config({"configuration": {"debugLogs": True}})
    """
    _default_logger.set_override(override)

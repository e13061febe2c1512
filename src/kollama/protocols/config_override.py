"""Protocol for debug-log overrides and config providers."""

from typing import Any, Callable, Optional, Protocol

from .plasmoid_config import PlasmoidConfig

# Returns the current host configuration, None outside a host
ConfigProvider = Callable[[], Optional[PlasmoidConfig]]


class ConfigOverride(Protocol):
    """Object carrying a nested configuration, e.g. a stubbed plasmoid.

    Plain mappings such as ``{"configuration": {"debugLogs": True}}`` are
    accepted wherever a ConfigOverride is.
    """

    configuration: Any


def read_flag(source: Any, host_key: str, attr_name: Optional[str] = None) -> Any:
    """
    Read an option from a mapping or an attribute-style object.

    Mappings are looked up by ``host_key`` first, then ``attr_name``.
    Objects are looked up by attribute ``attr_name`` first, then ``host_key``.

    Args:
        source: Mapping or object, may be None
        host_key: Host option name (camelCase)
        attr_name: Python attribute name, defaults to ``host_key``

    Returns:
        The option value, or None when absent
    """
    if source is None:
        return None
    attr_name = attr_name or host_key
    if hasattr(source, "keys"):
        if host_key in source:
            return source[host_key]
        return source.get(attr_name)
    value = getattr(source, attr_name, None)
    if value is None:
        value = getattr(source, host_key, None)
    return value

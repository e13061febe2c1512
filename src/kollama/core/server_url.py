"""Server URL assembly for the Ollama HTTP API."""

import re
from typing import Any, Optional

DEFAULT_SERVER_URL = "http://127.0.0.1:11434"

_TRAILING_SLASHES = re.compile(r"/+\Z")
_LEADING_SLASHES = re.compile(r"^/+")


def _normalize_base(base_url: Any) -> str:
    base = base_url or DEFAULT_SERVER_URL
    return _TRAILING_SLASHES.sub("", str(base))


def _normalize_endpoint(endpoint: Optional[str]) -> str:
    return _LEADING_SLASHES.sub("", endpoint or "")


def get_server_url(base_url: Optional[str] = None, endpoint: Optional[str] = None) -> str:
    """
    Build an API URL under the ``/api/`` prefix.

    Trailing slashes on the base and leading slashes on the endpoint are
    dropped so the parts join with exactly one slash. The ``/api/`` segment
    is always present, even for an empty endpoint.

    Args:
        base_url: Server base URL; ``DEFAULT_SERVER_URL`` when falsy
        endpoint: Endpoint path such as ``"tags"`` or ``"/tags"``

    Returns:
        str: Full API URL, e.g. ``http://127.0.0.1:11434/api/tags``
    """
    return f"{_normalize_base(base_url)}/api/{_normalize_endpoint(endpoint)}"


def build_server_url(base_url: Optional[str] = None, endpoint: Optional[str] = None) -> str:
    """
    Join a base URL and an endpoint without any path prefix.

    The separating slash is only added when the endpoint is non-empty after
    trimming, so ``build_server_url("http://host/", "")`` is ``"http://host"``.
    """
    base = _normalize_base(base_url)
    endpoint = _normalize_endpoint(endpoint)
    return base + (f"/{endpoint}" if endpoint else "")

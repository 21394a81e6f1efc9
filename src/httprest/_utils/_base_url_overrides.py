"""Base URL override resolution for named clients.

Allows routing a named client to an alternative URL (e.g., localhost)
via environment variables like ``HTTPREST_PAYMENTS_URL``.
"""

import os
import re
from functools import lru_cache

from .constants import ENV_BASE_URL_PREFIX, ENV_BASE_URL_SUFFIX

_NON_ALPHANUMERIC = re.compile(r"[^A-Z0-9]")


def env_var_name(client_name: str) -> str:
    """Environment variable consulted for ``client_name``.

    ``"payments-api"`` maps to ``HTTPREST_PAYMENTS_API_URL``.
    """
    normalized = _NON_ALPHANUMERIC.sub("_", client_name.upper())
    return f"{ENV_BASE_URL_PREFIX}{normalized}{ENV_BASE_URL_SUFFIX}"


@lru_cache(maxsize=None)
def get_base_url_override(client_name: str) -> str | None:
    """Look up a base URL override for the given client name.

    Returns:
        The override URL without its trailing slash if configured,
        otherwise ``None``.
    """
    value = os.environ.get(env_var_name(client_name))
    if not value:
        return None
    return value.rstrip("/")


def clear_base_url_overrides_cache() -> None:
    """Clear the cached overrides. Intended for tests."""
    get_base_url_override.cache_clear()

import os
import ssl
from functools import lru_cache
from typing import Any, Optional

from .constants import ENV_BASE_URL_PREFIX

DEFAULT_TIMEOUT = 30.0

CA_BUNDLE_ENV_VARS = (
    f"{ENV_BASE_URL_PREFIX}CA_BUNDLE",
    "SSL_CERT_FILE",
    "REQUESTS_CA_BUNDLE",
)


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def _ca_bundle() -> Optional[str]:
    for name in CA_BUNDLE_ENV_VARS:
        path = _env_path(name)
        if path:
            return path
    return None


@lru_cache(maxsize=1)
def create_ssl_context() -> ssl.SSLContext:
    """TLS context shared by every transport.

    An explicit CA bundle wins. Otherwise the operating system trust store
    is used through truststore, with certifi's bundle when it is missing.
    """
    ca_bundle = _ca_bundle()
    if ca_bundle is not None:
        return ssl.create_default_context(
            cafile=ca_bundle, capath=_env_path("SSL_CERT_DIR")
        )

    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        return ssl.create_default_context(
            cafile=certifi.where(), capath=_env_path("SSL_CERT_DIR")
        )


def get_httpx_client_kwargs() -> dict[str, Any]:
    """Default keyword arguments shared by every client the factory builds."""
    return {
        "verify": create_ssl_context(),
        "timeout": DEFAULT_TIMEOUT,
        "follow_redirects": True,
    }

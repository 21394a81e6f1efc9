"""Typed JSON REST calls over httpx.

Compose query strings with :class:`QueryStringBuilder`, send requests with
:class:`RestClient` and get non-2xx responses back as :class:`RestClientError`.
"""

from ._config import RestClientOptions
from ._rest_clients import RestClients
from ._services import HttpTransportFactory, RestClient, TransportFactory
from ._utils import (
    DEFAULT_SERIALIZER_CONFIG,
    EMPTY_ARRAY,
    EMPTY_OBJECT,
    Fragment,
    JsonContent,
    QueryString,
    QueryStringBuilder,
    SerializerConfig,
    setup_logging,
)
from ._utils.constants import APPLICATION_JSON_MEDIA_TYPE, DEFAULT_CONFIGURATION_NAME
from .models import (
    DeserializationError,
    InvalidArgumentError,
    RestClientError,
    RestResult,
    SerializationError,
    TransportError,
)

__all__ = [
    "APPLICATION_JSON_MEDIA_TYPE",
    "DEFAULT_CONFIGURATION_NAME",
    "DEFAULT_SERIALIZER_CONFIG",
    "DeserializationError",
    "EMPTY_ARRAY",
    "EMPTY_OBJECT",
    "Fragment",
    "HttpTransportFactory",
    "InvalidArgumentError",
    "JsonContent",
    "QueryString",
    "QueryStringBuilder",
    "RestClient",
    "RestClientError",
    "RestClientOptions",
    "RestClients",
    "RestResult",
    "SerializationError",
    "SerializerConfig",
    "TransportError",
    "TransportFactory",
    "setup_logging",
]

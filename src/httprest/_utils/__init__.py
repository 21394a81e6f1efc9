from ._base_url_overrides import (
    clear_base_url_overrides_cache,
    env_var_name,
    get_base_url_override,
)
from ._json_content import EMPTY_ARRAY, EMPTY_OBJECT, JsonContent
from ._logs import setup_logging
from ._query_string import Fragment, QueryString, QueryStringBuilder
from ._serializer import (
    DEFAULT_SERIALIZER_CONFIG,
    SerializerConfig,
    dump_json,
    load_json,
)
from ._ssl_context import get_httpx_client_kwargs

__all__ = [
    "DEFAULT_SERIALIZER_CONFIG",
    "EMPTY_ARRAY",
    "EMPTY_OBJECT",
    "Fragment",
    "JsonContent",
    "QueryString",
    "QueryStringBuilder",
    "SerializerConfig",
    "clear_base_url_overrides_cache",
    "dump_json",
    "env_var_name",
    "get_base_url_override",
    "get_httpx_client_kwargs",
    "load_json",
    "setup_logging",
]

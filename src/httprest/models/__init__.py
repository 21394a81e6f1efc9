from .errors import DeserializationError, InvalidArgumentError, SerializationError
from .exceptions import RestClientError, TransportError
from .results import RestResult

__all__ = [
    "DeserializationError",
    "InvalidArgumentError",
    "RestClientError",
    "RestResult",
    "SerializationError",
    "TransportError",
]

from ._transport_factory import HttpTransportFactory, TransportFactory
from .rest_client import RestClient

__all__ = [
    "HttpTransportFactory",
    "RestClient",
    "TransportFactory",
]

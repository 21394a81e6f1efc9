from typing import Any, Callable, Optional

from httpx import Timeout

from ._config import RestClientOptions
from ._services import HttpTransportFactory, RestClient, TransportFactory
from ._utils import SerializerConfig, get_base_url_override, setup_logging
from ._utils.constants import DEFAULT_CONFIGURATION_NAME


class RestClients:
    """Composition root for named REST clients.

    Each name owns an httpx transport registration and an options snapshot.
    Clients returned by :meth:`get` are bound to the snapshot resolved at
    that moment.

    Examples:
        ```python
        from httprest import RestClients

        clients = RestClients()
        clients.add_client("RequestBin", base_url="https://localtest.me:8080")

        client = clients.get("RequestBin")
        client.post("/v1/person", {"FirstName": "John", "LastName": "Doe"})
        ```
    """

    def __init__(
        self,
        *,
        transport_factory: Optional[HttpTransportFactory] = None,
        debug: bool = False,
    ) -> None:
        """
        Args:
            transport_factory (Optional[HttpTransportFactory]): The factory
                transports are registered with. A new one is created when omitted.
            debug (bool): Enable debug logging if set to True. Defaults to False.
        """
        self._transport_factory = transport_factory or HttpTransportFactory()
        self._options: dict[str, RestClientOptions] = {}

        setup_logging(debug)

    @property
    def transport_factory(self) -> TransportFactory:
        return self._transport_factory

    @property
    def names(self) -> list[str]:
        return list(self._options)

    def add_client(
        self,
        name: str = DEFAULT_CONFIGURATION_NAME,
        *,
        base_url: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
        timeout: Optional[float | Timeout] = None,
        configure_options: Optional[
            Callable[[RestClientOptions], RestClientOptions]
        ] = None,
        **client_kwargs: Any,
    ) -> "RestClients":
        """Register a named client.

        Args:
            name (str): The configuration name. Defaults to ``"Default"``.
            base_url (Optional[str]): Base URL relative paths are resolved
                against. ``HTTPREST_{NAME}_URL`` takes precedence when set.
            headers (Optional[dict[str, str]]): Headers sent with every request.
            timeout (Optional[float | Timeout]): Transport timeout.
            configure_options: Maps the default options of this client to the
                options it should use.
            **client_kwargs: Any other :class:`httpx.Client` argument.

        Returns:
            RestClients: This instance, for chaining.
        """
        base_url = get_base_url_override(name) or base_url
        if base_url is not None:
            client_kwargs["base_url"] = base_url
        if headers is not None:
            client_kwargs["headers"] = headers
        if timeout is not None:
            client_kwargs["timeout"] = timeout

        self._transport_factory.register(name, **client_kwargs)

        options = RestClientOptions(http_client_name=name)
        if configure_options is not None:
            options = configure_options(options)
        self._options[name] = options

        return self

    def configure_options(
        self,
        name: str,
        customize: Callable[[RestClientOptions], RestClientOptions],
    ) -> "RestClients":
        self._options[name] = customize(self.options(name))
        return self

    def configure_serialization(
        self,
        name: str,
        customize: Callable[[SerializerConfig], SerializerConfig],
    ) -> "RestClients":
        return self.configure_options(
            name, lambda options: options.with_serializer(customize)
        )

    def options(self, name: str = DEFAULT_CONFIGURATION_NAME) -> RestClientOptions:
        try:
            return self._options[name]
        except KeyError:
            raise KeyError(f"No REST client registered with name '{name}'") from None

    def get(self, name: str = DEFAULT_CONFIGURATION_NAME) -> RestClient:
        return RestClient(self._transport_factory, self.options(name))

    def close(self) -> None:
        self._transport_factory.close()

    async def aclose(self) -> None:
        await self._transport_factory.aclose()

    def __enter__(self) -> "RestClients":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    async def __aenter__(self) -> "RestClients":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

import asyncio
import threading
from logging import getLogger
from typing import Any, Optional, Protocol, runtime_checkable

from httpx import AsyncClient, Client

from .._utils import get_httpx_client_kwargs
from .._utils.constants import DEFAULT_CONFIGURATION_NAME, LOGGER_NAME
from ..models.errors import InvalidArgumentError

_AsyncKey = tuple[str, Optional[asyncio.AbstractEventLoop]]


def _running_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def _is_dead(loop: Optional[asyncio.AbstractEventLoop]) -> bool:
    return loop is not None and loop.is_closed()


@runtime_checkable
class TransportFactory(Protocol):
    """Resolves the HTTP transport used for a single request.

    Resolving the same name must always yield an equivalently configured
    client.
    """

    def create_client(self, name: Optional[str] = None) -> Client: ...

    def create_async_client(self, name: Optional[str] = None) -> AsyncClient: ...


class HttpTransportFactory:
    """Named registry of httpx clients.

    Client settings are registered per name and the clients themselves are
    built on first use, then shared by every request resolving that name.
    Async clients are additionally bound to the event loop they were built
    on, since their pooled connections cannot outlive it.
    Connection pooling, retries and timeouts are configured here, on the
    httpx clients, and nowhere else.
    """

    def __init__(self, **default_client_kwargs: Any) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._default_client_kwargs = default_client_kwargs
        self._configurations: dict[str, dict[str, Any]] = {}
        self._clients: dict[str, Client] = {}
        self._async_clients: dict[_AsyncKey, AsyncClient] = {}
        self._retired_async_clients: list[tuple[_AsyncKey, AsyncClient]] = []
        self._lock = threading.Lock()

    @property
    def names(self) -> list[str]:
        return list(self._configurations)

    def register(self, name: str, **client_kwargs: Any) -> None:
        """Store the httpx client settings used for ``name``.

        Re-registering a name replaces its settings; clients already built
        for that name are discarded and rebuilt on next use.
        """
        if not name:
            raise InvalidArgumentError("name")

        with self._lock:
            self._configurations[name] = client_kwargs
            stale = self._clients.pop(name, None)
            for key in [key for key in self._async_clients if key[0] == name]:
                # closed on aclose(), closing needs a running loop
                self._retired_async_clients.append(
                    (key, self._async_clients.pop(key))
                )

        if stale is not None:
            stale.close()

        self._logger.debug(f"Registered transport '{name}'")

    def is_registered(self, name: str) -> bool:
        return name in self._configurations

    def _client_kwargs(self, name: str) -> dict[str, Any]:
        return {
            **get_httpx_client_kwargs(),  # SSL, timeout, redirects
            **self._default_client_kwargs,
            **self._configurations.get(name, {}),
        }

    def _forget_dead_async_clients(self) -> None:
        # connections of a closed loop are unusable and cannot be closed
        for key in [key for key in self._async_clients if _is_dead(key[1])]:
            del self._async_clients[key]
        self._retired_async_clients = [
            (key, client)
            for key, client in self._retired_async_clients
            if not _is_dead(key[1])
        ]

    def create_client(self, name: Optional[str] = None) -> Client:
        key = name or DEFAULT_CONFIGURATION_NAME
        with self._lock:
            client = self._clients.get(key)
            if client is None or client.is_closed:
                client = Client(**self._client_kwargs(key))
                self._clients[key] = client
        return client

    def create_async_client(self, name: Optional[str] = None) -> AsyncClient:
        """Resolve the async client of ``name`` for the running event loop."""
        name = name or DEFAULT_CONFIGURATION_NAME
        key = (name, _running_loop())
        with self._lock:
            self._forget_dead_async_clients()
            client = self._async_clients.get(key)
            if client is None or client.is_closed:
                client = AsyncClient(**self._client_kwargs(name))
                self._async_clients[key] = client
        return client

    def close(self) -> None:
        with self._lock:
            clients = list(self._clients.values())
            self._clients.clear()
        for client in clients:
            client.close()

    async def aclose(self) -> None:
        """Close every client.

        Async clients built on another event loop that is still running are
        left to that loop; clients of closed loops are dropped.
        """
        loop = _running_loop()
        with self._lock:
            entries = [
                *self._async_clients.items(),
                *self._retired_async_clients,
            ]
            self._async_clients.clear()
            self._retired_async_clients.clear()
        for (_, client_loop), async_client in entries:
            if client_loop is None or client_loop is loop:
                await async_client.aclose()
        self.close()

    def __enter__(self) -> "HttpTransportFactory":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    async def __aenter__(self) -> "HttpTransportFactory":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

import logging
from typing import TYPE_CHECKING

import pytest
from pytest_httpx import HTTPXMock

from httprest import (
    HttpTransportFactory,
    RestClient,
    RestClientOptions,
    RestClients,
    SerializerConfig,
)
from tests.payloads import Request, Response

if TYPE_CHECKING:
    from _pytest.monkeypatch import MonkeyPatch


class TestRestClients:
    def test_add_client_registers_transport_and_options(self):
        with RestClients() as clients:
            clients.add_client("people", base_url="https://people.example.com")

            assert clients.names == ["people"]
            assert clients.options("people") == RestClientOptions(
                http_client_name="people"
            )
            factory = clients.transport_factory
            assert isinstance(factory, HttpTransportFactory)
            assert factory.is_registered("people")

    def test_add_client_defaults_to_default_name(self):
        with RestClients() as clients:
            clients.add_client(base_url="https://default.example.com")

            assert clients.names == ["Default"]
            assert clients.get().options.http_client_name == "Default"

    def test_add_client_is_chainable(self):
        with RestClients() as clients:
            result = clients.add_client(
                "people", base_url="https://people.example.com"
            ).add_client("orders", base_url="https://orders.example.com")

            assert result is clients
            assert clients.names == ["people", "orders"]

    def test_add_client_forwards_transport_settings(self):
        factory = HttpTransportFactory()

        with RestClients(transport_factory=factory) as clients:
            clients.add_client(
                "people",
                base_url="https://people.example.com",
                headers={"X-Api-Key": "secret"},
                timeout=5.0,
            )
            client = factory.create_client("people")

            assert client.base_url.host == "people.example.com"
            assert client.headers["X-Api-Key"] == "secret"
            assert client.timeout.read == 5.0

    def test_add_client_with_configured_options(self):
        with RestClients() as clients:
            clients.add_client(
                "people",
                base_url="https://people.example.com",
                configure_options=lambda options: options.model_copy(
                    update={"content_media_type": "application/vnd.api+json"}
                ),
            )

            options = clients.options("people")
            assert options.http_client_name == "people"
            assert options.content_media_type == "application/vnd.api+json"

    def test_configure_serialization(self):
        with RestClients() as clients:
            clients.add_client("people", base_url="https://people.example.com")

            clients.configure_serialization(
                "people",
                lambda config: config.model_copy(update={"exclude_none": True}),
            )

            assert clients.options("people").serializer_config == SerializerConfig(
                exclude_none=True
            )

    def test_get_binds_snapshot(self):
        with RestClients() as clients:
            clients.add_client("people", base_url="https://people.example.com")
            client = clients.get("people")

            clients.configure_options(
                "people",
                lambda options: options.model_copy(update={"encoding": "latin-1"}),
            )

            assert isinstance(client, RestClient)
            assert client.options.encoding == "utf-8"
            assert clients.get("people").options.encoding == "latin-1"

    def test_unknown_name_raises_key_error(self):
        with RestClients() as clients:
            with pytest.raises(KeyError, match="unknown"):
                clients.get("unknown")

    def test_base_url_override_wins(
        self, httpx_mock: HTTPXMock, monkeypatch: "MonkeyPatch"
    ):
        monkeypatch.setenv("HTTPREST_PEOPLE_URL", "http://localhost:8080/")
        httpx_mock.add_response(
            method="GET", url="http://localhost:8080/v1/person", json={"IntValue": 1}
        )

        with RestClients() as clients:
            clients.add_client("people", base_url="https://people.example.com")

            response = clients.get("people").get("/v1/person", result_type=Response)

        assert response == Response(int_value=1)

    def test_debug_enables_package_logging(self):
        RestClients(debug=True)
        assert logging.getLogger("httprest").level == logging.DEBUG

        RestClients()
        assert logging.getLogger("httprest").level == logging.WARNING

    def test_end_to_end(self, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST",
            url="https://people.example.com/v1/person",
            status_code=201,
            json={"IntValue": 7, "TextValue": "created"},
        )

        with RestClients() as clients:
            clients.add_client("people", base_url="https://people.example.com")

            response = clients.get("people").post(
                "/v1/person", Request(text="John", number=7), result_type=Response
            )

        assert response == Response(int_value=7, text_value="created")
        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.content == b'{"text":"John","number":7}'


class TestRestClientsAsync:
    @pytest.mark.asyncio
    async def test_end_to_end(self, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="PUT",
            url="https://people.example.com/v1/person/7",
            json={"IntValue": 7},
        )

        async with RestClients() as clients:
            clients.add_client("people", base_url="https://people.example.com")

            response = await clients.get("people").put_async(
                "/v1/person/7", {"name": "John"}, result_type=Response
            )

        assert response is not None
        assert response.int_value == 7

from logging import Logger, getLogger
from typing import Any, Optional, TypeVar, Union

from httpx import AsyncClient, Client, Request, Response

from .._config import RestClientOptions
from .._utils import JsonContent, QueryString
from .._utils.constants import (
    DEFAULT_EVENT_ID,
    HEADER_ACCEPT,
    HTTP_METHOD_EVENT_IDS,
    LOGGER_NAME,
)
from ..models.errors import InvalidArgumentError
from ..models.exceptions import RestClientError
from ..models.results import RestResult
from ._transport_factory import TransportFactory

T = TypeVar("T")

Content = Union[JsonContent, Any, None]


class RestClient:
    """Sends JSON requests and decodes JSON responses.

    Every call performs exactly one HTTP round trip over a transport
    resolved from the :class:`TransportFactory`. Responses outside of the
    2xx range raise :class:`RestClientError`; errors raised by the transport
    itself (connection failures, timeouts) propagate unchanged.

    Instances hold no per-request state and can be shared between threads
    and tasks.
    """

    def __init__(
        self,
        transport_factory: TransportFactory,
        options: Optional[RestClientOptions] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        if transport_factory is None:
            raise InvalidArgumentError("transport_factory")

        self._transport_factory = transport_factory
        self._options = options or RestClientOptions()
        self._logger = logger or getLogger(LOGGER_NAME)

    @property
    def options(self) -> RestClientOptions:
        return self._options

    @staticmethod
    def compose_url(path: str, query: Optional[QueryString] = None) -> str:
        if query is not None and query.has_items:
            return f"{path}?{query.query}"
        return path

    def send(
        self,
        method: str,
        path: str,
        content: Content = None,
        query: Optional[QueryString] = None,
        *,
        result_type: Optional[type[T]] = None,
    ) -> Optional[T]:
        """Send a request and optionally decode the response.

        Args:
            method: The HTTP method (GET, POST, PUT, DELETE, etc.).
            path: Absolute URL, or a path relative to the transport's base URL.
            content: Value serialized as the JSON body. ``None`` sends no body;
                a :class:`JsonContent` is sent as is.
            query: Query string appended to ``path``.
            result_type: Type the response payload is decoded into. When
                omitted, the payload is not decoded and ``None`` is returned.

        Returns:
            The decoded response, or ``None`` when no result type was given.

        Raises:
            InvalidArgumentError: If ``method`` is empty.
            SerializationError: If ``content`` cannot be serialized.
            RestClientError: If the response status is not in the 2xx range.
            DeserializationError: If the payload does not match ``result_type``.
            httpx.TransportError: If the request could not be delivered.

        Examples:
            ```python
            query = QueryStringBuilder()
            query.add("id", "42")

            person = client.send(
                "GET", "/v1/person", query=query.build_query(), result_type=Person
            )
            ```
        """
        method, url, json_content = self._prepare(method, path, content, query)

        client = self._create_client()
        request = self._build_request(
            client, method, url, json_content, expects_result=result_type is not None
        )

        self._log_request(request, json_content)

        response = client.send(request)
        try:
            payload = self._log_response(response)
            return self._handle_response(response, payload, result_type)
        finally:
            response.close()

    async def send_async(
        self,
        method: str,
        path: str,
        content: Content = None,
        query: Optional[QueryString] = None,
        *,
        result_type: Optional[type[T]] = None,
    ) -> Optional[T]:
        """Asynchronously send a request and optionally decode the response.

        See :meth:`send` for the arguments and the errors raised.
        """
        method, url, json_content = self._prepare(method, path, content, query)

        client = self._create_async_client()
        request = self._build_request(
            client, method, url, json_content, expects_result=result_type is not None
        )

        self._log_request(request, json_content)

        response = await client.send(request)
        try:
            payload = self._log_response(response)
            return self._handle_response(response, payload, result_type)
        finally:
            await response.aclose()

    def try_send(
        self,
        method: str,
        path: str,
        content: Content = None,
        query: Optional[QueryString] = None,
        *,
        result_type: Optional[type[T]] = None,
    ) -> RestResult[T]:
        """Like :meth:`send`, but returns unsuccessful statuses as a result.

        Only :class:`RestClientError` is captured; every other error
        propagates.
        """
        try:
            return RestResult(
                value=self.send(
                    method, path, content, query, result_type=result_type
                )
            )
        except RestClientError as e:
            return RestResult(error=e)

    async def try_send_async(
        self,
        method: str,
        path: str,
        content: Content = None,
        query: Optional[QueryString] = None,
        *,
        result_type: Optional[type[T]] = None,
    ) -> RestResult[T]:
        try:
            return RestResult(
                value=await self.send_async(
                    method, path, content, query, result_type=result_type
                )
            )
        except RestClientError as e:
            return RestResult(error=e)

    def get(
        self,
        path: str,
        content: Content = None,
        query: Optional[QueryString] = None,
        *,
        result_type: Optional[type[T]] = None,
    ) -> Optional[T]:
        return self.send("GET", path, content, query, result_type=result_type)

    def post(
        self,
        path: str,
        content: Content = None,
        query: Optional[QueryString] = None,
        *,
        result_type: Optional[type[T]] = None,
    ) -> Optional[T]:
        return self.send("POST", path, content, query, result_type=result_type)

    def put(
        self,
        path: str,
        content: Content = None,
        query: Optional[QueryString] = None,
        *,
        result_type: Optional[type[T]] = None,
    ) -> Optional[T]:
        return self.send("PUT", path, content, query, result_type=result_type)

    def delete(
        self,
        path: str,
        content: Content = None,
        query: Optional[QueryString] = None,
        *,
        result_type: Optional[type[T]] = None,
    ) -> Optional[T]:
        return self.send("DELETE", path, content, query, result_type=result_type)

    async def get_async(
        self,
        path: str,
        content: Content = None,
        query: Optional[QueryString] = None,
        *,
        result_type: Optional[type[T]] = None,
    ) -> Optional[T]:
        return await self.send_async(
            "GET", path, content, query, result_type=result_type
        )

    async def post_async(
        self,
        path: str,
        content: Content = None,
        query: Optional[QueryString] = None,
        *,
        result_type: Optional[type[T]] = None,
    ) -> Optional[T]:
        return await self.send_async(
            "POST", path, content, query, result_type=result_type
        )

    async def put_async(
        self,
        path: str,
        content: Content = None,
        query: Optional[QueryString] = None,
        *,
        result_type: Optional[type[T]] = None,
    ) -> Optional[T]:
        return await self.send_async(
            "PUT", path, content, query, result_type=result_type
        )

    async def delete_async(
        self,
        path: str,
        content: Content = None,
        query: Optional[QueryString] = None,
        *,
        result_type: Optional[type[T]] = None,
    ) -> Optional[T]:
        return await self.send_async(
            "DELETE", path, content, query, result_type=result_type
        )

    def _prepare(
        self,
        method: str,
        path: str,
        content: Content,
        query: Optional[QueryString],
    ) -> tuple[str, str, Optional[JsonContent]]:
        if not method:
            raise InvalidArgumentError("method")

        json_content: Optional[JsonContent] = None
        if isinstance(content, JsonContent):
            json_content = content
        elif content is not None:
            json_content = JsonContent.from_object(
                content,
                encoding=self._options.encoding,
                media_type=self._options.content_media_type,
                serializer_config=self._options.serializer_config,
            )

        return str(method).upper(), self.compose_url(path, query), json_content

    def _create_client(self) -> Client:
        if self._options.http_client_name is not None:
            return self._transport_factory.create_client(
                self._options.http_client_name
            )
        return self._transport_factory.create_client()

    def _create_async_client(self) -> AsyncClient:
        if self._options.http_client_name is not None:
            return self._transport_factory.create_async_client(
                self._options.http_client_name
            )
        return self._transport_factory.create_async_client()

    def _build_request(
        self,
        client: Union[Client, AsyncClient],
        method: str,
        url: str,
        content: Optional[JsonContent],
        *,
        expects_result: bool = False,
    ) -> Request:
        headers: dict[str, str] = {}
        if expects_result:
            headers[HEADER_ACCEPT] = self._options.content_media_type
        if content is None:
            return client.build_request(method, url, headers=headers)

        headers.update(content.headers)
        return client.build_request(
            method, url, content=content.content, headers=headers
        )

    def _handle_response(
        self,
        response: Response,
        payload: Optional[str],
        result_type: Optional[type[T]],
    ) -> Optional[T]:
        if not response.is_success:
            raise RestClientError(
                response.status_code,
                response.reason_phrase or None,
                payload or None,
                method=response.request.method,
                url=response.request.url,
            )

        if result_type is None:
            return None

        incoming = JsonContent(
            response.content,
            encoding=response.charset_encoding or self._options.encoding,
            media_type=self._options.content_media_type,
        )
        return incoming.read_as(result_type, self._options.serializer_config)

    def _log_request(self, request: Request, content: Optional[JsonContent]) -> None:
        event_id = HTTP_METHOD_EVENT_IDS.get(request.method, DEFAULT_EVENT_ID)
        extra = {"event_id": event_id, "event_name": request.method}

        if content is None:
            self._logger.debug(f"{request.method}: {request.url}", extra=extra)
            return

        self._logger.debug(
            f"{request.method}: {request.url} {content.content_type} {content.text}",
            extra=extra,
        )

    def _log_response(self, response: Response) -> Optional[str]:
        """Log the outcome of a request.

        Returns the response text for unsuccessful responses so it can be
        attached to the raised error, or ``None`` if it could not be read.
        """
        request = response.request
        path_and_query = request.url.raw_path.decode("ascii")
        reason = response.reason_phrase
        extra = {"event_id": response.status_code, "event_name": reason}

        if response.is_success:
            self._logger.debug(
                f"{request.method}: {path_and_query} {response.status_code} '{reason}'",
                extra=extra,
            )
            return None

        try:
            payload = response.text
        except Exception as e:
            self._logger.error(
                f"{request.method}: {path_and_query} {response.status_code} {reason} {e}",
                exc_info=e,
                extra=extra,
            )
            return None

        self._logger.error(
            f"{request.method}: {path_and_query} {response.status_code} '{reason}' '{payload}'",
            extra=extra,
        )
        return payload

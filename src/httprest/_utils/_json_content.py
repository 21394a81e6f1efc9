from dataclasses import dataclass
from typing import Any, Optional, TypeVar

from ..models.errors import (
    DeserializationError,
    InvalidArgumentError,
    SerializationError,
)
from ._serializer import SerializerConfig, dump_json, load_json
from .constants import (
    APPLICATION_JSON_MEDIA_TYPE,
    DEFAULT_ENCODING,
    HEADER_CONTENT_TYPE,
)

T = TypeVar("T")


@dataclass(frozen=True)
class JsonContent:
    """A JSON payload together with the metadata needed by the transport.

    ``content`` holds the bytes exactly as they are sent or received;
    ``encoding`` and ``media_type`` end up in the ``Content-Type`` header.
    """

    content: bytes
    encoding: str = DEFAULT_ENCODING
    media_type: str = APPLICATION_JSON_MEDIA_TYPE

    @classmethod
    def from_text(
        cls,
        text: str,
        encoding: str = DEFAULT_ENCODING,
        media_type: str = APPLICATION_JSON_MEDIA_TYPE,
    ) -> "JsonContent":
        """Wrap JSON ``text`` encoded with ``encoding``.

        Raises:
            SerializationError: If ``text`` has characters ``encoding``
                cannot represent.
        """
        try:
            return cls(text.encode(encoding), encoding, media_type)
        except UnicodeEncodeError as e:
            raise SerializationError(
                f"Payload cannot be encoded as {encoding}: {e}"
            ) from e

    @classmethod
    def from_object(
        cls,
        value: Any,
        encoding: str = DEFAULT_ENCODING,
        media_type: str = APPLICATION_JSON_MEDIA_TYPE,
        serializer_config: Optional[SerializerConfig] = None,
    ) -> "JsonContent":
        """Serialize ``value`` into a JSON payload.

        Args:
            value: Any value pydantic can serialize: models, dataclasses,
                typed dicts, plain containers and scalars.
            encoding: Byte encoding of the payload.
            media_type: Media type advertised in the ``Content-Type`` header.
            serializer_config: Serializer settings, the defaults when omitted.

        Raises:
            InvalidArgumentError: If ``value`` is ``None``.
            SerializationError: If ``value`` cannot be serialized or the
                result cannot be represented in ``encoding``.
        """
        if value is None:
            raise InvalidArgumentError("value")

        return cls.from_text(dump_json(value, serializer_config), encoding, media_type)

    @classmethod
    def empty_object(cls) -> "JsonContent":
        return EMPTY_OBJECT

    @classmethod
    def empty_array(cls) -> "JsonContent":
        return EMPTY_ARRAY

    @property
    def content_type(self) -> str:
        return f"{self.media_type}; charset={self.encoding}"

    @property
    def headers(self) -> dict[str, str]:
        return {HEADER_CONTENT_TYPE: self.content_type}

    @property
    def text(self) -> str:
        return self.content.decode(self.encoding)

    def read_as(
        self, result_type: type[T], serializer_config: Optional[SerializerConfig] = None
    ) -> T:
        """Decode the payload into ``result_type``.

        Raises:
            DeserializationError: If the payload is not valid JSON or does not
                match the shape of ``result_type``.
        """
        try:
            text = self.text
        except UnicodeDecodeError as e:
            raise DeserializationError(
                f"Payload is not valid {self.encoding} text: {e}"
            ) from e
        return load_json(text, result_type, serializer_config)

    def __len__(self) -> int:
        return len(self.content)


EMPTY_OBJECT = JsonContent(b"{}")
EMPTY_ARRAY = JsonContent(b"[]")

import codecs
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ._utils._serializer import DEFAULT_SERIALIZER_CONFIG, SerializerConfig
from ._utils.constants import APPLICATION_JSON_MEDIA_TYPE, DEFAULT_ENCODING


class RestClientOptions(BaseModel):
    """Options snapshot a :class:`~httprest.RestClient` is bound to."""

    model_config = ConfigDict(frozen=True)

    http_client_name: Optional[str] = None
    encoding: str = DEFAULT_ENCODING
    content_media_type: str = APPLICATION_JSON_MEDIA_TYPE
    serializer_config: SerializerConfig = DEFAULT_SERIALIZER_CONFIG

    @field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError:
            raise ValueError(f"Unknown encoding '{value}'.") from None

    @field_validator("content_media_type")
    @classmethod
    def _validate_media_type(cls, value: str) -> str:
        if not value:
            raise ValueError("content_media_type must not be empty.")
        return value

    def with_serializer(
        self, customize: Callable[[SerializerConfig], SerializerConfig]
    ) -> "RestClientOptions":
        return self.model_copy(
            update={"serializer_config": customize(self.serializer_config)}
        )

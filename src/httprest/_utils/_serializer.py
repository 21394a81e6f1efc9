from typing import Any, Optional, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    PydanticSchemaGenerationError,
    TypeAdapter,
    ValidationError,
)
from pydantic_core import PydanticSerializationError

from ..models.errors import DeserializationError, SerializationError

T = TypeVar("T")


class SerializerConfig(BaseModel):
    """Settings applied when converting values to and from JSON."""

    model_config = ConfigDict(frozen=True)

    by_alias: bool = True
    exclude_none: bool = False
    exclude_defaults: bool = False
    indent: Optional[int] = None
    strict: bool = False


DEFAULT_SERIALIZER_CONFIG = SerializerConfig()


def dump_json(value: Any, config: Optional[SerializerConfig] = None) -> str:
    """Serialize ``value`` to a JSON document."""
    config = config or DEFAULT_SERIALIZER_CONFIG
    try:
        adapter: TypeAdapter[Any] = TypeAdapter(type(value))
        data = adapter.dump_json(
            value,
            indent=config.indent,
            by_alias=config.by_alias,
            exclude_none=config.exclude_none,
            exclude_defaults=config.exclude_defaults,
        )
    except (PydanticSchemaGenerationError, PydanticSerializationError) as e:
        raise SerializationError(
            f"Unable to serialize value of type '{type(value).__name__}': {e}"
        ) from e
    return data.decode("utf-8")


def load_json(
    text: str, result_type: type[T], config: Optional[SerializerConfig] = None
) -> T:
    """Deserialize a JSON document into ``result_type``.

    An empty document is treated as JSON ``null``.
    """
    config = config or DEFAULT_SERIALIZER_CONFIG
    adapter: TypeAdapter[T] = TypeAdapter(result_type)
    try:
        if not text.strip():
            return adapter.validate_python(None, strict=config.strict)
        return adapter.validate_json(text, strict=config.strict)
    except ValidationError as e:
        raise DeserializationError(
            f"Unable to deserialize payload into '{getattr(result_type, '__name__', result_type)}': {e}",
            payload=text,
        ) from e

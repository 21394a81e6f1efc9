class InvalidArgumentError(ValueError):
    """Raised when a required argument is missing or empty.

    Validation happens before any I/O is performed.
    """

    def __init__(self, argument: str, message: str | None = None):
        self.argument = argument
        self.message = message or f"Argument '{argument}' must not be empty."
        super().__init__(self.message)


class SerializationError(ValueError):
    """Raised when a value cannot be serialized into a JSON payload."""


class DeserializationError(ValueError):
    """Raised when a JSON payload cannot be converted into the requested type.

    This is distinct from :class:`~httprest.models.exceptions.RestClientError`:
    it can happen even when the server answered with a success status.
    """

    def __init__(self, message: str, payload: str | None = None):
        self.payload = payload
        super().__init__(message)

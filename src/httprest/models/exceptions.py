from typing import Optional

from httpx import URL, TransportError

__all__ = ["RestClientError", "TransportError"]


class RestClientError(Exception):
    """Raised when a response status is outside of the 2xx range.

    Carries the status code, the reason phrase and, when it could be read,
    the raw response payload for diagnostics.
    """

    DEFAULT_MESSAGE = "An error occurred while performing an HTTP request"

    def __init__(
        self,
        status_code: int,
        reason_phrase: Optional[str] = None,
        payload: Optional[str] = None,
        *,
        method: Optional[str] = None,
        url: Optional[URL | str] = None,
    ) -> None:
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.payload = payload
        self.method = method
        self.url = str(url) if url is not None else None

        self.message = self._build_message()
        super().__init__(self.message)

    def _build_message(self) -> str:
        message = f"{self.DEFAULT_MESSAGE}: {self.status_code}"
        if self.reason_phrase:
            message += f" {self.reason_phrase}"
        if self.method and self.url:
            message += f" ({self.method} {self.url})"
        if self.payload:
            message += f"\nResponse content: {self.payload[:200]}"
        return message

    def __repr__(self) -> str:
        return (
            f"RestClientError(status_code={self.status_code!r}, "
            f"reason_phrase={self.reason_phrase!r})"
        )

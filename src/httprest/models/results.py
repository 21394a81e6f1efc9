from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .exceptions import RestClientError

T = TypeVar("T")


@dataclass(frozen=True)
class RestResult(Generic[T]):
    """Outcome of a single REST call as a value instead of an exception.

    Exactly one of ``value`` or ``error`` is meaningful: a failed call
    carries the :class:`RestClientError`, a successful one the decoded
    value (which may itself be ``None`` when no result type was requested).
    """

    value: Optional[T] = None
    error: Optional[RestClientError] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        """Return the value or raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value

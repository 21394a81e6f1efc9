"""Query string composition and parsing.

A :class:`QueryStringBuilder` accumulates key/value fragments in insertion
order and produces immutable :class:`QueryString` snapshots. Building never
mutates the builder, so the same state can be rendered with different
sorting and collation options.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable, NamedTuple, Optional
from urllib.parse import quote, unquote_plus

from ..models.errors import InvalidArgumentError


class Fragment(NamedTuple):
    key: str
    value: str


def _encode(text: str) -> str:
    return quote(text, safe="")


class QueryString:
    """Immutable, ordered sequence of fragments.

    The rendered query never carries the leading ``?``; callers prepend it
    when concatenating to a path.
    """

    __slots__ = ("_fragments",)

    def __init__(self, fragments: Iterable[Fragment] = ()) -> None:
        self._fragments: tuple[Fragment, ...] = tuple(
            Fragment(key, value) for key, value in fragments
        )

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return self._fragments

    @property
    def has_items(self) -> bool:
        return len(self._fragments) > 0

    @property
    def query(self) -> str:
        return "&".join(
            f"{_encode(fragment.key)}={_encode(fragment.value)}"
            for fragment in self._fragments
        )

    def to_query_string(self) -> str:
        """Explicit accessor for the URL-encoded query."""
        return self.query

    def __len__(self) -> int:
        return len(self._fragments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryString):
            return NotImplemented
        return self._fragments == other._fragments

    def __hash__(self) -> int:
        return hash(self._fragments)

    def __repr__(self) -> str:
        return f"QueryString({self.query!r})"


class QueryStringBuilder:
    """Mutable accumulator of query string fragments."""

    def __init__(self, fragments: Iterable[Fragment] = ()) -> None:
        self._fragments: list[Fragment] = [
            Fragment(key, value) for key, value in fragments
        ]

    @classmethod
    def parse_query(cls, query: Optional[str]) -> "QueryStringBuilder":
        """Create a builder from an existing query string.

        A single leading ``?`` is stripped. Each fragment is split on its
        first ``=``; a fragment without ``=`` becomes a key with an empty
        value. Empty fragments and fragments with an empty key are skipped.
        Keys and values are form-decoded (``+`` is a space).
        """
        query = query or ""
        if query.startswith("?"):
            query = query[1:]

        fragments = []
        for raw in query.split("&"):
            if not raw:
                continue
            raw_key, _, raw_value = raw.partition("=")
            key = unquote_plus(raw_key)
            if not key:
                continue
            fragments.append(Fragment(key, unquote_plus(raw_value)))

        return cls(fragments)

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return tuple(self._fragments)

    def add(self, key: str, value: str) -> None:
        if not key:
            raise InvalidArgumentError("key")
        if not value:
            raise InvalidArgumentError("value")

        self._fragments.append(Fragment(key, value))

    def add_value(self, key: str, value: Any) -> None:
        """Add a non-string value using its canonical query representation.

        ``None`` is ignored, booleans become ``true``/``false``, enums use
        their value and dates use ISO-8601.
        """
        if not key:
            raise InvalidArgumentError("key")
        if value is None:
            return

        if isinstance(value, Enum):
            value = value.value

        if isinstance(value, bool):
            text = "true" if value else "false"
        elif isinstance(value, (datetime, date)):
            text = value.isoformat()
        else:
            text = str(value)

        self.add(key, text)

    def has_key(self, key: str) -> bool:
        return any(fragment.key == key for fragment in self._fragments)

    def build_query(
        self, sort_keys: bool = True, collate_by: Optional[str] = None
    ) -> QueryString:
        """Render the accumulated fragments into a :class:`QueryString`.

        Args:
            sort_keys: Order fragments by key, ignoring case. The sort is
                stable, so values of the same key keep their insertion order.
            collate_by: When not empty, values sharing a key are joined with
                this separator into a single fragment, placed where the key
                first appeared.
        """
        items: list[Fragment] = list(self._fragments)

        if collate_by:
            grouped: dict[str, list[str]] = {}
            for key, value in items:
                grouped.setdefault(key, []).append(value)
            items = [
                Fragment(key, collate_by.join(values))
                for key, values in grouped.items()
            ]

        if sort_keys:
            items = sorted(items, key=lambda fragment: fragment.key.upper())

        return QueryString(items)

    def __len__(self) -> int:
        return len(self._fragments)

    def __repr__(self) -> str:
        return f"QueryStringBuilder({self._fragments!r})"

"""Immutable request descriptor handed to the dispatcher."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace

QueryPairs = tuple[tuple[str, str], ...]


def _render(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(
    params: Mapping[str, object] | Iterable[tuple[str, object]] | None,
) -> QueryPairs:
    """Normalise query parameters into ordered string pairs.

    ``None`` values are dropped, booleans render as ``true``/``false`` and
    list values expand into repeated keys.
    """
    if params is None:
        return ()
    items = params.items() if isinstance(params, Mapping) else params

    pairs: list[tuple[str, str]] = []
    for key, value in items:
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _render(v)) for v in value if v is not None)
        else:
            pairs.append((key, _render(value)))
    return tuple(pairs)


@dataclass(frozen=True)
class RequestSpec:
    """Everything needed to send one API request.

    Attributes:
        method: HTTP method.
        path: Path relative to the base URL, already interpolated.
        query: Ordered query pairs; keys may repeat.
        requires_auth: Whether the bearer credential is attached.
    """

    method: str
    path: str
    query: QueryPairs = field(default_factory=tuple)
    requires_auth: bool = True

    @classmethod
    def get(
        cls,
        path: str,
        params: Mapping[str, object] | Iterable[tuple[str, object]] | None = None,
        *,
        requires_auth: bool = True,
    ) -> RequestSpec:
        return cls("GET", path, build_query(params), requires_auth)

    def param(self, key: str) -> str | None:
        """Return the last value sent for ``key``, if any."""
        value = None
        for name, item in self.query:
            if name == key:
                value = item
        return value

    def with_param(self, key: str, value: object) -> RequestSpec:
        """Return a copy with every ``key`` entry replaced by a single value."""
        query = tuple(pair for pair in self.query if pair[0] != key)
        return replace(self, query=query + ((key, _render(value)),))

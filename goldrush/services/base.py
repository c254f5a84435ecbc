"""Shared plumbing for endpoint services."""

from __future__ import annotations

from urllib.parse import quote

from goldrush.http.dispatcher import RetryDispatcher
from goldrush.models.options import QueryOptions
from goldrush.models.request import QueryPairs


def path_segment(name: str, value: object) -> str:
    """Validate and escape one interpolated path segment."""
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValueError(f"{name} must not be empty")
    return quote(text, safe="")


def options_query(options: QueryOptions | None) -> QueryPairs:
    return options.to_query() if options is not None else ()


class BaseService:
    """Groups related endpoints on top of one dispatcher."""

    def __init__(self, dispatcher: RetryDispatcher) -> None:
        self._dispatcher = dispatcher

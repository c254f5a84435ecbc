"""Page-number pagination over dispatcher-backed calls.

A ``PageIterator`` presents a paged endpoint as a lazy, finite sequence of
item batches. Its cursor is owned by the iterator instance and only advanced
by ``next_page()``:

- finished          -> no further batches, no further calls
- call fails        -> error propagates, iterator freezes
- empty/absent batch -> finished, nothing yielded
- non-empty batch   -> yielded; the cursor moves to the next page only when
                       ``pagination.has_more`` is true (absent counts as false)

Iterators are not resumable after an error or exhaustion; build a new one
with the same starting spec to restart.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from goldrush.models.envelope import ResponseEnvelope
from goldrush.models.request import RequestSpec

T = TypeVar("T")

FetchFn = Callable[[RequestSpec, Any], Awaitable[ResponseEnvelope]]
ItemsFn = Callable[[Any], Sequence[Any] | None]

PAGE_NUMBER_PARAM = "page-number"
PAGE_SIZE_PARAM = "page-size"


def default_items(data: Any) -> Sequence[Any] | None:
    """Extract the ``items`` list from a page's data payload."""
    if data is None:
        return None
    if isinstance(data, dict):
        return data.get("items")
    return getattr(data, "items", None)


def _start_page(spec: RequestSpec, page_param: str) -> int:
    """Page number already set on ``spec``, else 0."""
    raw = spec.param(page_param)
    if raw is None or raw == "":
        return 0
    if not (raw.isascii() and raw.isdigit()):
        raise ValueError(
            f"{page_param} must be a non-negative integer, got {raw!r}"
        )
    return int(raw)


@dataclass
class PageCursor:
    """Position of a page iterator."""

    spec: RequestSpec
    page_number: int = 0
    finished: bool = False


class PageIterator(Generic[T]):
    """Async iterator over the item batches of a paged endpoint.

    Args:
        fetch: Coroutine function taking ``(spec, data_type)`` and returning an
            envelope, normally ``RetryDispatcher.dispatch``.
        spec: Request for the first page.
        data_type: Target shape of each page's ``data``.
        items: Extracts the batch from a page's ``data``.
        page_param: Query key carrying the page number.
    """

    def __init__(
        self,
        fetch: FetchFn,
        spec: RequestSpec,
        data_type: Any = None,
        *,
        items: ItemsFn = default_items,
        page_param: str = PAGE_NUMBER_PARAM,
    ) -> None:
        self._fetch = fetch
        self._data_type = data_type
        self._items = items
        self._page_param = page_param

        self._cursor = PageCursor(spec=spec, page_number=_start_page(spec, page_param))

    @property
    def has_more(self) -> bool:
        """Whether another call to ``next_page()`` may produce a batch."""
        return not self._cursor.finished

    @property
    def page_number(self) -> int:
        """Page number the next call will request."""
        return self._cursor.page_number

    async def next_page(self) -> list[T] | None:
        """Fetch the next batch, or return ``None`` at the end of the sequence."""
        cursor = self._cursor
        if cursor.finished:
            return None

        try:
            envelope = await self._fetch(cursor.spec, self._data_type)
        except Exception:
            cursor.finished = True
            raise

        batch = self._items(envelope.data)
        if not batch:
            cursor.finished = True
            return None

        pagination = envelope.pagination
        if pagination is not None and pagination.has_more:
            current = (
                pagination.page_number
                if pagination.page_number is not None
                else cursor.page_number
            )
            cursor.page_number = current + 1
            cursor.spec = cursor.spec.with_param(self._page_param, cursor.page_number)
        else:
            cursor.finished = True

        return list(batch)

    def __aiter__(self) -> PageIterator[T]:
        return self

    async def __anext__(self) -> list[T]:
        batch = await self.next_page()
        if batch is None:
            raise StopAsyncIteration
        return batch

    async def items(self) -> AsyncIterator[T]:
        """Iterate over individual items across all remaining pages."""
        async for batch in self:
            for item in batch:
                yield item

"""
Offset/limit pagination over list endpoints.

Every list endpoint answers with a `Page` envelope; walking the whole
collection means re-issuing the call with `offset` moved past the items
already received until `hasMore` turns false.
"""
from __future__ import annotations
from typing import Any, Callable, Dict, Iterator, Optional, TypeVar

from .debug import dprint
from .models.base import Page

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 100

FetchPage = Callable[[Dict[str, Any]], Page[T]]


def iterate_pages(
    fetch: FetchPage,
    params: Optional[Dict[str, Any]] = None,
    *,
    max_pages: Optional[int] = None,
) -> Iterator[Page[T]]:
    """
    Yield pages starting at `params["offset"]` (default 0).

    Stops when the server reports no more items, when a page comes back
    empty, or after `max_pages`.
    """
    query = dict(params or {})
    query.setdefault("offset", 0)
    query.setdefault("limit", DEFAULT_PAGE_SIZE)
    seen = 0
    while True:
        page = fetch(dict(query))
        seen += 1
        dprint("pagination.page", {
            "offset": page.offset,
            "count": len(page.data),
            "has_more": page.has_more,
            "total_count": page.total_count,
        })
        yield page

        nxt = page.next_offset()
        if nxt is None:
            return
        if max_pages is not None and seen >= max_pages:
            return
        query["offset"] = nxt


def iterate_items(
    fetch: FetchPage,
    params: Optional[Dict[str, Any]] = None,
    *,
    max_pages: Optional[int] = None,
) -> Iterator[T]:
    for page in iterate_pages(fetch, params, max_pages=max_pages):
        yield from page.data


__all__ = ["DEFAULT_PAGE_SIZE", "iterate_pages", "iterate_items"]

"""Cursor pagination over any Notion list endpoint.

Every Notion list endpoint takes a ``start_cursor`` and answers with a page
shaped like::

    {"object": "list", "results": [...], "next_cursor": "..." | None, "has_more": bool}

The iterators here turn such an endpoint into a lazy stream of items::

    for block in iterate_paginated_api(client.blocks.children.list, block_id=page_id):
        ...

    async for page in async_iterate_paginated_api(client.data_sources.query, data_source_id=ds_id):
        ...

Rules shared by every iterator:

* The first call uses the caller's ``start_cursor`` (``None`` starts at the
  beginning); each later call overrides only ``start_cursor``.
* A page's items are all yielded before the next page is requested, and no
  page is requested before the consumer asks for an item from it.
* Iteration ends when ``next_cursor`` is falsy.  ``has_more`` is ignored.
* Exceptions from the list call propagate unchanged.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from notionkit.observability import fields, get_logger

if TYPE_CHECKING:
    from notionkit.async_client import AsyncNotionKitClient
    from notionkit.client import NotionKitClient
    from notionkit.models import DataSourceTemplate

log = get_logger("notionkit.pagination")


def _log_page(list_fn: Callable[..., Any], page: int, items: int, next_cursor: Any) -> None:
    log.debug(
        "page fetched",
        extra=fields(
            op="paginate",
            endpoint=getattr(list_fn, "__qualname__", repr(list_fn)),
            page=page,
            items=items,
            has_next=bool(next_cursor),
        ),
    )


# ---------------------------------------------------------------------------
# Generic engine
# ---------------------------------------------------------------------------

def _drive(
    list_fn: Callable[..., Mapping[str, Any]],
    args: dict[str, Any],
    items_key: str,
) -> Iterator[Any]:
    cursor = args.get("start_cursor")
    page = 0
    while True:
        response = list_fn(**{**args, "start_cursor": cursor})
        page += 1
        items = response[items_key]
        cursor = response.get("next_cursor")
        _log_page(list_fn, page, len(items), cursor)
        yield from items
        if not cursor:
            return


async def _async_drive(
    list_fn: Callable[..., Awaitable[Mapping[str, Any]]],
    args: dict[str, Any],
    items_key: str,
) -> AsyncIterator[Any]:
    cursor = args.get("start_cursor")
    page = 0
    while True:
        response = await list_fn(**{**args, "start_cursor": cursor})
        page += 1
        items = response[items_key]
        cursor = response.get("next_cursor")
        _log_page(list_fn, page, len(items), cursor)
        for item in items:
            yield item
        if not cursor:
            return


def iterate_paginated_api(list_fn: Callable[..., Mapping[str, Any]], **first_page_args: Any) -> Iterator[Any]:
    """Lazily iterate over every result of a paginated list call.

    Parameters
    ----------
    list_fn:
        A bound list method such as ``client.blocks.children.list``.  It is
        called with keyword arguments and must return a ``PaginatedList``.
    **first_page_args:
        Arguments for every call, e.g. ``block_id=...``.  ``start_cursor``
        is filled in automatically after the first page.

    Yields
    ------
    Any
        Each item of each page's ``results``, in order.
    """
    return _drive(list_fn, first_page_args, "results")


def collect_paginated_api(list_fn: Callable[..., Mapping[str, Any]], **first_page_args: Any) -> list[Any]:
    """Drain :func:`iterate_paginated_api` into a list."""
    return list(iterate_paginated_api(list_fn, **first_page_args))


def async_iterate_paginated_api(
    list_fn: Callable[..., Awaitable[Mapping[str, Any]]],
    **first_page_args: Any,
) -> AsyncIterator[Any]:
    """Async counterpart of :func:`iterate_paginated_api`.

    *list_fn* is a coroutine function such as
    ``async_client.blocks.children.list``.
    """
    return _async_drive(list_fn, first_page_args, "results")


async def async_collect_paginated_api(
    list_fn: Callable[..., Awaitable[Mapping[str, Any]]],
    **first_page_args: Any,
) -> list[Any]:
    """Drain :func:`async_iterate_paginated_api` into a list."""
    return [item async for item in async_iterate_paginated_api(list_fn, **first_page_args)]


# ---------------------------------------------------------------------------
# Data source templates
# ---------------------------------------------------------------------------

def _template_args(
    data_source_id: str,
    name: str | None,
    page_size: int | None,
    start_cursor: str | None,
) -> dict[str, Any]:
    return {
        "data_source_id": data_source_id,
        "name": name,
        "page_size": page_size,
        "start_cursor": start_cursor,
    }


def iterate_data_source_templates(
    client: NotionKitClient,
    *,
    data_source_id: str,
    name: str | None = None,
    page_size: int | None = None,
    start_cursor: str | None = None,
) -> Iterator[DataSourceTemplate]:
    """Lazily iterate over the page templates of a data source.

    Same cursor handling as :func:`iterate_paginated_api`, driven against
    ``client.data_sources.list_templates`` and reading ``templates``
    instead of ``results``.

    Parameters
    ----------
    client:
        A :class:`~notionkit.client.NotionKitClient`.
    data_source_id:
        The data source whose templates to list.
    name:
        Optional case-insensitive substring filter on the template name.
    page_size:
        Optional page size (Notion caps it at 100).
    start_cursor:
        Optional cursor to resume from.
    """
    args = _template_args(data_source_id, name, page_size, start_cursor)
    return _drive(client.data_sources.list_templates, args, "templates")


def collect_data_source_templates(
    client: NotionKitClient,
    *,
    data_source_id: str,
    name: str | None = None,
    page_size: int | None = None,
    start_cursor: str | None = None,
) -> list[DataSourceTemplate]:
    """Drain :func:`iterate_data_source_templates` into a list."""
    return list(
        iterate_data_source_templates(
            client,
            data_source_id=data_source_id,
            name=name,
            page_size=page_size,
            start_cursor=start_cursor,
        )
    )


def async_iterate_data_source_templates(
    client: AsyncNotionKitClient,
    *,
    data_source_id: str,
    name: str | None = None,
    page_size: int | None = None,
    start_cursor: str | None = None,
) -> AsyncIterator[DataSourceTemplate]:
    """Async counterpart of :func:`iterate_data_source_templates`."""
    args = _template_args(data_source_id, name, page_size, start_cursor)
    return _async_drive(client.data_sources.list_templates, args, "templates")


async def async_collect_data_source_templates(
    client: AsyncNotionKitClient,
    *,
    data_source_id: str,
    name: str | None = None,
    page_size: int | None = None,
    start_cursor: str | None = None,
) -> list[DataSourceTemplate]:
    """Drain :func:`async_iterate_data_source_templates` into a list."""
    return [
        template
        async for template in async_iterate_data_source_templates(
            client,
            data_source_id=data_source_id,
            name=name,
            page_size=page_size,
            start_cursor=start_cursor,
        )
    ]

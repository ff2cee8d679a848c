"""Block API wrappers for the Notion API.

:class:`BlockAPI` and :class:`AsyncBlockAPI` cover ``/blocks``; their
``children`` attribute covers ``/blocks/{id}/children``.  ``children.list``
returns a single page and is meant to be driven by
:func:`notionkit.pagination.iterate_paginated_api`::

    for block in iterate_paginated_api(client.blocks.children.list, block_id=page_id):
        print(get_block_plain_text(block))
"""

from __future__ import annotations

from typing import Any

from .transport import AsyncNotionTransport, NotionTransport


def _append_body(children: list[dict[str, Any]], after: str | None) -> dict[str, Any]:
    return {"children": children, "after": after}


class BlockChildrenAPI:
    """``/blocks/{block_id}/children`` (sync)."""

    def __init__(self, transport: NotionTransport) -> None:
        self._transport = transport

    def list(
        self,
        *,
        block_id: str,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        """Fetch one page of child blocks.

        Parameters
        ----------
        block_id:
            The parent block or page.
        start_cursor:
            Cursor from a previous page's ``next_cursor``.
        page_size:
            Number of blocks per page (Notion caps it at 100).

        Returns
        -------
        dict
            A ``PaginatedList`` of blocks.
        """
        return self._transport.request(
            "GET",
            f"/blocks/{block_id}/children",
            params={"start_cursor": start_cursor, "page_size": page_size},
        )

    def append(
        self,
        *,
        block_id: str,
        children: list[dict[str, Any]],
        after: str | None = None,
    ) -> dict[str, Any]:
        """Append up to 100 blocks, optionally after an existing child."""
        return self._transport.request(
            "PATCH", f"/blocks/{block_id}/children", json=_append_body(children, after)
        )


class BlockAPI:
    """Synchronous wrapper for the Notion Blocks API."""

    def __init__(self, transport: NotionTransport) -> None:
        self._transport = transport
        self.children = BlockChildrenAPI(transport)

    def retrieve(self, *, block_id: str) -> dict[str, Any]:
        """Retrieve one block (full or partial, see :func:`notionkit.shapes.is_full_block`)."""
        return self._transport.request("GET", f"/blocks/{block_id}")

    def update(self, *, block_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Patch a block with a ``{block_type: {...}}`` payload."""
        return self._transport.request("PATCH", f"/blocks/{block_id}", json=payload)

    def delete(self, *, block_id: str) -> dict[str, Any]:
        """Move a block to the trash."""
        return self._transport.request("DELETE", f"/blocks/{block_id}")


class AsyncBlockChildrenAPI:
    """``/blocks/{block_id}/children`` (async)."""

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport

    async def list(
        self,
        *,
        block_id: str,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        return await self._transport.request(
            "GET",
            f"/blocks/{block_id}/children",
            params={"start_cursor": start_cursor, "page_size": page_size},
        )

    async def append(
        self,
        *,
        block_id: str,
        children: list[dict[str, Any]],
        after: str | None = None,
    ) -> dict[str, Any]:
        return await self._transport.request(
            "PATCH", f"/blocks/{block_id}/children", json=_append_body(children, after)
        )


class AsyncBlockAPI:
    """Asynchronous wrapper for the Notion Blocks API.

    Mirrors :class:`BlockAPI` but all methods are coroutines.
    """

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport
        self.children = AsyncBlockChildrenAPI(transport)

    async def retrieve(self, *, block_id: str) -> dict[str, Any]:
        return await self._transport.request("GET", f"/blocks/{block_id}")

    async def update(self, *, block_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._transport.request("PATCH", f"/blocks/{block_id}", json=payload)

    async def delete(self, *, block_id: str) -> dict[str, Any]:
        return await self._transport.request("DELETE", f"/blocks/{block_id}")

"""Page API wrappers for the Notion API.

:class:`PageAPI` (sync) and :class:`AsyncPageAPI` (async) are thin wrappers
around the ``/pages`` endpoints.  HTTP concerns live in the transport.
"""

from __future__ import annotations

from typing import Any

from .transport import AsyncNotionTransport, NotionTransport


def _create_body(
    parent: dict[str, Any],
    properties: dict[str, Any],
    children: list[dict[str, Any]] | None,
) -> dict[str, Any]:
    return {"parent": parent, "properties": properties, "children": children}


def _update_body(
    properties: dict[str, Any] | None,
    in_trash: bool | None,
) -> dict[str, Any]:
    return {"properties": properties, "in_trash": in_trash}


class PageAPI:
    """Synchronous wrapper for the Notion Pages API.

    Parameters
    ----------
    transport:
        A configured :class:`NotionTransport` instance.
    """

    def __init__(self, transport: NotionTransport) -> None:
        self._transport = transport

    def retrieve(self, *, page_id: str) -> dict[str, Any]:
        """Retrieve a page.

        Returns the full page when the integration can read it, otherwise a
        partial ``{"object": "page", "id": ...}``; see
        :func:`notionkit.shapes.is_full_page`.
        """
        return self._transport.request("GET", f"/pages/{page_id}")

    def create(
        self,
        *,
        parent: dict[str, Any],
        properties: dict[str, Any],
        children: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Create a page under *parent* (``{"page_id": ...}`` or ``{"data_source_id": ...}``)."""
        return self._transport.request("POST", "/pages", json=_create_body(parent, properties, children))

    def update(
        self,
        *,
        page_id: str,
        properties: dict[str, Any] | None = None,
        in_trash: bool | None = None,
    ) -> dict[str, Any]:
        """Update a page's properties or move it to / out of the trash."""
        return self._transport.request("PATCH", f"/pages/{page_id}", json=_update_body(properties, in_trash))


class AsyncPageAPI:
    """Asynchronous wrapper for the Notion Pages API.

    Mirrors :class:`PageAPI` but all methods are coroutines.
    """

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport

    async def retrieve(self, *, page_id: str) -> dict[str, Any]:
        return await self._transport.request("GET", f"/pages/{page_id}")

    async def create(
        self,
        *,
        parent: dict[str, Any],
        properties: dict[str, Any],
        children: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        return await self._transport.request("POST", "/pages", json=_create_body(parent, properties, children))

    async def update(
        self,
        *,
        page_id: str,
        properties: dict[str, Any] | None = None,
        in_trash: bool | None = None,
    ) -> dict[str, Any]:
        return await self._transport.request("PATCH", f"/pages/{page_id}", json=_update_body(properties, in_trash))

"""User, comment and search API wrappers."""

from __future__ import annotations

from typing import Any

from .transport import AsyncNotionTransport, NotionTransport


def _page_params(start_cursor: str | None, page_size: int | None) -> dict[str, Any]:
    return {"start_cursor": start_cursor, "page_size": page_size}


def _comment_body(
    rich_text: list[dict[str, Any]],
    parent: dict[str, Any] | None,
    discussion_id: str | None,
) -> dict[str, Any]:
    if (parent is None) == (discussion_id is None):
        raise ValueError("exactly one of parent or discussion_id is required")
    return {"rich_text": rich_text, "parent": parent, "discussion_id": discussion_id}


class UserAPI:
    """Synchronous wrapper for ``/users``."""

    def __init__(self, transport: NotionTransport) -> None:
        self._transport = transport

    def list(self, *, start_cursor: str | None = None, page_size: int | None = None) -> dict[str, Any]:
        """Fetch one page of workspace users."""
        return self._transport.request("GET", "/users", params=_page_params(start_cursor, page_size))

    def retrieve(self, *, user_id: str) -> dict[str, Any]:
        return self._transport.request("GET", f"/users/{user_id}")

    def me(self) -> dict[str, Any]:
        """Retrieve the bot user behind the current token."""
        return self._transport.request("GET", "/users/me")


class CommentAPI:
    """Synchronous wrapper for ``/comments``."""

    def __init__(self, transport: NotionTransport) -> None:
        self._transport = transport

    def list(
        self,
        *,
        block_id: str,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        """Fetch one page of unresolved comments on a page or block."""
        params = {"block_id": block_id, **_page_params(start_cursor, page_size)}
        return self._transport.request("GET", "/comments", params=params)

    def create(
        self,
        *,
        rich_text: list[dict[str, Any]],
        parent: dict[str, Any] | None = None,
        discussion_id: str | None = None,
    ) -> dict[str, Any]:
        """Start a discussion on *parent* or reply in *discussion_id*."""
        return self._transport.request("POST", "/comments", json=_comment_body(rich_text, parent, discussion_id))


class AsyncUserAPI:
    """Asynchronous wrapper for ``/users``."""

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport

    async def list(self, *, start_cursor: str | None = None, page_size: int | None = None) -> dict[str, Any]:
        return await self._transport.request("GET", "/users", params=_page_params(start_cursor, page_size))

    async def retrieve(self, *, user_id: str) -> dict[str, Any]:
        return await self._transport.request("GET", f"/users/{user_id}")

    async def me(self) -> dict[str, Any]:
        return await self._transport.request("GET", "/users/me")


class AsyncCommentAPI:
    """Asynchronous wrapper for ``/comments``."""

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport

    async def list(
        self,
        *,
        block_id: str,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        params = {"block_id": block_id, **_page_params(start_cursor, page_size)}
        return await self._transport.request("GET", "/comments", params=params)

    async def create(
        self,
        *,
        rich_text: list[dict[str, Any]],
        parent: dict[str, Any] | None = None,
        discussion_id: str | None = None,
    ) -> dict[str, Any]:
        return await self._transport.request(
            "POST", "/comments", json=_comment_body(rich_text, parent, discussion_id)
        )


class SearchAPI:
    """Synchronous wrapper for ``POST /search``."""

    def __init__(self, transport: NotionTransport) -> None:
        self._transport = transport

    def __call__(
        self,
        *,
        query: str | None = None,
        filter: dict[str, Any] | None = None,
        sort: dict[str, Any] | None = None,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        """Fetch one page of pages and data sources shared with the integration."""
        body = {"query": query, "filter": filter, "sort": sort, **_page_params(start_cursor, page_size)}
        return self._transport.request("POST", "/search", json=body)


class AsyncSearchAPI:
    """Asynchronous wrapper for ``POST /search``."""

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport

    async def __call__(
        self,
        *,
        query: str | None = None,
        filter: dict[str, Any] | None = None,
        sort: dict[str, Any] | None = None,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        body = {"query": query, "filter": filter, "sort": sort, **_page_params(start_cursor, page_size)}
        return await self._transport.request("POST", "/search", json=body)

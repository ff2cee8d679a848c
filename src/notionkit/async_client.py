"""Asynchronous Notion client.

:class:`AsyncNotionKitClient` mirrors :class:`NotionKitClient` but every
endpoint method is a coroutine, for use with the ``async_*`` helpers in
:mod:`notionkit.pagination`.

Usage::

    import asyncio
    from notionkit import AsyncNotionKitClient, async_iterate_paginated_api, get_page_title

    async def main():
        async with AsyncNotionKitClient(token="secret_xxx") as client:
            async for row in async_iterate_paginated_api(
                client.data_sources.query, data_source_id="<data_source_id>",
            ):
                print(get_page_title(row))

    asyncio.run(main())
"""

from __future__ import annotations

from typing import Any

import httpx

from notionkit.config import DEFAULT_LOG_LEVEL, NotionKitConfig
from notionkit.notion_api import (
    AsyncBlockAPI,
    AsyncCommentAPI,
    AsyncDatabaseAPI,
    AsyncDataSourceAPI,
    AsyncNotionTransport,
    AsyncPageAPI,
    AsyncSearchAPI,
    AsyncUserAPI,
)
from notionkit.observability import get_logger


class AsyncNotionKitClient:
    """Asynchronous Notion API client.

    Parameters
    ----------
    token:
        Notion integration token.
    http_transport:
        Optional async httpx transport, mainly for tests.
    **kwargs:
        Forwarded to :class:`NotionKitConfig`.
    """

    def __init__(
        self,
        token: str,
        *,
        http_transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: Any,
    ) -> None:
        self._config = NotionKitConfig(token=token, **kwargs)
        # The notionkit logger is shared; leave its level alone unless asked.
        level = self._config.log_level
        get_logger(level=None if level.upper() == DEFAULT_LOG_LEVEL else level)
        self._transport = AsyncNotionTransport(self._config, http_transport)
        self.pages = AsyncPageAPI(self._transport)
        self.blocks = AsyncBlockAPI(self._transport)
        self.data_sources = AsyncDataSourceAPI(self._transport)
        self.databases = AsyncDatabaseAPI(self._transport)
        self.users = AsyncUserAPI(self._transport)
        self.comments = AsyncCommentAPI(self._transport)
        self.search = AsyncSearchAPI(self._transport)

    @property
    def config(self) -> NotionKitConfig:
        return self._config

    async def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        await self._transport.aclose()

    async def __aenter__(self) -> AsyncNotionKitClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

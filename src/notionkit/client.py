"""Synchronous Notion client.

:class:`NotionKitClient` wires a :class:`NotionTransport` to the endpoint
wrappers and exposes them as attributes.

Usage::

    from notionkit import NotionKitClient, collect_paginated_api, get_block_plain_text

    with NotionKitClient(token="secret_xxx") as client:
        blocks = collect_paginated_api(client.blocks.children.list, block_id=page_id)
        print("\\n".join(get_block_plain_text(b) for b in blocks))
"""

from __future__ import annotations

from typing import Any

import httpx

from notionkit.config import DEFAULT_LOG_LEVEL, NotionKitConfig
from notionkit.notion_api import (
    BlockAPI,
    CommentAPI,
    DatabaseAPI,
    DataSourceAPI,
    NotionTransport,
    PageAPI,
    SearchAPI,
    UserAPI,
)
from notionkit.observability import get_logger


class NotionKitClient:
    """Synchronous Notion API client.

    Parameters
    ----------
    token:
        Notion integration token.
    http_transport:
        Optional httpx transport, mainly for tests.
    **kwargs:
        Forwarded to :class:`NotionKitConfig`.

    Attributes
    ----------
    pages, blocks, data_sources, databases, users, comments:
        Endpoint wrappers; ``blocks.children`` covers child blocks.
    search:
        Callable wrapper for ``POST /search``.
    """

    def __init__(
        self,
        token: str,
        *,
        http_transport: httpx.BaseTransport | None = None,
        **kwargs: Any,
    ) -> None:
        self._config = NotionKitConfig(token=token, **kwargs)
        # The notionkit logger is shared; leave its level alone unless asked.
        level = self._config.log_level
        get_logger(level=None if level.upper() == DEFAULT_LOG_LEVEL else level)
        self._transport = NotionTransport(self._config, http_transport)
        self.pages = PageAPI(self._transport)
        self.blocks = BlockAPI(self._transport)
        self.data_sources = DataSourceAPI(self._transport)
        self.databases = DatabaseAPI(self._transport)
        self.users = UserAPI(self._transport)
        self.comments = CommentAPI(self._transport)
        self.search = SearchAPI(self._transport)

    @property
    def config(self) -> NotionKitConfig:
        return self._config

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self._transport.close()

    def __enter__(self) -> NotionKitClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

"""notionkit.notion_api -- Notion API transport and endpoint wrappers.

This sub-package provides:

* :mod:`.transport` -- HTTP transport with auth headers and typed errors.
* :mod:`.pages` -- Page API wrappers.
* :mod:`.blocks` -- Block and block-children API wrappers.
* :mod:`.data_sources` -- Data source and database API wrappers.
* :mod:`.users` -- User, comment and search API wrappers.

Every ``list``/``query``/``search`` method returns a single page and takes
``start_cursor`` as a keyword, so it can be handed straight to
:mod:`notionkit.pagination`.
"""

from __future__ import annotations

from .blocks import AsyncBlockAPI, BlockAPI
from .data_sources import AsyncDatabaseAPI, AsyncDataSourceAPI, DatabaseAPI, DataSourceAPI
from .pages import AsyncPageAPI, PageAPI
from .transport import AsyncNotionTransport, NotionTransport
from .users import AsyncCommentAPI, AsyncSearchAPI, AsyncUserAPI, CommentAPI, SearchAPI, UserAPI

__all__ = [
    "AsyncBlockAPI",
    "AsyncCommentAPI",
    "AsyncDataSourceAPI",
    "AsyncDatabaseAPI",
    "AsyncNotionTransport",
    "AsyncPageAPI",
    "AsyncSearchAPI",
    "AsyncUserAPI",
    "BlockAPI",
    "CommentAPI",
    "DataSourceAPI",
    "DatabaseAPI",
    "NotionTransport",
    "PageAPI",
    "SearchAPI",
    "UserAPI",
]

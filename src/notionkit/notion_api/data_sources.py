"""Data source and database API wrappers.

Since API version ``2025-09-03`` a database is a container of one or more
data sources; rows live in the data source and are read with
``data_sources.query``.  Query results mix pages and data sources, which is
what :func:`notionkit.shapes.is_full_page_or_data_source` is for.
"""

from __future__ import annotations

from typing import Any

from .transport import AsyncNotionTransport, NotionTransport


def _query_body(
    filter: dict[str, Any] | None,
    sorts: list[dict[str, Any]] | None,
    start_cursor: str | None,
    page_size: int | None,
) -> dict[str, Any]:
    return {"filter": filter, "sorts": sorts, "start_cursor": start_cursor, "page_size": page_size}


def _template_params(name: str | None, start_cursor: str | None, page_size: int | None) -> dict[str, Any]:
    return {"name": name, "start_cursor": start_cursor, "page_size": page_size}


class DataSourceAPI:
    """Synchronous wrapper for ``/data_sources``."""

    def __init__(self, transport: NotionTransport) -> None:
        self._transport = transport

    def retrieve(self, *, data_source_id: str) -> dict[str, Any]:
        return self._transport.request("GET", f"/data_sources/{data_source_id}")

    def query(
        self,
        *,
        data_source_id: str,
        filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        """Fetch one page of rows matching *filter*, ordered by *sorts*."""
        return self._transport.request(
            "POST",
            f"/data_sources/{data_source_id}/query",
            json=_query_body(filter, sorts, start_cursor, page_size),
        )

    def list_templates(
        self,
        *,
        data_source_id: str,
        name: str | None = None,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        """Fetch one page of page templates.

        The response keeps its items under ``templates``, not ``results``;
        use :func:`notionkit.pagination.iterate_data_source_templates`.
        """
        return self._transport.request(
            "GET",
            f"/data_sources/{data_source_id}/templates",
            params=_template_params(name, start_cursor, page_size),
        )


class DatabaseAPI:
    """Synchronous wrapper for ``/databases``."""

    def __init__(self, transport: NotionTransport) -> None:
        self._transport = transport

    def retrieve(self, *, database_id: str) -> dict[str, Any]:
        """Retrieve a database container, including its ``data_sources`` list."""
        return self._transport.request("GET", f"/databases/{database_id}")


class AsyncDataSourceAPI:
    """Asynchronous wrapper for ``/data_sources``."""

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport

    async def retrieve(self, *, data_source_id: str) -> dict[str, Any]:
        return await self._transport.request("GET", f"/data_sources/{data_source_id}")

    async def query(
        self,
        *,
        data_source_id: str,
        filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        return await self._transport.request(
            "POST",
            f"/data_sources/{data_source_id}/query",
            json=_query_body(filter, sorts, start_cursor, page_size),
        )

    async def list_templates(
        self,
        *,
        data_source_id: str,
        name: str | None = None,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        return await self._transport.request(
            "GET",
            f"/data_sources/{data_source_id}/templates",
            params=_template_params(name, start_cursor, page_size),
        )


class AsyncDatabaseAPI:
    """Asynchronous wrapper for ``/databases``."""

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport

    async def retrieve(self, *, database_id: str) -> dict[str, Any]:
        return await self._transport.request("GET", f"/databases/{database_id}")

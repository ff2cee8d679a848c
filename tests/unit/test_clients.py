"""Tests for NotionKitClient (sync) and AsyncNotionKitClient (async).

Every request goes through an ``httpx.MockTransport`` so these tests run
entirely offline.
"""

from __future__ import annotations

import logging

import httpx
import pytest
from factories import (
    PAGE_ID,
    AsyncRecordingHandler,
    RecordingHandler,
    json_response,
    make_block,
    make_page,
    make_rich_text,
    page_of,
)

from notionkit import (
    AsyncNotionKitClient,
    NotionKitClient,
    NotionKitRateLimitError,
    async_collect_data_source_templates,
    async_collect_paginated_api,
    collect_data_source_templates,
    collect_paginated_api,
    get_block_plain_text,
    get_page_title,
    iterate_paginated_api,
)
from notionkit.observability import ROOT_LOGGER_NAME

TOKEN = "secret_test_token_1234"


def _client(handler) -> NotionKitClient:
    return NotionKitClient(TOKEN, http_transport=httpx.MockTransport(handler))


def _async_client(handler) -> AsyncNotionKitClient:
    return AsyncNotionKitClient(TOKEN, http_transport=httpx.MockTransport(handler))


def _paragraph(text: str) -> dict:
    return make_block("paragraph", {"rich_text": [make_rich_text(text)]})


# ---------------------------------------------------------------------------
# Sync client
# ---------------------------------------------------------------------------


class TestNotionKitClient:
    def test_config_from_kwargs(self):
        client = NotionKitClient(TOKEN, timeout_seconds=5.0, notion_version="2022-06-28")
        try:
            assert client.config.timeout_seconds == 5.0
            assert client.config.notion_version == "2022-06-28"
        finally:
            client.close()

    def test_invalid_config_raises(self):
        with pytest.raises(ValueError):
            NotionKitClient(TOKEN, base_url="http://api.example.com")

    def test_retrieve_page(self):
        handler = RecordingHandler(json_response(200, make_page()))
        with _client(handler) as client:
            page = client.pages.retrieve(page_id=PAGE_ID)
        assert page["id"] == PAGE_ID
        assert handler.requests[0].method == "GET"
        assert handler.requests[0].url.path == f"/v1/pages/{PAGE_ID}"

    def test_create_page_body(self):
        handler = RecordingHandler(json_response(200, make_page()))
        parent = {"data_source_id": "ds1"}
        properties = {"Name": {"title": [{"text": {"content": "Hi"}}]}}
        with _client(handler) as client:
            client.pages.create(parent=parent, properties=properties)
        request = handler.requests[0]
        assert (request.method, request.url.path) == ("POST", "/v1/pages")
        assert handler.json_bodies == [{"parent": parent, "properties": properties}]

    def test_update_page_body(self):
        handler = RecordingHandler(json_response(200, make_page()))
        with _client(handler) as client:
            client.pages.update(page_id=PAGE_ID, in_trash=True)
        assert handler.requests[0].method == "PATCH"
        assert handler.json_bodies == [{"in_trash": True}]

    def test_block_children_paginate(self):
        handler = RecordingHandler(
            json_response(200, page_of([_paragraph("one"), _paragraph("two")], "cur-2")),
            json_response(200, page_of([_paragraph("three")])),
        )
        with _client(handler) as client:
            blocks = collect_paginated_api(client.blocks.children.list, block_id=PAGE_ID, page_size=2)
        assert [get_block_plain_text(b) for b in blocks] == ["one", "two", "three"]
        first, second = (dict(r.url.params) for r in handler.requests)
        assert first == {"page_size": "2"}
        assert second == {"page_size": "2", "start_cursor": "cur-2"}
        assert handler.requests[0].url.path == f"/v1/blocks/{PAGE_ID}/children"

    def test_append_children(self):
        handler = RecordingHandler(json_response(200, page_of([_paragraph("x")])))
        with _client(handler) as client:
            client.blocks.children.append(block_id=PAGE_ID, children=[_paragraph("x")])
        assert handler.requests[0].method == "PATCH"
        assert list(handler.json_bodies[0]) == ["children"]

    def test_query_data_source_paginates_in_body(self):
        handler = RecordingHandler(
            json_response(200, page_of([make_page()], "c1")),
            json_response(200, page_of([make_page()])),
        )
        with _client(handler) as client:
            rows = collect_paginated_api(client.data_sources.query, data_source_id="ds1")
        assert [get_page_title(r) for r in rows] == ["", ""]
        assert handler.json_bodies == [{}, {"start_cursor": "c1"}]
        assert handler.requests[0].url.path == "/v1/data_sources/ds1/query"

    def test_list_templates(self):
        handler = RecordingHandler(
            json_response(
                200,
                {
                    "templates": [{"id": "t1", "name": "Weekly", "is_default": True}],
                    "has_more": False,
                    "next_cursor": None,
                },
            )
        )
        with _client(handler) as client:
            templates = collect_data_source_templates(client, data_source_id="ds1", name="week")
        assert templates == [{"id": "t1", "name": "Weekly", "is_default": True}]
        request = handler.requests[0]
        assert request.url.path == "/v1/data_sources/ds1/templates"
        assert dict(request.url.params) == {"name": "week"}

    def test_comment_requires_exactly_one_target(self):
        handler = RecordingHandler()
        with _client(handler) as client:
            with pytest.raises(ValueError):
                client.comments.create(rich_text=[])
            with pytest.raises(ValueError):
                client.comments.create(rich_text=[], parent={"page_id": "p"}, discussion_id="d")
        assert handler.requests == []

    def test_search(self):
        handler = RecordingHandler(json_response(200, page_of([])))
        with _client(handler) as client:
            client.search(query="roadmap", page_size=10)
        assert handler.json_bodies == [{"query": "roadmap", "page_size": 10}]

    def test_users_me(self):
        handler = RecordingHandler(json_response(200, {"object": "user", "id": "bot", "type": "bot"}))
        with _client(handler) as client:
            assert client.users.me()["type"] == "bot"
        assert handler.requests[0].url.path == "/v1/users/me"

    def test_error_mid_pagination_surfaces(self):
        handler = RecordingHandler(
            json_response(200, page_of([_paragraph("one")], "c1")),
            json_response(429, {"object": "error", "code": "rate_limited", "message": "slow down"}),
        )
        seen = []
        with _client(handler) as client, pytest.raises(NotionKitRateLimitError):
            for block in iterate_paginated_api(client.blocks.children.list, block_id=PAGE_ID):
                seen.append(get_block_plain_text(block))
        assert seen == ["one"]


# ---------------------------------------------------------------------------
# Async client
# ---------------------------------------------------------------------------


class TestAsyncNotionKitClient:
    @pytest.mark.asyncio
    async def test_retrieve_database(self):
        handler = AsyncRecordingHandler(json_response(200, {"object": "database", "id": "db1"}))
        async with _async_client(handler) as client:
            db = await client.databases.retrieve(database_id="db1")
        assert db["object"] == "database"
        assert handler.requests[0].url.path == "/v1/databases/db1"

    @pytest.mark.asyncio
    async def test_block_children_paginate(self):
        handler = AsyncRecordingHandler(
            json_response(200, page_of([_paragraph("a")], "c1")),
            json_response(200, page_of([_paragraph("b")])),
        )
        async with _async_client(handler) as client:
            blocks = await async_collect_paginated_api(client.blocks.children.list, block_id=PAGE_ID)
        assert [get_block_plain_text(b) for b in blocks] == ["a", "b"]
        assert dict(handler.requests[1].url.params) == {"start_cursor": "c1"}

    @pytest.mark.asyncio
    async def test_list_templates(self):
        handler = AsyncRecordingHandler(
            json_response(200, {"templates": [{"id": "t1", "name": "A", "is_default": False}], "has_more": True, "next_cursor": "n"}),
            json_response(200, {"templates": [{"id": "t2", "name": "B", "is_default": False}], "has_more": False, "next_cursor": None}),
        )
        async with _async_client(handler) as client:
            templates = await async_collect_data_source_templates(client, data_source_id="ds1")
        assert [t["id"] for t in templates] == ["t1", "t2"]
        assert dict(handler.requests[1].url.params) == {"start_cursor": "n"}

    @pytest.mark.asyncio
    async def test_close_releases_http_client(self):
        client = _async_client(AsyncRecordingHandler())
        await client.close()
        assert client._transport._client.is_closed


# ---------------------------------------------------------------------------
# Logger level
# ---------------------------------------------------------------------------


@pytest.fixture
def restore_root_level():
    root = logging.getLogger(ROOT_LOGGER_NAME)
    saved = root.level
    yield root
    root.setLevel(saved)


class TestClientLogLevel:
    def test_explicit_level_is_applied(self, restore_root_level):
        _client(RecordingHandler()).close()
        NotionKitClient(TOKEN, log_level="DEBUG", http_transport=httpx.MockTransport(RecordingHandler())).close()
        assert restore_root_level.level == logging.DEBUG

    def test_default_client_keeps_earlier_level(self, restore_root_level):
        NotionKitClient(TOKEN, log_level="DEBUG", http_transport=httpx.MockTransport(RecordingHandler())).close()
        _client(RecordingHandler()).close()
        assert restore_root_level.level == logging.DEBUG

    @pytest.mark.asyncio
    async def test_async_default_client_keeps_earlier_level(self, restore_root_level):
        NotionKitClient(TOKEN, log_level="info", http_transport=httpx.MockTransport(RecordingHandler())).close()
        await _async_client(AsyncRecordingHandler()).close()
        assert restore_root_level.level == logging.INFO

"""Tests for ids.py: Notion ID extraction and normalisation."""

from __future__ import annotations

import pytest

from notionkit.ids import (
    extract_block_id,
    extract_database_id,
    extract_notion_id,
    extract_page_id,
    format_uuid,
    is_valid_notion_id,
)

COMPACT = "0f3b5c7e9a1d4b2c8e6f0a1b2c3d4e5f"
CANONICAL = "0f3b5c7e-9a1d-4b2c-8e6f-0a1b2c3d4e5f"
OTHER_COMPACT = "aaaaaaaabbbbccccddddeeeeeeeeeeee"
OTHER_CANONICAL = "aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee"


class TestFormatUuid:
    def test_hyphenates(self):
        assert format_uuid(COMPACT) == CANONICAL

    def test_lowercases(self):
        assert format_uuid(COMPACT.upper()) == CANONICAL


class TestExtractNotionId:
    def test_canonical_is_returned_lowercased(self):
        assert extract_notion_id(CANONICAL.upper()) == CANONICAL

    def test_compact_is_hyphenated(self):
        assert extract_notion_id(COMPACT) == CANONICAL

    def test_surrounding_whitespace_is_ignored(self):
        assert extract_notion_id(f"  {COMPACT}\n") == CANONICAL

    def test_idempotent(self):
        once = extract_notion_id(COMPACT)
        assert extract_notion_id(once) == once

    def test_page_url_with_slug(self):
        url = f"https://www.notion.so/acme/Roadmap-{COMPACT}"
        assert extract_notion_id(url) == CANONICAL

    def test_path_segment_followed_by_query(self):
        url = f"https://www.notion.so/acme/Tasks-{COMPACT}?pvs=4"
        assert extract_notion_id(url) == CANONICAL

    @pytest.mark.parametrize("suffix", ["#frag", "/sub", "?pvs=4", ""])
    def test_path_segment_terminators(self, suffix):
        url = f"https://x/Slug-{COMPACT}{suffix}"
        assert extract_notion_id(url) == CANONICAL

    def test_overlong_path_run_falls_through_to_query(self):
        url = f"https://x/Slug-{COMPACT}a?p={OTHER_COMPACT}"
        assert extract_notion_id(url) == OTHER_CANONICAL

    def test_path_wins_over_view_query(self):
        url = f"https://www.notion.so/acme/Tasks-{COMPACT}?v={OTHER_COMPACT}"
        assert extract_notion_id(url) == CANONICAL

    def test_path_wins_over_page_query(self):
        url = f"https://www.notion.so/acme/Tasks-{COMPACT}?p={OTHER_COMPACT}"
        assert extract_notion_id(url) == CANONICAL

    @pytest.mark.parametrize("param", ["p", "page_id", "database_id"])
    def test_query_parameter(self, param):
        url = f"https://www.notion.so/acme?{param}={COMPACT}"
        assert extract_notion_id(url) == CANONICAL

    def test_query_parameter_after_another(self):
        url = f"https://www.notion.so/acme?foo=1&p={COMPACT}"
        assert extract_notion_id(url) == CANONICAL

    def test_bare_compact_in_path(self):
        url = f"https://www.notion.so/{COMPACT}"
        assert extract_notion_id(url) == CANONICAL

    def test_longer_hex_run_is_not_an_id(self):
        assert extract_notion_id(f"https://example.com/{COMPACT}ab") is None

    @pytest.mark.parametrize("value", [None, "", 123, ["x"], {}, "invalid-id", "https://www.notion.so/acme"])
    def test_no_id_returns_none(self, value):
        assert extract_notion_id(value) is None

    def test_aliases_match(self):
        url = f"https://www.notion.so/acme/Tasks-{COMPACT}?v={OTHER_COMPACT}"
        assert extract_page_id(url) == extract_notion_id(url)
        assert extract_database_id(url) == extract_notion_id(url)


class TestExtractBlockId:
    def test_block_prefixed_fragment(self):
        url = f"https://www.notion.so/acme/Page-{COMPACT}#block-{OTHER_COMPACT}"
        assert extract_block_id(url) == OTHER_CANONICAL

    def test_bare_fragment(self):
        url = f"https://www.notion.so/acme/Page-{COMPACT}#{OTHER_COMPACT}"
        assert extract_block_id(url) == OTHER_CANONICAL

    def test_no_fragment_returns_none(self):
        assert extract_block_id(f"https://www.notion.so/acme/Page-{COMPACT}") is None

    @pytest.mark.parametrize("value", [None, "", 42])
    def test_non_string_returns_none(self, value):
        assert extract_block_id(value) is None


class TestIsValidNotionId:
    @pytest.mark.parametrize("value", [CANONICAL, COMPACT, CANONICAL.upper(), f" {COMPACT} "])
    def test_valid(self, value):
        assert is_valid_notion_id(value) is True

    @pytest.mark.parametrize(
        "value",
        [None, 123, "", "   ", "invalid-id", COMPACT[:-1], f"https://www.notion.so/Page-{COMPACT}"],
    )
    def test_invalid(self, value):
        assert is_valid_notion_id(value) is False

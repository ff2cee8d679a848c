"""Property-based tests for the pure helpers."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from notionkit.ids import extract_notion_id, format_uuid, is_valid_notion_id
from notionkit.pagination import collect_paginated_api
from notionkit.rich_text import rich_text_to_markdown, rich_text_to_plain_text

hex_ids = st.text(alphabet="0123456789abcdefABCDEF", min_size=32, max_size=32)
slugs = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=12)

spans = st.fixed_dictionaries(
    {
        "type": st.just("text"),
        "plain_text": st.text(max_size=20),
        "annotations": st.fixed_dictionaries(
            {
                "bold": st.booleans(),
                "italic": st.booleans(),
                "strikethrough": st.booleans(),
                "underline": st.booleans(),
                "code": st.booleans(),
            }
        ),
    }
)


@given(hex_ids)
def test_extracted_ids_are_canonical_and_stable(raw):
    extracted = extract_notion_id(raw)
    assert extracted == format_uuid(raw)
    assert extracted == extracted.lower()
    assert is_valid_notion_id(extracted)
    assert extract_notion_id(extracted) == extracted


@given(hex_ids)
def test_format_uuid_round_trips_to_compact(raw):
    formatted = format_uuid(raw)
    assert is_valid_notion_id(formatted)
    assert formatted.replace("-", "") == raw.lower()


@given(slugs, hex_ids)
def test_page_url_yields_its_id(slug, raw):
    assert extract_notion_id(f"https://www.notion.so/{slug}-{raw}") == format_uuid(raw)


@given(st.lists(spans, max_size=6))
def test_plain_text_is_concatenation(items):
    assert rich_text_to_plain_text(items) == "".join(i["plain_text"] for i in items)


@given(st.lists(spans, max_size=6))
def test_unannotated_markdown_equals_plain_text(items):
    for item in items:
        item["annotations"] = {flag: False for flag in item["annotations"]}
    assert rich_text_to_markdown(items) == rich_text_to_plain_text(items)


@given(st.lists(st.lists(st.integers(), max_size=4), min_size=1, max_size=5))
def test_pagination_yields_every_item_in_order(pages):
    responses = [
        {"results": items, "next_cursor": f"c{i + 1}" if i + 1 < len(pages) else None}
        for i, items in enumerate(pages)
    ]
    calls = []

    def list_fn(**kwargs):
        calls.append(kwargs["start_cursor"])
        return responses[len(calls) - 1]

    assert collect_paginated_api(list_fn) == [item for items in pages for item in items]
    assert calls == [None] + [f"c{i}" for i in range(1, len(pages))]

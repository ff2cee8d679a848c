"""notionkit: helpers and a thin client for the Notion API.

Public re-exports
-----------------

* **Pagination:** :func:`iterate_paginated_api`, :func:`collect_paginated_api`,
  their ``async_*`` twins, and the data-source template iterators
* **Shapes:** ``is_full_*`` predicates for full vs. partial responses
* **Properties:** :func:`get_page_property`, :func:`get_page_title`,
  :func:`get_block_plain_text` and friends
* **Rich text:** :func:`rich_text_to_plain_text`, :func:`rich_text_to_markdown`
* **IDs:** :func:`extract_notion_id`, :func:`is_valid_notion_id` and friends
* **Clients:** :class:`NotionKitClient`, :class:`AsyncNotionKitClient`
* **Errors:** :class:`NotionKitError`, its subclasses and :class:`ErrorCode`

Usage::

    from notionkit import NotionKitClient, extract_page_id, get_page_properties_as_dict

    with NotionKitClient(token="secret_xxx") as client:
        page = client.pages.retrieve(page_id=extract_page_id(url))
        print(get_page_properties_as_dict(page))
"""

from __future__ import annotations

# ── Clients ────────────────────────────────────────────────────────────
from notionkit.async_client import AsyncNotionKitClient
from notionkit.client import NotionKitClient

# ── Configuration ───────────────────────────────────────────────────────
from notionkit.config import NotionKitConfig

# ── Errors ──────────────────────────────────────────────────────────────
from notionkit.errors import (
    ErrorCode,
    NotionKitAuthError,
    NotionKitConflictError,
    NotionKitError,
    NotionKitNetworkError,
    NotionKitNotFoundError,
    NotionKitPermissionError,
    NotionKitRateLimitError,
    NotionKitServerError,
    NotionKitTimeoutError,
    NotionKitValidationError,
    is_notionkit_error,
)

# ── Helpers ─────────────────────────────────────────────────────────────
from notionkit.ids import (
    extract_block_id,
    extract_database_id,
    extract_notion_id,
    extract_page_id,
    format_uuid,
    is_valid_notion_id,
)
from notionkit.models import ObjectType, PropertyType, RichTextType, TextBlockType
from notionkit.pagination import (
    async_collect_data_source_templates,
    async_collect_paginated_api,
    async_iterate_data_source_templates,
    async_iterate_paginated_api,
    collect_data_source_templates,
    collect_paginated_api,
    iterate_data_source_templates,
    iterate_paginated_api,
)
from notionkit.properties import (
    get_block_plain_text,
    get_page_properties_as_dict,
    get_page_property,
    get_page_property_names,
    get_page_title,
)
from notionkit.rich_text import (
    is_equation_rich_text_item,
    is_mention_rich_text_item,
    is_text_rich_text_item,
    rich_text_to_markdown,
    rich_text_to_plain_text,
)
from notionkit.shapes import (
    is_full_block,
    is_full_comment,
    is_full_data_source,
    is_full_database,
    is_full_page,
    is_full_page_or_data_source,
    is_full_user,
)

__all__ = [
    # Clients
    "NotionKitClient",
    "AsyncNotionKitClient",
    "NotionKitConfig",
    # Errors
    "ErrorCode",
    "NotionKitError",
    "NotionKitValidationError",
    "NotionKitAuthError",
    "NotionKitPermissionError",
    "NotionKitNotFoundError",
    "NotionKitConflictError",
    "NotionKitRateLimitError",
    "NotionKitServerError",
    "NotionKitNetworkError",
    "NotionKitTimeoutError",
    "is_notionkit_error",
    # Pagination
    "iterate_paginated_api",
    "collect_paginated_api",
    "async_iterate_paginated_api",
    "async_collect_paginated_api",
    "iterate_data_source_templates",
    "collect_data_source_templates",
    "async_iterate_data_source_templates",
    "async_collect_data_source_templates",
    # Shapes
    "is_full_block",
    "is_full_page",
    "is_full_data_source",
    "is_full_database",
    "is_full_page_or_data_source",
    "is_full_user",
    "is_full_comment",
    # Properties
    "get_page_property",
    "get_page_property_names",
    "get_page_properties_as_dict",
    "get_page_title",
    "get_block_plain_text",
    # Rich text
    "rich_text_to_plain_text",
    "rich_text_to_markdown",
    "is_text_rich_text_item",
    "is_equation_rich_text_item",
    "is_mention_rich_text_item",
    # IDs
    "extract_notion_id",
    "extract_page_id",
    "extract_database_id",
    "extract_block_id",
    "format_uuid",
    "is_valid_notion_id",
    # Enums
    "ObjectType",
    "PropertyType",
    "RichTextType",
    "TextBlockType",
]

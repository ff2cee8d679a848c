"""Notion identifier parsing and normalisation.

Notion IDs are 128-bit UUIDs that show up in two spellings: the hyphenated
8-4-4-4-12 form returned by the API, and a compact 32-hex-digit form that
Notion embeds in page and database URLs::

    https://www.notion.so/acme/Roadmap-0f3b5c7e9a1d4b2c8e6f0a1b2c3d4e5f?v=...

Every function here returns the canonical form (hyphenated, lowercase) or
``None``/``False``; nothing raises.
"""

from __future__ import annotations

import re

# Hex matching is case-insensitive on input; output is always lowercased.
_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
_COMPACT_RE = re.compile(r"^[0-9a-f]{32}$", re.IGNORECASE)

# "/<slug>-<32 hex>" ending the segment.  Tried before the query string so a
# view id in "?v=" never wins over the database id in the path.
_PATH_ID_RE = re.compile(r"/[^/?#]*-([0-9a-f]{32})(?:[/?#]|$)", re.IGNORECASE)
_QUERY_ID_RE = re.compile(r"[?&](?:p|page_id|database_id)=([0-9a-f]{32})", re.IGNORECASE)
_ANY_ID_RE = re.compile(r"(?<![0-9a-f])([0-9a-f]{32})(?![0-9a-f])", re.IGNORECASE)

_BLOCK_FRAGMENT_RE = re.compile(r"#(?:block-)?([0-9a-f]{32})", re.IGNORECASE)


def format_uuid(compact_id: str) -> str:
    """Hyphenate a 32-character hex string into canonical UUID form.

    The caller guarantees the length; no validation is done.

    >>> format_uuid("0F3B5C7E9A1D4B2C8E6F0A1B2C3D4E5F")
    '0f3b5c7e-9a1d-4b2c-8e6f-0a1b2c3d4e5f'
    """
    clean = compact_id.lower()
    return f"{clean[:8]}-{clean[8:12]}-{clean[12:16]}-{clean[16:20]}-{clean[20:32]}"


def extract_notion_id(url_or_id: object) -> str | None:
    """Extract a Notion ID from a URL, or normalise a bare ID.

    Resolution order:

    1. Already hyphenated: returned lowercased.
    2. Compact 32 hex digits: hyphenated.
    3. A ``/<slug>-<id>`` path segment.
    4. A ``p``, ``page_id`` or ``database_id`` query parameter.
    5. Any standalone run of exactly 32 hex digits.

    Parameters
    ----------
    url_or_id:
        A Notion URL or ID.  Non-string input yields ``None``.

    Returns
    -------
    str | None
        The canonical ID, or ``None`` when nothing ID-shaped was found.
    """
    if not url_or_id or not isinstance(url_or_id, str):
        return None

    trimmed = url_or_id.strip()

    if _UUID_RE.match(trimmed):
        return trimmed.lower()

    if _COMPACT_RE.match(trimmed):
        return format_uuid(trimmed)

    for pattern in (_PATH_ID_RE, _QUERY_ID_RE, _ANY_ID_RE):
        match = pattern.search(trimmed)
        if match:
            return format_uuid(match.group(1))

    return None


def extract_database_id(database_url: object) -> str | None:
    """Extract a database ID from a database URL.  Alias of :func:`extract_notion_id`."""
    return extract_notion_id(database_url)


def extract_page_id(page_url: object) -> str | None:
    """Extract a page ID from a page URL.  Alias of :func:`extract_notion_id`."""
    return extract_notion_id(page_url)


def extract_block_id(url_with_block: object) -> str | None:
    """Extract a block ID from a ``#block-<id>`` or ``#<id>`` URL fragment.

    Unlike :func:`extract_notion_id` this never looks at the path or query:
    a URL without a block fragment yields ``None``.
    """
    if not url_with_block or not isinstance(url_with_block, str):
        return None

    match = _BLOCK_FRAGMENT_RE.search(url_with_block)
    if match:
        return format_uuid(match.group(1))
    return None


def is_valid_notion_id(value: object) -> bool:
    """Return ``True`` if *value* is a hyphenated or compact Notion ID."""
    if not value or not isinstance(value, str):
        return False
    trimmed = value.strip()
    return bool(_UUID_RE.match(trimmed) or _COMPACT_RE.match(trimmed))

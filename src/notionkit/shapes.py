"""Full vs. partial response narrowing.

Depending on the integration's permissions, Notion returns either the full
object or a partial one carrying little more than ``object`` and ``id``.
Each predicate checks the single field that tells the two apart for its
kind, and returns a :class:`~typing.TypeGuard` so type checkers narrow the
union.  No deeper validation is done.

``is_full_data_source`` and ``is_full_database`` only look at ``object``:
Notion has no partial wire shape for those kinds that differs in a field we
could test.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeGuard

from notionkit.models import (
    BlockObject,
    CommentObject,
    DatabaseObject,
    DataSourceObject,
    ObjectType,
    PageObject,
    UserObject,
)


def is_full_block(response: Any) -> TypeGuard[BlockObject]:
    """Return ``True`` if *response* is a full block (has ``type``)."""
    return (
        isinstance(response, Mapping)
        and response.get("object") == ObjectType.BLOCK
        and "type" in response
    )


def is_full_page(response: Any) -> TypeGuard[PageObject]:
    """Return ``True`` if *response* is a full page (has ``url``)."""
    return (
        isinstance(response, Mapping)
        and response.get("object") == ObjectType.PAGE
        and "url" in response
    )


def is_full_data_source(response: Any) -> TypeGuard[DataSourceObject]:
    """Return ``True`` if *response* is a data source."""
    return isinstance(response, Mapping) and response.get("object") == ObjectType.DATA_SOURCE


def is_full_database(response: Any) -> TypeGuard[DatabaseObject]:
    """Return ``True`` if *response* is a database."""
    return isinstance(response, Mapping) and response.get("object") == ObjectType.DATABASE


def is_full_page_or_data_source(response: Any) -> TypeGuard[PageObject | DataSourceObject]:
    """Return ``True`` for a full page or a data source.

    Meant for the mixed result lists of ``data_sources.query`` and
    ``search``.
    """
    if isinstance(response, Mapping) and response.get("object") == ObjectType.DATA_SOURCE:
        return is_full_data_source(response)
    return is_full_page(response)


def is_full_user(response: Any) -> TypeGuard[UserObject]:
    """Return ``True`` if *response* is a full user (has ``type``)."""
    return isinstance(response, Mapping) and "type" in response


def is_full_comment(response: Any) -> TypeGuard[CommentObject]:
    """Return ``True`` if *response* is a full comment (has ``created_by``)."""
    return isinstance(response, Mapping) and "created_by" in response

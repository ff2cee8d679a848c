"""Typed shapes for the Notion API objects notionkit reads.

Responses stay plain ``dict`` / ``list`` values exactly as decoded from
JSON; the :class:`~typing.TypedDict` classes below only describe them for
type checkers.  Full and partial variants are separate types so the
predicates in :mod:`notionkit.shapes` can narrow between them.

The closed tag sets the helpers dispatch on are ``str`` enums, so a value
read from a response compares equal to its member (``"title" ==
PropertyType.TITLE``).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Literal, NotRequired, TypedDict, TypeVar

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ObjectType(str, Enum):
    """Values of the ``object`` discriminant."""

    PAGE = "page"
    DATA_SOURCE = "data_source"
    DATABASE = "database"
    BLOCK = "block"
    USER = "user"
    COMMENT = "comment"
    LIST = "list"


class RichTextType(str, Enum):
    """Kinds of rich-text span."""

    TEXT = "text"
    MENTION = "mention"
    EQUATION = "equation"


class PropertyType(str, Enum):
    """Every page property kind the extractor knows about."""

    TITLE = "title"
    RICH_TEXT = "rich_text"
    NUMBER = "number"
    SELECT = "select"
    MULTI_SELECT = "multi_select"
    STATUS = "status"
    DATE = "date"
    CHECKBOX = "checkbox"
    URL = "url"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    PEOPLE = "people"
    FILES = "files"
    FORMULA = "formula"
    RELATION = "relation"
    ROLLUP = "rollup"
    CREATED_TIME = "created_time"
    CREATED_BY = "created_by"
    LAST_EDITED_TIME = "last_edited_time"
    LAST_EDITED_BY = "last_edited_by"
    UNIQUE_ID = "unique_id"
    VERIFICATION = "verification"
    BUTTON = "button"


class TextBlockType(str, Enum):
    """Block kinds whose payload carries a ``rich_text`` array."""

    PARAGRAPH = "paragraph"
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    TOGGLE = "toggle"
    TO_DO = "to_do"
    QUOTE = "quote"
    CALLOUT = "callout"
    CODE = "code"


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------

class PaginatedList(TypedDict, Generic[T]):
    """One page of a cursor-paginated list endpoint."""

    object: Literal["list"]
    results: list[T]
    next_cursor: str | None
    has_more: bool
    type: NotRequired[str]


class DataSourceTemplate(TypedDict):
    id: str
    name: str
    is_default: bool


class ListDataSourceTemplatesResponse(TypedDict):
    templates: list[DataSourceTemplate]
    next_cursor: str | None
    has_more: bool


# ---------------------------------------------------------------------------
# Rich text
# ---------------------------------------------------------------------------

class Annotations(TypedDict):
    bold: bool
    italic: bool
    strikethrough: bool
    underline: bool
    code: bool
    color: str


class RichTextItem(TypedDict):
    """A single rich-text span."""

    type: str
    plain_text: str
    href: str | None
    annotations: Annotations
    text: NotRequired[dict[str, Any]]
    mention: NotRequired[dict[str, Any]]
    equation: NotRequired[dict[str, Any]]


# ---------------------------------------------------------------------------
# Objects: full and partial variants
# ---------------------------------------------------------------------------

class PartialPage(TypedDict):
    object: Literal["page"]
    id: str


class PageObject(PartialPage):
    url: str
    created_time: str
    last_edited_time: str
    archived: bool
    in_trash: NotRequired[bool]
    parent: dict[str, Any]
    properties: dict[str, dict[str, Any]]
    icon: NotRequired[dict[str, Any] | None]
    cover: NotRequired[dict[str, Any] | None]
    public_url: NotRequired[str | None]


class PartialBlock(TypedDict):
    object: Literal["block"]
    id: str


class BlockObject(PartialBlock):
    type: str
    has_children: bool
    created_time: str
    last_edited_time: str
    parent: dict[str, Any]
    archived: NotRequired[bool]


class PartialDataSource(TypedDict):
    object: Literal["data_source"]
    id: str


class DataSourceObject(PartialDataSource):
    title: NotRequired[list[RichTextItem]]
    properties: NotRequired[dict[str, dict[str, Any]]]
    parent: NotRequired[dict[str, Any]]


class PartialDatabase(TypedDict):
    object: Literal["database"]
    id: str


class DatabaseObject(PartialDatabase):
    title: NotRequired[list[RichTextItem]]
    data_sources: NotRequired[list[dict[str, Any]]]
    url: NotRequired[str]


class PartialUser(TypedDict):
    object: Literal["user"]
    id: str


class UserObject(PartialUser):
    type: Literal["person", "bot"]
    name: str | None
    avatar_url: str | None
    person: NotRequired[dict[str, Any]]
    bot: NotRequired[dict[str, Any]]


class PartialComment(TypedDict):
    object: Literal["comment"]
    id: str


class CommentObject(PartialComment):
    parent: dict[str, Any]
    discussion_id: str
    created_time: str
    last_edited_time: str
    created_by: PartialUser
    rich_text: list[RichTextItem]


ObjectResponse = (
    PageObject
    | PartialPage
    | DataSourceObject
    | PartialDataSource
    | DatabaseObject
    | PartialDatabase
    | BlockObject
    | PartialBlock
)
"""Anything a query, search, or retrieve call can hand back."""

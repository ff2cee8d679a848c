"""Read page properties and block text without knowing their shapes up front.

Every property value in a page's ``properties`` map is tagged by ``type``
and keeps its payload under a key of the same name::

    {"Status": {"id": "a%3Bc", "type": "status", "status": {"name": "Done", ...}}}

:func:`get_page_property` dispatches on that tag and lightly normalises a
few common kinds.  Unknown tags (Notion adds new ones over time) yield
``None`` rather than an error.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from notionkit.models import BlockObject, PageObject, PartialBlock, PartialPage, PropertyType, TextBlockType
from notionkit.rich_text import rich_text_to_plain_text
from notionkit.shapes import is_full_block, is_full_page


def _named(payload: Any) -> Any:
    return payload.get("name") if isinstance(payload, Mapping) else None


def _names(payload: Any) -> list[Any] | None:
    if not isinstance(payload, list):
        return None
    return [option.get("name") for option in payload if isinstance(option, Mapping)]


def _raw(payload: Any) -> Any:
    return payload


_PropertyExtractor = Callable[[Any], Any]

_EXTRACTORS: dict[PropertyType, _PropertyExtractor] = {
    PropertyType.TITLE: rich_text_to_plain_text,
    PropertyType.RICH_TEXT: rich_text_to_plain_text,
    PropertyType.SELECT: _named,
    PropertyType.STATUS: _named,
    PropertyType.MULTI_SELECT: _names,
    PropertyType.NUMBER: _raw,
    PropertyType.DATE: _raw,
    PropertyType.CHECKBOX: _raw,
    PropertyType.URL: _raw,
    PropertyType.EMAIL: _raw,
    PropertyType.PHONE_NUMBER: _raw,
    PropertyType.PEOPLE: _raw,
    PropertyType.FILES: _raw,
    PropertyType.FORMULA: _raw,
    PropertyType.RELATION: _raw,
    PropertyType.ROLLUP: _raw,
    PropertyType.CREATED_TIME: _raw,
    PropertyType.CREATED_BY: _raw,
    PropertyType.LAST_EDITED_TIME: _raw,
    PropertyType.LAST_EDITED_BY: _raw,
    PropertyType.UNIQUE_ID: _raw,
    PropertyType.VERIFICATION: _raw,
    PropertyType.BUTTON: _raw,
}


def _tag(value: Any, enum: type[PropertyType] | type[TextBlockType]) -> Any:
    """Coerce a ``type`` tag into *enum*, or ``None`` if it is not a member."""
    if not isinstance(value, str):
        return None
    try:
        return enum(value)
    except ValueError:
        return None


def _properties(page: Any) -> Mapping[str, Any] | None:
    if not is_full_page(page):
        return None
    properties = page.get("properties")
    return properties if isinstance(properties, Mapping) else None


def get_page_property(page: PageObject | PartialPage, property_name: str) -> Any:
    """Return the value of the property called *property_name*.

    ``title`` and ``rich_text`` come back as plain text, ``select`` and
    ``status`` as the option name, ``multi_select`` as a list of option
    names.  Every other kind returns its payload as-is (a number, a date
    dict, a list of users, ...).

    Parameters
    ----------
    page:
        A page object.  Partial pages have no properties and yield ``None``.
    property_name:
        The property's display name, i.e. its key in ``page["properties"]``.

    Returns
    -------
    Any
        The extracted value, or ``None`` if the page is partial, the
        property is missing, or its type is unrecognised.
    """
    if not isinstance(property_name, str):
        return None
    properties = _properties(page)
    if properties is None:
        return None

    prop = properties.get(property_name)
    if not isinstance(prop, Mapping):
        return None

    prop_type = _tag(prop.get("type"), PropertyType)
    if prop_type is None or prop_type.value not in prop:
        return None

    return _EXTRACTORS[prop_type](prop[prop_type.value])


def get_page_property_names(page: PageObject | PartialPage) -> list[str]:
    """Return the names of all properties on *page* (``[]`` for partial pages)."""
    properties = _properties(page)
    if properties is None:
        return []
    return list(properties)


def get_page_properties_as_dict(page: PageObject | PartialPage) -> dict[str, Any]:
    """Map every property name on *page* to :func:`get_page_property`'s value.

    Handy for logging or dumping a page to JSON.
    """
    properties = _properties(page)
    if properties is None:
        return {}
    return {name: get_page_property(page, name) for name in properties}


def get_page_title(page: PageObject | PartialPage) -> str:
    """Return the page title as plain text, or ``""`` if there is none.

    A page has at most one ``title`` property; if more turn up, the first in
    iteration order wins.
    """
    properties = _properties(page)
    if properties is None:
        return ""

    for prop in properties.values():
        if isinstance(prop, Mapping) and prop.get("type") == PropertyType.TITLE and "title" in prop:
            return rich_text_to_plain_text(prop["title"])
    return ""


def get_block_plain_text(block: BlockObject | PartialBlock) -> str:
    """Return the text content of a text-bearing block.

    Paragraphs, headings, list items, toggles, to-dos, quotes, callouts and
    code blocks are supported; any other block type (image, embed, ...)
    and partial blocks yield ``""``.
    """
    if not is_full_block(block):
        return ""

    block_type = _tag(block.get("type"), TextBlockType)
    if block_type is None:
        return ""

    payload = block.get(block_type.value)
    if not isinstance(payload, Mapping):
        return ""
    return rich_text_to_plain_text(payload.get("rich_text"))

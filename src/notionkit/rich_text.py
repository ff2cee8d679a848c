"""Notion rich_text arrays to plain text and Markdown.

A rich_text array is an ordered list of spans.  Each span has a ``type``
(``text``, ``mention`` or ``equation``), a ready-made ``plain_text``
rendering, and independent ``annotations`` flags.

Markdown wrapping order (innermost first)::

    bold -> italic -> strikethrough -> underline -> code -> link

so ``bold`` + ``code`` puts the backticks outside the asterisks.  Equations become ``$x$``
and mentions are emitted as-is; neither gets annotations or links.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeGuard

from notionkit.models import RichTextItem, RichTextType

# (annotation flag, opening, closing), applied in this order.
_ANNOTATION_WRAPPERS: tuple[tuple[str, str, str], ...] = (
    ("bold", "**", "**"),
    ("italic", "*", "*"),
    ("strikethrough", "~~", "~~"),
    ("underline", "<u>", "</u>"),
    ("code", "`", "`"),
)


def is_text_rich_text_item(item: Mapping[str, Any]) -> TypeGuard[RichTextItem]:
    """Return ``True`` if *item* is a ``text`` span."""
    return item.get("type") == RichTextType.TEXT


def is_equation_rich_text_item(item: Mapping[str, Any]) -> TypeGuard[RichTextItem]:
    """Return ``True`` if *item* is an inline ``equation`` span."""
    return item.get("type") == RichTextType.EQUATION


def is_mention_rich_text_item(item: Mapping[str, Any]) -> TypeGuard[RichTextItem]:
    """Return ``True`` if *item* is a ``mention`` span."""
    return item.get("type") == RichTextType.MENTION


def _spans(rich_text: Any) -> list[Mapping[str, Any]]:
    if not isinstance(rich_text, list):
        return []
    return [item for item in rich_text if isinstance(item, Mapping)]


def _plain_text(item: Mapping[str, Any]) -> str:
    text = item.get("plain_text")
    return text if isinstance(text, str) else ""


def rich_text_to_plain_text(rich_text: list[RichTextItem] | None) -> str:
    """Concatenate the ``plain_text`` of every span.

    Parameters
    ----------
    rich_text:
        A rich_text array.  ``None`` or anything that is not a list
        yields ``""``.

    Returns
    -------
    str
        The unformatted text, spans joined in order.
    """
    return "".join(_plain_text(item) for item in _spans(rich_text))


def _link_url(item: Mapping[str, Any]) -> str | None:
    text = item.get("text")
    if not isinstance(text, Mapping):
        return None
    link = text.get("link")
    if not isinstance(link, Mapping):
        return None
    return link.get("url") or None


def _render_span(item: Mapping[str, Any]) -> str:
    text = _plain_text(item)

    if is_equation_rich_text_item(item):
        return f"${text}$"
    if is_mention_rich_text_item(item):
        # plain_text already carries the leading "@".
        return text

    annotations = item.get("annotations")
    if isinstance(annotations, Mapping):
        for flag, opening, closing in _ANNOTATION_WRAPPERS:
            if annotations.get(flag):
                text = f"{opening}{text}{closing}"

    if is_text_rich_text_item(item):
        url = _link_url(item)
        if url:
            text = f"[{text}]({url})"

    return text


def rich_text_to_markdown(rich_text: list[RichTextItem] | None) -> str:
    """Render a rich_text array as Markdown.

    Parameters
    ----------
    rich_text:
        A rich_text array.  ``None`` or anything that is not a list
        yields ``""``.

    Returns
    -------
    str
        The Markdown string.  Text is not escaped; spans are joined with no
        separator.
    """
    return "".join(_render_span(item) for item in _spans(rich_text))

"""Serialize typed blocks into Notion API block payloads.

Every block becomes ``{"object": "block", "type": T, T: {...}}``::

    {
        "object": "block",
        "type": "to_do",
        "to_do": {
            "rich_text": [
                {"type": "text", "text": {"content": "Ship it"}},
            ],
            "checked": true
        }
    }

Rich-text segments carry a hyperlink as ``text.link.url``.  Tables embed
their rows as ``table_row`` children, each cell being a rich-text array.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from notionsync.converter.rich_text import split_rich_text
from notionsync.models import (
    Block,
    BulletedListItem,
    CodeBlock,
    Divider,
    Heading,
    NumberedListItem,
    Paragraph,
    Quote,
    RichText,
    Segment,
    Table,
    ToDo,
)


def serialize_rich_text(rich_text: RichText, limit: int | None = None) -> list[dict[str, Any]]:
    """Convert segments into a Notion ``rich_text`` array.

    When *limit* is given, segments longer than it are split first.
    """
    if limit is not None:
        rich_text = split_rich_text(rich_text, limit)
    return [_text_segment(segment) for segment in rich_text]


def _text_segment(segment: Segment) -> dict[str, Any]:
    text: dict[str, Any] = {"content": segment.content}
    if segment.link:
        text["link"] = {"url": segment.link}
    return {"type": "text", "text": text}


# ---------------------------------------------------------------------------
# Per-variant payload builders
# ---------------------------------------------------------------------------

def _text_payload(block: Any, limit: int | None) -> dict[str, Any]:
    return {"rich_text": serialize_rich_text(block.text, limit)}


def _todo_payload(block: ToDo, limit: int | None) -> dict[str, Any]:
    return {
        "rich_text": serialize_rich_text(block.text, limit),
        "checked": block.checked,
    }


def _divider_payload(block: Divider, limit: int | None) -> dict[str, Any]:
    return {}


def _code_payload(block: CodeBlock, limit: int | None) -> dict[str, Any]:
    return {
        "rich_text": serialize_rich_text((Segment(block.content),), limit),
        "language": block.language,
    }


def _table_payload(block: Table, limit: int | None) -> dict[str, Any]:
    rows = [
        {
            "type": "table_row",
            "table_row": {
                "cells": [serialize_rich_text(cell, limit) for cell in row],
            },
        }
        for row in block.rows
    ]
    return {
        "table_width": block.width,
        "has_column_header": block.has_column_header,
        "has_row_header": block.has_row_header,
        "children": rows,
    }


_PayloadBuilder = Callable[..., dict[str, Any]]

_PAYLOAD_BUILDERS: dict[type, _PayloadBuilder] = {
    Heading: _text_payload,
    Paragraph: _text_payload,
    BulletedListItem: _text_payload,
    NumberedListItem: _text_payload,
    Quote: _text_payload,
    ToDo: _todo_payload,
    Divider: _divider_payload,
    CodeBlock: _code_payload,
    Table: _table_payload,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def serialize_block(block: Block, *, rich_text_limit: int | None = None) -> dict[str, Any]:
    """Serialize one block.

    Raises
    ------
    TypeError
        If *block* is not one of the block variants in
        :mod:`notionsync.models`.
    """
    builder = _PAYLOAD_BUILDERS.get(type(block))
    if builder is None:
        raise TypeError(f"Cannot serialize {type(block).__name__!r} as a Notion block")
    block_type = block.block_type
    return {
        "object": "block",
        "type": block_type,
        block_type: builder(block, rich_text_limit),
    }


def serialize_blocks(
    blocks: Iterable[Block],
    *,
    rich_text_limit: int | None = None,
) -> list[dict[str, Any]]:
    """Serialize *blocks* in order."""
    return [serialize_block(block, rich_text_limit=rich_text_limit) for block in blocks]

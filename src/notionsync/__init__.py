"""notionsync: convert Markdown documents into Notion block payloads.

Public re-exports
-----------------

* **Conversion:** :class:`MarkdownToNotionConverter`, :func:`convert`
* **Configuration:** :class:`ConverterConfig`
* **Errors:** :class:`NotionSyncError`, its subclasses and :class:`ErrorCode`
* **Models:** the block variants, rich-text types and result dataclasses

Usage::

    from notionsync import convert

    result = convert("---\\ntitle: Notes\\n---\\n\\n- [x] write docs\\n")
    result.title          # 'Notes'
    result.payload[0]     # {'object': 'block', 'type': 'to_do', ...}
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from notionsync.config import NOTION_TEXT_LIMIT, ConverterConfig

# ── Conversion ──────────────────────────────────────────────────────────
from notionsync.converter import MarkdownToNotionConverter, convert

# ── Errors ──────────────────────────────────────────────────────────────
from notionsync.errors import (
    ErrorCode,
    FrontmatterError,
    MarkdownParseFailure,
    NotionSyncConversionError,
    NotionSyncError,
)

# ── Models ──────────────────────────────────────────────────────────────
from notionsync.models import (
    Block,
    BulletedListItem,
    CodeBlock,
    ConversionResult,
    ConversionWarning,
    DispatchStep,
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

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Conversion
    "MarkdownToNotionConverter",
    "convert",
    # Configuration
    "ConverterConfig",
    "NOTION_TEXT_LIMIT",
    # Errors
    "NotionSyncError",
    "ErrorCode",
    "NotionSyncConversionError",
    "MarkdownParseFailure",
    "FrontmatterError",
    # Models: blocks
    "Block",
    "Heading",
    "Paragraph",
    "BulletedListItem",
    "NumberedListItem",
    "Quote",
    "ToDo",
    "Divider",
    "CodeBlock",
    "Table",
    # Models: rich text
    "RichText",
    "Segment",
    # Models: results
    "ConversionResult",
    "ConversionWarning",
    "DispatchStep",
]

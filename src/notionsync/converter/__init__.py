"""Markdown → Notion conversion pipeline.

Public API:

- :class:`MarkdownToNotionConverter` / :func:`convert`: full pipeline.
- :func:`split_frontmatter`: separate the YAML header from the body.
- :func:`dispatch`: body lines → typed block list.
- :func:`build_rich_text`: one line of text → rich-text segments.
- :func:`extract_title`: first heading or frontmatter title.
- :func:`serialize_blocks`: typed blocks → Notion API payload.
"""

from notionsync.converter.dispatcher import dispatch, iter_steps
from notionsync.converter.frontmatter import parse_frontmatter, split_frontmatter
from notionsync.converter.md_to_notion import MarkdownToNotionConverter, convert
from notionsync.converter.rich_text import build_rich_text, split_rich_text
from notionsync.converter.serialize import serialize_block, serialize_blocks
from notionsync.converter.title import extract_title

__all__ = [
    "MarkdownToNotionConverter",
    "build_rich_text",
    "convert",
    "dispatch",
    "extract_title",
    "iter_steps",
    "parse_frontmatter",
    "serialize_block",
    "serialize_blocks",
    "split_frontmatter",
    "split_rich_text",
]

"""Data models for notionsync.

Blocks are a tagged union: one frozen dataclass per Notion block kind,
combined into :data:`Block`.  Rich text is an immutable tuple of
:class:`Segment` values.  Everything produced by a conversion is a
derived, read-only value; nothing here mutates after construction except
the result containers that collect warnings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

# ---------------------------------------------------------------------------
# Rich text
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Segment:
    """A run of literal text, optionally carrying a hyperlink.

    Attributes
    ----------
    content:
        The literal text of the run.
    link:
        Absolute ``http``/``https`` URL the run links to, or ``None``.
    """

    content: str
    link: str | None = None


RichText = tuple[Segment, ...]
"""Ordered segments of one text field.  Never empty."""

Cell = RichText
Row = tuple[Cell, ...]


def plain_text(rich_text: RichText) -> str:
    """Concatenate the content of every segment in *rich_text*."""
    return "".join(seg.content for seg in rich_text)


# ---------------------------------------------------------------------------
# Block variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Heading:
    """Heading block; *level* is 1, 2 or 3."""

    level: int
    text: RichText

    @property
    def block_type(self) -> str:
        return f"heading_{self.level}"


@dataclass(frozen=True)
class Paragraph:
    text: RichText

    block_type: ClassVar[str] = "paragraph"


@dataclass(frozen=True)
class BulletedListItem:
    text: RichText

    block_type: ClassVar[str] = "bulleted_list_item"


@dataclass(frozen=True)
class NumberedListItem:
    text: RichText

    block_type: ClassVar[str] = "numbered_list_item"


@dataclass(frozen=True)
class Quote:
    text: RichText

    block_type: ClassVar[str] = "quote"


@dataclass(frozen=True)
class ToDo:
    text: RichText
    checked: bool = False

    block_type: ClassVar[str] = "to_do"


@dataclass(frozen=True)
class Divider:
    block_type: ClassVar[str] = "divider"


@dataclass(frozen=True)
class CodeBlock:
    """Fenced code block.  *content* holds the body lines verbatim."""

    language: str
    content: str

    block_type: ClassVar[str] = "code"


@dataclass(frozen=True)
class Table:
    """Table block.

    Every row in *rows* has exactly *width* cells; the first row is the
    column header.
    """

    width: int
    rows: tuple[Row, ...]

    block_type: ClassVar[str] = "table"
    has_column_header: ClassVar[bool] = True
    has_row_header: ClassVar[bool] = False


Block = Union[
    Heading,
    Paragraph,
    BulletedListItem,
    NumberedListItem,
    Quote,
    ToDo,
    Divider,
    CodeBlock,
    Table,
]

BLOCK_CLASSES: tuple[type, ...] = (
    Heading,
    Paragraph,
    BulletedListItem,
    NumberedListItem,
    Quote,
    ToDo,
    Divider,
    CodeBlock,
    Table,
)


# ---------------------------------------------------------------------------
# Conversion warnings
# ---------------------------------------------------------------------------

@dataclass
class ConversionWarning:
    """A non-fatal issue encountered during conversion.

    Attributes
    ----------
    code:
        A machine-readable warning code (e.g. ``"LINK_DROPPED"``).
    message:
        A human-readable description of the issue.
    context:
        Arbitrary structured data for diagnostics.
    """

    code: str
    message: str
    context: dict = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Dispatcher and pipeline results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DispatchStep:
    """One iteration of the block dispatcher.

    Attributes
    ----------
    kind:
        Line classification that selected the parser (``"blank"``,
        ``"heading"``, ``"code"``, ``"table"``, ``"to_do"``, ``"bulleted"``,
        ``"numbered"``, ``"quote"``, ``"divider"`` or ``"paragraph"``).
    start:
        Index of the first body line examined by this step.
    consumed:
        Number of body lines the step advanced past.
    blocks:
        Blocks produced by the step (possibly none).
    """

    kind: str
    start: int
    consumed: int
    blocks: tuple[Block, ...] = ()


@dataclass
class ConversionResult:
    """Output of :meth:`MarkdownToNotionConverter.convert`.

    Attributes
    ----------
    blocks:
        Typed block sequence in source order.
    payload:
        *blocks* serialized to Notion API block dicts.
    frontmatter:
        Parsed metadata header; empty when absent or malformed.
    title:
        Resolved document title, or ``None`` when neither a heading nor a
        ``title`` frontmatter key supplies one.
    warnings:
        Non-fatal issues discovered during conversion.
    """

    blocks: list[Block] = field(default_factory=list)
    payload: list[dict[str, Any]] = field(default_factory=list)
    frontmatter: dict[str, Any] = field(default_factory=dict)
    title: str | None = None
    warnings: list[ConversionWarning] = field(default_factory=list)

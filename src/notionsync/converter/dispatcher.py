"""Drive the block parsers over a document body.

The dispatcher keeps a cursor into the body's line list.  At each step it
classifies the current line with :func:`classify_line`, hands the line to
the matching parser, and advances the cursor by the number of lines that
parser consumed.  Blank lines between blocks are skipped one at a time.

Every step advances by at least one line, so dispatch always terminates,
and the consumed counts of all steps add up to the number of body lines.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from notionsync.config import ConverterConfig
from notionsync.converter.block_parsers import (
    ParseContext,
    ParseResult,
    parse_bulleted_list,
    parse_code_block,
    parse_divider,
    parse_heading,
    parse_numbered_list,
    parse_paragraph,
    parse_quote,
    parse_todo,
)
from notionsync.converter.line_rules import (
    BLANK,
    BULLETED,
    CODE,
    DIVIDER,
    HEADING,
    NUMBERED,
    PARAGRAPH,
    QUOTE,
    TABLE,
    TO_DO,
    classify_line,
)
from notionsync.converter.tables import parse_table
from notionsync.models import Block, ConversionWarning, DispatchStep

_Parser = Callable[[ParseContext, int], ParseResult]

_PARSERS: dict[str, _Parser] = {
    HEADING: parse_heading,
    CODE: parse_code_block,
    TABLE: parse_table,
    TO_DO: parse_todo,
    BULLETED: parse_bulleted_list,
    NUMBERED: parse_numbered_list,
    QUOTE: parse_quote,
    DIVIDER: parse_divider,
    PARAGRAPH: parse_paragraph,
}


def iter_steps(ctx: ParseContext) -> Iterator[DispatchStep]:
    """Yield one :class:`DispatchStep` per dispatcher iteration."""
    lines = ctx.lines
    cursor = 0
    while cursor < len(lines):
        kind = classify_line(lines, cursor)
        if kind == BLANK:
            yield DispatchStep(kind=kind, start=cursor, consumed=1)
            cursor += 1
            continue

        blocks, consumed = _PARSERS[kind](ctx, cursor)
        consumed = max(consumed, 1)
        yield DispatchStep(kind=kind, start=cursor, consumed=consumed, blocks=tuple(blocks))
        cursor += consumed


def dispatch(
    lines: Sequence[str],
    config: ConverterConfig | None = None,
    warnings: list[ConversionWarning] | None = None,
) -> list[Block]:
    """Convert body *lines* into an ordered block list.

    Parameters
    ----------
    lines:
        Body lines, without frontmatter.
    config:
        Converter configuration; defaults to ``ConverterConfig()``.
    warnings:
        Optional list collecting non-fatal conversion warnings.
    """
    ctx = ParseContext(lines, config, warnings)
    return [block for step in iter_steps(ctx) for block in step.blocks]

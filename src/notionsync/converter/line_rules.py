"""Line classification rules for the block dispatcher.

:data:`LINE_RULES` is an ordered table of ``(kind, predicate)`` pairs.
The first predicate that accepts a line decides which block parser
handles it; a line no rule accepts starts a paragraph.  Several kinds
share prefixes (``-`` opens bullets, to-dos and dividers; ``|`` opens
tables and otherwise plain text), so the order of the table is the
precedence of the grammar:

1. blank
2. heading       ``#``, ``##``, ...
3. code          a line starting with three backticks
4. table         ``|...`` followed by a separator row such as ``|---|:-:|``
5. to_do         ``- [ ]`` / ``- [x]`` (before bulleted)
6. bulleted      ``-``, ``*`` or ``+`` followed by whitespace
7. numbered      ``1.`` followed by whitespace
8. quote         ``>``
9. divider       ``---``, ``***`` or ``___`` (one character, three or more)
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

FENCE = "```"

BLANK = "blank"
HEADING = "heading"
CODE = "code"
TABLE = "table"
TO_DO = "to_do"
BULLETED = "bulleted"
NUMBERED = "numbered"
QUOTE = "quote"
DIVIDER = "divider"
PARAGRAPH = "paragraph"

TODO_RE = re.compile(r"^\s*[-*]\s+\[([x ])\]\s*(.*)$")
BULLET_RE = re.compile(r"^\s*[-*+]\s")
BULLET_MARKER_RE = re.compile(r"^\s*[-*+]\s+")
NUMBERED_RE = re.compile(r"^\s*\d+\.\s")
NUMBERED_MARKER_RE = re.compile(r"^\s*\d+\.\s+")
DIVIDER_RE = re.compile(r"^([-*_])\1{2,}$")
TABLE_SEPARATOR_RE = re.compile(r"^\|[\s|:-]*$")


def split_lines(body: str) -> list[str]:
    """Split a document body into lines, accepting ``\\n`` and ``\\r\\n``."""
    return body.replace("\r\n", "\n").split("\n")


def _is_blank(lines: Sequence[str], index: int) -> bool:
    return not lines[index].strip()


def _is_heading(lines: Sequence[str], index: int) -> bool:
    return lines[index].startswith("#")


def _is_fence(lines: Sequence[str], index: int) -> bool:
    return lines[index].startswith(FENCE)


def _is_table(lines: Sequence[str], index: int) -> bool:
    # A lone "|" line is plain text unless a separator row follows it.
    return (
        lines[index].startswith("|")
        and index + 1 < len(lines)
        and TABLE_SEPARATOR_RE.match(lines[index + 1].rstrip()) is not None
    )


def _is_todo(lines: Sequence[str], index: int) -> bool:
    return TODO_RE.match(lines[index]) is not None


def _is_bullet(lines: Sequence[str], index: int) -> bool:
    return BULLET_RE.match(lines[index]) is not None


def _is_numbered(lines: Sequence[str], index: int) -> bool:
    return NUMBERED_RE.match(lines[index]) is not None


def _is_quote(lines: Sequence[str], index: int) -> bool:
    return lines[index].startswith(">")


def _is_divider(lines: Sequence[str], index: int) -> bool:
    return DIVIDER_RE.match(lines[index].strip()) is not None


LineRule = tuple[str, Callable[[Sequence[str], int], bool]]

LINE_RULES: tuple[LineRule, ...] = (
    (BLANK, _is_blank),
    (HEADING, _is_heading),
    (CODE, _is_fence),
    (TABLE, _is_table),
    (TO_DO, _is_todo),
    (BULLETED, _is_bullet),
    (NUMBERED, _is_numbered),
    (QUOTE, _is_quote),
    (DIVIDER, _is_divider),
)


def classify_line(lines: Sequence[str], index: int) -> str:
    """Return the block kind that the line at *index* opens.

    Parameters
    ----------
    lines:
        All body lines.  Some rules look ahead to the next line.
    index:
        Position of the line to classify.

    Returns
    -------
    str
        One of the kind constants of this module; :data:`PARAGRAPH` when
        no rule matches.
    """
    for kind, matches in LINE_RULES:
        if matches(lines, index):
            return kind
    return PARAGRAPH

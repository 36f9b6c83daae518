"""Table conversion: pipe-delimited Markdown rows to a Notion table block.

Input::

    | Name  | Role      |
    |:------|----------:|
    | Ada   | Engineer  |
    | Grace | Admiral   | extra |

Output::

    Table(width=2, rows=(
        (("Name",), ("Role",)),
        (("Ada",), ("Engineer",)),
        (("Grace",), ("Admiral",)),
    ))

(each cell shown by its segment contents).  Rules:

* every contiguous line starting with ``|`` belongs to the table;
* the wrapping pipes do not produce cells, inner empty cells are kept;
* rows made only of separator cells (``---``, ``:--``, ``:``, blanks)
  are dropped wherever they appear;
* the first remaining row fixes the width and serves as column header;
  other rows are padded with empty cells or truncated to that width.
"""

from __future__ import annotations

import re

from notionsync.converter.block_parsers import ParseContext, ParseResult
from notionsync.models import Row, Table

_SEPARATOR_CELL_RE = re.compile(r"^[\s:-]*$")


def split_row(line: str) -> list[str]:
    """Split one ``|``-delimited line into trimmed cell strings."""
    cells = line.strip().split("|")
    if cells and cells[0] == "":
        cells = cells[1:]
    if cells and cells[-1] == "":
        cells = cells[:-1]
    return [cell.strip() for cell in cells]


def is_separator_row(cells: list[str]) -> bool:
    """Return True when every cell holds only ``-``, ``:`` and whitespace.

    Blank cells qualify, so ``| | |`` is dropped like ``|---|---|``.  A row
    with no cells at all (a bare ``|``) counts as a separator too, so it
    never becomes a zero-width header.
    """
    return all(_SEPARATOR_CELL_RE.match(cell) for cell in cells)


def parse_table(ctx: ParseContext, start: int) -> ParseResult:
    """Parse the run of ``|`` lines starting at *start*.

    Returns
    -------
    tuple[list[Block], int]
        A single :class:`Table`, or no block when every row was a
        separator.  The consumed count always covers the whole run so
        the dispatcher never rescans these lines.
    """
    lines = ctx.lines
    index = start
    raw_rows: list[list[str]] = []
    while index < len(lines) and lines[index].startswith("|"):
        raw_rows.append(split_row(lines[index]))
        index += 1
    consumed = index - start

    data_rows = [cells for cells in raw_rows if not is_separator_row(cells)]
    if not data_rows:
        ctx.add_warning(
            "TABLE_EMPTY",
            "Table has no data rows and was omitted.",
            line=start,
            rows=consumed,
        )
        return [], consumed

    width = len(data_rows[0])
    rows = tuple(_build_row(cells, width, ctx) for cells in data_rows)
    return [Table(width=width, rows=rows)], consumed


def _build_row(cells: list[str], width: int, ctx: ParseContext) -> Row:
    """Pad or truncate *cells* to *width* and format each one."""
    fitted = cells[:width] + [""] * (width - len(cells))
    return tuple(ctx.rich_text(cell) for cell in fitted)

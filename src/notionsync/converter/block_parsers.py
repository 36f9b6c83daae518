"""Single- and multi-line block parsers.

Every parser has the signature ``parser(ctx, start) -> (blocks, consumed)``:
it reads ``ctx.lines`` from index *start*, returns the blocks it produced
(possibly none) and the number of lines it consumed.  Parsers are only
called by the dispatcher on a line that :func:`classify_line` assigned to
them; tables live in :mod:`notionsync.converter.tables`.

Nothing nests.  Indented list items become siblings of the item above
them, and quotes hold a single line.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from notionsync.config import ConverterConfig
from notionsync.converter.line_rules import (
    BULLET_MARKER_RE,
    BULLET_RE,
    FENCE,
    NUMBERED_MARKER_RE,
    NUMBERED_RE,
    PARAGRAPH,
    TODO_RE,
    classify_line,
)
from notionsync.converter.rich_text import build_rich_text
from notionsync.models import (
    Block,
    BulletedListItem,
    CodeBlock,
    ConversionWarning,
    Divider,
    Heading,
    NumberedListItem,
    Paragraph,
    Quote,
    RichText,
    ToDo,
)

ParseResult = tuple[list[Block], int]


class ParseContext:
    """Shared, per-document state handed to every parser."""

    __slots__ = ("config", "lines", "warnings")

    def __init__(
        self,
        lines: Sequence[str],
        config: ConverterConfig | None = None,
        warnings: list[ConversionWarning] | None = None,
    ) -> None:
        self.lines = lines
        self.config = config or ConverterConfig()
        self.warnings: list[ConversionWarning] = [] if warnings is None else warnings

    def rich_text(self, text: str) -> RichText:
        return build_rich_text(text, warnings=self.warnings)

    def add_warning(self, code: str, message: str, **context: object) -> None:
        self.warnings.append(ConversionWarning(
            code=code, message=message, context=dict(context),
        ))


# ---------------------------------------------------------------------------
# Notion code language mapping
# ---------------------------------------------------------------------------

# Language identifiers accepted by the Notion API.
_NOTION_LANGUAGES: frozenset[str] = frozenset({
    "abap", "arduino", "bash", "basic", "c", "clojure", "coffeescript",
    "c++", "c#", "css", "dart", "diff", "docker", "elixir", "elm",
    "erlang", "flow", "fortran", "f#", "gherkin", "glsl", "go", "graphql",
    "groovy", "haskell", "html", "java", "javascript", "json", "julia",
    "kotlin", "latex", "less", "lisp", "livescript", "lua", "makefile",
    "markdown", "markup", "matlab", "mermaid", "nix", "objective-c",
    "ocaml", "pascal", "perl", "php", "plain text", "powershell",
    "prolog", "protobuf", "python", "r", "reason", "ruby", "rust",
    "sass", "scala", "scheme", "scss", "shell", "sql", "swift",
    "typescript", "vb.net", "verilog", "vhdl", "visual basic",
    "webassembly", "xml", "yaml", "java/c/c++/c#",
})

_LANGUAGE_ALIASES: dict[str, str] = {
    "py": "python",
    "js": "javascript",
    "ts": "typescript",
    "sh": "shell",
    "zsh": "shell",
    "rb": "ruby",
    "rs": "rust",
    "yml": "yaml",
    "md": "markdown",
    "cs": "c#",
    "cpp": "c++",
    "objc": "objective-c",
    "dockerfile": "docker",
    "make": "makefile",
    "tex": "latex",
    "htm": "html",
    "jsx": "javascript",
    "tsx": "typescript",
    "jsonc": "json",
    "golang": "go",
    "kt": "kotlin",
    "ps1": "powershell",
}


def normalize_language(tag: str, default: str = "plain text") -> str:
    """Map a fence tag such as ``"py"`` or ``"Python3"`` to a Notion language."""
    words = tag.strip().lower().split()
    if not words:
        return default
    lang = words[0]
    for candidate in (lang, re.sub(r"\d+$", "", lang)):
        if candidate in _NOTION_LANGUAGES:
            return candidate
        if candidate in _LANGUAGE_ALIASES:
            return _LANGUAGE_ALIASES[candidate]
    return default


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------

def parse_heading(ctx: ParseContext, start: int) -> ParseResult:
    """Parse one ``#`` line.  Four or more markers still give ``heading_3``."""
    line = ctx.lines[start]
    markers = len(line) - len(line.lstrip("#"))
    text = line[markers:]
    if text.startswith(" "):
        text = text[1:]
    return [Heading(level=min(markers, 3), text=ctx.rich_text(text.rstrip()))], 1


def parse_code_block(ctx: ParseContext, start: int) -> ParseResult:
    """Parse a fenced code block.

    Body lines are kept verbatim up to the next line starting with the
    fence.  An unterminated fence runs to the end of the input; it is
    reported as a warning, never as an error.
    """
    lines = ctx.lines
    config = ctx.config

    tag = lines[start][len(FENCE):].strip()
    if config.normalize_code_language:
        language = normalize_language(tag, config.default_code_language)
    else:
        language = tag or config.default_code_language

    body: list[str] = []
    index = start + 1
    while index < len(lines) and not lines[index].startswith(FENCE):
        body.append(lines[index])
        index += 1

    closed = index < len(lines)
    if not closed:
        ctx.add_warning(
            "CODE_FENCE_UNTERMINATED",
            "Code fence is never closed; the block runs to the end of the document.",
            line=start,
        )

    block = CodeBlock(language=language, content="\n".join(body))
    return [block], len(body) + (2 if closed else 1)


def _parse_list(
    ctx: ParseContext,
    start: int,
    marker_re: re.Pattern[str],
    strip_re: re.Pattern[str],
    block_cls: type[BulletedListItem] | type[NumberedListItem],
) -> ParseResult:
    lines = ctx.lines
    items: list[Block] = []
    index = start
    while index < len(lines) and marker_re.match(lines[index]):
        text = strip_re.sub("", lines[index], count=1).strip()
        items.append(block_cls(text=ctx.rich_text(text)))
        index += 1
    return items, index - start


def parse_bulleted_list(ctx: ParseContext, start: int) -> ParseResult:
    """Parse a run of ``-``/``*``/``+`` items, one block per line."""
    return _parse_list(ctx, start, BULLET_RE, BULLET_MARKER_RE, BulletedListItem)


def parse_numbered_list(ctx: ParseContext, start: int) -> ParseResult:
    """Parse a run of ``1.`` items, one block per line."""
    return _parse_list(ctx, start, NUMBERED_RE, NUMBERED_MARKER_RE, NumberedListItem)


def parse_todo(ctx: ParseContext, start: int) -> ParseResult:
    match = TODO_RE.match(ctx.lines[start])
    if match is None:
        return [], 0
    checked = match.group(1) == "x"
    text = match.group(2).strip()
    return [ToDo(text=ctx.rich_text(text), checked=checked)], 1


def parse_quote(ctx: ParseContext, start: int) -> ParseResult:
    text = ctx.lines[start][1:]
    if text.startswith(" "):
        text = text[1:]
    return [Quote(text=ctx.rich_text(text.rstrip()))], 1


def parse_divider(ctx: ParseContext, start: int) -> ParseResult:
    return [Divider()], 1


def parse_paragraph(ctx: ParseContext, start: int) -> ParseResult:
    """Parse a paragraph: the start line plus following plain-text lines.

    The run stops at a blank line or at a line that opens another block
    (heading, fence, table, list, quote, divider).  Lines are trimmed and
    joined with single spaces.  A blank start line yields no block and
    consumes nothing.
    """
    lines = ctx.lines
    run: list[str] = []
    index = start
    while index < len(lines) and lines[index].strip():
        if index > start and classify_line(lines, index) != PARAGRAPH:
            break
        run.append(lines[index].strip())
        index += 1

    if not run:
        return [], 0

    return [Paragraph(text=ctx.rich_text(" ".join(run)))], len(run)

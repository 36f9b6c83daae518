"""Full Markdown-to-Notion conversion pipeline.

:class:`MarkdownToNotionConverter` runs four stages over a document:

1. **Split**: :func:`split_frontmatter` separates the YAML header.
2. **Dispatch**: the body lines are classified and parsed into typed
   blocks by :func:`iter_steps`.
3. **Title**: :func:`extract_title` picks the first heading or the
   frontmatter ``title``.
4. **Serialize**: :func:`serialize_blocks` builds the Notion payload.

The result is a :class:`ConversionResult`.  Conversion is all-or-nothing:
any unexpected fault surfaces as a single :class:`MarkdownParseFailure`.
"""

from __future__ import annotations

import json
import sys
import time

from notionsync.config import ConverterConfig
from notionsync.converter.block_parsers import ParseContext
from notionsync.converter.dispatcher import iter_steps
from notionsync.converter.frontmatter import split_frontmatter
from notionsync.converter.line_rules import split_lines
from notionsync.converter.serialize import serialize_blocks
from notionsync.converter.title import extract_title
from notionsync.errors import MarkdownParseFailure
from notionsync.models import ConversionResult, ConversionWarning, DispatchStep
from notionsync.observability import NoopMetricsHook, get_logger

log = get_logger("notionsync.converter")


class MarkdownToNotionConverter:
    """Convert Markdown text to Notion API block payloads.

    Parameters
    ----------
    config:
        Converter configuration; ``None`` means ``ConverterConfig()``.

    Examples
    --------
    >>> converter = MarkdownToNotionConverter()
    >>> result = converter.convert("# Hello\\n\\nWorld")
    >>> [block.block_type for block in result.blocks]
    ['heading_1', 'paragraph']
    >>> result.title
    'Hello'
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self._config = config or ConverterConfig()
        self._metrics = self._config.metrics or NoopMetricsHook()

    @property
    def config(self) -> ConverterConfig:
        return self._config

    def convert(self, markdown: str) -> ConversionResult:
        """Full pipeline: split -> dispatch -> resolve title -> serialize.

        Parameters
        ----------
        markdown:
            Raw Markdown text, optionally opening with a YAML header.

        Returns
        -------
        ConversionResult
            Blocks, payload, frontmatter, title and warnings.

        Raises
        ------
        MarkdownParseFailure
            If conversion fails for any reason.  The original exception is
            chained as ``cause``.
        """
        started = time.perf_counter()
        warnings: list[ConversionWarning] = []
        lines: list[str] = []

        # Conversion is all-or-nothing: every internal fault becomes one
        # MarkdownParseFailure and no partial result is returned.
        try:
            frontmatter, body = split_frontmatter(markdown, warnings)
            lines = split_lines(body)
            steps = list(iter_steps(ParseContext(lines, self._config, warnings)))
            blocks = [block for step in steps for block in step.blocks]
            title = extract_title(body, frontmatter)
            payload = serialize_blocks(blocks, rich_text_limit=self._config.rich_text_limit)
        except Exception as exc:
            self._metrics.increment("notionsync.conversion_failures_total")
            log.warning(
                "markdown conversion failed",
                extra={"extra_fields": {
                    "op": "convert",
                    "line_count": len(lines),
                    "exception_type": type(exc).__name__,
                }},
            )
            raise MarkdownParseFailure(
                f"Failed to parse markdown: {exc}",
                context={
                    "line_count": len(lines),
                    "exception_type": type(exc).__name__,
                },
                cause=exc,
            ) from exc

        if self._config.debug_dump_lines:
            _dump("Dispatch steps", [_step_summary(step) for step in steps])
        if self._config.debug_dump_payload:
            _dump("Notion blocks payload", payload)

        self._record_metrics(blocks, warnings, started)

        return ConversionResult(
            blocks=blocks,
            payload=payload,
            frontmatter=frontmatter,
            title=title,
            warnings=warnings,
        )

    def _record_metrics(
        self,
        blocks: list,
        warnings: list[ConversionWarning],
        started: float,
    ) -> None:
        metrics = self._metrics
        metrics.increment("notionsync.conversions_total")
        counts: dict[str, int] = {}
        for block in blocks:
            counts[block.block_type] = counts.get(block.block_type, 0) + 1
        for block_type, count in sorted(counts.items()):
            metrics.increment(
                "notionsync.blocks_converted_total", count, tags={"block_type": block_type},
            )
        for warning in warnings:
            metrics.increment(
                "notionsync.conversion_warnings_total", tags={"code": warning.code},
            )
        metrics.timing(
            "notionsync.conversion_duration_ms",
            (time.perf_counter() - started) * 1000.0,
        )


def convert(markdown: str, config: ConverterConfig | None = None) -> ConversionResult:
    """Convert *markdown* with a one-off :class:`MarkdownToNotionConverter`."""
    return MarkdownToNotionConverter(config).convert(markdown)


def _step_summary(step: DispatchStep) -> dict:
    return {
        "kind": step.kind,
        "start": step.start,
        "consumed": step.consumed,
        "blocks": [block.block_type for block in step.blocks],
    }


def _dump(label: str, data: object) -> None:
    print(
        f"[notionsync] {label}:",
        json.dumps(data, indent=2, ensure_ascii=False),
        file=sys.stderr,
    )

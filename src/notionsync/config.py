"""Converter configuration for notionsync.

:class:`ConverterConfig` is a plain dataclass that captures every tuneable
knob of the Markdown-to-Notion converter.  An instance is built once by the
caller and passed explicitly to :class:`MarkdownToNotionConverter`; there is
no module-level configuration state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

NOTION_TEXT_LIMIT = 2000
"""Maximum length of ``rich_text[].text.content`` accepted by Notion."""


@dataclass
class ConverterConfig:
    """Complete configuration for a converter.

    Every parameter has a default, so ``ConverterConfig()`` reproduces the
    plain conversion rules.

    Parameters
    ----------
    normalize_code_language:
        Map code fence tags onto the language identifiers Notion accepts
        (``py`` becomes ``python``, unknown tags become ``"plain text"``).
        When ``False`` the trimmed tag is used as written.
    default_code_language:
        Language assigned to a fence with no tag.
    rich_text_limit:
        When set, text segments longer than this are split into several
        segments carrying the same link.  Use :data:`NOTION_TEXT_LIMIT`
        for payloads sent straight to the API.
    metrics:
        Optional :class:`~notionsync.observability.MetricsHook` receiving
        conversion counters and timings.
    debug_dump_lines:
        Write the dispatcher's per-step line classification to *stderr*.
    debug_dump_payload:
        Write the serialized Notion payload to *stderr*.
    """

    # ── Code blocks ─────────────────────────────────────────────────────
    normalize_code_language: bool = False

    default_code_language: str = "plain text"

    # ── Rich text ───────────────────────────────────────────────────────
    rich_text_limit: int | None = None

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_lines: bool = False

    debug_dump_payload: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.rich_text_limit is not None and self.rich_text_limit < 1:
            raise ValueError(f"rich_text_limit must be >= 1, got {self.rich_text_limit}")
        if not self.default_code_language.strip():
            raise ValueError("default_code_language must be a non-empty string")

"""Separate an optional YAML metadata header from a Markdown body.

A header is recognised only when the document opens with a ``---`` line
and a matching closing ``---`` line follows::

    ---
    title: Release notes
    tags: [changelog]
    ---

    # 1.4.0

Parsing is delegated to python-frontmatter's YAML handler.  The converter
uses :func:`split_frontmatter`, which never raises: a header that cannot
be parsed is treated as absent and the original text is kept intact.
"""

from __future__ import annotations

from typing import Any

import yaml
from frontmatter.default_handlers import YAMLHandler

from notionsync.errors import FrontmatterError
from notionsync.models import ConversionWarning
from notionsync.observability import get_logger

log = get_logger("notionsync.converter")

_HANDLER = YAMLHandler()


def parse_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Strictly split *text* into ``(metadata, body)``.

    Returns ``({}, text)`` unchanged when the document has no header.  An
    opening ``---`` without a closing one is a thematic break, not a
    header.

    Raises
    ------
    FrontmatterError
        If a header is present but is not valid YAML or does not decode
        to a mapping.
    """
    if not _HANDLER.detect(text):
        return {}, text

    try:
        raw, body = _HANDLER.split(text)
    except ValueError:
        return {}, text

    try:
        metadata = _HANDLER.load(raw)
    except (yaml.YAMLError, ValueError) as exc:
        # ValueError covers scalars YAML accepts but cannot build, e.g. 2024-02-30.
        raise FrontmatterError(
            f"Frontmatter header could not be parsed: {exc}",
            context={"reason": type(exc).__name__},
            cause=exc,
        ) from exc

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise FrontmatterError(
            "Frontmatter header must be a mapping.",
            context={"reason": f"got {type(metadata).__name__}"},
        )

    return metadata, body


def split_frontmatter(
    text: str,
    warnings: list[ConversionWarning] | None = None,
) -> tuple[dict[str, Any], str]:
    """Split *text* into ``(metadata, body)``, degrading on any failure.

    Parameters
    ----------
    text:
        Raw document text.
    warnings:
        Optional list that receives a ``FRONTMATTER_INVALID`` warning when
        a header is present but cannot be parsed.

    Returns
    -------
    tuple[dict, str]
        The parsed metadata and the body with the header removed, or
        ``({}, text)`` with *text* untouched when there is no usable
        header.
    """
    try:
        return parse_frontmatter(text)
    except FrontmatterError as exc:
        log.warning(
            "frontmatter ignored",
            extra={"extra_fields": {"op": "split_frontmatter", **exc.context}},
        )
        if warnings is not None:
            warnings.append(ConversionWarning(
                code="FRONTMATTER_INVALID",
                message=f"Frontmatter was ignored: {exc.message}",
                context=dict(exc.context),
            ))
        return {}, text

"""Resolve a page title for a converted document."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from notionsync.converter.line_rules import split_lines

_HEADING_PREFIX_RE = re.compile(r"^#+\s*")


def extract_title(body: str, frontmatter: Mapping[str, Any] | None = None) -> str | None:
    """Return the document title, or ``None`` when there is none.

    The first body line starting with ``#`` wins, whatever its level; its
    markers and surrounding whitespace are removed, so a marker-only line
    gives ``""``.  The scan looks at raw lines, so it does not know about
    code fences.  Without a heading line the frontmatter ``title`` value
    is used, converted to ``str``.  Choosing a fallback such as the file
    name is left to the caller.
    """
    for line in split_lines(body):
        if line.startswith("#"):
            return _HEADING_PREFIX_RE.sub("", line, count=1).strip()

    if frontmatter:
        value = frontmatter.get("title")
        if value is not None:
            return str(value)

    return None

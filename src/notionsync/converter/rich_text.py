"""Build rich text from a line of Markdown text.

The only inline syntax recognised is the link span ``[label](url)``.
Everything else, including emphasis markers, is kept as literal text.

Scanning ``see [the docs](https://example.com/docs) or [below](#faq)``
yields::

    (Segment("see "),
     Segment("the docs", link="https://example.com/docs"),
     Segment(" or "),
     Segment("below"))

Only ``http://`` and ``https://`` targets survive as hyperlinks.  In-page
anchors, ``mailto:`` and relative paths cannot be resolved by Notion, so
the label is kept and the target dropped.
"""

from __future__ import annotations

import re
from urllib.parse import urlparse

from notionsync.models import ConversionWarning, RichText, Segment
from notionsync.utils.text_split import split_string

_LINK_RE = re.compile(r"\[([^\[\]]+)\]\(([^()]*)\)")

_LINKABLE_URL_RE = re.compile(r"^https?://", re.IGNORECASE)


def build_rich_text(
    text: str,
    *,
    warnings: list[ConversionWarning] | None = None,
) -> RichText:
    """Convert *text* into rich-text segments, extracting link spans.

    Parameters
    ----------
    text:
        A single line, or several lines already joined with spaces.
    warnings:
        Optional list that receives a ``LINK_DROPPED`` warning for every
        link whose target is not an ``http``/``https`` URL.

    Returns
    -------
    RichText
        At least one segment.  Text without link spans comes back as a
        single segment holding *text* unchanged, even when it is empty.
    """
    segments: list[Segment] = []
    pos = 0

    for match in _LINK_RE.finditer(text):
        if match.start() > pos:
            segments.append(Segment(text[pos : match.start()]))

        label = match.group(1)
        url = match.group(2).strip()
        if _is_linkable(url):
            segments.append(Segment(label, link=url))
        else:
            segments.append(Segment(label))
            if warnings is not None:
                warnings.append(ConversionWarning(
                    code="LINK_DROPPED",
                    message=f"Link target '{url}' is not an http(s) URL; kept the label only.",
                    context={"url": url, "label": label},
                ))

        pos = match.end()

    if pos < len(text):
        segments.append(Segment(text[pos:]))

    if not segments:
        return (Segment(text),)
    return tuple(segments)


def split_rich_text(rich_text: RichText, limit: int = 2000) -> RichText:
    """Split every segment longer than *limit* into several segments.

    Each piece keeps the link of the segment it came from.  Segments
    within the limit, including empty ones, pass through unchanged.
    """
    output: list[Segment] = []
    for segment in rich_text:
        if len(segment.content) <= limit:
            output.append(segment)
            continue
        for chunk in split_string(segment.content, limit):
            output.append(Segment(chunk, link=segment.link))
    return tuple(output)


def _is_linkable(url: str) -> bool:
    """Return True when *url* is an absolute ``http://`` or ``https://`` URL with a host."""
    if not _LINKABLE_URL_RE.match(url):
        return False
    try:
        netloc = urlparse(url).netloc
    except ValueError:
        # Malformed netloc, e.g. an unclosed IPv6 bracket.
        return False
    return bool(netloc)

"""Length-bounded string splitting for rich-text content.

Notion rejects ``text.content`` values longer than 2 000 characters.
:func:`split_string` cuts a string into consecutive pieces of bounded
length.  Python ``str`` slicing works on code points, so no piece ever
ends in the middle of a multi-byte character.
"""

from __future__ import annotations


def split_string(text: str, limit: int = 2000) -> list[str]:
    """Split *text* into consecutive chunks of at most *limit* characters.

    Parameters
    ----------
    text:
        The string to partition.
    limit:
        Maximum characters per chunk.

    Returns
    -------
    list[str]
        Non-empty chunks whose concatenation equals *text*; ``[]`` for an
        empty string.

    Raises
    ------
    ValueError
        If *limit* is less than 1.

    Examples
    --------
    >>> split_string("abcdefg", 3)
    ['abc', 'def', 'g']
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    return [text[start : start + limit] for start in range(0, len(text), limit)]

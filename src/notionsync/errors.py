"""Exceptions raised by notionsync.

Conversion has exactly one terminal failure, :class:`MarkdownParseFailure`.
:class:`FrontmatterError` only escapes the strict
:func:`~notionsync.converter.frontmatter.parse_frontmatter`; the converter
recovers from it.  Both share :class:`NotionSyncError`, which carries:

* ``code``: an :class:`ErrorCode` member (a ``str``, so it compares equal
  to its name and lands in JSON logs as-is),
* ``message``: text for developers,
* ``context``: a small dict of diagnostic values, documented per class,
* ``cause``: the wrapped exception, also set as ``__cause__``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable category of a :class:`NotionSyncError`."""

    CONVERSION_ERROR = "CONVERSION_ERROR"
    MARKDOWN_PARSE_FAILURE = "MARKDOWN_PARSE_FAILURE"
    FRONTMATTER_ERROR = "FRONTMATTER_ERROR"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class NotionSyncError(Exception):
    """Root of the notionsync exception tree.

    Parameters
    ----------
    code:
        Category of the failure, normally an :class:`ErrorCode` member.
    message:
        What went wrong, phrased for the developer reading a traceback.
    context:
        Structured diagnostic values; ``None`` is stored as ``{}``.
    cause:
        Exception being wrapped, if any.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        parts = [f"code={self.code!r}", f"message={self.message!r}"]
        if self.context:
            parts.append(f"context={self.context!r}")
        return f"{type(self).__name__}({', '.join(parts)})"


# ---------------------------------------------------------------------------
# Conversion errors
# ---------------------------------------------------------------------------

class NotionSyncConversionError(NotionSyncError):
    """Something went wrong while turning Markdown into blocks.

    Subclasses pin their code through :attr:`default_code` and accept only
    ``(message, context, cause)``.
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.CONVERSION_ERROR

    def __init__(
        self,
        message: str = "Conversion error",
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
        *,
        code: str | None = None,
    ) -> None:
        super().__init__(code or self.default_code, message, context, cause)


class MarkdownParseFailure(NotionSyncConversionError):
    """A document could not be converted.

    :meth:`MarkdownToNotionConverter.convert` raises nothing else and never
    returns a partial block list alongside it.

    Context keys: ``line_count``, ``exception_type``.
    """

    default_code = ErrorCode.MARKDOWN_PARSE_FAILURE


class FrontmatterError(NotionSyncConversionError):
    """The YAML header is present but unusable.

    Context keys: ``reason`` (name of the underlying exception type, or a
    short description).
    """

    default_code = ErrorCode.FRONTMATTER_ERROR

"""Tests for errors.py: codes, hierarchy and context."""

from __future__ import annotations

import pytest

from notionsync.errors import (
    ErrorCode,
    FrontmatterError,
    MarkdownParseFailure,
    NotionSyncConversionError,
    NotionSyncError,
)


class TestErrorCode:
    def test_codes_are_strings(self):
        assert ErrorCode.MARKDOWN_PARSE_FAILURE == "MARKDOWN_PARSE_FAILURE"
        assert isinstance(ErrorCode.FRONTMATTER_ERROR, str)

    def test_codes_are_unique(self):
        values = [code.value for code in ErrorCode]
        assert len(values) == len(set(values))


class TestHierarchy:
    @pytest.mark.parametrize("cls", [MarkdownParseFailure, FrontmatterError])
    def test_subclasses(self, cls):
        err = cls("boom")
        assert isinstance(err, NotionSyncConversionError)
        assert isinstance(err, NotionSyncError)
        assert isinstance(err, Exception)

    def test_parse_failure_code(self):
        assert MarkdownParseFailure("x").code == ErrorCode.MARKDOWN_PARSE_FAILURE

    def test_frontmatter_code(self):
        assert FrontmatterError("x").code == ErrorCode.FRONTMATTER_ERROR

    def test_conversion_error_defaults(self):
        err = NotionSyncConversionError()
        assert err.code == ErrorCode.CONVERSION_ERROR
        assert err.message == "Conversion error"


class TestErrorAttributes:
    def test_message_and_str(self):
        err = MarkdownParseFailure("Failed to parse markdown: oops")
        assert err.message == "Failed to parse markdown: oops"
        assert str(err) == "Failed to parse markdown: oops"

    def test_context_defaults_to_empty_dict(self):
        assert MarkdownParseFailure("x").context == {}

    def test_context_kept(self):
        err = MarkdownParseFailure("x", context={"line_count": 3})
        assert err.context == {"line_count": 3}

    def test_cause_is_chained(self):
        cause = RuntimeError("inner")
        err = MarkdownParseFailure("outer", cause=cause)
        assert err.cause is cause
        assert err.__cause__ is cause

    def test_no_cause(self):
        err = FrontmatterError("x")
        assert err.cause is None
        assert err.__cause__ is None

    def test_repr_includes_context(self):
        err = FrontmatterError("bad", context={"reason": "ScannerError"})
        text = repr(err)
        assert text.startswith("FrontmatterError(")
        assert "FRONTMATTER_ERROR" in text
        assert "ScannerError" in text

    def test_repr_without_context(self):
        assert "context" not in repr(MarkdownParseFailure("x"))

    def test_catchable_as_base(self):
        with pytest.raises(NotionSyncError):
            raise MarkdownParseFailure("x")

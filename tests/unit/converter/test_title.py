"""Tests for converter/title.py."""

from __future__ import annotations

from notionsync.converter.title import extract_title


class TestExtractTitle:
    def test_first_heading_wins(self):
        assert extract_title("intro\n## Second level\n# First level") == "Second level"

    def test_heading_markers_and_whitespace_removed(self):
        assert extract_title("###   Spaced   ") == "Spaced"

    def test_heading_beats_frontmatter(self):
        assert extract_title("# From body", {"title": "From meta"}) == "From body"

    def test_frontmatter_fallback(self):
        assert extract_title("no headings here", {"title": "From meta"}) == "From meta"

    def test_frontmatter_title_is_stringified(self):
        assert extract_title("", {"title": 2024}) == "2024"

    def test_null_frontmatter_title_is_ignored(self):
        assert extract_title("", {"title": None}) is None

    def test_no_title_anywhere(self):
        assert extract_title("just text") is None
        assert extract_title("just text", {}) is None
        assert extract_title("just text", {"author": "me"}) is None

    def test_first_heading_wins_even_when_empty(self):
        assert extract_title("#\n# Real") == ""
        assert extract_title("##   \n# Real", {"title": "meta"}) == ""

    def test_indented_hash_is_not_a_heading(self):
        assert extract_title("  # indented", {"title": "meta"}) == "meta"

    def test_heading_inside_code_fence_counts(self):
        assert extract_title("```\n# comment\n```\n# Later") == "comment"

    def test_crlf_body(self):
        assert extract_title("text\r\n# Windows\r\n") == "Windows"

    def test_link_syntax_is_kept_verbatim(self):
        assert extract_title("# See [docs](https://d.io)") == "See [docs](https://d.io)"

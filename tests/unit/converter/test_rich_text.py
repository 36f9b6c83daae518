"""Tests for converter/rich_text.py: link extraction and segment splitting."""

from notionsync.converter.rich_text import build_rich_text, split_rich_text
from notionsync.models import Segment


class TestPlainText:
    def test_text_without_links_is_one_segment(self):
        assert build_rich_text("Just words.") == (Segment("Just words."),)

    def test_empty_text_still_has_one_segment(self):
        assert build_rich_text("") == (Segment(""),)

    def test_whitespace_is_preserved(self):
        assert build_rich_text("  padded  ") == (Segment("  padded  "),)

    def test_emphasis_markers_are_literal(self):
        assert build_rich_text("**bold** and _it_") == (Segment("**bold** and _it_"),)

    def test_bracket_without_url_is_literal(self):
        assert build_rich_text("[not a link] here") == (Segment("[not a link] here"),)


class TestHttpLinks:
    def test_link_only(self):
        assert build_rich_text("[See](https://example.com)") == (
            Segment("See", link="https://example.com"),
        )

    def test_http_scheme(self):
        rt = build_rich_text("[old](http://example.org/page)")
        assert rt == (Segment("old", link="http://example.org/page"),)

    def test_surrounding_text_becomes_segments(self):
        rt = build_rich_text("Read [the docs](https://x.io/docs) first.")
        assert rt == (
            Segment("Read "),
            Segment("the docs", link="https://x.io/docs"),
            Segment(" first."),
        )

    def test_multiple_links(self):
        rt = build_rich_text("[a](https://a.com) and [b](https://b.com)")
        assert rt == (
            Segment("a", link="https://a.com"),
            Segment(" and "),
            Segment("b", link="https://b.com"),
        )

    def test_adjacent_links_have_no_empty_segment_between(self):
        rt = build_rich_text("[a](https://a.com)[b](https://b.com)")
        assert len(rt) == 2
        assert all(seg.content for seg in rt)

    def test_url_whitespace_is_trimmed(self):
        rt = build_rich_text("[x]( https://example.com/ )")
        assert rt == (Segment("x", link="https://example.com/"),)

    def test_uppercase_scheme_is_linkable(self):
        rt = build_rich_text("[x](HTTPS://EXAMPLE.COM)")
        assert rt[0].link == "HTTPS://EXAMPLE.COM"


class TestDroppedTargets:
    def test_anchor_link_keeps_label_only(self):
        assert build_rich_text("[Jump](#section)") == (Segment("Jump"),)

    def test_mailto_link_dropped(self):
        assert build_rich_text("[Mail](mailto:a@b.c)") == (Segment("Mail"),)

    def test_relative_path_dropped(self):
        assert build_rich_text("[Guide](docs/guide.md)") == (Segment("Guide"),)

    def test_empty_target_dropped(self):
        assert build_rich_text("[Nothing]()") == (Segment("Nothing"),)

    def test_malformed_ipv6_host_dropped(self):
        assert build_rich_text("[bad](http://[::1)") == (Segment("bad"),)

    def test_scheme_must_lead_the_url(self):
        assert build_rich_text("[x](\x00http://a.io)") == (Segment("x"),)
        assert build_rich_text("[x](ht\ttp://a.io)") == (Segment("x"),)

    def test_scheme_needs_double_slash(self):
        assert build_rich_text("[x](http:foo)") == (Segment("x"),)
        assert build_rich_text("[x](https:/example.com)") == (Segment("x"),)

    def test_url_without_host_dropped(self):
        assert build_rich_text("[x](https://)") == (Segment("x"),)

    def test_dropped_link_records_warning(self):
        warnings = []
        build_rich_text("[Jump](#section) and [ok](https://ok.com)", warnings=warnings)
        assert len(warnings) == 1
        assert warnings[0].code == "LINK_DROPPED"
        assert warnings[0].context == {"url": "#section", "label": "Jump"}

    def test_no_warning_list_is_fine(self):
        assert build_rich_text("[Jump](#x)") == (Segment("Jump"),)


class TestSplitRichText:
    def test_short_segments_unchanged(self):
        rt = (Segment("abc"), Segment("de", link="https://x.io"))
        assert split_rich_text(rt, limit=5) == rt

    def test_long_segment_split_keeps_link(self):
        rt = (Segment("abcdefg", link="https://x.io"),)
        assert split_rich_text(rt, limit=3) == (
            Segment("abc", link="https://x.io"),
            Segment("def", link="https://x.io"),
            Segment("g", link="https://x.io"),
        )

    def test_empty_segment_survives(self):
        assert split_rich_text((Segment(""),), limit=3) == (Segment(""),)

"""Golden fixture conversion tests.

Each fixture under ``fixtures/`` is converted end to end and checked for
its block sequence, title, frontmatter, warnings and payload shape.
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from notionsync.config import ConverterConfig
from notionsync.converter.md_to_notion import MarkdownToNotionConverter
from notionsync.models import Segment, plain_text

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _load(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def basic(converter):
    return converter.convert(_load("basic.md"))


@pytest.fixture
def complex_doc(converter):
    return converter.convert(_load("complex.md"))


class TestBasicFixture:
    """Verify basic.md converts to the expected blocks."""

    def test_block_sequence(self, basic):
        assert [b.block_type for b in basic.blocks] == [
            "heading_1",
            "paragraph",
            "heading_2",
            "code",
            "bulleted_list_item",
            "bulleted_list_item",
            "bulleted_list_item",
            "numbered_list_item",
            "numbered_list_item",
            "quote",
            "divider",
        ]

    def test_title_and_frontmatter(self, basic):
        assert basic.title == "Hello World"
        assert basic.frontmatter == {}
        assert basic.warnings == []

    def test_paragraph_joins_lines_and_keeps_link(self, basic):
        paragraph = basic.blocks[1]
        assert paragraph.text == (
            Segment("This is a paragraph with a "),
            Segment("link", link="https://example.com"),
            Segment(" in it. It continues on a second line."),
        )

    def test_code_block_is_verbatim(self, basic):
        code = basic.blocks[3]
        assert code.language == "python"
        assert code.content == 'def greet():\n    print("Hello, World!")'

    def test_list_texts(self, basic):
        bullets = [plain_text(b.text) for b in basic.blocks[4:7]]
        numbered = [plain_text(b.text) for b in basic.blocks[7:9]]
        assert bullets == ["Item one", "Item two", "Item three"]
        assert numbered == ["First", "Second"]

    def test_payload_round_trips_through_json(self, basic):
        assert json.loads(json.dumps(basic.payload)) == basic.payload


class TestComplexFixture:
    """Verify complex.md, which opens with a YAML header."""

    def test_block_sequence(self, complex_doc):
        assert [b.block_type for b in complex_doc.blocks] == [
            "paragraph",
            "to_do",
            "to_do",
            "bulleted_list_item",
            "bulleted_list_item",
            "bulleted_list_item",
            "table",
            "code",
            "heading_3",
            "divider",
            "quote",
            "quote",
        ]

    def test_frontmatter(self, complex_doc):
        assert complex_doc.frontmatter == {
            "title": "Release checklist",
            "tags": ["release", "ops"],
            "owner": "platform",
        }

    def test_body_heading_wins_over_frontmatter_title(self, complex_doc):
        assert complex_doc.title == "Deep heading"

    def test_anchor_link_warning(self, complex_doc):
        assert [w.code for w in complex_doc.warnings] == ["LINK_DROPPED"]
        assert complex_doc.warnings[0].context["url"] == "#faq"

    def test_todo_states(self, complex_doc):
        assert [b.checked for b in complex_doc.blocks[1:3]] == [True, False]

    def test_nested_list_is_flattened(self, complex_doc):
        texts = [plain_text(b.text) for b in complex_doc.blocks[3:6]]
        assert texts == ["Level 1", "Level 2", "Level 3"]

    def test_table_shape(self, complex_doc):
        table = complex_doc.blocks[6]
        assert table.width == 3
        cells = [[plain_text(cell) for cell in row] for row in table.rows]
        assert cells == [
            ["Name", "Status", "Notes"],
            ["foo", "ready", ""],
            ["bar", "blocked", "waiting on infra"],
        ]
        assert table.rows[2][2][1] == Segment("infra", link="https://infra.example.com")

    def test_table_payload(self, complex_doc):
        payload = complex_doc.payload[6]["table"]
        assert payload["table_width"] == 3
        assert [child["type"] for child in payload["children"]] == ["table_row"] * 3
        assert all(len(child["table_row"]["cells"]) == 3 for child in payload["children"])

    def test_untagged_code_block(self, complex_doc):
        code = complex_doc.blocks[7]
        assert code.language == "plain text"
        assert code.content == "raw text block\n   with indentation"


class TestFixtureOptions:
    def test_normalized_language_and_limit(self):
        converter = MarkdownToNotionConverter(
            ConverterConfig(normalize_code_language=True, rich_text_limit=10),
        )
        result = converter.convert(_load("basic.md"))
        assert result.blocks[3].language == "python"
        for block in result.payload:
            body = block[block["type"]]
            for seg in body.get("rich_text", []):
                assert len(seg["text"]["content"]) <= 10

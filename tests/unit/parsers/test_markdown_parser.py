import io
from unittest.mock import Mock

import pytest

from changelog_kit.observability import names
from changelog_kit.parsers.markdown_parser import MarkdownParser
from changelog_kit.parsers.models import Block

SAMPLE = """# Changelog

All notable changes to this project will be documented in this file.

## [1.0.0] - 2020-01-01

### Added

- one
- two
"""


@pytest.fixture
def parser() -> MarkdownParser:
    return MarkdownParser()


class TestMarkdownParser:
    def test_one_block_per_top_level_token(self, parser: MarkdownParser) -> None:
        blocks = parser.parse_text(SAMPLE)

        assert [b.type for b in blocks] == [
            "heading",
            "paragraph",
            "heading",
            "heading",
            "list",
        ]

    def test_exposes_heading_levels(self, parser: MarkdownParser) -> None:
        blocks = parser.parse_text(SAMPLE)

        assert [b.heading_level for b in blocks] == [1, None, 2, 3, None]

    def test_blank_lines_are_not_blocks(self, parser: MarkdownParser) -> None:
        blocks = parser.parse_text("para one\n\n\n\npara two\n")

        assert all(b.type != "blank_line" for b in blocks)
        assert len(blocks) == 2

    def test_setext_heading_is_level_two(self, parser: MarkdownParser) -> None:
        blocks = parser.parse_text("1.0.0\n-----\n")

        assert blocks[0].heading_level == 2

    def test_parse_reads_binary_source(self, parser: MarkdownParser) -> None:
        blocks = parser.parse(io.BytesIO(SAMPLE.encode("utf-8")))

        assert len(blocks) == 5

    def test_strips_byte_order_mark(self, parser: MarkdownParser) -> None:
        blocks = parser.parse(io.BytesIO(b"\xef\xbb\xbf## 1.0.0\n"))

        assert blocks[0].heading_level == 2

    def test_undecodable_bytes_do_not_abort(self, parser: MarkdownParser) -> None:
        blocks = parser.parse(io.BytesIO(b"## 1.0.0\n\nbad \xff byte\n"))

        assert [b.type for b in blocks] == ["heading", "paragraph"]

    def test_parsing_is_deterministic(self, parser: MarkdownParser) -> None:
        assert parser.parse_text(SAMPLE) == parser.parse_text(SAMPLE)

    def test_empty_document(self, parser: MarkdownParser) -> None:
        assert parser.parse_text("") == []

    def test_enables_plugins(self) -> None:
        parser = MarkdownParser(plugins=["strikethrough"])

        blocks = parser.parse_text("~~gone~~\n")

        assert blocks[0].children[0]["type"] == "strikethrough"

    def test_reports_metrics(self) -> None:
        hook = Mock()

        MarkdownParser(metrics_hook=hook).parse_text(SAMPLE)

        hook.increment.assert_called_once_with(names.PARSER_BLOCKS_TOTAL, 5)
        assert hook.record_latency.call_args.args[0] == names.PARSER_DURATION


class TestBlock:
    def test_non_heading_has_no_level(self) -> None:
        block = Block({"type": "paragraph", "children": []})

        assert block.heading_level is None

    def test_children_default_to_empty(self) -> None:
        block = Block({"type": "thematic_break"})

        assert list(block.children) == []

    def test_block_is_frozen(self) -> None:
        block = Block({"type": "paragraph"})

        with pytest.raises(AttributeError):
            block.token = {}  # type: ignore

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_markdown_to_blocks.py
"""Integration tests: markdown source through tokenizer and renderers to blocks."""

import json

import pytest
from utils import list_texts

from md2blocks import (
    BlocksOptions,
    ImageBlock,
    InvalidOptionsError,
    ListOptions,
    MarkdownParserOptions,
    ParsingError,
    RichTextBlock,
    RichTextLink,
    RichTextStyle,
    RichTextText,
    SectionBlock,
    blocks_to_json,
    markdown_to_blocks,
    markdown_to_payload,
)
from md2blocks.blocks import image

RICH_LISTS = BlocksOptions(lists=ListOptions(use_rich_text=True))
RICH = BlocksOptions(use_rich_text=True)


def _section_leaves(block: RichTextBlock, index: int = 0) -> list:
    """Return the leaves of the section at ``index`` (list nodes are unwrapped)."""
    element = block.elements[index]
    if element.type == "rich_text_list":
        element = element.elements[0]
    return element.elements


@pytest.mark.integration
class TestRichTextLists:
    """List conversion with rich text enabled at list level."""

    def test_unordered_list(self):
        """Test a bullet list becomes one rich text block of list nodes."""
        blocks = markdown_to_blocks("- First item\n- Second item\n- Third item", RICH_LISTS)
        assert len(blocks) == 1
        block = blocks[0]
        assert block.type == "rich_text"
        assert len(block.elements) == 3
        first = block.elements[0]
        assert first.type == "rich_text_list"
        assert first.style == "bullet"
        assert first.indent == 0
        assert len(first.elements) == 1
        assert first.elements[0].type == "rich_text_section"
        assert first.elements[0].elements[0].text == "First item"

    def test_ordered_list(self):
        """Test ordered list style."""
        blocks = markdown_to_blocks("1. First item\n2. Second item\n3. Third item", RICH_LISTS)
        assert len(blocks[0].elements) == 3
        assert {element.style for element in blocks[0].elements} == {"ordered"}
        assert _section_leaves(blocks[0])[0].text == "First item"

    def test_formatting_in_items(self):
        """Test styles and links inside list items."""
        markdown = "- **Bold text** with _italic_\n- ~~Strikethrough~~ and `code`\n- [Link text](https://example.com)"
        block = markdown_to_blocks(markdown, RICH_LISTS)[0]
        assert len(block.elements) == 3

        assert _section_leaves(block, 0) == [
            RichTextText(text="Bold text", style=RichTextStyle(bold=True)),
            RichTextText(text=" with "),
            RichTextText(text="italic", style=RichTextStyle(italic=True)),
        ]

        second = _section_leaves(block, 1)
        assert second[0] == RichTextText(text="Strikethrough", style=RichTextStyle(strike=True))
        assert second[2] == RichTextText(text="code", style=RichTextStyle(code=True))

        assert _section_leaves(block, 2) == [RichTextLink(url="https://example.com", text="Link text")]

    def test_nested_lists(self):
        """Test nested items are flattened with indents after their parent."""
        markdown = (
            "1. First item\n"
            "   - Nested bullet one\n"
            "   - Nested bullet two\n"
            "2. Second item\n"
            "   - Another nested item"
        )
        block = markdown_to_blocks(markdown, RICH_LISTS)[0]
        assert list_texts(block) == [
            (0, "First item"),
            (1, "Nested bullet one"),
            (1, "Nested bullet two"),
            (0, "Second item"),
            (1, "Another nested item"),
        ]
        assert [element.style for element in block.elements] == ["ordered", "bullet", "bullet", "ordered", "bullet"]

    @pytest.mark.parametrize("options", [None, BlocksOptions(lists=ListOptions(use_rich_text=False))])
    def test_mrkdwn_fallback(self, options):
        """Test lists render as one mrkdwn section unless rich text is enabled."""
        blocks = markdown_to_blocks("- First item\n- Second item", options)
        assert blocks == [SectionBlock(text="• First item\n• Second item")]


@pytest.mark.integration
class TestRichTextParagraphs:
    """Paragraph conversion with the global rich text flag."""

    def test_styled_paragraphs(self):
        """Test two paragraphs with five leaves each."""
        markdown = (
            "This is a **bold** paragraph with _italic_ text.\n\n"
            "Another paragraph with ~~strikethrough~~ and `code`."
        )
        blocks = markdown_to_blocks(markdown, RICH)
        assert len(blocks) == 2
        assert all(isinstance(block, RichTextBlock) and len(block.elements) == 1 for block in blocks)

        assert _section_leaves(blocks[0]) == [
            RichTextText(text="This is a "),
            RichTextText(text="bold", style=RichTextStyle(bold=True)),
            RichTextText(text=" paragraph with "),
            RichTextText(text="italic", style=RichTextStyle(italic=True)),
            RichTextText(text=" text."),
        ]
        assert _section_leaves(blocks[1]) == [
            RichTextText(text="Another paragraph with "),
            RichTextText(text="strikethrough", style=RichTextStyle(strike=True)),
            RichTextText(text=" and "),
            RichTextText(text="code", style=RichTextStyle(code=True)),
            RichTextText(text="."),
        ]

    def test_links(self):
        """Test links become link leaves."""
        blocks = markdown_to_blocks("Visit [Google](https://google.com) for more information.", RICH)
        assert _section_leaves(blocks[0]) == [
            RichTextText(text="Visit "),
            RichTextLink(url="https://google.com", text="Google"),
            RichTextText(text=" for more information."),
        ]

    def test_source_newline_stays_in_leaf(self):
        """Test that a newline inside a paragraph is part of the surrounding text leaf."""
        blocks = markdown_to_blocks("first line\nsecond _line_", RICH)
        assert _section_leaves(blocks[0]) == [
            RichTextText(text="first line\nsecond "),
            RichTextText(text="line", style=RichTextStyle(italic=True)),
        ]

    def test_image_splits_paragraph(self):
        """Test an inline image yields rich text, image, rich text."""
        markdown = "Here is some text ![alt text](https://example.com/image.jpg) and more text."
        blocks = markdown_to_blocks(markdown, RICH)
        assert [block.type for block in blocks] == ["rich_text", "image", "rich_text"]
        assert _section_leaves(blocks[0])[0].text == "Here is some text "
        assert blocks[1] == image("https://example.com/image.jpg", "alt text")
        assert _section_leaves(blocks[2])[0].text == " and more text."

    def test_lists_follow_global_flag(self):
        """Test lists become rich text when the global flag is on."""
        block = markdown_to_blocks("- First item with **bold** text\n- Second item with _italic_ text", RICH)[0]
        assert len(block.elements) == 2
        assert _section_leaves(block, 0)[1] == RichTextText(text="bold", style=RichTextStyle(bold=True))
        assert _section_leaves(block, 1)[1] == RichTextText(text="italic", style=RichTextStyle(italic=True))

    @pytest.mark.parametrize("options", [None, BlocksOptions(use_rich_text=False)])
    def test_mrkdwn_paragraph(self, options):
        """Test mrkdwn is kept when the global flag is off."""
        blocks = markdown_to_blocks("This is a **bold** paragraph with _italic_ text.", options)
        assert blocks == [SectionBlock(text="This is a *bold* paragraph with _italic_ text.")]

    def test_global_flag_overrides_list_flag(self):
        """Test the global flag wins over a disabled list flag."""
        options = BlocksOptions(use_rich_text=True, lists=ListOptions(use_rich_text=False))
        blocks = markdown_to_blocks("- List item with **bold** text\n\nRegular paragraph with _italic_ text.", options)
        assert [block.type for block in blocks] == ["rich_text", "rich_text"]


@pytest.mark.integration
class TestMrkdwnDocument:
    """Whole-document conversion in the default mode."""

    def test_mixed_document(self):
        """Test ordering and kinds of blocks for a mixed document."""
        markdown = (
            "# **Title**\n\n"
            "Intro with a [link](https://example.com).\n\n"
            "---\n\n"
            "```python\nprint('hi')\n```\n\n"
            "> quoted line one\n> quoted line two\n\n"
            "| A | B |\n|---|---|\n| 1 | 2 |\n"
        )
        blocks = markdown_to_blocks(markdown)
        assert [block.type for block in blocks] == ["header", "section", "divider", "section", "section", "section"]
        assert blocks[0].text == "Title"
        assert blocks[1].text == "Intro with a <https://example.com|link> ."
        assert blocks[3].text == "```\nprint('hi')\n```"
        assert blocks[4].text == "> quoted line one\n> quoted line two"
        assert blocks[5].text == "```\n| A | B |\n| --- | --- |\n| 1 | 2 |\n```"

    def test_table_line_count(self):
        """Test a table produces its rows plus header and separator lines."""
        markdown = "| A |\n|---|\n| 1 |\n| 2 |\n| 3 |"
        text = markdown_to_blocks(markdown)[0].text
        assert len(text.split("\n")) == 3 + 2 + 2

    def test_nested_mrkdwn_list(self):
        """Test nested list indentation in mrkdwn."""
        blocks = markdown_to_blocks("- parent\n  - child\n- sibling")
        assert blocks == [SectionBlock(text="• parent\n  • child\n• sibling")]

    def test_task_list_with_checkbox_prefix(self):
        """Test the checkbox prefix callback through the full pipeline."""
        def checkbox(checked: bool) -> str:
            return ":white_check_mark: " if checked else ":white_square: "

        options = BlocksOptions(lists=ListOptions(checkbox_prefix=checkbox))
        blocks = markdown_to_blocks("- [x] shipped\n- [ ] pending", options)
        assert blocks[0].text == ":white_check_mark: shipped\n:white_square: pending"

    def test_text_image_text(self):
        """Test an inline image splits mrkdwn sections."""
        blocks = markdown_to_blocks("text-a ![a cat](https://example.com/cat.png) text-b")
        assert blocks == [
            SectionBlock(text="text-a "),
            ImageBlock(image_url="https://example.com/cat.png", alt_text="a cat"),
            SectionBlock(text=" text-b"),
        ]

    def test_html_image(self):
        """Test images in raw HTML blocks."""
        blocks = markdown_to_blocks('<img src="https://example.com/a.png" alt="A">\n\nAfter.')
        assert blocks == [ImageBlock(image_url="https://example.com/a.png", alt_text="A"), SectionBlock(text="After.")]

    def test_long_header_truncated(self):
        """Test headers are cut to 150 characters."""
        blocks = markdown_to_blocks("# " + "x" * 200)
        assert blocks[0].text == "x" * 150

    def test_disabled_tables_render_as_paragraph(self):
        """Test parser options flow through the entry point."""
        blocks = markdown_to_blocks("| A |\n|---|\n| 1 |", parser_options=MarkdownParserOptions(parse_tables=False))
        assert blocks[0].type == "section"
        assert not blocks[0].text.startswith("```")

    def test_empty_markdown(self):
        """Test empty input gives no blocks."""
        assert markdown_to_blocks("") == []


@pytest.mark.integration
class TestPayload:
    """JSON payload generation."""

    def test_payload_is_json_ready(self):
        """Test dict output round-trips through json."""
        payload = markdown_to_payload("# Hi\n\n- a\n- b", RICH)
        assert json.loads(json.dumps(payload)) == payload
        assert payload[0] == {"type": "header", "text": {"type": "plain_text", "text": "Hi"}}
        assert payload[1]["elements"][0]["type"] == "rich_text_list"

    def test_deterministic_output(self):
        """Test identical input gives identical JSON."""
        markdown = "Some **bold** text\n\n1. one\n   - two\n\n![img](https://example.com/i.png)"
        assert blocks_to_json(markdown_to_blocks(markdown, RICH)) == blocks_to_json(markdown_to_blocks(markdown, RICH))


@pytest.mark.integration
class TestErrors:
    """Error propagation from the entry points."""

    def test_invalid_options(self):
        """Test wrong options type is rejected."""
        with pytest.raises(InvalidOptionsError):
            markdown_to_blocks("text", options={"use_rich_text": True})

    def test_invalid_parser_options(self):
        """Test wrong parser options type is rejected."""
        with pytest.raises(InvalidOptionsError):
            markdown_to_blocks("text", parser_options=RICH)

    def test_invalid_bytes(self):
        """Test undecodable input is reported as a parsing error."""
        with pytest.raises(ParsingError):
            markdown_to_blocks(b"\xff\xfe")

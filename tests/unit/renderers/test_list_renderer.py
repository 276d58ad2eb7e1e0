#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_list_renderer.py
"""Unit tests for list rendering in both encodings."""

import pytest
from utils import bullet_list, list_texts, ordered_list, text_item

from md2blocks.ast import CodeBlock, Image, List, ListItem, Paragraph, Strong, Text
from md2blocks.blocks import RichTextBlock, RichTextStyle, RichTextText, SectionBlock
from md2blocks.options import BlocksOptions, ListOptions
from md2blocks.renderers.lists import render_list, render_list_mrkdwn, render_list_rich_text


def _checkbox(checked: bool) -> str:
    return "[x] " if checked else "[ ] "


def _mixed_content_list() -> List:
    """Build ``- a / - b / after``, ``- (nested only) / - only-nested`` and ``- c``."""
    mixed = ListItem(
        children=[
            Paragraph(content=[Text(content="a")]),
            bullet_list(text_item("b")),
            Paragraph(content=[Text(content="after")]),
        ]
    )
    nested_only = ListItem(children=[bullet_list(text_item("only-nested"))])
    return bullet_list(mixed, nested_only, text_item("c"))


@pytest.mark.unit
class TestMrkdwnLists:
    """Tests for the single-section list encoding."""

    def test_bullet_list(self):
        """Test bullet prefixes and line joining."""
        node = bullet_list(text_item("First item"), text_item("Second item"))
        assert render_list_mrkdwn(node) == SectionBlock(text="• First item\n• Second item")

    def test_ordered_list_numbers_from_one(self):
        """Test ordered numbering ignores the source start value."""
        node = ordered_list(text_item("a"), text_item("b"), text_item("c"))
        node.start = 5
        assert render_list_mrkdwn(node).text == "1. a\n2. b\n3. c"

    def test_nested_list_is_indented(self, nested_bullet_list):
        """Test that nested items sit two spaces deeper beneath their parent."""
        assert render_list_mrkdwn(nested_bullet_list).text == "• parent\n  • child one\n  • child two\n• sibling"

    def test_nested_ordered_list_restarts_numbering(self):
        """Test numbering restarts within each nested list."""
        nested = ordered_list(text_item("x"), text_item("y"))
        node = ordered_list(text_item("one", nested=nested), text_item("two"))
        assert render_list_mrkdwn(node).text == "1. one\n  1. x\n  2. y\n2. two"

    def test_item_markup_is_preserved(self):
        """Test inline formatting inside items."""
        item = ListItem(children=[Paragraph(content=[Strong(content=[Text(content="bold")]), Text(content=" item")])])
        assert render_list_mrkdwn(bullet_list(item)).text == "• *bold* item"

    def test_task_items_without_prefix_use_bullet(self):
        """Test that task items fall back to the bullet prefix."""
        node = bullet_list(text_item("done", task_status="checked"), text_item("todo", task_status="unchecked"))
        assert render_list_mrkdwn(node).text == "• done\n• todo"

    def test_checkbox_prefix_callback(self):
        """Test that a configured checkbox prefix replaces the bullet for task items."""
        node = bullet_list(
            text_item("done", task_status="checked"),
            text_item("todo", task_status="unchecked"),
            text_item("plain"),
        )
        text = render_list_mrkdwn(node, ListOptions(checkbox_prefix=_checkbox)).text
        assert text == "[x] done\n[ ] todo\n• plain"

    def test_checkbox_prefix_none_falls_back_to_bullet(self):
        """Test that a callback returning None leaves the bullet prefix in place."""
        node = bullet_list(text_item("done", task_status="checked"), text_item("todo", task_status="unchecked"))
        options = ListOptions(checkbox_prefix=lambda checked: "[x] " if checked else None)
        assert render_list_mrkdwn(node, options).text == "[x] done\n• todo"

    def test_nested_list_between_item_content(self):
        """Test text after a nested list, and an item holding only a nested list."""
        assert render_list_mrkdwn(_mixed_content_list()).text == "• a\n  • bafter\n• • only-nested\n• c"

    def test_non_paragraph_children_are_skipped(self):
        """Test that code blocks and images inside items are dropped."""
        item = ListItem(
            children=[Paragraph(content=[Text(content="item")]), CodeBlock(content="x"), Image(url="u")]
        )
        assert render_list_mrkdwn(bullet_list(item)).text == "• item"


@pytest.mark.unit
class TestRichTextLists:
    """Tests for the flattened rich text list encoding."""

    def test_flat_list(self):
        """Test one list node per item at indent zero."""
        block = render_list_rich_text(bullet_list(text_item("a"), text_item("b")))
        assert isinstance(block, RichTextBlock)
        assert list_texts(block) == [(0, "a"), (0, "b")]
        assert {element.style for element in block.elements} == {"bullet"}

    def test_nested_indents(self, nested_bullet_list):
        """Test that nested items follow their parent at indent one."""
        block = render_list_rich_text(nested_bullet_list)
        assert list_texts(block) == [(0, "parent"), (1, "child one"), (1, "child two"), (0, "sibling")]

    def test_three_levels(self):
        """Test indents grow by one per nesting level."""
        inner = bullet_list(text_item("c"))
        middle = bullet_list(text_item("b", nested=inner))
        node = ordered_list(text_item("a", nested=middle))
        block = render_list_rich_text(node)
        assert list_texts(block) == [(0, "a"), (1, "b"), (2, "c")]
        assert [element.style for element in block.elements] == ["ordered", "bullet", "bullet"]

    def test_document_order_around_nested_lists(self):
        """Test content after a nested list and items holding only a nested list."""
        block = render_list_rich_text(_mixed_content_list())
        assert list_texts(block) == [(0, "a"), (1, "b"), (0, "after"), (1, "only-nested"), (0, "c")]

    def test_starting_indent(self):
        """Test a non-zero starting indent."""
        block = render_list_rich_text(bullet_list(text_item("a")), indent=3)
        assert list_texts(block) == [(3, "a")]

    def test_item_styles_become_leaves(self):
        """Test that item formatting is carried into rich text leaves."""
        item = ListItem(children=[Paragraph(content=[Strong(content=[Text(content="bold")]), Text(content=" item")])])
        block = render_list_rich_text(bullet_list(item))
        assert block.elements[0].elements[0].elements == [
            RichTextText(text="bold", style=RichTextStyle(bold=True)),
            RichTextText(text=" item"),
        ]


@pytest.mark.unit
class TestListModeSelection:
    """Tests for choosing the list encoding from options."""

    def test_default_is_mrkdwn(self, nested_bullet_list):
        """Test mrkdwn is used by default."""
        blocks = render_list(nested_bullet_list)
        assert len(blocks) == 1
        assert isinstance(blocks[0], SectionBlock)

    def test_list_level_rich_text(self, nested_bullet_list):
        """Test the list-level flag alone switches to rich text."""
        blocks = render_list(nested_bullet_list, BlocksOptions(lists=ListOptions(use_rich_text=True)))
        assert isinstance(blocks[0], RichTextBlock)

    def test_global_rich_text_overrides_list_setting(self, nested_bullet_list):
        """Test the global flag forces rich text lists."""
        options = BlocksOptions(use_rich_text=True, lists=ListOptions(use_rich_text=False))
        assert isinstance(render_list(nested_bullet_list, options)[0], RichTextBlock)

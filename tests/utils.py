"""Test utilities for the md2blocks test suite.

Helpers for building token trees by hand and inspecting rendered blocks.
"""

from md2blocks.ast import List, ListItem, Node, Paragraph, Text
from md2blocks.blocks import RichTextBlock, RichTextList


def paragraph(*content: Node) -> Paragraph:
    """Build a paragraph from phrasing nodes."""
    return Paragraph(content=list(content))


def text_item(text: str, nested: List | None = None, task_status=None) -> ListItem:
    """Build a list item holding one text paragraph and an optional nested list."""
    children: list[Node] = [Paragraph(content=[Text(content=text)])]
    if nested is not None:
        children.append(nested)
    return ListItem(children=children, task_status=task_status)


def bullet_list(*items: ListItem) -> List:
    """Build an unordered list."""
    return List(ordered=False, items=list(items))


def ordered_list(*items: ListItem) -> List:
    """Build an ordered list."""
    return List(ordered=True, items=list(items))


def list_texts(block: RichTextBlock) -> list[tuple[int, str]]:
    """Return ``(indent, joined leaf text)`` for each list node of a rich text block."""
    result = []
    for element in block.elements:
        assert isinstance(element, RichTextList)
        assert len(element.elements) == 1
        section = element.elements[0]
        result.append((element.indent, "".join(leaf.text for leaf in section.elements)))
    return result

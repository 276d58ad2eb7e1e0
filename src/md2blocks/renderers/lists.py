#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/renderers/lists.py
"""List rendering.

Two independent algorithms are provided:

``render_list_mrkdwn``
    One section per top-level list. Every item becomes one line; nested lists
    are rendered recursively and indented two spaces per level beneath their
    parent item.

``render_list_rich_text``
    One rich text block holding a *flat* sequence of ``rich_text_list`` nodes.
    Hierarchy is encoded only through each node's ``indent``. For an item with
    both direct content and a nested list, the item's own node comes first,
    followed by every node of the nested list, before the next sibling item.

"""

from __future__ import annotations

import logging

from md2blocks.ast.nodes import Image, List, ListItem, Node, Paragraph, is_phrasing
from md2blocks.blocks.factory import rich_text, rich_text_list, rich_text_section, section
from md2blocks.blocks.models import Block, RichTextBlock, RichTextLeaf, RichTextList, SectionBlock
from md2blocks.constants import DEFAULT_BULLET_PREFIX, NESTED_LIST_INDENT, RichTextListStyle
from md2blocks.options.blocks import BlocksOptions, ListOptions
from md2blocks.renderers.inline import mrkdwn_text, rich_text_leaves

logger = logging.getLogger(__name__)


def _list_style(node: List) -> RichTextListStyle:
    return "ordered" if node.ordered else "bullet"


def _inline_children(item: ListItem) -> list[Node]:
    """Collect the bare phrasing children of an item, images excluded."""
    return [child for child in item.children if is_phrasing(child) and not isinstance(child, Image)]


# ============================================================================
# mrkdwn
# ============================================================================


def _indent_lines(text: str) -> str:
    return "\n".join(f"{NESTED_LIST_INDENT}{line}" if line else line for line in text.split("\n"))


def _item_prefix(node: List, item: ListItem, index: int, options: ListOptions) -> str:
    if node.ordered:
        return f"{index}. "
    checked = item.checked
    if checked is not None and options.checkbox_prefix is not None:
        prefix = options.checkbox_prefix(checked)
        if prefix is not None:
            return prefix
    return DEFAULT_BULLET_PREFIX


def _render_list_lines(node: List, options: ListOptions) -> str:
    lines: list[str] = []

    for index, item in enumerate(node.items, start=1):
        parts: list[str] = []
        pending_inline: list[Node] = []

        for child in item.children:
            if is_phrasing(child):
                if not isinstance(child, Image):
                    pending_inline.append(child)
                continue

            if pending_inline:
                parts.append(mrkdwn_text(pending_inline))
                pending_inline = []

            if isinstance(child, List):
                nested = _render_list_lines(child, options)
                if nested:
                    parts.append("\n" + _indent_lines(nested))
            elif isinstance(child, Paragraph):
                parts.append(mrkdwn_text(child.content))
            else:
                logger.debug("Skipping %s inside list item", type(child).__name__)

        if pending_inline:
            parts.append(mrkdwn_text(pending_inline))

        content = "".join(parts).strip()
        lines.append(f"{_item_prefix(node, item, index, options)}{content}")

    return "\n".join(lines)


def render_list_mrkdwn(node: List, options: ListOptions | None = None) -> SectionBlock:
    """Render a list to a single mrkdwn section.

    Parameters
    ----------
    node : List
        List node to render
    options : ListOptions or None, default = None
        List options; ``checkbox_prefix`` controls task item prefixes

    Returns
    -------
    SectionBlock
        Section whose lines are the list items; ordered items are numbered
        from 1 within each list, bullet and task items use ``"• "`` unless a
        checkbox prefix is configured

    """
    return section(_render_list_lines(node, options or ListOptions()))


# ============================================================================
# Rich text
# ============================================================================


def _flatten_rich_list(node: List, indent: int) -> list[RichTextList]:
    style = _list_style(node)
    elements: list[RichTextList] = []

    for item in node.items:
        leaves: list[RichTextLeaf] = []

        for child in item.children:
            if is_phrasing(child):
                leaves.extend(rich_text_leaves([child]))
            elif isinstance(child, Paragraph):
                leaves.extend(rich_text_leaves(child.content))
            elif isinstance(child, List):
                # The item's own content precedes its nested list
                if leaves:
                    elements.append(rich_text_list(style, indent, rich_text_section(leaves)))
                    leaves = []
                elements.extend(_flatten_rich_list(child, indent + 1))
            else:
                logger.debug("Skipping %s inside list item", type(child).__name__)

        if leaves:
            elements.append(rich_text_list(style, indent, rich_text_section(leaves)))

    return elements


def render_list_rich_text(node: List, indent: int = 0) -> RichTextBlock:
    """Render a list to one rich text block of flattened list nodes.

    Parameters
    ----------
    node : List
        List node to render
    indent : int, default = 0
        Indent of the list's own items

    Returns
    -------
    RichTextBlock
        Block whose elements are ``rich_text_list`` nodes, each wrapping
        exactly one section, in document order

    """
    return rich_text(_flatten_rich_list(node, indent))


def render_list(node: List, options: BlocksOptions | None = None) -> list[Block]:
    """Render a list in the effective mode for ``options``.

    Rich text is used when either the global or the list-level
    ``use_rich_text`` flag is set.

    """
    options = options or BlocksOptions()
    if options.lists_use_rich_text:
        return [render_list_rich_text(node)]
    return [render_list_mrkdwn(node, options.lists)]


__all__ = ["render_list", "render_list_mrkdwn", "render_list_rich_text"]

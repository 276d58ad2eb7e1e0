#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/renderers/inline.py
"""Inline (phrasing) content rendering.

Phrasing nodes are rendered in one of three encodings:

- **mrkdwn**: flat marked-up text (``*bold*``, ``_italic_``, ``~strike~``,
  `` `code` ``, ``<url|text>``). Markup composes textually because nested
  containers are rendered recursively and wrapped.
- **rich text**: one :class:`RichTextText` or :class:`RichTextLink` leaf per
  node. A styled leaf carries the single flag of its own node over the
  flattened text of its descendants, so only the outermost style in a nesting
  chain survives (``***x***`` becomes a bold leaf, not bold+italic).
- **plain text**: used for headers and table cells.

Images found among the direct children of a paragraph interrupt the current
accumulation and become standalone image blocks in both block-producing modes.

"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from md2blocks.ast.nodes import (
    Code,
    Emphasis,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    Node,
    Strikethrough,
    Strong,
    Text,
)
from md2blocks.blocks.factory import image, rich_text, rich_text_section, section
from md2blocks.blocks.models import (
    Block,
    ImageBlock,
    RichTextLeaf,
    RichTextLink,
    RichTextStyle,
    RichTextText,
    SectionBlock,
)
from md2blocks.constants import DEFAULT_IMAGE_PLACEHOLDER, MAX_TEXT_LENGTH

logger = logging.getLogger(__name__)


# ============================================================================
# mrkdwn
# ============================================================================


def _mrkdwn_children(nodes: Sequence[Node]) -> str:
    return "".join(render_mrkdwn(child) for child in nodes)


def _mrkdwn_text(node: Text) -> str:
    return node.content


def _mrkdwn_strong(node: Strong) -> str:
    return f"*{_mrkdwn_children(node.content)}*"


def _mrkdwn_emphasis(node: Emphasis) -> str:
    return f"_{_mrkdwn_children(node.content)}_"


def _mrkdwn_strikethrough(node: Strikethrough) -> str:
    return f"~{_mrkdwn_children(node.content)}~"


def _mrkdwn_code(node: Code) -> str:
    return f"`{node.content}`"


def _mrkdwn_link(node: Link) -> str:
    return f"<{node.url}|{_mrkdwn_children(node.content)}> "


def _mrkdwn_line_break(node: LineBreak) -> str:
    return "\n" if node.soft else ""


_MRKDWN_DISPATCH: dict[type, Callable[[Node], str]] = {
    Text: _mrkdwn_text,
    Strong: _mrkdwn_strong,
    Emphasis: _mrkdwn_emphasis,
    Strikethrough: _mrkdwn_strikethrough,
    Code: _mrkdwn_code,
    Link: _mrkdwn_link,
    LineBreak: _mrkdwn_line_break,
}


def render_mrkdwn(node: Node) -> str:
    """Render one phrasing node to mrkdwn.

    Nodes without a mrkdwn form (images nested in containers, inline HTML)
    render to an empty string.

    """
    renderer = _MRKDWN_DISPATCH.get(type(node))
    if renderer is None:
        return ""
    return renderer(node)


# ============================================================================
# Plain text
# ============================================================================


def render_plain_text(node: Node) -> str:
    """Flatten one phrasing node to plain text.

    Containers contribute their children's text, code spans keep their
    backticks, images fall back to ``title`` then ``url`` and inline HTML is
    kept raw.

    """
    if isinstance(node, (Strong, Emphasis, Strikethrough, Link)):
        return "".join(render_plain_text(child) for child in node.content)
    if isinstance(node, Text):
        return node.content
    if isinstance(node, Code):
        return f"`{node.content}`"
    if isinstance(node, HTMLInline):
        return node.content
    if isinstance(node, Image):
        return node.title or node.url
    if isinstance(node, LineBreak):
        return "\n" if node.soft else ""
    return ""


def plain_text(nodes: Sequence[Node]) -> str:
    """Flatten a sequence of phrasing nodes to plain text."""
    return "".join(render_plain_text(node) for node in nodes)


# ============================================================================
# Rich text
# ============================================================================


def _leaf_text(leaf: Optional[RichTextLeaf]) -> str:
    if leaf is None:
        return ""
    if isinstance(leaf, RichTextLink):
        return leaf.text or leaf.url
    return leaf.text


def flatten_rich_text(nodes: Sequence[Node]) -> str:
    """Concatenate the leaf text of ``nodes``, discarding their styles."""
    return "".join(_leaf_text(render_rich_text_leaf(node)) for node in nodes)


def _styled_leaf(nodes: Sequence[Node], style: RichTextStyle) -> RichTextText:
    return RichTextText(text=flatten_rich_text(nodes), style=style)


def render_rich_text_leaf(node: Node) -> Optional[RichTextLeaf]:
    """Render one phrasing node to a rich text leaf.

    Returns
    -------
    RichTextText, RichTextLink or None
        None for nodes without a rich text form (images, hard line breaks,
        inline HTML)

    """
    if isinstance(node, Text):
        return RichTextText(text=node.content)
    if isinstance(node, Strong):
        return _styled_leaf(node.content, RichTextStyle(bold=True))
    if isinstance(node, Emphasis):
        return _styled_leaf(node.content, RichTextStyle(italic=True))
    if isinstance(node, Strikethrough):
        return _styled_leaf(node.content, RichTextStyle(strike=True))
    if isinstance(node, Code):
        return RichTextText(text=node.content, style=RichTextStyle(code=True))
    if isinstance(node, Link):
        return RichTextLink(url=node.url, text=flatten_rich_text(node.content))
    if isinstance(node, LineBreak) and node.soft:
        return RichTextText(text="\n")
    return None


def rich_text_leaves(nodes: Sequence[Node]) -> list[RichTextLeaf]:
    """Render phrasing nodes to leaves, dropping nodes without a leaf form."""
    leaves: list[RichTextLeaf] = []
    for node in nodes:
        leaf = render_rich_text_leaf(node)
        if leaf is not None:
            leaves.append(leaf)
    return leaves


# ============================================================================
# Block accumulation
# ============================================================================


def image_block(node: Image) -> ImageBlock:
    """Build the standalone image block for an image found in phrasing content."""
    return image(node.url, node.alt_text or node.title or node.url, node.title)


def cell_text(nodes: Sequence[Node]) -> str:
    """Flatten table cell content to a single line of plain text.

    Images degrade to their URL (or title, alt text, placeholder) instead of
    becoming separate blocks.

    """
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, Image):
            parts.append(node.url or node.title or node.alt_text or DEFAULT_IMAGE_PLACEHOLDER)
        else:
            parts.append(render_plain_text(node))
    return "".join(parts).replace("\n", " ")


def render_inline_mrkdwn(nodes: Sequence[Node]) -> list[Block]:
    """Render phrasing content to mrkdwn sections, split at images.

    Each fragment is appended to the open section while the combined length
    stays within 3000 characters; otherwise a new section starts at that
    fragment. Lengths are measured before truncation. A fragment that renders
    to nothing never opens a section, so no empty section is produced.

    """
    pending: list[str | ImageBlock] = []
    for node in nodes:
        if isinstance(node, Image):
            pending.append(image_block(node))
            continue

        fragment = render_mrkdwn(node)
        last = pending[-1] if pending else None
        if isinstance(last, str) and len(last) + len(fragment) <= MAX_TEXT_LENGTH:
            pending[-1] = last + fragment
        elif not fragment:
            continue
        else:
            if isinstance(last, str):
                logger.debug("Section reached %d characters, starting a new section", len(last))
            pending.append(fragment)

    return [section(item) if isinstance(item, str) else item for item in pending]


def render_inline_rich_text(nodes: Sequence[Node]) -> list[Block]:
    """Render phrasing content to rich text blocks, split at images.

    Leaves accumulate into one section; each image closes the current
    section (if it holds any leaves) into its own rich text block.

    """
    blocks: list[Block] = []
    leaves: list[RichTextLeaf] = []

    for node in nodes:
        if isinstance(node, Image):
            if leaves:
                blocks.append(rich_text([rich_text_section(leaves)]))
                leaves = []
            blocks.append(image_block(node))
            continue

        leaf = render_rich_text_leaf(node)
        if leaf is not None:
            leaves.append(leaf)

    if leaves:
        blocks.append(rich_text([rich_text_section(leaves)]))

    return blocks


def render_inline(nodes: Sequence[Node], use_rich_text: bool = False) -> list[Block]:
    """Render phrasing content to blocks in the selected encoding."""
    if use_rich_text:
        return render_inline_rich_text(nodes)
    return render_inline_mrkdwn(nodes)


def mrkdwn_text(nodes: Sequence[Node]) -> str:
    """Render phrasing content to one mrkdwn string, dropping images."""
    return "".join(block.text for block in render_inline_mrkdwn(nodes) if isinstance(block, SectionBlock))

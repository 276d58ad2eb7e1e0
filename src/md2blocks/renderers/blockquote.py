#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/renderers/blockquote.py
"""Blockquote rendering.

Only paragraph children of a quote are rendered; other children (nested
lists, code blocks, nested quotes) are dropped. Paragraphs are rendered as
mrkdwn sections, and a section spanning several lines gets ``"> "`` in front
of every line. Single-line sections and image blocks pass through unchanged.
"""

from __future__ import annotations

import logging

from md2blocks.ast.nodes import BlockQuote, Paragraph
from md2blocks.blocks.factory import section
from md2blocks.blocks.models import Block, SectionBlock
from md2blocks.constants import QUOTE_PREFIX
from md2blocks.renderers.inline import render_inline_mrkdwn

logger = logging.getLogger(__name__)


def _quote(block: Block) -> Block:
    if isinstance(block, SectionBlock) and "\n" in block.text:
        return section(QUOTE_PREFIX + block.text.replace("\n", "\n" + QUOTE_PREFIX))
    return block


def render_blockquote(node: BlockQuote) -> list[Block]:
    """Render the paragraphs of a blockquote with quote-line prefixes."""
    blocks: list[Block] = []
    for child in node.children:
        if not isinstance(child, Paragraph):
            logger.debug("Dropping %s inside blockquote", type(child).__name__)
            continue
        blocks.extend(_quote(block) for block in render_inline_mrkdwn(child.content))
    return blocks

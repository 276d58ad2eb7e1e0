#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/renderers/dispatch.py
"""Token dispatcher: maps each top-level node kind to its renderer.

Dispatch is a closed table keyed on node type. Node kinds without an entry
render to nothing.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Union

from md2blocks.ast.nodes import (
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    HTMLBlock,
    List,
    Node,
    Paragraph,
    Table,
    ThematicBreak,
)
from md2blocks.blocks.factory import divider, header, section
from md2blocks.blocks.models import Block
from md2blocks.constants import CODE_FENCE
from md2blocks.exceptions import validate_options_type
from md2blocks.options.blocks import BlocksOptions
from md2blocks.renderers.blockquote import render_blockquote
from md2blocks.renderers.html_images import render_html
from md2blocks.renderers.inline import plain_text, render_inline
from md2blocks.renderers.lists import render_list
from md2blocks.renderers.tables import render_table

logger = logging.getLogger(__name__)

Handler = Callable[[Node, BlocksOptions], list[Block]]


def _heading(node: Heading, options: BlocksOptions) -> list[Block]:
    return [header(plain_text(node.content))]


def _paragraph(node: Paragraph, options: BlocksOptions) -> list[Block]:
    return render_inline(node.content, use_rich_text=options.use_rich_text)


def _code_block(node: CodeBlock, options: BlocksOptions) -> list[Block]:
    return [section(f"{CODE_FENCE}\n{node.content}\n{CODE_FENCE}")]


def _blockquote(node: BlockQuote, options: BlocksOptions) -> list[Block]:
    return render_blockquote(node)


def _list(node: List, options: BlocksOptions) -> list[Block]:
    return render_list(node, options)


def _table(node: Table, options: BlocksOptions) -> list[Block]:
    return [render_table(node)]


def _thematic_break(node: ThematicBreak, options: BlocksOptions) -> list[Block]:
    return [divider()]


def _html_block(node: HTMLBlock, options: BlocksOptions) -> list[Block]:
    return list(render_html(node))


_DISPATCH: dict[type, Handler] = {
    Heading: _heading,
    Paragraph: _paragraph,
    CodeBlock: _code_block,
    BlockQuote: _blockquote,
    List: _list,
    Table: _table,
    ThematicBreak: _thematic_break,
    HTMLBlock: _html_block,
}


def dispatch(node: Node, options: BlocksOptions | None = None) -> list[Block]:
    """Render one top-level node to blocks.

    Parameters
    ----------
    node : Node
        Block-level node
    options : BlocksOptions or None, default = None
        Rendering options

    Returns
    -------
    list of Block
        Blocks for the node; empty for node kinds that have no block form

    """
    handler = _DISPATCH.get(type(node))
    if handler is None:
        logger.debug("No block renderer for %s, skipping", type(node).__name__)
        return []
    return handler(node, options or BlocksOptions())


def parse_blocks(nodes: Union[Document, Iterable[Node]], options: BlocksOptions | None = None) -> list[Block]:
    """Render a token tree into an ordered block sequence.

    Parameters
    ----------
    nodes : Document or iterable of Node
        Top-level nodes in document order
    options : BlocksOptions or None, default = None
        Rendering options

    Returns
    -------
    list of Block
        Concatenated blocks of every node, in document order

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a BlocksOptions instance

    Examples
    --------
    >>> from md2blocks.ast import Paragraph, Strong, Text
    >>> parse_blocks([Paragraph(content=[Strong(content=[Text(content="hi")])])])
    [SectionBlock(text='*hi*', expand=True)]

    """
    validate_options_type(options, BlocksOptions, "parse_blocks")
    options = options or BlocksOptions()

    children = nodes.children if isinstance(nodes, Document) else nodes
    blocks: list[Block] = []
    for node in children:
        blocks.extend(dispatch(node, options))
    return blocks

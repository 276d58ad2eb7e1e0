"""The major exported API functions for markdown to block conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2blocks/api.py
import logging
from typing import Any, Optional, Union

from md2blocks.blocks.models import Block
from md2blocks.blocks.serialization import blocks_to_dicts
from md2blocks.exceptions import validate_options_type
from md2blocks.options.blocks import BlocksOptions
from md2blocks.options.markdown import MarkdownParserOptions
from md2blocks.parsers.markdown import markdown_to_ast
from md2blocks.renderers.dispatch import parse_blocks

logger = logging.getLogger(__name__)


def markdown_to_blocks(
    markdown: Union[str, bytes],
    options: Optional[BlocksOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> list[Block]:
    """Convert markdown text into an ordered list of blocks.

    Parameters
    ----------
    markdown : str or bytes
        Markdown source; bytes are decoded as UTF-8
    options : BlocksOptions, optional
        Block rendering options
    parser_options : MarkdownParserOptions, optional
        Tokenizer options

    Returns
    -------
    list of Block
        Blocks in document order

    Raises
    ------
    InvalidOptionsError
        If an options argument has the wrong type
    ParsingError
        If the markdown input cannot be decoded

    Examples
    --------
    >>> markdown_to_blocks("- First item\\n- Second item")
    [SectionBlock(text='• First item\\n• Second item', expand=True)]

    >>> blocks = markdown_to_blocks("Some **bold** text", BlocksOptions(use_rich_text=True))
    >>> blocks[0].type
    'rich_text'

    """
    validate_options_type(options, BlocksOptions, "markdown_to_blocks")

    document = markdown_to_ast(markdown, parser_options)
    blocks = parse_blocks(document, options)
    logger.debug("Converted %d top-level nodes into %d blocks", len(document.children), len(blocks))
    return blocks


def markdown_to_payload(
    markdown: Union[str, bytes],
    options: Optional[BlocksOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> list[dict[str, Any]]:
    """Convert markdown text into JSON-ready block dictionaries.

    The result can be passed directly as the ``blocks`` field of a chat
    message.

    """
    return blocks_to_dicts(markdown_to_blocks(markdown, options, parser_options))

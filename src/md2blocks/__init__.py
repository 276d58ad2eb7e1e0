"""md2blocks - convert markdown into chat-message blocks.

md2blocks turns a markdown document into the ordered block sequence of a
chat-message API (section, header, divider, image and rich_text blocks).
Markdown is tokenized with mistune into a small token tree, and the token
tree is rendered block by block.

Key Features
------------
- Headings, paragraphs, code blocks, block quotes, tables, rules
- Bullet, ordered and task lists, including nested lists
- mrkdwn sections or structured rich_text blocks
- Images in paragraphs and raw HTML become image blocks
- Field-length limits of the block schema are applied

Examples
--------
Basic conversion:

    >>> from md2blocks import markdown_to_blocks
    >>> blocks = markdown_to_blocks("# Title\\n\\nSome *text*.")

Rich text output and JSON payloads:

    >>> from md2blocks import BlocksOptions, blocks_to_json
    >>> blocks = markdown_to_blocks("- one\\n- two", BlocksOptions(use_rich_text=True))
    >>> payload = blocks_to_json(blocks)

Rendering a token tree built elsewhere:

    >>> from md2blocks import parse_blocks
    >>> from md2blocks.ast import Paragraph, Text
    >>> parse_blocks([Paragraph(content=[Text(content="hi")])])
    [SectionBlock(text='hi', expand=True)]

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from md2blocks.api import markdown_to_blocks, markdown_to_payload
from md2blocks.blocks import (
    Block,
    DividerBlock,
    HeaderBlock,
    ImageBlock,
    RichTextBlock,
    RichTextLink,
    RichTextList,
    RichTextSection,
    RichTextStyle,
    RichTextText,
    SectionBlock,
    block_to_dict,
    blocks_to_dicts,
    blocks_to_json,
)
from md2blocks.exceptions import InvalidOptionsError, Md2BlocksError, ParsingError, ValidationError
from md2blocks.options import BlocksOptions, ListOptions, MarkdownParserOptions
from md2blocks.parsers import markdown_to_ast
from md2blocks.renderers import dispatch, parse_blocks

__version__ = "0.1.0"

__all__ = [
    "Block",
    "BlocksOptions",
    "DividerBlock",
    "HeaderBlock",
    "ImageBlock",
    "InvalidOptionsError",
    "ListOptions",
    "MarkdownParserOptions",
    "Md2BlocksError",
    "ParsingError",
    "RichTextBlock",
    "RichTextLink",
    "RichTextList",
    "RichTextSection",
    "RichTextStyle",
    "RichTextText",
    "SectionBlock",
    "ValidationError",
    "block_to_dict",
    "blocks_to_dicts",
    "blocks_to_json",
    "dispatch",
    "markdown_to_ast",
    "markdown_to_blocks",
    "markdown_to_payload",
    "parse_blocks",
]

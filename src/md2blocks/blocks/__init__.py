#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/blocks/__init__.py
"""Output block model, constructors and JSON serialization."""

from __future__ import annotations

from md2blocks.blocks.factory import (
    divider,
    header,
    image,
    rich_text,
    rich_text_list,
    rich_text_section,
    section,
)
from md2blocks.blocks.models import (
    Block,
    DividerBlock,
    HeaderBlock,
    ImageBlock,
    RichTextBlock,
    RichTextElement,
    RichTextLeaf,
    RichTextLink,
    RichTextList,
    RichTextSection,
    RichTextStyle,
    RichTextText,
    SectionBlock,
)
from md2blocks.blocks.serialization import block_to_dict, blocks_to_dicts, blocks_to_json

__all__ = [
    "Block",
    "DividerBlock",
    "HeaderBlock",
    "ImageBlock",
    "RichTextBlock",
    "RichTextElement",
    "RichTextLeaf",
    "RichTextLink",
    "RichTextList",
    "RichTextSection",
    "RichTextStyle",
    "RichTextText",
    "SectionBlock",
    "block_to_dict",
    "blocks_to_dicts",
    "blocks_to_json",
    "divider",
    "header",
    "image",
    "rich_text",
    "rich_text_list",
    "rich_text_section",
    "section",
]

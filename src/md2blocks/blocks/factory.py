#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/blocks/factory.py
"""Factory functions for output blocks.

Truncation to the schema's field limits is the only constraint enforced here.
"""

from __future__ import annotations

from typing import Optional, Sequence

from md2blocks.blocks.models import (
    DividerBlock,
    HeaderBlock,
    ImageBlock,
    RichTextBlock,
    RichTextElement,
    RichTextLeaf,
    RichTextList,
    RichTextSection,
    SectionBlock,
)
from md2blocks.constants import (
    MAX_HEADER_LENGTH,
    MAX_IMAGE_ALT_TEXT_LENGTH,
    MAX_IMAGE_TITLE_LENGTH,
    MAX_TEXT_LENGTH,
    RichTextListStyle,
)


def section(text: str) -> SectionBlock:
    """Build a mrkdwn section, truncating ``text`` to 3000 characters."""
    return SectionBlock(text=text[:MAX_TEXT_LENGTH])


def header(text: str) -> HeaderBlock:
    """Build a plain-text header, truncating ``text`` to 150 characters."""
    return HeaderBlock(text=text[:MAX_HEADER_LENGTH])


def divider() -> DividerBlock:
    """Build a divider block."""
    return DividerBlock()


def image(url: str, alt_text: str, title: Optional[str] = None) -> ImageBlock:
    """Build an image block.

    Parameters
    ----------
    url : str
        Image URL, stored unmodified
    alt_text : str
        Alternative text, truncated to 2000 characters
    title : str or None, default = None
        Optional title, truncated to 2000 characters; an empty title is dropped

    Returns
    -------
    ImageBlock
        The image block

    """
    return ImageBlock(
        image_url=url,
        alt_text=alt_text[:MAX_IMAGE_ALT_TEXT_LENGTH],
        title=title[:MAX_IMAGE_TITLE_LENGTH] if title else None,
    )


def rich_text(elements: Sequence[RichTextElement]) -> RichTextBlock:
    """Build a rich text block from sections and list nodes."""
    return RichTextBlock(elements=list(elements))


def rich_text_section(elements: Sequence[RichTextLeaf]) -> RichTextSection:
    """Build a rich text section from leaves."""
    return RichTextSection(elements=list(elements))


def rich_text_list(style: RichTextListStyle, indent: int, content: RichTextSection) -> RichTextList:
    """Build a flattened list node wrapping exactly one section."""
    return RichTextList(style=style, indent=indent, elements=[content])

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/blocks/models.py
"""Output block classes for the chat-message block schema.

Each class mirrors one variant of the target API's block schema. Instances
are built through :mod:`md2blocks.blocks.factory`, which applies the field
length caps; the classes themselves perform no validation.

Block Hierarchy
---------------
Top-level blocks:
    - SectionBlock (mrkdwn text)
    - HeaderBlock (plain text)
    - DividerBlock
    - ImageBlock
    - RichTextBlock

Rich text elements:
    - RichTextSection, RichTextList (children of RichTextBlock)
    - RichTextText, RichTextLink (leaves of RichTextSection)

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union

from md2blocks.constants import RichTextListStyle


@dataclass
class SectionBlock:
    """Section block holding mrkdwn text.

    Parameters
    ----------
    text : str
        Marked-up text
    expand : bool, default = True
        Ask clients to show the full text instead of a "see more" fold

    """

    type: ClassVar[str] = "section"

    text: str
    expand: bool = True


@dataclass
class HeaderBlock:
    """Header block holding plain text."""

    type: ClassVar[str] = "header"

    text: str


@dataclass
class DividerBlock:
    """Divider block; carries no payload."""

    type: ClassVar[str] = "divider"


@dataclass
class ImageBlock:
    """Image block.

    Parameters
    ----------
    image_url : str
        Image URL
    alt_text : str
        Alternative text
    title : str or None, default = None
        Optional plain-text title shown above the image

    """

    type: ClassVar[str] = "image"

    image_url: str
    alt_text: str
    title: Optional[str] = None


@dataclass
class RichTextStyle:
    """Independent style flags of a rich text leaf."""

    bold: bool = False
    italic: bool = False
    strike: bool = False
    code: bool = False

    def is_plain(self) -> bool:
        """Return True when no flag is set."""
        return not (self.bold or self.italic or self.strike or self.code)


@dataclass
class RichTextText:
    """Rich text leaf carrying raw text and style flags."""

    type: ClassVar[str] = "text"

    text: str
    style: RichTextStyle = field(default_factory=RichTextStyle)


@dataclass
class RichTextLink:
    """Rich text leaf linking to a URL."""

    type: ClassVar[str] = "link"

    url: str
    text: str = ""


RichTextLeaf = Union[RichTextText, RichTextLink]


@dataclass
class RichTextSection:
    """Ordered run of rich text leaves."""

    type: ClassVar[str] = "rich_text_section"

    elements: list[RichTextLeaf] = field(default_factory=list)


@dataclass
class RichTextList:
    """One flattened list node of a rich text block.

    Hierarchy is encoded purely through ``indent``; a list node never
    contains another list.

    Parameters
    ----------
    style : {'ordered', 'bullet'}
        List style
    indent : int
        Nesting depth, 0 at the top level
    elements : list of RichTextSection
        Always exactly one section
    border : int, default = 0
        Border width requested from the client

    """

    type: ClassVar[str] = "rich_text_list"

    style: RichTextListStyle
    indent: int
    elements: list[RichTextSection] = field(default_factory=list)
    border: int = 0


RichTextElement = Union[RichTextSection, RichTextList]


@dataclass
class RichTextBlock:
    """Rich text block holding sections and flattened list nodes."""

    type: ClassVar[str] = "rich_text"

    elements: list[RichTextElement] = field(default_factory=list)


Block = Union[SectionBlock, HeaderBlock, DividerBlock, ImageBlock, RichTextBlock]

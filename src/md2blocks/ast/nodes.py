#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/ast/nodes.py
"""Token tree node classes consumed by the block renderers.

This module defines the node hierarchy produced by the markdown tokenizer
adapter and consumed by the renderers in :mod:`md2blocks.renderers`. Nodes are
plain dataclasses; renderers never mutate them.

Node Hierarchy
--------------
Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, Table, TableRow, TableCell
    - ThematicBreak, HTMLBlock

Phrasing (inline) nodes represent text formatting:
    - Text, Emphasis, Strong, Strikethrough, Code
    - Link, Image, LineBreak, HTMLInline

Container phrasing nodes (Strong, Emphasis, Strikethrough, Link) own an
ordered list of child phrasing nodes in ``content``.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional

Alignment = Literal["left", "center", "right"]
TaskStatus = Literal["checked", "unchecked"]


class Node:
    """Base class for all token tree nodes.

    Subclasses are dataclasses that declare their own ``metadata`` field.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root node returned by the tokenizer adapter.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level block nodes in document order
    metadata : dict, default = empty dict
        Document-level metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Phrasing nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")


@dataclass
class Paragraph(Node):
    """Paragraph node containing phrasing content."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class CodeBlock(Node):
    """Fenced or indented code block.

    Parameters
    ----------
    content : str
        Code content, without the trailing newline of the fence body
    language : str or None, default = None
        Language from the fence info string

    """

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for bullet lists
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number written in the source of an ordered list. Informational
        only: rendered lists are always numbered from 1.

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ListItem(Node):
    """List item node containing block and phrasing content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Mixed content of the item: paragraphs, nested lists or bare
        phrasing nodes
    task_status : {'checked', 'unchecked'} or None, default = None
        Checkbox state for task list items; None when the item has no checkbox

    """

    children: list[Node] = field(default_factory=list)
    task_status: Optional[TaskStatus] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def checked(self) -> Optional[bool]:
        """Tri-state checkbox flag: None when unset, else whether it is ticked."""
        if self.task_status is None:
            return None
        return self.task_status == "checked"


@dataclass
class Table(Node):
    """Table node with optional header row.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Body rows (excluding header)
    header : TableRow or None, default = None
        Header row

    """

    rows: list[TableRow] = field(default_factory=list)
    header: Optional[TableRow] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class TableRow(Node):
    """Table row node containing cells."""

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class TableCell(Node):
    """Table cell node holding phrasing content.

    ``alignment`` is the column alignment from the delimiter row. It is
    informational only; the fenced table output does not align columns.
    """

    content: list[Node] = field(default_factory=list)
    alignment: Alignment | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ThematicBreak(Node):
    """Thematic break node (horizontal rule)."""

    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block node.

    The content is kept verbatim; the only thing ever extracted from it is
    ``<img>`` tags.

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


# ============================================================================
# Phrasing Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node containing phrasing children."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Strong(Node):
    """Strong (bold) node containing phrasing children."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Strikethrough(Node):
    """Strikethrough node containing phrasing children."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Code(Node):
    """Inline code span.

    Parameters
    ----------
    content : str
        Code text without the surrounding backticks

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    url : str
        Link target
    content : list of Node, default = empty list
        Phrasing nodes representing the link text
    title : str or None, default = None
        Optional link title

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    url : str
        Image source URL
    alt_text : str, default = ""
        Alternative text
    title : str or None, default = None
        Optional image title

    """

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class LineBreak(Node):
    """Hard or soft line break.

    Parameters
    ----------
    soft : bool, default = False
        True for a soft break (newline in source), False for a hard break

    """

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class HTMLInline(Node):
    """Raw inline HTML fragment."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


PHRASING_TYPES: tuple[type[Node], ...] = (
    Text,
    Emphasis,
    Strong,
    Strikethrough,
    Code,
    Link,
    Image,
    LineBreak,
    HTMLInline,
)


def is_phrasing(node: Node) -> bool:
    """Return True when ``node`` is a phrasing-level (inline) node."""
    return isinstance(node, PHRASING_TYPES)

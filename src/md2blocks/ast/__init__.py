#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/ast/__init__.py
"""Token tree consumed by the block renderers.

The tree is produced by :mod:`md2blocks.parsers.markdown` (or built by hand)
and rendered into chat blocks by :func:`md2blocks.renderers.parse_blocks`.

Examples
--------
    >>> from md2blocks.ast import Document, Heading, Paragraph, Text
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")]),
    ... ])

"""

from __future__ import annotations

from md2blocks.ast.nodes import (
    PHRASING_TYPES,
    Alignment,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    TaskStatus,
    Text,
    ThematicBreak,
    is_phrasing,
)

__all__ = [
    "PHRASING_TYPES",
    "Alignment",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "TaskStatus",
    "Text",
    "ThematicBreak",
    "is_phrasing",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2blocks.

All options are frozen dataclasses; use ``create_updated`` to derive a
modified copy.
"""

from md2blocks.options.base import CloneFrozenMixin
from md2blocks.options.blocks import BlocksOptions, CheckboxPrefix, ListOptions
from md2blocks.options.markdown import MarkdownParserOptions

__all__ = [
    "BlocksOptions",
    "CheckboxPrefix",
    "CloneFrozenMixin",
    "ListOptions",
    "MarkdownParserOptions",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/renderers/__init__.py
"""Renderers converting the token tree into chat blocks."""

from md2blocks.renderers.blockquote import render_blockquote
from md2blocks.renderers.dispatch import dispatch, parse_blocks
from md2blocks.renderers.html_images import extract_images
from md2blocks.renderers.inline import render_inline, render_inline_mrkdwn, render_inline_rich_text
from md2blocks.renderers.lists import render_list, render_list_mrkdwn, render_list_rich_text
from md2blocks.renderers.tables import render_table

__all__ = [
    "dispatch",
    "extract_images",
    "parse_blocks",
    "render_blockquote",
    "render_inline",
    "render_inline_mrkdwn",
    "render_inline_rich_text",
    "render_list",
    "render_list_mrkdwn",
    "render_list_rich_text",
    "render_table",
]

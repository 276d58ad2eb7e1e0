#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/parsers/__init__.py
"""Tokenizer adapters producing the token tree."""

from md2blocks.parsers.markdown import MarkdownTokenizer, markdown_to_ast

__all__ = ["MarkdownTokenizer", "markdown_to_ast"]

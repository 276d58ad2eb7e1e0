#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/parsers/markdown.py
"""Markdown to token tree converter.

This module tokenizes markdown with the mistune parser and converts mistune's
token dictionaries into the node classes of :mod:`md2blocks.ast`, which the
block renderers consume.

"""

from __future__ import annotations

import logging
from typing import Any, Literal, Union

import mistune

from md2blocks.ast import (
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
    Text,
    ThematicBreak,
)
from md2blocks.exceptions import ParsingError, validate_options_type
from md2blocks.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)


class MarkdownTokenizer:
    r"""Convert markdown text into a token tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> tokenizer = MarkdownTokenizer()
        >>> doc = tokenizer.parse("# Hello\\n\\nThis is **bold**.")

    Without GFM tables:

        >>> tokenizer = MarkdownTokenizer(MarkdownParserOptions(parse_tables=False))

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the tokenizer with options."""
        validate_options_type(options, MarkdownParserOptions, "markdown")
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_task_lists:
            plugins.append("task_lists")

        # renderer=None makes mistune return its token stream
        self._markdown = mistune.create_markdown(plugins=plugins, renderer=None)

    def parse(self, input_data: Union[str, bytes]) -> Document:
        """Parse markdown input into a Document.

        Parameters
        ----------
        input_data : str or bytes
            Markdown text, or UTF-8 encoded markdown bytes

        Returns
        -------
        Document
            Root node holding the top-level block nodes

        Raises
        ------
        ParsingError
            If bytes input is not valid UTF-8 or the input is not text

        """
        markdown_content = self._load_text_content(input_data)

        tokens, _state = self._markdown.parse(markdown_content)
        if not isinstance(tokens, list):
            # Only happens if a renderer is configured
            logger.warning("Unexpected mistune output of type %s", type(tokens).__name__)
            tokens = []

        return Document(children=self._process_tokens(tokens))

    @staticmethod
    def _load_text_content(input_data: Union[str, bytes]) -> str:
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, bytes):
            try:
                return input_data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParsingError("Markdown input is not valid UTF-8", original_error=e) from e
        raise ParsingError(f"Markdown input must be str or bytes, got {type(input_data).__name__}")

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into nodes."""
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single mistune block token.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting node, or None for tokens without a node form

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))

        if token_type != "blank_line":
            logger.debug("Ignoring mistune token of type %r", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1

        # Ensure level is valid (1-6)
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        children = token.get("children", [])
        content = self._process_inline_tokens(children) if isinstance(children, list) else []

        return Heading(level=level, content=content)

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        The fence body always ends with a newline in mistune's output; it is
        removed so renderers can place their own fences.

        """
        code_content = token.get("raw", "")
        if code_content.endswith("\n"):
            code_content = code_content[:-1]

        attrs = token.get("attrs", {})
        info_string = (attrs.get("info") or "").strip()
        language = info_string.split(maxsplit=1)[0] if info_string else None

        metadata: dict[str, Any] = {"info_string": info_string} if info_string else {}
        return CodeBlock(content=code_content, language=language, metadata=metadata)

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs", {})
        # Guard against attrs not being a dict
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = attrs.get("ordered", False)
        start = attrs.get("start", 1)

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        items = [self._process_list_item(child) for child in children if isinstance(child, dict)]

        return List(ordered=ordered, items=items, start=start)

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        content = self._process_tokens(token.get("children", []))

        # task_list_item tokens carry the checkbox state
        task_status: Literal["checked", "unchecked"] | None = None
        attrs = token.get("attrs", {})
        if isinstance(attrs, dict) and "checked" in attrs:
            task_status = "checked" if attrs["checked"] else "unchecked"

        return ListItem(children=content, task_status=task_status)

    def _process_table(self, token: dict[str, Any]) -> Table:
        header = None
        rows = []

        for row_token in token.get("children", []):
            row_type = row_token.get("type", "")
            if row_type == "table_head":
                # Header cells are direct children of table_head
                header = TableRow(cells=self._process_table_row_cells(row_token), is_header=True)
            elif row_type == "table_body":
                for body_row_token in row_token.get("children", []):
                    rows.append(TableRow(cells=self._process_table_row_cells(body_row_token)))

        return Table(header=header, rows=rows)

    def _process_table_row_cells(self, row_token: dict[str, Any]) -> list[TableCell]:
        cells = []

        for cell_token in row_token.get("children", []):
            if cell_token.get("type") != "table_cell":
                continue
            content = self._process_inline_tokens(cell_token.get("children", []))
            alignment = cell_token.get("attrs", {}).get("align", None)
            cells.append(TableCell(content=content, alignment=alignment))

        return cells

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens, merging adjacent text runs.

        Mistune emits separate text tokens around delimiters it failed to
        match, and a softbreak token for each newline inside a paragraph.
        Both are joined into the surrounding text so each run of plain text,
        source newlines included, is one Text node.

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_inline_token(token)
            if node is None:
                continue
            if isinstance(node, Text) and nodes and isinstance(nodes[-1], Text):
                nodes[-1] = Text(content=nodes[-1].content + node.content)
            else:
                nodes.append(node)

        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(content=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        children = token.get("children", [])
        if not isinstance(children, list):
            children = []
        return Link(url=attrs.get("url", ""), content=self._process_inline_tokens(children), title=attrs.get("title"))

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        # Alt text is in children, not attrs
        children = token.get("children", [])
        alt_text = ""
        if isinstance(children, list):
            alt_text = "".join(
                child.get("raw", "") for child in children if isinstance(child, dict) and child.get("type") == "text"
            )
        return Image(url=attrs.get("url", ""), alt_text=alt_text, title=attrs.get("title"))

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> Text:
        return Text(content="\n")

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        return HTMLInline(content=token.get("raw", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "strikethrough": self._handle_strikethrough_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        logger.debug("Ignoring inline mistune token of type %r", token_type)
        return None


def markdown_to_ast(markdown_content: Union[str, bytes], options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert a markdown string to a token tree.

    Parameters
    ----------
    markdown_content : str or bytes
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        Root node

    Examples
    --------
    >>> from md2blocks.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownTokenizer(options).parse(markdown_content)

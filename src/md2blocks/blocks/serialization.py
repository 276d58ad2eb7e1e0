#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/blocks/serialization.py
"""JSON serialization for output blocks.

Converts block dataclasses into the dictionaries expected by the chat API's
``blocks`` array.

Examples
--------
    >>> from md2blocks.blocks import header, section
    >>> blocks_to_dicts([header("Title"), section("*hi*")])
    [{'type': 'header', 'text': {'type': 'plain_text', 'text': 'Title'}}, {'type': 'section', 'text': {'type': 'mrkdwn', 'text': '*hi*'}, 'expand': True}]

"""

from __future__ import annotations

import json
from typing import Any, Callable, Iterable, Union

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
    RichTextText,
    SectionBlock,
)
from md2blocks.constants import TextObjectType

Serializable = Union[Block, RichTextElement, RichTextLeaf]


def _text_object(text_type: TextObjectType, text: str) -> dict[str, Any]:
    return {"type": text_type, "text": text}


def _serialize_section(block: SectionBlock) -> dict[str, Any]:
    return {"type": block.type, "text": _text_object("mrkdwn", block.text), "expand": block.expand}


def _serialize_header(block: HeaderBlock) -> dict[str, Any]:
    return {"type": block.type, "text": _text_object("plain_text", block.text)}


def _serialize_divider(block: DividerBlock) -> dict[str, Any]:
    return {"type": block.type}


def _serialize_image(block: ImageBlock) -> dict[str, Any]:
    result: dict[str, Any] = {"type": block.type, "image_url": block.image_url, "alt_text": block.alt_text}
    if block.title is not None:
        result["title"] = _text_object("plain_text", block.title)
    return result


def _serialize_rich_text(block: RichTextBlock) -> dict[str, Any]:
    return {"type": block.type, "elements": [block_to_dict(element) for element in block.elements]}


def _serialize_rich_text_section(element: RichTextSection) -> dict[str, Any]:
    return {"type": element.type, "elements": [block_to_dict(leaf) for leaf in element.elements]}


def _serialize_rich_text_list(element: RichTextList) -> dict[str, Any]:
    return {
        "type": element.type,
        "style": element.style,
        "indent": element.indent,
        "border": element.border,
        "elements": [block_to_dict(child) for child in element.elements],
    }


def _serialize_rich_text_text(leaf: RichTextText) -> dict[str, Any]:
    result: dict[str, Any] = {"type": leaf.type, "text": leaf.text}
    # Only set flags are sent
    style = {name: True for name in ("bold", "italic", "strike", "code") if getattr(leaf.style, name)}
    if style:
        result["style"] = style
    return result


def _serialize_rich_text_link(leaf: RichTextLink) -> dict[str, Any]:
    result: dict[str, Any] = {"type": leaf.type, "url": leaf.url}
    if leaf.text:
        result["text"] = leaf.text
    return result


_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    SectionBlock: _serialize_section,
    HeaderBlock: _serialize_header,
    DividerBlock: _serialize_divider,
    ImageBlock: _serialize_image,
    RichTextBlock: _serialize_rich_text,
    RichTextSection: _serialize_rich_text_section,
    RichTextList: _serialize_rich_text_list,
    RichTextText: _serialize_rich_text_text,
    RichTextLink: _serialize_rich_text_link,
}


def block_to_dict(block: Serializable) -> dict[str, Any]:
    """Convert a block or rich text element to its API dictionary.

    Parameters
    ----------
    block : Block, RichTextElement or RichTextLeaf
        The object to convert

    Returns
    -------
    dict
        JSON-ready dictionary

    Raises
    ------
    ValueError
        If the object is not a known block type

    """
    block_class = type(block)
    serializer = _SERIALIZATION_DISPATCH.get(block_class)
    if serializer:
        return serializer(block)

    raise ValueError(f"Unknown block type for serialization: {block_class.__name__}")


def blocks_to_dicts(blocks: Iterable[Block]) -> list[dict[str, Any]]:
    """Convert a block sequence to a list of API dictionaries."""
    return [block_to_dict(block) for block in blocks]


def blocks_to_json(blocks: Iterable[Block], indent: int | None = None) -> str:
    """Serialize a block sequence to a JSON array string.

    Parameters
    ----------
    blocks : iterable of Block
        Blocks to serialize
    indent : int or None, default = None
        JSON indentation level

    Returns
    -------
    str
        JSON array of block objects

    """
    # Use ensure_ascii=False to preserve Unicode characters (bullets etc.)
    return json.dumps(blocks_to_dicts(blocks), indent=indent, ensure_ascii=False)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/renderers/html_images.py
"""Image extraction from raw HTML fragments.

Raw HTML is never rendered; the only thing taken from it is ``<img>`` tags
at the top level of the fragment, which become image blocks. Parsing uses
BeautifulSoup, which tolerates malformed markup.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from md2blocks.ast.nodes import HTMLBlock
from md2blocks.blocks.factory import image
from md2blocks.blocks.models import ImageBlock
from md2blocks.constants import DEFAULT_HTML_PARSER

logger = logging.getLogger(__name__)


def _attribute(tag: Tag, name: str) -> str:
    value = tag.get(name)
    if isinstance(value, list):
        # Multi-valued attributes (class, rel) come back as lists
        return " ".join(value)
    return value or ""


def extract_images(html: str) -> list[ImageBlock]:
    """Build one image block per top-level ``<img>`` element in ``html``.

    Parameters
    ----------
    html : str
        Raw HTML fragment

    Returns
    -------
    list of ImageBlock
        Images in document order; ``alt`` falls back to ``src``. Tags without
        a ``src`` are skipped. Markup without images gives an empty list.

    """
    soup = BeautifulSoup(html, DEFAULT_HTML_PARSER)

    blocks: list[ImageBlock] = []
    for tag in soup.find_all("img", recursive=False):
        src = _attribute(tag, "src")
        if not src:
            logger.debug("Skipping <img> without src attribute")
            continue
        blocks.append(image(src, _attribute(tag, "alt") or src))
    return blocks


def render_html(node: HTMLBlock) -> list[ImageBlock]:
    """Render a raw HTML block to the image blocks it contains."""
    return extract_images(node.content)

"""Pytest configuration and shared fixtures for the md2blocks test suite."""

import pytest
from utils import bullet_list, text_item

from md2blocks.ast import Emphasis, Image, List, Strong, Text


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - markdown through the full pipeline")


@pytest.fixture
def text_image_text() -> list:
    """Provide phrasing content with an image between two text runs.

    Returns
    -------
    list
        ``text-a``, an image, ``text-b``

    """
    return [
        Text(content="text-a "),
        Image(url="https://example.com/cat.png", alt_text="a cat"),
        Text(content="text-b"),
    ]


@pytest.fixture
def nested_bullet_list() -> List:
    """Provide a bullet list whose first item holds a nested bullet list.

    Returns
    -------
    List
        ``- parent`` with ``- child one`` and ``- child two`` beneath it,
        followed by ``- sibling``

    """
    nested = bullet_list(text_item("child one"), text_item("child two"))
    return bullet_list(text_item("parent", nested=nested), text_item("sibling"))


@pytest.fixture
def styled_content() -> list:
    """Provide ``**Bold text** with _italic_`` as phrasing nodes."""
    return [
        Strong(content=[Text(content="Bold text")]),
        Text(content=" with "),
        Emphasis(content=[Text(content="italic")]),
    ]

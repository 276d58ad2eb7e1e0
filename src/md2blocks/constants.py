#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2blocks.

Constants are organized by category:
1. Type Definitions - Literal types shared by the block model
2. Block Field Limits - Length caps enforced by the block constructors
3. Rendering Defaults - Markers and prefixes used by the renderers
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

RichTextListStyle = Literal["ordered", "bullet"]
TextObjectType = Literal["mrkdwn", "plain_text"]

# =============================================================================
# Block Field Limits
# =============================================================================

MAX_TEXT_LENGTH = 3000
MAX_HEADER_LENGTH = 150
MAX_IMAGE_TITLE_LENGTH = 2000
MAX_IMAGE_ALT_TEXT_LENGTH = 2000

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_BULLET_PREFIX = "• "
NESTED_LIST_INDENT = "  "
QUOTE_PREFIX = "> "
CODE_FENCE = "```"
TABLE_SEPARATOR_CELL = "---"
DEFAULT_IMAGE_PLACEHOLDER = "image"

# BeautifulSoup parser backend used for raw HTML fragments
DEFAULT_HTML_PARSER = "html.parser"

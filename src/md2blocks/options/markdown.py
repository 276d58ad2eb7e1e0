#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options for tokenizing markdown with mistune."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2blocks.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class MarkdownParserOptions(CloneFrozenMixin):
    """Configuration options for markdown tokenization.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_task_lists : bool, default True
        Whether to parse task list checkboxes (- [ ] and - [x]).

    """

    parse_tables: bool = field(
        default=True,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=True,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "importance": "core"},
    )
    parse_task_lists: bool = field(
        default=True,
        metadata={"help": "Parse task list checkboxes (- [ ] and - [x])", "importance": "core"},
    )

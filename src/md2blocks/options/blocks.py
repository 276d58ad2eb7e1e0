#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options controlling how a token tree is rendered into blocks.

Examples
--------
Render every paragraph and list as rich text:

    >>> options = BlocksOptions(use_rich_text=True)

Keep mrkdwn paragraphs but use rich-text lists with custom checkboxes:

    >>> options = BlocksOptions(
    ...     lists=ListOptions(use_rich_text=True, checkbox_prefix=lambda checked: "[x] " if checked else "[ ] ")
    ... )

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from md2blocks.options.base import CloneFrozenMixin

CheckboxPrefix = Callable[[bool], Optional[str]]


@dataclass(frozen=True)
class ListOptions(CloneFrozenMixin):
    """Configuration for list rendering.

    Parameters
    ----------
    use_rich_text : bool, default False
        Render lists as ``rich_text`` blocks of flattened ``rich_text_list``
        nodes instead of a single mrkdwn section.
    checkbox_prefix : callable or None, default None
        Called with the checked state of a task list item to produce its line
        prefix in mrkdwn mode. A returned string is used as given; when the
        callback returns None, or no callback is set, task items use the plain
        bullet prefix.

    """

    use_rich_text: bool = field(
        default=False,
        metadata={"help": "Render lists as rich_text blocks instead of mrkdwn sections", "importance": "core"},
    )
    checkbox_prefix: Optional[CheckboxPrefix] = field(
        default=None,
        metadata={"help": "Callable producing the line prefix for task list items", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the checkbox prefix callback.

        Raises
        ------
        ValueError
            If checkbox_prefix is set but not callable.

        """
        if self.checkbox_prefix is not None and not callable(self.checkbox_prefix):
            raise ValueError(f"checkbox_prefix must be callable, got {type(self.checkbox_prefix).__name__}")


@dataclass(frozen=True)
class BlocksOptions(CloneFrozenMixin):
    """Configuration for converting a token tree into blocks.

    Parameters
    ----------
    use_rich_text : bool, default False
        Render paragraphs as ``rich_text`` blocks and force rich-text lists.
        When False, list rendering defers to ``lists.use_rich_text``.
    lists : ListOptions
        List-specific rendering options

    """

    use_rich_text: bool = field(
        default=False,
        metadata={"help": "Render paragraphs and lists as rich_text blocks", "importance": "core"},
    )
    lists: ListOptions = field(
        default_factory=ListOptions,
        metadata={"help": "List rendering options", "importance": "core"},
    )

    @property
    def lists_use_rich_text(self) -> bool:
        """Effective rich-text mode for lists (global OR list-level)."""
        return self.use_rich_text or self.lists.use_rich_text

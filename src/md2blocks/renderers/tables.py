#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/renderers/tables.py
"""Table rendering as a fenced pipe table inside one section."""

from __future__ import annotations

import logging
from typing import Sequence

from md2blocks.ast.nodes import Table, TableRow
from md2blocks.blocks.factory import section
from md2blocks.blocks.models import SectionBlock
from md2blocks.constants import CODE_FENCE, TABLE_SEPARATOR_CELL
from md2blocks.renderers.inline import cell_text

logger = logging.getLogger(__name__)


def _between_pipes(texts: Sequence[str]) -> str:
    return f"| {' | '.join(texts)} |"


def _row_cells(row: TableRow) -> list[str]:
    return [cell_text(cell.content) for cell in row.cells]


def table_lines(node: Table) -> list[str]:
    """Linearize a table into pipe-delimited lines.

    The first line holds the header cells, the second one ``---`` per header
    column, followed by one line per body row. A table without a header row
    promotes its first body row.

    """
    rows = list(node.rows)
    header = node.header
    if header is None:
        if not rows:
            return []
        logger.debug("Table has no header row, using first body row as header")
        header, rows = rows[0], rows[1:]

    header_cells = _row_cells(header)
    lines = [
        _between_pipes(header_cells),
        _between_pipes([TABLE_SEPARATOR_CELL] * len(header_cells)),
    ]
    lines.extend(_between_pipes(_row_cells(row)) for row in rows)
    return lines


def render_table(node: Table) -> SectionBlock:
    """Render a table to one section containing a fenced pipe table."""
    body = "\n".join(table_lines(node))
    return section(f"{CODE_FENCE}\n{body}\n{CODE_FENCE}")

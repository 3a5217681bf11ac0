"""Inventory (table of contents) tables listing documented components."""

from __future__ import annotations

import locale
from typing import Iterable, List, Sequence

from .constants import INVENTORY_HEADER
from .markdown import first_paragraph_of, markdown_table, sanitize_for_table
from .models import InventoryRow


class InventoryTable:
    """Accumulates component rows; rows are only sorted when rendered."""

    def __init__(self, header: Sequence[str] = INVENTORY_HEADER) -> None:
        self.header = tuple(header)
        self._rows: List[InventoryRow] = []

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> List[InventoryRow]:
        return list(self._rows)

    def add_row(self, component_name: str, doc_url: str, description: str) -> InventoryRow:
        """Append a row using only the first paragraph of ``description``."""
        row = InventoryRow(
            name=f"[{component_name}]({doc_url})",
            target=doc_url,
            description=sanitize_for_table(first_paragraph_of(description or "")),
        )
        self._rows.append(row)
        return row

    def sorted_rows(self) -> List[List[str]]:
        """Return the header followed by rows ordered by their first column."""
        body = sorted(
            ([row.name, row.description] for row in self._rows),
            key=lambda cells: locale.strxfrm(cells[0]),
        )
        return [list(self.header), *body]

    def render(self, extra_rows: Iterable[Sequence[str]] = ()) -> str:
        """Render the sorted table; ``extra_rows`` are appended after sorting."""
        rows = self.sorted_rows()
        rows.extend(list(row) for row in extra_rows)
        return markdown_table(rows)


__all__ = ["InventoryTable"]

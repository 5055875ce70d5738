"""Lookup tables browsed alongside the graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Tuple


@dataclass(frozen=True)
class AttributeTable:
    """Rows describing nodes, matched to them through ``key_column``."""

    name: str
    key_column: str
    rows: Sequence[Mapping[str, Any]]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Attribute table name cannot be empty")
        for index, row in enumerate(self.rows):
            if self.key_column not in row:
                raise ValueError(
                    f"Row {index} of table '{self.name}' is missing key "
                    f"column '{self.key_column}'"
                )

    def rows_for(self, node_id: str) -> Tuple[Mapping[str, Any], ...]:
        return tuple(
            row
            for row in self.rows
            if str(row[self.key_column]).strip() == node_id
        )

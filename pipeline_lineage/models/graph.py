"""Pipeline graph domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class NodeKind(str, Enum):
    """Category of a pipeline node."""

    CODE = "Code"
    DATA = "Data"

    @classmethod
    def parse(cls, value: str | "NodeKind") -> "NodeKind":
        """Resolve a kind from its table spelling, ignoring case."""
        if isinstance(value, NodeKind):
            return value
        lowered = (value or "").strip().lower()
        for kind in cls:
            if kind.value.lower() == lowered:
                return kind
        raise ValueError(
            f"Node kind '{value}' is not recognized. Expected one of "
            f"{', '.join(kind.value for kind in cls)}"
        )


@dataclass(frozen=True)
class Node:
    """A program or dataset participating in the pipeline."""

    id: str
    label: str = ""
    kind: NodeKind = NodeKind.DATA
    subtype: Optional[str] = None
    group: Optional[str] = None
    created_at: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Node id cannot be empty")
        if not self.label:
            object.__setattr__(self, "label", self.id)
        object.__setattr__(self, "kind", NodeKind.parse(self.kind))

    def to_dict(self) -> dict[str, Optional[str]]:
        return {
            "id": self.id,
            "label": self.label,
            "kind": self.kind.value,
            "subtype": self.subtype,
            "group": self.group,
            "created_at": self.created_at,
        }


@dataclass(frozen=True)
class Edge:
    """Directed producer -> consumer relationship between two nodes."""

    id: str
    source: str
    target: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Edge id cannot be empty")
        if not self.source or not self.target:
            raise ValueError(
                f"Edge '{self.id}' must name both of its endpoints"
            )

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "from": self.source, "to": self.target}

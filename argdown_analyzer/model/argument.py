"""Arguments: prose descriptions plus an optional reconstruction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .statement import Statement, StatementRole

if TYPE_CHECKING:
    from .relation import Relation


@dataclass(eq=False)
class Argument:
    """
    A named argument.

    descriptions collects the prose following each definition or reference;
    pcs is the premise-conclusion structure in document order.
    """

    title: str
    descriptions: list[Statement] = field(default_factory=list)
    pcs: list[Statement] = field(default_factory=list)
    relations: list["Relation"] = field(default_factory=list)

    @property
    def premises(self) -> list[Statement]:
        return [s for s in self.pcs if s.role == StatementRole.PREMISE]

    @property
    def conclusions(self) -> list[Statement]:
        return [s for s in self.pcs if s.role == StatementRole.CONCLUSION]

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "descriptions": [d.to_dict() for d in self.descriptions],
            "pcs": [s.to_dict() for s in self.pcs],
            "relations": [r.to_dict() for r in self.relations],
        }

    def __repr__(self) -> str:
        return f"Argument({self.title!r}, pcs={len(self.pcs)})"

"""Equivalence classes of statements sharing a title."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .statement import Statement

if TYPE_CHECKING:
    from .relation import Relation


@dataclass(eq=False)
class EquivalenceClass:
    """
    All occurrences of one proposition, keyed by their shared title.

    Compared by identity: two classes are only ever equal if they are the
    same registry entry.
    """

    title: str
    members: list[Statement] = field(default_factory=list)
    is_used_as_thesis: bool = False
    is_used_in_argument: bool = False
    relations: list["Relation"] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "members": [m.to_dict() for m in self.members],
            "is_used_as_thesis": self.is_used_as_thesis,
            "is_used_in_argument": self.is_used_in_argument,
            "relations": [r.to_dict() for r in self.relations],
        }

    def __repr__(self) -> str:
        return f"EquivalenceClass({self.title!r}, members={len(self.members)})"

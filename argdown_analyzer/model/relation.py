"""Support and attack relations between statements and arguments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional, Union

from .argument import Argument
from .equivalence_class import EquivalenceClass

RelationNode = Union[EquivalenceClass, Argument]


class RelationType(str, Enum):
    """Polarity of a relation."""

    SUPPORT = "support"
    ATTACK = "attack"


class RelationSide(Enum):
    """Which endpoint of a relation a builder already holds."""

    FROM = auto()
    TO = auto()


def _node_summary(node: RelationNode) -> dict[str, str]:
    kind = "argument" if isinstance(node, Argument) else "statement"
    return {"title": node.title, "kind": kind}


@dataclass(eq=False)
class Relation:
    """
    A directed edge of the relation graph.

    The same Relation object is stored in both endpoints' relations lists.
    Parallel edges are kept as separate objects.
    """

    type: RelationType
    from_: RelationNode
    to: RelationNode

    def attach(self) -> None:
        """Register the relation with both of its endpoints."""
        self.from_.relations.append(self)
        self.to.relations.append(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "from": _node_summary(self.from_),
            "to": _node_summary(self.to),
        }

    def __repr__(self) -> str:
        return f"Relation({self.from_.title!r} -{self.type.value}-> {self.to.title!r})"


@dataclass
class RelationBuilder:
    """
    A relation whose endpoints are fixed in two steps.

    The relations block fixes one endpoint when the relation node is entered;
    the node's content fills the pending endpoint on exit.
    """

    type: RelationType
    fixed: Optional[RelationNode]
    fixed_side: RelationSide

    def complete(self, pending: Optional[RelationNode]) -> Optional[Relation]:
        """Build the relation, or None when either endpoint is missing."""
        if self.fixed is None or pending is None:
            return None
        if self.fixed_side == RelationSide.FROM:
            return Relation(type=self.type, from_=self.fixed, to=pending)
        return Relation(type=self.type, from_=pending, to=self.fixed)

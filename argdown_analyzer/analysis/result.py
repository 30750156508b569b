"""Analysis result types."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from ..model import Argument, EquivalenceClass, Relation
    from .trace import TraceEvent

logger = logging.getLogger(__name__)


@dataclass
class AnalysisStats:
    """Statistics from one traversal."""

    nodes_visited: int = 0
    handler_calls: int = 0
    generated_titles: int = 0
    relations: int = 0
    elapsed_ms: int = 0


@dataclass
class AnalysisResult:
    """Final, fully linked document model."""

    statements: dict[str, "EquivalenceClass"] = field(default_factory=dict)
    arguments: dict[str, "Argument"] = field(default_factory=dict)
    trace: list["TraceEvent"] = field(default_factory=list)
    stats: AnalysisStats = field(default_factory=AnalysisStats)

    def relations(self) -> Iterator["Relation"]:
        """Yield every relation once, from the node it starts at."""
        seen: set[int] = set()
        for node in [*self.statements.values(), *self.arguments.values()]:
            for relation in node.relations:
                if relation.from_ is node and id(relation) not in seen:
                    seen.add(id(relation))
                    yield relation

    def log_relations(self, target: Optional[logging.Logger] = None) -> None:
        """Write one log line per relation."""
        target = target or logger
        for relation in self.relations():
            target.info(
                f"Relation from: {relation.from_.title} to: {relation.to.title} "
                f"type: {relation.type.value}"
            )

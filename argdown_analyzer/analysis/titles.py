"""Title generation and symbol resolution."""

from __future__ import annotations

import logging
from typing import Optional, Union

from ..model import Argument, EquivalenceClass, Statement
from ..model.relation import RelationNode

logger = logging.getLogger(__name__)

DEFAULT_UNTITLED_PREFIX = "Untitled"


class TitleRegistry:
    """
    Owns the statement and argument registries of one document run.

    Generated titles come from a monotonic counter that is never reset
    within a run, so they are unique and ordered.
    """

    def __init__(self, untitled_prefix: str = DEFAULT_UNTITLED_PREFIX) -> None:
        self.untitled_prefix = untitled_prefix
        self.statements: dict[str, EquivalenceClass] = {}
        self.arguments: dict[str, Argument] = {}
        self._counter = 0

    @property
    def generated_count(self) -> int:
        """Number of titles generated so far."""
        return self._counter

    def next_unique_title(self) -> str:
        """Return the next anonymous title ("Untitled 1", "Untitled 2", ...)."""
        self._counter += 1
        title = f"{self.untitled_prefix} {self._counter}"
        logger.debug(f"Generated title {title!r}")
        return title

    def resolve_equivalence_class(self, title: Optional[str]) -> Optional[EquivalenceClass]:
        """Get or lazily create the class for a title. None for empty titles."""
        if not title:
            return None

        equivalence_class = self.statements.get(title)
        if equivalence_class is None:
            equivalence_class = EquivalenceClass(title=title)
            self.statements[title] = equivalence_class
        return equivalence_class

    def resolve_relation_target(
        self, node: Optional[Union[Statement, Argument]]
    ) -> Optional[RelationNode]:
        """
        Map a statement or argument to its node in the relation graph.

        Arguments are their own node. Statements are collapsed into their
        equivalence class, receiving a generated title first if needed.
        """
        if node is None or isinstance(node, Argument):
            return node
        if not node.title:
            node.title = self.next_unique_title()
        return self.resolve_equivalence_class(node.title)

"""Traversal context - the mutable state of one document run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from ..model import Argument, EquivalenceClass, Inference, Range, RelationBuilder, Statement
from ..model.relation import RelationNode
from ..tree.node import ParseNode
from .titles import DEFAULT_UNTITLED_PREFIX, TitleRegistry


@dataclass
class NodeVisit:
    """A node together with its position in the parent's children."""

    node: ParseNode
    parent: Optional[ParseNode] = None
    index: int = 0
    depth: int = 0

    def preceding_sibling(self, distance: int = 1) -> Optional[ParseNode]:
        """Return the sibling `distance` places before this node, if any."""
        if self.parent is None or self.index - distance < 0:
            return None
        return self.parent.children[self.index - distance]


@dataclass
class TraversalContext:
    """
    Mutable state passed to every handler.

    Handlers READ and MUTATE the "current" pointers and stacks directly.
    Statements and arguments are registered in `titles` and collected at the
    end of the run. One context serves exactly one document.
    """

    titles: TitleRegistry = field(default_factory=TitleRegistry)

    # --- Open entities ---
    current_statement: Optional[Statement] = None
    current_statement_or_argument: Optional[Union[Statement, Argument]] = None
    current_argument: Optional[Argument] = None
    current_reconstruction: Optional[Argument] = None
    current_inference: Optional[Inference] = None

    # --- Nesting stacks ---
    range_stack: list[Optional[Range]] = field(default_factory=list)
    attachment_stack: list[Optional[RelationNode]] = field(default_factory=list)
    relation_stack: list[RelationBuilder] = field(default_factory=list)

    # --- Bookkeeping ---
    relation_count: int = 0

    @classmethod
    def fresh(cls, untitled_prefix: str = DEFAULT_UNTITLED_PREFIX) -> TraversalContext:
        """Factory for a context with empty registries."""
        return cls(titles=TitleRegistry(untitled_prefix))

    @property
    def statements(self) -> dict[str, EquivalenceClass]:
        return self.titles.statements

    @property
    def arguments(self) -> dict[str, Argument]:
        return self.titles.arguments

    @property
    def current_relation(self) -> Optional[RelationBuilder]:
        """The innermost relation still waiting for its content."""
        return self.relation_stack[-1] if self.relation_stack else None

    def reset(self) -> None:
        """Clear registries, pointers and stacks, restarting the title counter."""
        self.titles = TitleRegistry(self.titles.untitled_prefix)
        self.current_statement = None
        self.current_statement_or_argument = None
        self.current_argument = None
        self.current_reconstruction = None
        self.current_inference = None
        self.range_stack = []
        self.attachment_stack = []
        self.relation_stack = []
        self.relation_count = 0

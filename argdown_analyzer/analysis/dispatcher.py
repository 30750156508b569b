"""Traversal dispatcher - routes every node visit to its handler."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..tree.node import NodeKind
from . import handlers  # noqa: F401 - triggers handler registration
from .context import NodeVisit, TraversalContext
from .registry import Phase, get_handler
from .result import AnalysisResult, AnalysisStats
from .titles import DEFAULT_UNTITLED_PREFIX
from .trace import TraceRecorder

if TYPE_CHECKING:
    from ..tree.node import ParseNode
    from ..utils.config import ConfigManager


@dataclass
class AnalyzerConfig:
    """Configuration for the analysis pass."""

    untitled_prefix: str = DEFAULT_UNTITLED_PREFIX
    include_trace: bool = False

    @classmethod
    def from_manager(cls, manager: "ConfigManager") -> AnalyzerConfig:
        return cls(
            untitled_prefix=manager.get("titles.untitled_prefix", DEFAULT_UNTITLED_PREFIX),
            include_trace=bool(manager.get("trace.enabled", False)),
        )


class ArgdownAnalyzer:
    """
    Single-pass semantic analysis of an Argdown parse tree.

    External drivers call enter() and exit() in depth-first order and receive
    the result from exit() on the document root; run() performs the whole
    traversal itself. Each document starts from a fresh context, so an
    analyzer may be reused sequentially but not concurrently.
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None) -> None:
        self.config = config or AnalyzerConfig()
        self.trace = TraceRecorder()

        # Execution state (reset on each document)
        self.context = TraversalContext.fresh(self.config.untitled_prefix)
        self.nodes_visited = 0
        self.handler_calls = 0
        self._started_ms = int(time.time() * 1000)

    def run(self, root: "ParseNode") -> AnalysisResult:
        """
        Analyze a complete document.

        Args:
            root: documentRoot node of the parse tree (mutated in place)

        Returns:
            AnalysisResult with the statement and argument registries
        """
        self.reset()
        self.walk(root)
        return self.result()

    def reset(self) -> None:
        """Discard all state from a previous document."""
        self.context = TraversalContext.fresh(self.config.untitled_prefix)
        self.nodes_visited = 0
        self.handler_calls = 0
        self.trace.clear()
        self._started_ms = int(time.time() * 1000)

    def walk(
        self,
        node: "ParseNode",
        parent: Optional["ParseNode"] = None,
        index: int = 0,
        depth: int = 0,
    ) -> None:
        """Visit a subtree: entry, children in order, exit."""
        self.enter(node, parent, index, depth)
        for child_index, child in enumerate(node.children):
            self.walk(child, node, child_index, depth + 1)
        self.exit(node, parent, index, depth)

    def enter(
        self,
        node: "ParseNode",
        parent: Optional["ParseNode"] = None,
        index: int = 0,
        depth: int = 0,
    ) -> None:
        """Entry event. Entering a document root starts a new document."""
        if node.kind is NodeKind.DOCUMENT_ROOT:
            self.reset()
        self.nodes_visited += 1
        self._dispatch(NodeVisit(node, parent, index, depth), Phase.ENTRY)

    def exit(
        self,
        node: "ParseNode",
        parent: Optional["ParseNode"] = None,
        index: int = 0,
        depth: int = 0,
    ) -> Optional[AnalysisResult]:
        """Exit event. Exiting a document root returns the finished result."""
        self._dispatch(NodeVisit(node, parent, index, depth), Phase.EXIT)
        if node.kind is NodeKind.DOCUMENT_ROOT:
            return self.result()
        return None

    def _dispatch(self, visit: NodeVisit, phase: Phase) -> None:
        handler = get_handler(visit.node.kind, phase)
        if handler is None:
            return

        if self.config.include_trace:
            self.trace.log(
                "HANDLER_INVOKED",
                {"image": visit.node.image} if visit.node.image else None,
                kind=visit.node.kind.value,
                phase=phase.value,
                handler=handler.__name__,
                depth=visit.depth,
            )

        handler(self.context, visit)
        self.handler_calls += 1

    def result(self) -> AnalysisResult:
        """Gather the registries of the current document."""
        ctx = self.context
        return AnalysisResult(
            statements=ctx.statements,
            arguments=ctx.arguments,
            trace=list(self.trace.events) if self.config.include_trace else [],
            stats=AnalysisStats(
                nodes_visited=self.nodes_visited,
                handler_calls=self.handler_calls,
                generated_titles=ctx.titles.generated_count,
                relations=ctx.relation_count,
                elapsed_ms=int(time.time() * 1000) - self._started_ms,
            ),
        )

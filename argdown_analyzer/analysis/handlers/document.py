"""Document root and heading handlers."""

from __future__ import annotations

from ...tree.node import NodeKind
from ..context import NodeVisit, TraversalContext
from ..registry import Phase, handler


@handler(NodeKind.DOCUMENT_ROOT, phase=Phase.ENTRY)
def on_document_entry(ctx: TraversalContext, visit: NodeVisit) -> None:
    ctx.reset()


@handler(NodeKind.HEADING, phase=Phase.EXIT)
def on_heading_exit(ctx: TraversalContext, visit: NodeVisit) -> None:
    """Heading level is the length of the marker; text comes from the second child."""
    node = visit.node
    if not node.children:
        return
    node.heading = len(node.children[0].image)
    if len(node.children) > 1:
        node.text = node.children[1].derived_text

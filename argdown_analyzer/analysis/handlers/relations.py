"""Relation graph builder: support and attack edges."""

from __future__ import annotations

import logging

from ...model import RelationBuilder, RelationSide, RelationType
from ...tree.node import NodeKind
from ..context import NodeVisit, TraversalContext
from ..registry import Phase, handler

logger = logging.getLogger(__name__)

# kind -> (type, endpoint fixed by the enclosing relations block)
RELATION_VARIANTS: dict[NodeKind, tuple[RelationType, RelationSide]] = {
    NodeKind.INCOMING_SUPPORT: (RelationType.SUPPORT, RelationSide.FROM),
    NodeKind.INCOMING_ATTACK: (RelationType.ATTACK, RelationSide.FROM),
    NodeKind.OUTGOING_SUPPORT: (RelationType.SUPPORT, RelationSide.TO),
    NodeKind.OUTGOING_ATTACK: (RelationType.ATTACK, RelationSide.TO),
}


@handler(NodeKind.RELATIONS, phase=Phase.ENTRY)
def on_relations_entry(ctx: TraversalContext, visit: NodeVisit) -> None:
    """
    Fix what the relations block is about.

    Resolved once, up front, so that statements parsed inside the block do
    not change the attachment point of their siblings.
    """
    target = ctx.titles.resolve_relation_target(ctx.current_statement_or_argument)
    ctx.attachment_stack.append(target)


@handler(NodeKind.RELATIONS, phase=Phase.EXIT)
def on_relations_exit(ctx: TraversalContext, visit: NodeVisit) -> None:
    if ctx.attachment_stack:
        ctx.attachment_stack.pop()


@handler(*RELATION_VARIANTS, phase=Phase.ENTRY)
def on_relation_entry(ctx: TraversalContext, visit: NodeVisit) -> None:
    relation_type, fixed_side = RELATION_VARIANTS[visit.node.kind]
    anchor = ctx.attachment_stack[-1] if ctx.attachment_stack else None
    ctx.relation_stack.append(
        RelationBuilder(type=relation_type, fixed=anchor, fixed_side=fixed_side)
    )


@handler(*RELATION_VARIANTS, phase=Phase.EXIT)
def on_relation_exit(ctx: TraversalContext, visit: NodeVisit) -> None:
    """Fill the pending endpoint from the relation's content and attach it."""
    node = visit.node
    if not ctx.relation_stack:
        return
    builder = ctx.relation_stack.pop()

    # First child is the relation marker ("+", "->", ...)
    content = node.children[1] if len(node.children) > 1 else None
    target = None
    if content is not None:
        target = ctx.titles.resolve_relation_target(content.argument or content.statement)

    relation = builder.complete(target)
    if relation is None:
        logger.debug(f"Dropping {node.kind.value} relation with an unresolved endpoint")
        return

    relation.attach()
    node.relation = relation
    ctx.relation_count += 1

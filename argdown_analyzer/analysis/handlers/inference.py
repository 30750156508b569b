"""Inference rules and metadata between premises and conclusions."""

from __future__ import annotations

from ...model import Inference
from ...tree.node import NodeKind
from ..context import NodeVisit, TraversalContext
from ..registry import Phase, handler


@handler(NodeKind.INFERENCE, phase=Phase.ENTRY)
def on_inference_entry(ctx: TraversalContext, visit: NodeVisit) -> None:
    ctx.current_inference = Inference()
    visit.node.inference = ctx.current_inference


@handler(NodeKind.INFERENCE_RULES, phase=Phase.EXIT)
def on_inference_rules_exit(ctx: TraversalContext, visit: NodeVisit) -> None:
    if ctx.current_inference is None:
        return
    for child in visit.node.children:
        if child.kind == NodeKind.FREESTYLE_TEXT:
            ctx.current_inference.inference_rules.append(child.derived_text.strip())


@handler(NodeKind.METADATA_STATEMENT, phase=Phase.EXIT)
def on_metadata_statement_exit(ctx: TraversalContext, visit: NodeVisit) -> None:
    """
    First child is the key, the rest are values.

    A single value is stored as a string, several as a list. A repeated key
    replaces the earlier value.
    """
    children = visit.node.children
    if ctx.current_inference is None or not children:
        return

    key = children[0].derived_text
    values = [child.derived_text for child in children[1:]]
    ctx.current_inference.metadata[key] = values[0] if len(values) == 1 else values

"""Argument builder: definitions, references and reconstruction blocks."""

from __future__ import annotations

import logging
from typing import Optional

from ...model import Argument, Statement, StatementRole
from ...tree.node import NodeKind, ParseNode
from ..context import NodeVisit, TraversalContext
from ..patterns import match_argument_definition, match_argument_reference
from ..registry import Phase, handler

logger = logging.getLogger(__name__)

_ARGUMENT_HEADS = (NodeKind.ARGUMENT_DEFINITION, NodeKind.ARGUMENT_REFERENCE)


def resolve_or_create_argument(ctx: TraversalContext, title: str) -> Argument:
    """
    Look up an argument by title, registering it on first use.

    Every definition or reference opens a fresh description statement that
    collects the prose following it.
    """
    argument = ctx.arguments.get(title)
    if argument is None:
        argument = Argument(title=title)
        ctx.arguments[title] = argument

    description = Statement()
    argument.descriptions.append(description)

    ctx.current_argument = argument
    ctx.current_statement_or_argument = argument
    ctx.current_statement = description
    return argument


def _enter_argument_head(ctx: TraversalContext, visit: NodeVisit, title: Optional[str]) -> None:
    if title is None:
        logger.debug(f"No title in {visit.node.kind.value} image {visit.node.image!r}")
        return
    visit.node.argument = resolve_or_create_argument(ctx, title)


@handler(NodeKind.ARGUMENT_DEFINITION, phase=Phase.ENTRY)
def on_argument_definition_entry(ctx: TraversalContext, visit: NodeVisit) -> None:
    _enter_argument_head(ctx, visit, match_argument_definition(visit.node.image))


@handler(NodeKind.ARGUMENT_REFERENCE, phase=Phase.ENTRY)
def on_argument_reference_entry(ctx: TraversalContext, visit: NodeVisit) -> None:
    _enter_argument_head(ctx, visit, match_argument_reference(visit.node.image))


@handler(*_ARGUMENT_HEADS, phase=Phase.EXIT)
def on_argument_head_exit(ctx: TraversalContext, visit: NodeVisit) -> None:
    ctx.current_statement = None
    ctx.current_argument = None


def _argument_of(node: Optional[ParseNode]) -> Optional[Argument]:
    if node is not None and node.kind in _ARGUMENT_HEADS:
        return node.argument
    return None


@handler(NodeKind.ARGUMENT, phase=Phase.ENTRY)
def on_reconstruction_entry(ctx: TraversalContext, visit: NodeVisit) -> None:
    """
    Attach a reconstruction block to its argument.

    A block directly below an argument definition or reference continues
    that argument; one blank line in between is tolerated. Any other block
    gets a new anonymous argument.
    """
    preceding = visit.preceding_sibling()
    argument = _argument_of(preceding)
    if argument is None and preceding is not None and preceding.kind == NodeKind.EMPTY_LINE:
        argument = _argument_of(visit.preceding_sibling(2))

    if argument is None:
        argument = Argument(title=ctx.titles.next_unique_title())
        ctx.arguments[argument.title] = argument

    visit.node.argument = argument
    ctx.current_reconstruction = argument


@handler(NodeKind.ARGUMENT_STATEMENT, phase=Phase.EXIT)
def on_argument_statement_exit(ctx: TraversalContext, visit: NodeVisit) -> None:
    """Add one numbered premise or conclusion to the current reconstruction."""
    node = visit.node
    # First child is the "(n)" marker
    if len(node.children) < 2:
        return
    statement = node.children[1].statement
    if statement is None:
        return

    statement.role = StatementRole.PREMISE
    preceding = visit.preceding_sibling()
    if preceding is not None and preceding.kind == NodeKind.INFERENCE:
        statement.role = StatementRole.CONCLUSION
        statement.inference = preceding.inference

    equivalence_class = ctx.titles.resolve_equivalence_class(statement.title)
    if equivalence_class is not None:
        equivalence_class.is_used_in_argument = True

    node.statement = statement
    reconstruction = ctx.current_reconstruction
    if reconstruction is None:
        return
    reconstruction.pcs.append(statement)
    node.statement_nr = len(reconstruction.pcs)

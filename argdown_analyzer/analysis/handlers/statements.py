"""Statement builder: occurrences, titles and equivalence classes."""

from __future__ import annotations

import logging
from typing import Optional

from ...model import Statement, StatementRole
from ...tree.node import NodeKind
from ..context import NodeVisit, TraversalContext
from ..patterns import match_statement_definition, match_statement_reference
from ..registry import Phase, handler

logger = logging.getLogger(__name__)


@handler(NodeKind.STATEMENT, phase=Phase.ENTRY)
def on_statement_entry(ctx: TraversalContext, visit: NodeVisit) -> None:
    statement = Statement()
    if visit.parent is not None and visit.parent.kind == NodeKind.DOCUMENT_ROOT:
        statement.role = StatementRole.THESIS

    ctx.current_statement = statement
    ctx.current_statement_or_argument = statement
    visit.node.statement = statement


@handler(NodeKind.STATEMENT, phase=Phase.EXIT)
def on_statement_exit(ctx: TraversalContext, visit: NodeVisit) -> None:
    statement = visit.node.statement
    if statement is None:
        return

    if not statement.title:
        statement.title = ctx.titles.next_unique_title()

    equivalence_class = ctx.titles.resolve_equivalence_class(statement.title)
    equivalence_class.members.append(statement)
    if statement.role == StatementRole.THESIS:
        equivalence_class.is_used_as_thesis = True

    ctx.current_statement = None


def _assign_title(ctx: TraversalContext, visit: NodeVisit, title: Optional[str]) -> None:
    if title is None:
        logger.debug(f"No title in {visit.node.kind.value} image {visit.node.image!r}")
        return
    if ctx.current_statement is None:
        return
    ctx.current_statement.title = title
    visit.node.statement = ctx.current_statement


@handler(NodeKind.STATEMENT_DEFINITION, phase=Phase.ENTRY)
def on_statement_definition_entry(ctx: TraversalContext, visit: NodeVisit) -> None:
    _assign_title(ctx, visit, match_statement_definition(visit.node.image))


@handler(NodeKind.STATEMENT_REFERENCE, phase=Phase.ENTRY)
def on_statement_reference_entry(ctx: TraversalContext, visit: NodeVisit) -> None:
    _assign_title(ctx, visit, match_statement_reference(visit.node.image))

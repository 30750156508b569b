"""Range tracker: inline formatting, links, mentions and running prose."""

from __future__ import annotations

import logging
from typing import Optional

from ...model import Range, RangeType
from ...tree.node import NodeKind, ParseNode
from ..context import NodeVisit, TraversalContext
from ..patterns import (
    MentionMatch,
    match_argument_mention,
    match_link,
    match_statement_mention,
    trailing_whitespace_flag,
)
from ..registry import Phase, handler

logger = logging.getLogger(__name__)


def open_range(ctx: TraversalContext, kind: RangeType) -> Optional[Range]:
    """
    Open a nested range at the end of the current statement's text.

    The range is added to the statement immediately; its stop is set when
    it is closed. Without an open statement a placeholder keeps the stack
    balanced.
    """
    statement = ctx.current_statement
    if statement is None:
        ctx.range_stack.append(None)
        return None

    range_ = Range(type=kind, start=len(statement.text))
    ctx.range_stack.append(range_)
    statement.ranges.append(range_)
    return range_


def close_range(ctx: TraversalContext, node: ParseNode, trailing_raw: str) -> Optional[Range]:
    """Close the innermost open range, then apply the trailing-whitespace rule."""
    range_ = ctx.range_stack.pop() if ctx.range_stack else None
    statement = ctx.current_statement

    if range_ is not None and statement is not None:
        range_.stop = len(statement.text) - 1
        if range_.stop < range_.start:
            # Empty formatting spans no character.
            statement.ranges = [r for r in statement.ranges if r is not range_]
            logger.debug(f"Dropped empty {range_.type.value} range at {range_.start}")
            range_ = None

    node.trailing_whitespace = trailing_whitespace_flag(trailing_raw)
    if node.trailing_whitespace and statement is not None:
        statement.text += node.trailing_whitespace
    return range_


def _closing_image(node: ParseNode) -> str:
    return node.children[-1].image if node.children else node.image


@handler(NodeKind.BOLD, phase=Phase.ENTRY)
def on_bold_entry(ctx: TraversalContext, visit: NodeVisit) -> None:
    open_range(ctx, RangeType.BOLD)


@handler(NodeKind.ITALIC, phase=Phase.ENTRY)
def on_italic_entry(ctx: TraversalContext, visit: NodeVisit) -> None:
    open_range(ctx, RangeType.ITALIC)


@handler(NodeKind.BOLD, NodeKind.ITALIC, phase=Phase.EXIT)
def on_emphasis_exit(ctx: TraversalContext, visit: NodeVisit) -> None:
    close_range(ctx, visit.node, _closing_image(visit.node))


@handler(NodeKind.LINK, phase=Phase.ENTRY)
def on_link_entry(ctx: TraversalContext, visit: NodeVisit) -> None:
    """Links do not nest: the range opens and closes on entry."""
    node = visit.node
    match = match_link(node.image)
    if match is None:
        logger.debug(f"Unmatched link image {node.image!r}")
        return

    node.url = match.url
    node.text = match.text
    node.trailing_whitespace = match.trailing_whitespace

    statement = ctx.current_statement
    if statement is None:
        return

    start = len(statement.text)
    statement.text += match.text
    statement.ranges.append(
        Range(type=RangeType.LINK, start=start, stop=len(statement.text) - 1, url=match.url)
    )
    statement.text += match.trailing_whitespace


def _record_mention(
    ctx: TraversalContext, node: ParseNode, kind: RangeType, match: Optional[MentionMatch]
) -> None:
    if match is None:
        logger.debug(f"Unmatched mention image {node.image!r}")
        return

    node.title = match.title
    node.trailing_whitespace = match.trailing_whitespace

    statement = ctx.current_statement
    if statement is None:
        return

    # The raw image, trailing space included, is part of the statement text.
    start = len(statement.text)
    statement.text += node.image
    statement.ranges.append(
        Range(type=kind, start=start, stop=len(statement.text) - 1, title=match.title)
    )


@handler(NodeKind.STATEMENT_MENTION, phase=Phase.EXIT)
def on_statement_mention_exit(ctx: TraversalContext, visit: NodeVisit) -> None:
    _record_mention(
        ctx, visit.node, RangeType.STATEMENT_MENTION, match_statement_mention(visit.node.image)
    )


@handler(NodeKind.ARGUMENT_MENTION, phase=Phase.EXIT)
def on_argument_mention_exit(ctx: TraversalContext, visit: NodeVisit) -> None:
    _record_mention(
        ctx, visit.node, RangeType.ARGUMENT_MENTION, match_argument_mention(visit.node.image)
    )


@handler(NodeKind.FREESTYLE_TEXT, phase=Phase.ENTRY)
def on_freestyle_text_entry(ctx: TraversalContext, visit: NodeVisit) -> None:
    node = visit.node
    node.text = "".join(child.image for child in node.children)
    if ctx.current_statement is not None:
        ctx.current_statement.text += node.text

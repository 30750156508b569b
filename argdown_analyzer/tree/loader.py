"""Build parse trees from their JSON representation."""

from __future__ import annotations

import json
import logging
from typing import Any, TextIO

from .node import NodeKind, ParseNode

logger = logging.getLogger(__name__)


def node_from_dict(data: dict[str, Any]) -> ParseNode:
    """
    Convert a nested dictionary into a ParseNode tree.

    Expected shape: {"kind": str, "image": str, "children": [...]}.
    A missing kind means a lexer token.

    Raises:
        ValueError: if a node carries an unknown kind
    """
    raw_kind = data.get("kind", NodeKind.TOKEN.value)
    try:
        kind = NodeKind(raw_kind)
    except ValueError:
        raise ValueError(f"Unknown parse node kind: {raw_kind!r}") from None

    return ParseNode(
        kind=kind,
        image=data.get("image", ""),
        children=[node_from_dict(child) for child in data.get("children", [])],
    )


def load_tree(source: TextIO) -> ParseNode:
    """Read a JSON parse tree from a file object."""
    tree = node_from_dict(json.load(source))
    logger.debug(f"Loaded parse tree rooted at {tree.kind.value}")
    return tree


def node_to_dict(node: ParseNode) -> dict[str, Any]:
    """Inverse of node_from_dict; derived fields are not included."""
    data: dict[str, Any] = {"kind": node.kind.value, "image": node.image}
    if node.children:
        data["children"] = [node_to_dict(child) for child in node.children]
    return data

"""Parse tree nodes consumed by the analysis pass."""

from .node import NodeKind, ParseNode
from .loader import load_tree, node_from_dict, node_to_dict

__all__ = [
    "NodeKind",
    "ParseNode",
    "node_from_dict",
    "load_tree",
    "node_to_dict",
]

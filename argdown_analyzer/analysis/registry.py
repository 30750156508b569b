"""Handler registration and lookup, keyed by node kind and traversal phase."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from ..tree.node import NodeKind

if TYPE_CHECKING:
    from .context import NodeVisit, TraversalContext

Handler = Callable[["TraversalContext", "NodeVisit"], None]


class Phase(str, Enum):
    """When a handler fires relative to the node's children."""

    ENTRY = "entry"
    EXIT = "exit"


# Global registry: (kind, phase) -> handler
_HANDLER_REGISTRY: dict[tuple[NodeKind, Phase], Handler] = {}


def handler(*kinds: NodeKind, phase: Phase) -> Callable[[Handler], Handler]:
    """
    Decorator for handler registration.

    Usage:
        @handler(NodeKind.STATEMENT, phase=Phase.ENTRY)
        def on_statement_entry(ctx, visit): ...

    Each (kind, phase) pair has at most one handler.
    """

    def decorator(func: Handler) -> Handler:
        for kind in kinds:
            key = (kind, phase)
            if key in _HANDLER_REGISTRY:
                raise ValueError(
                    f"Handler for {kind.value} {phase.value} already registered: "
                    f"{_HANDLER_REGISTRY[key].__name__}"
                )
            _HANDLER_REGISTRY[key] = func
        return func

    return decorator


def get_handler(kind: NodeKind, phase: Phase) -> Optional[Handler]:
    """Get the handler for a node kind and phase, if one is registered."""
    return _HANDLER_REGISTRY.get((kind, phase))


def list_registered_handlers() -> list[tuple[NodeKind, Phase]]:
    """List all (kind, phase) pairs with a registered handler."""
    return list(_HANDLER_REGISTRY.keys())

"""Trace events for debugging the dispatch order."""

from __future__ import annotations

import json
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass
class TraceEvent:
    """Single trace event capturing one dispatched visit."""

    event_type: str
    timestamp_ms: int
    kind: Optional[str] = None
    phase: Optional[str] = None
    handler: Optional[str] = None
    depth: int = 0
    data: dict[str, Any] = field(default_factory=dict)


class TraceRecorder:
    """Records trace events during a traversal."""

    def __init__(self) -> None:
        self.events: list[TraceEvent] = []

    def log(
        self,
        event_type: str,
        data: Optional[dict[str, Any]] = None,
        *,
        kind: Optional[str] = None,
        phase: Optional[str] = None,
        handler: Optional[str] = None,
        depth: int = 0,
    ) -> None:
        """Log a trace event."""
        self.events.append(
            TraceEvent(
                event_type=event_type,
                timestamp_ms=int(time.time() * 1000),
                kind=kind,
                phase=phase,
                handler=handler,
                depth=depth,
                data=data or {},
            )
        )

    def clear(self) -> None:
        """Clear all recorded events."""
        self.events.clear()

    def export_json(self, indent: int = 2) -> str:
        """Export trace as JSON string."""
        return json.dumps([asdict(e) for e in self.events], indent=indent)

    def filter_by_type(self, event_type: str) -> list[TraceEvent]:
        """Get all events of a specific type."""
        return [e for e in self.events if e.event_type == event_type]

    def filter_by_kind(self, kind: str) -> list[TraceEvent]:
        """Get all events for one node kind."""
        return [e for e in self.events if e.kind == kind]

"""Semantic analysis pass over Argdown parse trees."""

from .context import NodeVisit, TraversalContext
from .dispatcher import AnalyzerConfig, ArgdownAnalyzer
from .registry import Phase, get_handler, handler, list_registered_handlers
from .result import AnalysisResult, AnalysisStats
from .titles import TitleRegistry
from .trace import TraceEvent, TraceRecorder

__all__ = [
    "NodeVisit",
    "TraversalContext",
    "AnalyzerConfig",
    "ArgdownAnalyzer",
    "Phase",
    "get_handler",
    "handler",
    "list_registered_handlers",
    "AnalysisResult",
    "AnalysisStats",
    "TitleRegistry",
    "TraceEvent",
    "TraceRecorder",
]

"""Argdown semantic analysis package."""

__version__ = "0.1.0"
__author__ = "argdown-analyzer"

from .analysis import AnalysisResult, AnalyzerConfig, ArgdownAnalyzer
from .model import (
    Argument,
    EquivalenceClass,
    Inference,
    Range,
    RangeType,
    Relation,
    RelationType,
    Statement,
    StatementRole,
)
from .tree import NodeKind, ParseNode

__all__ = [
    "AnalysisResult",
    "AnalyzerConfig",
    "ArgdownAnalyzer",
    "Argument",
    "EquivalenceClass",
    "Inference",
    "Range",
    "RangeType",
    "Relation",
    "RelationType",
    "Statement",
    "StatementRole",
    "NodeKind",
    "ParseNode",
]

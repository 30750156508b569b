"""
JSON export models for the analysis result
"""

from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .analysis.result import AnalysisResult


class ExportedRange(BaseModel):
    """An inclusive span over a statement's text"""
    type: str
    start: int
    stop: Optional[int] = None
    title: Optional[str] = None
    url: Optional[str] = None


class ExportedInference(BaseModel):
    """Inference rules and metadata leading to a conclusion"""
    inference_rules: List[str] = Field(default_factory=list)
    metadata: Dict[str, Union[str, List[str]]] = Field(default_factory=dict)


class ExportedStatement(BaseModel):
    """One statement occurrence"""
    title: Optional[str] = None
    text: str = ""
    role: str = "none"
    ranges: List[ExportedRange] = Field(default_factory=list)
    inference: Optional[ExportedInference] = None


class ExportedRelationNode(BaseModel):
    """Relation endpoint, referenced by title"""
    title: str
    kind: str = Field(description="'statement' for equivalence classes, 'argument' for arguments")


class ExportedRelation(BaseModel):
    """A support or attack edge"""
    model_config = ConfigDict(populate_by_name=True)

    type: str
    from_: ExportedRelationNode = Field(alias="from")
    to: ExportedRelationNode


class ExportedEquivalenceClass(BaseModel):
    """All occurrences of one statement title"""
    title: str
    members: List[ExportedStatement] = Field(default_factory=list)
    is_used_as_thesis: bool = False
    is_used_in_argument: bool = False
    relations: List[ExportedRelation] = Field(default_factory=list)


class ExportedArgument(BaseModel):
    """An argument with its descriptions and reconstruction"""
    title: str
    descriptions: List[ExportedStatement] = Field(default_factory=list)
    pcs: List[ExportedStatement] = Field(default_factory=list)
    relations: List[ExportedRelation] = Field(default_factory=list)


class AnalysisExport(BaseModel):
    """Complete exported document model"""
    statements: Dict[str, ExportedEquivalenceClass] = Field(default_factory=dict)
    arguments: Dict[str, ExportedArgument] = Field(default_factory=dict)
    meta: Dict[str, Any] = Field(default_factory=dict)
    trace: Optional[List[Dict[str, Any]]] = Field(default=None, description="Handler trace, when enabled")

    def model_post_init(self, __context) -> None:
        """Add metadata after initialization"""
        self.meta.setdefault("generated_at", datetime.now(timezone.utc).isoformat())
        self.meta.setdefault("statement_count", len(self.statements))
        self.meta.setdefault("argument_count", len(self.arguments))


def export_result(result: AnalysisResult, include_trace: bool = False) -> AnalysisExport:
    """Convert an analysis result into its exportable form."""
    return AnalysisExport.model_validate({
        "statements": {title: ec.to_dict() for title, ec in result.statements.items()},
        "arguments": {title: arg.to_dict() for title, arg in result.arguments.items()},
        "meta": {
            "relation_count": sum(1 for _ in result.relations()),
            "generated_titles": result.stats.generated_titles,
            "nodes_visited": result.stats.nodes_visited,
        },
        "trace": [asdict(e) for e in result.trace] if include_trace else None,
    })

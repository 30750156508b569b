"""Statement occurrences and the inferences leading to conclusions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from .range import Range

MetadataValue = Union[str, list[str]]


class StatementRole(str, Enum):
    """Role a statement occurrence plays in the document."""

    NONE = "none"
    THESIS = "thesis"
    PREMISE = "premise"
    CONCLUSION = "conclusion"


@dataclass
class Inference:
    """Inference step between premises and a conclusion."""

    inference_rules: list[str] = field(default_factory=list)
    metadata: dict[str, MetadataValue] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "inference_rules": list(self.inference_rules),
            "metadata": {
                key: list(value) if isinstance(value, list) else value
                for key, value in self.metadata.items()
            },
        }


@dataclass
class Statement:
    """
    A single occurrence of a claim in the document.

    Occurrences sharing a title are collected in one EquivalenceClass.
    inference is only set for conclusions.
    """

    title: Optional[str] = None
    text: str = ""
    ranges: list[Range] = field(default_factory=list)
    role: StatementRole = StatementRole.NONE
    inference: Optional[Inference] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "title": self.title,
            "text": self.text,
            "role": self.role.value,
            "ranges": [r.to_dict() for r in self.ranges],
        }
        if self.inference is not None:
            data["inference"] = self.inference.to_dict()
        return data

    def __repr__(self) -> str:
        return f"Statement({self.title!r}, role={self.role.value})"

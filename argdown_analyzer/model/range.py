"""Inline formatting and cross-reference spans."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class RangeType(str, Enum):
    """Kinds of spans recorded over a statement's text."""

    BOLD = "bold"
    ITALIC = "italic"
    LINK = "link"
    STATEMENT_MENTION = "statement-mention"
    ARGUMENT_MENTION = "argument-mention"


@dataclass
class Range:
    """
    An inclusive span over the owning statement's text.

    stop stays None while a bold/italic range is still open.
    """

    type: RangeType
    start: int
    stop: Optional[int] = None
    title: Optional[str] = None  # mentions only
    url: Optional[str] = None  # links only

    @property
    def is_closed(self) -> bool:
        return self.stop is not None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type.value,
            "start": self.start,
            "stop": self.stop,
        }
        if self.title is not None:
            data["title"] = self.title
        if self.url is not None:
            data["url"] = self.url
        return data

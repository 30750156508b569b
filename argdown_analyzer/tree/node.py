"""Concrete parse tree node shape produced by the Argdown grammar."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..model import Argument, Inference, Relation, Statement


class NodeKind(str, Enum):
    """Rule and token kinds emitted by the grammar."""

    DOCUMENT_ROOT = "documentRoot"
    HEADING = "heading"
    STATEMENT = "statement"
    STATEMENT_DEFINITION = "statementDefinition"
    STATEMENT_REFERENCE = "statementReference"
    STATEMENT_MENTION = "statementMention"
    ARGUMENT = "argument"
    ARGUMENT_DEFINITION = "argumentDefinition"
    ARGUMENT_REFERENCE = "argumentReference"
    ARGUMENT_MENTION = "argumentMention"
    ARGUMENT_STATEMENT = "argumentStatement"
    INFERENCE = "inference"
    INFERENCE_RULES = "inferenceRules"
    METADATA_STATEMENT = "metadataStatement"
    INCOMING_SUPPORT = "incomingSupport"
    INCOMING_ATTACK = "incomingAttack"
    OUTGOING_SUPPORT = "outgoingSupport"
    OUTGOING_ATTACK = "outgoingAttack"
    RELATIONS = "relations"
    FREESTYLE_TEXT = "freestyleText"
    BOLD = "bold"
    ITALIC = "italic"
    LINK = "link"
    EMPTY_LINE = "emptyLine"
    TOKEN = "token"  # any other lexer terminal (markers, text chunks)


@dataclass(eq=False)
class ParseNode:
    """
    A node of the concrete parse tree.

    kind, image and children come from the parser. The remaining fields are
    written by the analysis pass and read by downstream renderers.
    """

    kind: NodeKind
    image: str = ""
    children: list[ParseNode] = field(default_factory=list)

    # --- Derived by the analysis pass ---
    statement: Optional["Statement"] = None
    argument: Optional["Argument"] = None
    relation: Optional["Relation"] = None
    inference: Optional["Inference"] = None
    text: Optional[str] = None
    heading: Optional[int] = None
    title: Optional[str] = None
    trailing_whitespace: Optional[str] = None
    url: Optional[str] = None
    statement_nr: Optional[int] = None

    @classmethod
    def token(cls, image: str) -> ParseNode:
        """Create a lexer terminal."""
        return cls(kind=NodeKind.TOKEN, image=image)

    @property
    def derived_text(self) -> str:
        """Text written by the analysis pass, falling back to the raw image."""
        return self.text if self.text is not None else self.image

    def __repr__(self) -> str:
        return f"ParseNode({self.kind.value}, image={self.image!r}, children={len(self.children)})"

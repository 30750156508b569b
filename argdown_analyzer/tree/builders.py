"""
Convenience constructors for assembling parse trees by hand.

The shapes mirror what the Argdown grammar emits: rule nodes carry their
leading token as image and as first child, prose is wrapped in freestyleText
nodes made of tokens.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Union

from .node import NodeKind, ParseNode

Part = Union[str, ParseNode]


def token(image: str) -> ParseNode:
    return ParseNode.token(image)


def freestyle(text: str) -> ParseNode:
    return ParseNode(NodeKind.FREESTYLE_TEXT, image=text, children=[token(text)])


def _parts(parts: Iterable[Part]) -> list[ParseNode]:
    return [freestyle(p) if isinstance(p, str) else p for p in parts]


def document(*children: ParseNode) -> ParseNode:
    return ParseNode(NodeKind.DOCUMENT_ROOT, children=list(children))


def heading(level: int, text: str) -> ParseNode:
    return ParseNode(NodeKind.HEADING, image="#" * level, children=[token("#" * level), freestyle(text)])


def statement(*parts: Part) -> ParseNode:
    return ParseNode(NodeKind.STATEMENT, children=_parts(parts))


def statement_definition(title: str) -> ParseNode:
    return ParseNode(NodeKind.STATEMENT_DEFINITION, image=f"[{title}]:")


def statement_reference(title: str) -> ParseNode:
    return ParseNode(NodeKind.STATEMENT_REFERENCE, image=f"[{title}]")


def statement_mention(title: str, trailing: str = "") -> ParseNode:
    return ParseNode(NodeKind.STATEMENT_MENTION, image=f"@[{title}]{trailing}")


def argument_mention(title: str, trailing: str = "") -> ParseNode:
    return ParseNode(NodeKind.ARGUMENT_MENTION, image=f"@<{title}>{trailing}")


def argument_definition(title: str, *parts: Part) -> ParseNode:
    image = f"<{title}>:"
    return ParseNode(NodeKind.ARGUMENT_DEFINITION, image=image, children=[token(image), *_parts(parts)])


def argument_reference(title: str, *parts: Part) -> ParseNode:
    image = f"<{title}>"
    return ParseNode(NodeKind.ARGUMENT_REFERENCE, image=image, children=[token(image), *_parts(parts)])


def bold(*parts: Part, closing: str = "**") -> ParseNode:
    return ParseNode(NodeKind.BOLD, children=[token("**"), *_parts(parts), token(closing)])


def italic(*parts: Part, closing: str = "_") -> ParseNode:
    return ParseNode(NodeKind.ITALIC, children=[token("_"), *_parts(parts), token(closing)])


def link(text: str, url: str, trailing: str = "") -> ParseNode:
    return ParseNode(NodeKind.LINK, image=f"[{text}]({url}){trailing}")


def empty_line() -> ParseNode:
    return ParseNode(NodeKind.EMPTY_LINE, image="\n\n")


def reconstruction(*children: ParseNode) -> ParseNode:
    return ParseNode(NodeKind.ARGUMENT, children=list(children))


def argument_statement(number: int, content: ParseNode) -> ParseNode:
    marker = f"({number})"
    return ParseNode(NodeKind.ARGUMENT_STATEMENT, image=marker, children=[token(marker), content])


def metadata_statement(key: str, *values: str) -> ParseNode:
    return ParseNode(NodeKind.METADATA_STATEMENT, children=[freestyle(key), *[freestyle(v) for v in values]])


def inference(
    rules: Sequence[str] = (),
    metadata: Sequence[Sequence[str]] = (),
) -> ParseNode:
    """`-- rule1, rule2 {key: value} --`; each metadata entry is (key, *values)."""
    children = [token("--")]
    if rules:
        children.append(ParseNode(NodeKind.INFERENCE_RULES, children=[freestyle(r) for r in rules]))
    children.extend(metadata_statement(*entry) for entry in metadata)
    children.append(token("--"))
    return ParseNode(NodeKind.INFERENCE, children=children)


def relations(*children: ParseNode) -> ParseNode:
    return ParseNode(NodeKind.RELATIONS, children=list(children))


def _relation(kind: NodeKind, marker: str, content: ParseNode) -> ParseNode:
    return ParseNode(kind, image=marker, children=[token(marker), content])


def incoming_support(content: ParseNode) -> ParseNode:
    return _relation(NodeKind.INCOMING_SUPPORT, "+", content)


def incoming_attack(content: ParseNode) -> ParseNode:
    return _relation(NodeKind.INCOMING_ATTACK, "-", content)


def outgoing_support(content: ParseNode) -> ParseNode:
    return _relation(NodeKind.OUTGOING_SUPPORT, "<+", content)


def outgoing_attack(content: ParseNode) -> ParseNode:
    return _relation(NodeKind.OUTGOING_ATTACK, "<-", content)

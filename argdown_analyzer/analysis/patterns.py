"""
Literal extraction patterns.

The grammar has already matched these shapes; the functions below re-derive
titles, link targets and trailing whitespace from a node's raw image. They
return None when the image does not match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

STATEMENT_REFERENCE_PATTERN = re.compile(r"\[(.+)\]")
STATEMENT_DEFINITION_PATTERN = re.compile(r"\[(.+)\]:")
STATEMENT_MENTION_PATTERN = re.compile(r"@\[(.+)\](\s?)")
ARGUMENT_REFERENCE_PATTERN = re.compile(r"<(.+)>")
ARGUMENT_DEFINITION_PATTERN = re.compile(r"<(.+)>:")
ARGUMENT_MENTION_PATTERN = re.compile(r"@<(.+)>(\s?)")
LINK_PATTERN = re.compile(r"\[(.+)\]\((.+)\)")


@dataclass(frozen=True)
class MentionMatch:
    title: str
    trailing_whitespace: str  # " " or ""


@dataclass(frozen=True)
class LinkMatch:
    text: str
    url: str
    trailing_whitespace: str  # " " or ""


def ends_with_whitespace(raw: str) -> bool:
    """True if the last character of a raw image is whitespace."""
    return raw[-1:].isspace()


def trailing_whitespace_flag(raw: str) -> str:
    return " " if ends_with_whitespace(raw) else ""


def _first_group(pattern: re.Pattern[str], image: str) -> Optional[str]:
    match = pattern.search(image)
    return match.group(1) if match else None


def match_statement_reference(image: str) -> Optional[str]:
    """`[Title]` -> "Title"."""
    return _first_group(STATEMENT_REFERENCE_PATTERN, image)


def match_statement_definition(image: str) -> Optional[str]:
    """`[Title]:` -> "Title"."""
    return _first_group(STATEMENT_DEFINITION_PATTERN, image)


def match_argument_reference(image: str) -> Optional[str]:
    """`<Title>` -> "Title"."""
    return _first_group(ARGUMENT_REFERENCE_PATTERN, image)


def match_argument_definition(image: str) -> Optional[str]:
    """`<Title>:` -> "Title"."""
    return _first_group(ARGUMENT_DEFINITION_PATTERN, image)


def _match_mention(pattern: re.Pattern[str], image: str) -> Optional[MentionMatch]:
    match = pattern.search(image)
    if not match:
        return None
    return MentionMatch(
        title=match.group(1),
        trailing_whitespace=trailing_whitespace_flag(image),
    )


def match_statement_mention(image: str) -> Optional[MentionMatch]:
    """`@[Title]` with an optional trailing space."""
    return _match_mention(STATEMENT_MENTION_PATTERN, image)


def match_argument_mention(image: str) -> Optional[MentionMatch]:
    """`@<Title>` with an optional trailing space."""
    return _match_mention(ARGUMENT_MENTION_PATTERN, image)


def match_link(image: str) -> Optional[LinkMatch]:
    """`[text](url)` with an optional trailing space."""
    match = LINK_PATTERN.search(image)
    if not match:
        return None
    return LinkMatch(
        text=match.group(1),
        url=match.group(2),
        trailing_whitespace=trailing_whitespace_flag(image),
    )

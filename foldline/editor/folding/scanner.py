"""Per-line structural token scanner used to discover foldable blocks.

The scanner is a heuristic, not a lexer: it knows nothing about string
literals, multi-line comments or template expressions. Lines whose stripped
text starts with a comment marker are skipped entirely, and anything that
matches the markup tag grammar is treated as a tag (``a<b && c>d`` yields a
``b`` tag opener).
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Sequence

DEFAULT_COMMENT_PREFIXES: tuple[str, ...] = ("//", "/*", "*", "#")

BRACKET_PAIRS = {"{": "}", "[": "]", "(": ")"}
CLOSING_BRACKETS = {close: open_ for open_, close in BRACKET_PAIRS.items()}

# Opening tags are rejected when a "/>" occurs before the closing ">".
_TOKEN_PATTERN = re.compile(
    r"<(?P<open>[A-Za-z0-9_:-]+)(?![^>]*/>)[^>]*>"
    r"|</(?P<close>[A-Za-z0-9_:-]+)>"
    r"|(?P<bracket>[{}\[\]()])"
)


class TokenKind(Enum):
    BRACKET_OPEN = "bracket-open"
    BRACKET_CLOSE = "bracket-close"
    TAG_OPEN = "tag-open"
    TAG_CLOSE = "tag-close"

    @property
    def is_opener(self) -> bool:
        return self in (TokenKind.BRACKET_OPEN, TokenKind.TAG_OPEN)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    symbol: str
    line: int


def is_comment_line(text: str, comment_prefixes: Sequence[str] = DEFAULT_COMMENT_PREFIXES) -> bool:
    stripped = text.strip()
    return any(stripped.startswith(prefix) for prefix in comment_prefixes)


def scan_line(
    text: str,
    line: int,
    comment_prefixes: Sequence[str] = DEFAULT_COMMENT_PREFIXES,
) -> List[Token]:
    """Return the structural tokens on ``text`` in order of appearance."""

    if is_comment_line(text, comment_prefixes):
        return []

    tokens: List[Token] = []
    for match in _TOKEN_PATTERN.finditer(text):
        open_tag = match.group("open")
        close_tag = match.group("close")
        bracket = match.group("bracket")
        if open_tag:
            tokens.append(Token(TokenKind.TAG_OPEN, open_tag, line))
        elif close_tag:
            tokens.append(Token(TokenKind.TAG_CLOSE, close_tag, line))
        elif bracket in BRACKET_PAIRS:
            tokens.append(Token(TokenKind.BRACKET_OPEN, bracket, line))
        else:
            tokens.append(Token(TokenKind.BRACKET_CLOSE, bracket, line))
    return tokens


def split_lines(text: str) -> List[str]:
    return text.split("\n")


def scan_lines(
    lines: Iterable[str],
    comment_prefixes: Sequence[str] = DEFAULT_COMMENT_PREFIXES,
) -> Iterator[Token]:
    """Yield tokens for every line, numbering lines from 1."""

    for index, text in enumerate(lines, start=1):
        yield from scan_line(text, index, comment_prefixes)


def scan_text(text: str, comment_prefixes: Sequence[str] = DEFAULT_COMMENT_PREFIXES) -> Iterator[Token]:
    return scan_lines(split_lines(text), comment_prefixes)

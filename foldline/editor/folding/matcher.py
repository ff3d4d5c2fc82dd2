"""Single-pass stack matcher pairing structural openers with closers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from foldline.editor.folding.ranges import FoldRange
from foldline.editor.folding.scanner import CLOSING_BRACKETS, Token, TokenKind


@dataclass(frozen=True)
class StackEntry:
    line: int
    symbol: str


def _expected_opener(token: Token) -> str:
    if token.kind is TokenKind.BRACKET_CLOSE:
        return CLOSING_BRACKETS[token.symbol]
    return token.symbol


def match_ranges(tokens: Iterable[Token]) -> List[FoldRange]:
    """Pair tokens across the whole file and return multi-line candidate ranges.

    A closer only pops the stack when it matches the top entry; otherwise it
    is ignored in place. Openers still on the stack at the end are dropped.
    The result is in emission order and may contain several ranges per start.
    """

    stack: list[StackEntry] = []
    ranges: List[FoldRange] = []
    for token in tokens:
        if token.kind.is_opener:
            stack.append(StackEntry(token.line, token.symbol))
            continue
        if not stack or stack[-1].symbol != _expected_opener(token):
            continue
        entry = stack.pop()
        if token.line > entry.line:
            ranges.append(FoldRange(entry.line, token.line))
    return ranges

from __future__ import annotations

import pytest

from foldline.editor.folding.scanner import Token, TokenKind, is_comment_line, scan_line, scan_text


def _kinds(tokens: list[Token]) -> list[tuple[TokenKind, str]]:
    return [(token.kind, token.symbol) for token in tokens]


def test_brackets_are_reported_in_order() -> None:
    tokens = scan_line("call(a[0], {b})", 7)

    assert _kinds(tokens) == [
        (TokenKind.BRACKET_OPEN, "("),
        (TokenKind.BRACKET_OPEN, "["),
        (TokenKind.BRACKET_CLOSE, "]"),
        (TokenKind.BRACKET_OPEN, "{"),
        (TokenKind.BRACKET_CLOSE, "}"),
        (TokenKind.BRACKET_CLOSE, ")"),
    ]
    assert {token.line for token in tokens} == {7}


def test_tags_capture_names() -> None:
    tokens = scan_line('<div class="x"><my-el:part>text</my-el:part>', 1)

    assert _kinds(tokens) == [
        (TokenKind.TAG_OPEN, "div"),
        (TokenKind.TAG_OPEN, "my-el:part"),
        (TokenKind.TAG_CLOSE, "my-el:part"),
    ]


def test_self_closing_tags_produce_no_tokens() -> None:
    assert scan_line('<img src="a.png" />', 1) == []
    assert scan_line("<br/>", 1) == []


@pytest.mark.parametrize("line", ["// call() {", "# dict = {", "/* open {", " * still in a comment {", "   //x("])
def test_comment_lines_are_skipped(line: str) -> None:
    assert is_comment_line(line)
    assert scan_line(line, 3) == []


def test_custom_comment_prefixes() -> None:
    assert scan_line("-- f(", 1, comment_prefixes=("--",)) == []
    assert _kinds(scan_line("# f(", 1, comment_prefixes=("--",))) == [(TokenKind.BRACKET_OPEN, "(")]


def test_comparison_matching_tag_grammar_is_a_tag() -> None:
    tokens = scan_line("if (a<b && c>d) {", 1)

    assert (TokenKind.TAG_OPEN, "b") in _kinds(tokens)


def test_comparison_with_spaces_is_not_a_tag() -> None:
    tokens = scan_line("x = a < b > c", 1)

    assert tokens == []


def test_scan_text_numbers_lines_from_one() -> None:
    tokens = list(scan_text("a {\n\n}"))

    assert [(token.kind, token.line) for token in tokens] == [
        (TokenKind.BRACKET_OPEN, 1),
        (TokenKind.BRACKET_CLOSE, 3),
    ]

"""Helpers for fold gutter geometry and markers."""
from __future__ import annotations

from PySide6.QtCore import QRect

from foldline.editor.folding.visibility import FOLDED_MARKER_CLASS, LineDirective

EXPANDED_GLYPH = "▾"
COLLAPSED_GLYPH = "▸"


def gutter_width(line_count: int, digit_width: int, marker_width: int, show_numbers: bool = True) -> int:
    width = marker_width + 6
    if show_numbers:
        digits = max(1, len(str(max(1, line_count))))
        width += 10 + digit_width * digits
    return width


def marker_rect(area_width: int, top: int, height: int, marker_width: int) -> QRect:
    return QRect(area_width - marker_width - 4, top, marker_width, height)


def marker_glyph(directive: LineDirective | None) -> str | None:
    if directive is None or not directive.foldable:
        return None
    if directive.marker_class == FOLDED_MARKER_CLASS:
        return COLLAPSED_GLYPH
    return EXPANDED_GLYPH

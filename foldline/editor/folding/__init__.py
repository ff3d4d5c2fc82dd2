"""Structural code folding: token scanning, range matching and line visibility."""
from foldline.editor.folding.manager import FoldingManager, compute_fold_ranges
from foldline.editor.folding.matcher import StackEntry, match_ranges
from foldline.editor.folding.ranges import FoldRange, normalize_ranges
from foldline.editor.folding.scanner import Token, TokenKind, scan_line, scan_lines
from foldline.editor.folding.state import FoldState
from foldline.editor.folding.visibility import (
    LineDirective,
    LineVisibility,
    resolve_line,
    resolve_lines,
)

__all__ = [
    "FoldRange",
    "FoldState",
    "FoldingManager",
    "LineDirective",
    "LineVisibility",
    "StackEntry",
    "Token",
    "TokenKind",
    "compute_fold_ranges",
    "match_ranges",
    "normalize_ranges",
    "resolve_line",
    "resolve_lines",
    "scan_line",
    "scan_lines",
]

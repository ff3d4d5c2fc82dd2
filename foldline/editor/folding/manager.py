"""Folding manager owning fold ranges and fold state for one viewer."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from PySide6.QtCore import QObject, Signal

from foldline.core.logging import get_logger
from foldline.editor.folding.matcher import match_ranges
from foldline.editor.folding.ranges import FoldRange, normalize_ranges
from foldline.editor.folding.scanner import DEFAULT_COMMENT_PREFIXES, scan_lines, split_lines
from foldline.editor.folding.state import FoldState
from foldline.editor.folding.visibility import LineDirective, resolve_line, resolve_lines

logger = get_logger(__name__)


def compute_fold_ranges(
    text: str,
    comment_prefixes: Sequence[str] = DEFAULT_COMMENT_PREFIXES,
) -> Tuple[FoldRange, ...]:
    """Run scanner, matcher and normalizer over ``text``."""

    return normalize_ranges(match_ranges(scan_lines(split_lines(text), comment_prefixes)))


class FoldingManager(QObject):
    """Recomputes fold ranges whenever content changes and tracks collapsed blocks."""

    rangesChanged = Signal()
    foldToggled = Signal(int, bool)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        comment_prefixes: Sequence[str] | None = None,
        enabled: bool = True,
    ) -> None:
        super().__init__(parent)
        if comment_prefixes is None:
            comment_prefixes = DEFAULT_COMMENT_PREFIXES
        self.comment_prefixes = tuple(comment_prefixes)
        self.enabled = enabled
        self.state = FoldState(valid_starts=())
        self._ranges: Tuple[FoldRange, ...] = ()
        self._line_count = 0

    @property
    def ranges(self) -> Tuple[FoldRange, ...]:
        return self._ranges

    @property
    def line_count(self) -> int:
        return self._line_count

    def set_content(self, text: str | None) -> None:
        """Rerun the pipeline for new content and drop all collapsed blocks."""

        if text is None:
            ranges: Tuple[FoldRange, ...] = ()
            line_count = 0
        else:
            line_count = len(split_lines(text))
            ranges = compute_fold_ranges(text, self.comment_prefixes) if self.enabled else ()
        # Fold state must be cleared before the new ranges are published.
        self.state.reset(valid_starts=(item.start for item in ranges))
        self._ranges = ranges
        self._line_count = line_count
        logger.debug("Computed %d fold ranges over %d lines", len(ranges), line_count)
        self.rangesChanged.emit()

    def range_at(self, line: int) -> FoldRange | None:
        for item in self._ranges:
            if item.start == line:
                return item
        return None

    def toggle(self, start: int) -> bool:
        """Toggle the block starting at ``start``; unknown lines are ignored."""

        if self.range_at(start) is None:
            return False
        collapsed = self.state.toggle(start)
        self.foldToggled.emit(start, collapsed)
        return True

    def is_folded(self, start: int) -> bool:
        return self.state.is_folded(start)

    def directive(self, line: int) -> LineDirective:
        return resolve_line(line, self._ranges, self.state, self.toggle)

    def directives(self) -> List[LineDirective]:
        return resolve_lines(self._line_count, self._ranges, self.state, self.toggle)

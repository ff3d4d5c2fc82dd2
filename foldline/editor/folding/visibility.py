"""Per-line render directives derived from fold ranges and fold state."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Sequence

from foldline.editor.folding.ranges import FoldRange
from foldline.editor.folding.state import FoldState

FOLDABLE_MARKER_CLASS = "foldable-line"
FOLDED_MARKER_CLASS = "foldable-line folded"

ActivationHandler = Callable[[str], bool]


class LineVisibility(Enum):
    VISIBLE_PLAIN = "visible-plain"
    VISIBLE_FOLDABLE = "visible-foldable"
    HIDDEN = "hidden"


@dataclass(frozen=True)
class LineDirective:
    """Instructions for rendering a single line.

    ``on_activate`` is only set for foldable lines. It receives the text
    selected by the gesture that triggered it and refuses to toggle when that
    text is non-empty, so selecting across a foldable line never folds it.
    """

    line: int
    visibility: LineVisibility
    marker_class: str | None = None
    on_activate: ActivationHandler | None = None

    @property
    def hidden(self) -> bool:
        return self.visibility is LineVisibility.HIDDEN

    @property
    def foldable(self) -> bool:
        return self.visibility is LineVisibility.VISIBLE_FOLDABLE


def make_activation(start: int, toggle: Callable[[int], object]) -> ActivationHandler:
    def activate(selected_text: str = "") -> bool:
        if selected_text:
            return False
        toggle(start)
        return True

    return activate


def _foldable_directive(line: int, state: FoldState, toggle: Callable[[int], object]) -> LineDirective:
    marker = FOLDED_MARKER_CLASS if state.is_folded(line) else FOLDABLE_MARKER_CLASS
    return LineDirective(line, LineVisibility.VISIBLE_FOLDABLE, marker, make_activation(line, toggle))


def resolve_line(
    line: int,
    ranges: Sequence[FoldRange],
    state: FoldState,
    toggle: Callable[[int], object] | None = None,
) -> LineDirective:
    """Resolve one line; hidden wins over foldable, foldable over plain."""

    toggle = toggle or state.toggle
    if any(state.is_folded(item.start) and item.contains_interior(line) for item in ranges):
        return LineDirective(line, LineVisibility.HIDDEN)
    if any(item.start == line for item in ranges):
        return _foldable_directive(line, state, toggle)
    return LineDirective(line, LineVisibility.VISIBLE_PLAIN)


def hidden_lines(line_count: int, ranges: Sequence[FoldRange], state: FoldState) -> List[bool]:
    """Return a 1-indexed hidden mask (index 0 unused) covering ``line_count`` lines."""

    # Difference array over the interiors of collapsed ranges.
    depth = [0] * (line_count + 2)
    for item in ranges:
        if not state.is_folded(item.start) or item.interior_size <= 0:
            continue
        first = item.start + 1
        if first > line_count:
            continue
        depth[first] += 1
        depth[min(item.end, line_count + 1)] -= 1

    mask = [False] * (line_count + 1)
    running = 0
    for line in range(1, line_count + 1):
        running += depth[line]
        mask[line] = running > 0
    return mask


def resolve_lines(
    line_count: int,
    ranges: Sequence[FoldRange],
    state: FoldState,
    toggle: Callable[[int], object] | None = None,
) -> List[LineDirective]:
    """Resolve lines ``1..line_count`` in a single sweep."""

    toggle = toggle or state.toggle
    mask = hidden_lines(line_count, ranges, state)
    starts = {item.start for item in ranges}
    directives: List[LineDirective] = []
    for line in range(1, line_count + 1):
        if mask[line]:
            directives.append(LineDirective(line, LineVisibility.HIDDEN))
        elif line in starts:
            directives.append(_foldable_directive(line, state, toggle))
        else:
            directives.append(LineDirective(line, LineVisibility.VISIBLE_PLAIN))
    return directives

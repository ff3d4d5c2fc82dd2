"""Fold range type and normalization of matcher candidates."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True, order=True)
class FoldRange:
    """A foldable block spanning ``start``..``end`` (1-based, inclusive)."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError(f"fold range must span at least two lines, got {self.start}..{self.end}")

    def contains_interior(self, line: int) -> bool:
        """True when ``line`` lies strictly between the boundary lines."""
        return self.start < line < self.end

    @property
    def interior_size(self) -> int:
        return self.end - self.start - 1


def normalize_ranges(candidates: Iterable[FoldRange]) -> Tuple[FoldRange, ...]:
    """Keep the outermost range for each start line.

    Candidates are ordered by start ascending and end descending, so the
    first range seen for a start is the largest one beginning there. Nested
    ranges with a different start survive.
    """

    ordered = sorted(candidates, key=lambda item: (item.start, -item.end))
    kept: list[FoldRange] = []
    for candidate in ordered:
        if kept and kept[-1].start == candidate.start:
            continue
        kept.append(candidate)
    return tuple(kept)

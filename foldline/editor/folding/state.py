"""Collapsed-block bookkeeping for a single viewer."""
from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator


class FoldState:
    """Set of collapsed fold start lines with pure toggle semantics.

    When ``valid_starts`` is given, only those lines can be collapsed and a
    toggle of any other line is a no-op. Toggling the same line twice always
    restores the previous state.
    """

    def __init__(self, valid_starts: Iterable[int] | None = None) -> None:
        self._folded: set[int] = set()
        self._valid_starts: FrozenSet[int] | None = None
        if valid_starts is not None:
            self._valid_starts = frozenset(valid_starts)

    @property
    def valid_starts(self) -> FrozenSet[int] | None:
        return self._valid_starts

    def toggle(self, start: int) -> bool:
        """Flip ``start`` and return whether it is now collapsed."""

        if self._valid_starts is not None and start not in self._valid_starts:
            return False
        if start in self._folded:
            self._folded.discard(start)
            return False
        self._folded.add(start)
        return True

    def reset(self, valid_starts: Iterable[int] | None = None) -> None:
        self._folded.clear()
        if valid_starts is not None:
            self._valid_starts = frozenset(valid_starts)

    def is_folded(self, start: int) -> bool:
        return start in self._folded

    def snapshot(self) -> FrozenSet[int]:
        return frozenset(self._folded)

    def __contains__(self, start: object) -> bool:
        return start in self._folded

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._folded))

    def __len__(self) -> int:
        return len(self._folded)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FoldState):
            return self._folded == other._folded
        if isinstance(other, (set, frozenset)):
            return self._folded == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FoldState({sorted(self._folded)!r})"


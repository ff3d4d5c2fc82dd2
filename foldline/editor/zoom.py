"""Wheel and pinch zoom state machine for the source viewer."""
from __future__ import annotations

import math
from typing import Sequence, Tuple

from PySide6.QtCore import QObject, Signal

from foldline.core.logging import get_logger

logger = get_logger(__name__)

Point = Tuple[float, float]


def point_distance(points: Sequence[Point]) -> float:
    (x1, y1), (x2, y2) = points[0], points[1]
    return math.hypot(x1 - x2, y1 - y2)


class ZoomController(QObject):
    """Tracks the viewer font scale and keeps it within ``[minimum, maximum]``.

    Handlers return ``True`` when they consumed the gesture, in which case the
    caller must suppress the platform's default scrolling or panning. Single
    pointer input is never consumed so text selection keeps working.
    """

    scaleChanged = Signal(float)

    WHEEL_STEP = 1.0

    def __init__(
        self,
        initial: float = 14.0,
        minimum: float = 10.0,
        maximum: float = 32.0,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.minimum = float(minimum)
        self.maximum = float(maximum)
        self._scale = self._clamp(initial)
        self._baseline: tuple[float, float] | None = None

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def pinch_active(self) -> bool:
        return self._baseline is not None

    def _clamp(self, value: float) -> float:
        return min(max(float(value), self.minimum), self.maximum)

    def set_scale(self, value: float) -> float:
        clamped = self._clamp(value)
        if clamped != self._scale:
            self._scale = clamped
            logger.debug("Zoom scale set to %.2f", clamped)
            self.scaleChanged.emit(clamped)
        return self._scale

    # Wheel ---------------------------------------------------------------
    def handle_wheel(self, delta: float, precision: bool) -> bool:
        """Step the scale for a modifier-held wheel event.

        ``delta`` is positive when the wheel turns away from the user.
        """
        if not precision:
            return False
        if delta > 0:
            self.set_scale(self._scale + self.WHEEL_STEP)
        elif delta < 0:
            self.set_scale(self._scale - self.WHEEL_STEP)
        return True

    # Pinch ---------------------------------------------------------------
    def begin_pinch(self, points: Sequence[Point]) -> bool:
        if len(points) != 2:
            return False
        distance = point_distance(points)
        if distance <= 0:
            return False
        self._baseline = (distance, self._scale)
        return True

    def update_pinch(self, points: Sequence[Point]) -> bool:
        if len(points) < 2:
            self.end_pinch()
            return False
        if len(points) > 2:
            return False
        if self._baseline is None:
            return self.begin_pinch(points)
        baseline_distance, baseline_scale = self._baseline
        self.set_scale(baseline_scale * (point_distance(points) / baseline_distance))
        return True

    def end_pinch(self) -> None:
        self._baseline = None

    def cancel_gesture(self) -> None:
        """Forget any pinch baseline, e.g. when the viewed content changes."""
        self.end_pinch()

from __future__ import annotations

import random

import pytest

from foldline.editor.zoom import ZoomController


def test_wheel_requires_precision_modifier() -> None:
    zoom = ZoomController(initial=14)

    assert zoom.handle_wheel(120, precision=False) is False
    assert zoom.scale == 14


def test_wheel_steps_by_one() -> None:
    zoom = ZoomController(initial=14)

    assert zoom.handle_wheel(120, precision=True) is True
    assert zoom.scale == 15
    assert zoom.handle_wheel(-15, precision=True) is True
    assert zoom.handle_wheel(-480, precision=True) is True
    assert zoom.scale == 13


def test_zero_wheel_delta_is_consumed_without_change() -> None:
    zoom = ZoomController(initial=14)

    assert zoom.handle_wheel(0, precision=True) is True
    assert zoom.scale == 14


def test_initial_scale_is_clamped() -> None:
    assert ZoomController(initial=2).scale == 10
    assert ZoomController(initial=99).scale == 32


def test_pinch_scales_relative_to_baseline() -> None:
    zoom = ZoomController(initial=16)

    assert zoom.begin_pinch([(0, 0), (100, 0)]) is True
    assert zoom.update_pinch([(0, 0), (150, 0)]) is True
    assert zoom.scale == pytest.approx(24)
    assert zoom.update_pinch([(0, 0), (75, 0)]) is True
    assert zoom.scale == pytest.approx(12)


def test_pinch_rebaselines_after_end() -> None:
    zoom = ZoomController(initial=16)
    zoom.begin_pinch([(0, 0), (100, 0)])
    zoom.update_pinch([(0, 0), (125, 0)])
    zoom.end_pinch()

    assert not zoom.pinch_active
    # The first two-point update after an end records a new baseline.
    assert zoom.update_pinch([(0, 0), (10, 0)]) is True
    assert zoom.scale == pytest.approx(20)
    assert zoom.update_pinch([(0, 0), (11, 0)]) is True
    assert zoom.scale == pytest.approx(22)


def test_single_point_is_not_consumed_and_clears_baseline() -> None:
    zoom = ZoomController()
    zoom.begin_pinch([(0, 0), (50, 50)])

    assert zoom.update_pinch([(10, 10)]) is False
    assert not zoom.pinch_active


def test_three_points_are_not_consumed() -> None:
    zoom = ZoomController()
    zoom.begin_pinch([(0, 0), (50, 0)])

    assert zoom.update_pinch([(0, 0), (1, 1), (2, 2)]) is False
    assert zoom.pinch_active


def test_degenerate_baseline_is_not_recorded() -> None:
    zoom = ZoomController()

    assert zoom.begin_pinch([(5, 5), (5, 5)]) is False
    assert not zoom.pinch_active


def test_cancel_gesture_drops_baseline() -> None:
    zoom = ZoomController()
    zoom.begin_pinch([(0, 0), (40, 30)])

    zoom.cancel_gesture()

    assert not zoom.pinch_active


def test_scale_changed_emits_clamped_values() -> None:
    zoom = ZoomController(initial=31)
    emitted: list[float] = []
    zoom.scaleChanged.connect(emitted.append)

    zoom.handle_wheel(1, precision=True)
    zoom.handle_wheel(1, precision=True)
    zoom.set_scale(-5)

    assert emitted == [32.0, 10.0]


def test_random_gesture_sequences_stay_in_bounds() -> None:
    rng = random.Random(1234)
    zoom = ZoomController(initial=14)

    for _ in range(500):
        action = rng.choice(["wheel", "pinch", "end"])
        if action == "wheel":
            zoom.handle_wheel(rng.choice([-120, 120]), precision=rng.random() > 0.2)
        elif action == "pinch":
            points = [(rng.uniform(0, 500), rng.uniform(0, 500)) for _ in range(rng.choice([1, 2, 2, 3]))]
            zoom.update_pinch(points)
        else:
            zoom.end_pinch()
        assert 10 <= zoom.scale <= 32

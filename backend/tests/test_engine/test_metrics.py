"""Tests for the four metric evaluators."""

from __future__ import annotations

import numpy as np
import pytest

from perfect_square.engine.config import AnalyzerConfig
from perfect_square.engine.context import CornerSet, NormalizedPath, StrokeContext
from perfect_square.engine.corners import detect_corners
from perfect_square.engine.metrics.angles import angles, corner_angles
from perfect_square.engine.metrics.closure import closure
from perfect_square.engine.metrics.sides import side_lengths, sides
from perfect_square.engine.metrics.straightness import side_spans, straightness
from perfect_square.engine.normalize import normalize_path
from perfect_square.utils.geometry import Point, as_points
from tests.conftest import square_path


def _path(points) -> NormalizedPath:
    arr = np.asarray(points, dtype=float)
    return NormalizedPath(points=arr, smoothed=arr.copy())


def _corners(points, indices=(0, 1, 2, 3)) -> CornerSet:
    return CornerSet(indices=tuple(indices), points=tuple(Point(*p) for p in points))


SQUARE = [(-0.25, -0.25), (0.25, -0.25), (0.25, 0.25), (-0.25, 0.25)]
COINCIDENT = [(0.1, 0.1)] * 4


def _ctx(path_points, corner_points, indices=(0, 1, 2, 3)) -> StrokeContext:
    return StrokeContext(path=_path(path_points), corners=_corners(corner_points, indices))


def _square_ctx() -> StrokeContext:
    norm = normalize_path(as_points(square_path()))
    return StrokeContext(path=norm, corners=detect_corners(norm))


# --- closure ---


def test_closure_closed_path_scores_full():
    ctx = _ctx([(0.0, 0.0), (0.3, 0.0), (0.0, 0.0)], SQUARE)
    assert closure(ctx) == pytest.approx(100.0)


def test_closure_half_of_limit_scores_half():
    ctx = _ctx([(0.0, 0.0), (0.3, 0.3), (0.125, 0.0)], SQUARE)
    assert closure(ctx) == pytest.approx(50.0)


def test_closure_clamped_at_zero():
    ctx = _ctx([(0.0, 0.0), (0.3, 0.3), (0.5, 0.0)], SQUARE)
    assert closure(ctx) == 0.0


def test_closure_improves_as_gap_shrinks():
    scores = []
    for drop in (12, 8, 4, 0):
        norm = normalize_path(as_points(square_path(close=False, drop_last=drop)))
        scores.append(closure(StrokeContext(path=norm, corners=detect_corners(norm))))
    assert scores == sorted(scores)
    assert scores[-1] > scores[0]


# --- sides ---


def test_side_lengths_wrap():
    lengths = side_lengths(_corners(SQUARE))
    assert np.allclose(lengths, 0.5)


def test_sides_equal_square():
    assert sides(_ctx(SQUARE, SQUARE)) == pytest.approx(100.0)


def test_sides_rectangle_scores_zero():
    rect = [(-0.4, -0.2), (0.4, -0.2), (0.4, 0.2), (-0.4, 0.2)]
    # rel error = 0.2 / 0.6 = 1/3 -> well past the 20% cut-off
    assert sides(_ctx(rect, rect)) == 0.0


def test_sides_mild_rectangle():
    rect = [(-0.25, -0.2), (0.25, -0.2), (0.25, 0.2), (-0.25, 0.2)]
    # lengths 0.5, 0.4, 0.5, 0.4: mean 0.45, std 0.05
    assert sides(_ctx(rect, rect)) == pytest.approx(100.0 * (1 - (0.05 / 0.45) * 5))


def test_sides_coincident_corners_score_zero():
    assert sides(_ctx(COINCIDENT, COINCIDENT)) == 0.0


# --- angles ---


def test_corner_angles_square():
    assert np.allclose(corner_angles(_corners(SQUARE)), np.pi / 2)


def test_angles_square_scores_full():
    assert angles(_ctx(SQUARE, SQUARE)) == pytest.approx(100.0)


def test_angles_rhombus():
    h = np.sqrt(3) / 2
    rhombus = [(0.0, 0.0), (1.0, 0.0), (1.5, h), (0.5, h)]
    # 60 and 120 degree corners: 30 degree error each -> 1 - 30/45
    assert angles(_ctx(rhombus, rhombus)) == pytest.approx(100.0 / 3)


def test_angles_coincident_corners_score_zero():
    assert angles(_ctx(COINCIDENT, COINCIDENT)) == 0.0


# --- straightness ---


def test_side_spans_wrap_to_start():
    spans = side_spans((0, 3, 6, 9), 12)
    assert spans[0].tolist() == [0, 1, 2, 3]
    assert spans[2].tolist() == [6, 7, 8, 9]
    assert spans[3].tolist() == [9, 10, 11, 0]


def test_straightness_perfect_square():
    assert straightness(_square_ctx()) == pytest.approx(100.0)


def test_straightness_ignores_opposite_side():
    # Path of the square itself: each side only sees its own samples
    ctx = _ctx(SQUARE + [SQUARE[0]], SQUARE, indices=(0, 1, 2, 3))
    assert straightness(ctx) == pytest.approx(100.0)


def test_straightness_bowed_side():
    path = [(0.0, 0.0), (0.25, 0.02), (0.5, 0.0), (0.5, 0.5), (0.0, 0.5)]
    corners = [(0.0, 0.0), (0.5, 0.0), (0.5, 0.5), (0.0, 0.5)]
    ctx = _ctx(path, corners, indices=(0, 2, 3, 4))
    # 9 counted samples (0,1,2 | 2,3 | 3,4 | 4,0), deviation only at sample 1
    assert straightness(ctx) == pytest.approx(100.0 * (1 - (0.02 / 9) * 10))


def test_straightness_no_counted_points_uses_fallback():
    ctx = _ctx(COINCIDENT, COINCIDENT)
    assert straightness(ctx) == 0.0


def test_metrics_respect_config():
    config = AnalyzerConfig(closure_threshold=0.1)
    ctx = StrokeContext(
        path=_path([(0.0, 0.0), (0.3, 0.3), (0.25, 0.0)]),
        corners=_corners(SQUARE),
        config=config,
    )
    assert closure(ctx) == pytest.approx(50.0)

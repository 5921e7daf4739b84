"""Angles — how close each corner is to a right angle.

The angle at a corner is taken between the vectors to its previous and next
corner along the path. A 45° error scores 0 for that corner.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from perfect_square.engine.context import CornerSet, StrokeContext
from perfect_square.engine.registry import metric
from perfect_square.utils.geometry import angles_between
from perfect_square.utils.math_helpers import clamp_score

IDEAL_ANGLE = math.pi / 2
MAX_ERROR = math.pi / 4


def corner_angles(corners: CornerSet) -> NDArray[np.float64]:
    pts = corners.as_array()
    to_prev = np.roll(pts, 1, axis=0) - pts
    to_next = np.roll(pts, -1, axis=0) - pts
    return angles_between(to_prev, to_next)


@metric(
    name="angles",
    weight=0.35,
    order=1,
    description="Mean deviation of corner angles from 90 degrees",
)
def angles(ctx: StrokeContext) -> float:
    error = np.abs(corner_angles(ctx.corners) - IDEAL_ANGLE)
    per_corner = np.maximum(0.0, 1.0 - error / MAX_ERROR)
    return clamp_score(float(np.mean(per_corner)) * 100.0)

"""Sides — equality of the four corner-to-corner lengths.

Relative error = population std / mean; 20% relative error scores 0.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from perfect_square.engine.context import CornerSet, StrokeContext
from perfect_square.engine.registry import metric
from perfect_square.utils.math_helpers import clamp_score, coefficient_of_variation


def side_lengths(corners: CornerSet) -> NDArray[np.float64]:
    pts = corners.as_array()
    edges = np.roll(pts, -1, axis=0) - pts
    return np.hypot(edges[:, 0], edges[:, 1])


@metric(
    name="sides",
    weight=0.30,
    order=2,
    description="Spread of side lengths between consecutive corners",
)
def sides(ctx: StrokeContext) -> float:
    rel_error = coefficient_of_variation(side_lengths(ctx.corners))
    if not np.isfinite(rel_error):
        return 0.0
    return clamp_score(100.0 * (1.0 - rel_error * ctx.config.sides_multiplier))

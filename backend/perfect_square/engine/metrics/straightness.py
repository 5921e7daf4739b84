"""Straightness — how far each stretch of stroke strays from its corner-to-corner line.

A side owns the samples between its two corners (the last side wraps past the
end of the stroke back to the first corner). Of those, samples whose
projection falls inside the side's span contribute their perpendicular
distance. Mean deviation 0.1 scores 0.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from perfect_square.engine.context import StrokeContext
from perfect_square.engine.registry import metric
from perfect_square.utils.math_helpers import clamp_score


def side_spans(indices: tuple[int, ...], n: int) -> list[NDArray[np.int64]]:
    """Sample indices belonging to each side, in path order."""
    spans = []
    count = len(indices)
    for i in range(count):
        start, end = indices[i], indices[(i + 1) % count]
        if i < count - 1:
            spans.append(np.arange(start, end + 1))
        else:
            spans.append(np.concatenate([np.arange(start, n), np.arange(0, end + 1)]))
    return spans


def side_deviation(ctx: StrokeContext) -> tuple[float, int]:
    """Sum of perpendicular deviations and number of samples counted."""
    points = ctx.path.points
    corners = ctx.corners.as_array()
    total = 0.0
    count = 0

    for i, span in enumerate(side_spans(ctx.corners.indices, len(points))):
        start = corners[i]
        side = corners[(i + 1) % len(corners)] - start
        length = float(np.hypot(side[0], side[1]))
        if length <= 1e-12:
            continue
        unit = side / length

        rel = points[span] - start
        proj = rel @ unit
        inside = (proj >= 0.0) & (proj <= length)
        # |cross(rel, unit)| = distance from the side line
        dev = np.abs(rel[:, 0] * unit[1] - rel[:, 1] * unit[0])
        total += float(np.sum(dev[inside]))
        count += int(np.count_nonzero(inside))

    return total, count


@metric(
    name="straightness",
    weight=0.25,
    order=3,
    description="Mean perpendicular deviation of samples from each side",
)
def straightness(ctx: StrokeContext) -> float:
    total, count = side_deviation(ctx)
    avg = total / count if count > 0 else ctx.config.straightness_fallback
    return clamp_score(100.0 * (1.0 - avg * ctx.config.straightness_multiplier))

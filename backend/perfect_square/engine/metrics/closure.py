"""Closure — how close the stroke ends to where it started."""

from __future__ import annotations

from perfect_square.engine.context import StrokeContext
from perfect_square.engine.registry import metric
from perfect_square.utils.math_helpers import clamp_score


@metric(
    name="closure",
    weight=0.10,
    order=4,
    description="Gap between the first and last sample",
)
def closure(ctx: StrokeContext) -> float:
    gap = ctx.path.closure_gap
    return clamp_score(100.0 * (1.0 - gap / ctx.config.closure_limit))

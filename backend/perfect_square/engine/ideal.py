"""Debug geometry — the reference square and the mapping back to the canvas."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np

from perfect_square.engine.context import CornerSet
from perfect_square.utils.geometry import Point, as_points, bbox


def ideal_square(corners: CornerSet) -> tuple[Point, Point, Point, Point]:
    """Axis-aligned square centred on the corners' centroid.

    Half-width is the mean centroid-to-corner distance. Emitted in the fixed
    order top-left, top-right, bottom-right, bottom-left (y grows downward).
    """
    pts = corners.as_array()
    cx, cy = pts.mean(axis=0)
    radius = float(np.mean(np.hypot(pts[:, 0] - cx, pts[:, 1] - cy)))
    cx, cy = float(cx), float(cy)
    return (
        Point(cx - radius, cy - radius),
        Point(cx + radius, cy - radius),
        Point(cx + radius, cy + radius),
        Point(cx - radius, cy + radius),
    )


def to_device_space(points: Sequence[Point], raw_path: Iterable[Any]) -> list[Point]:
    """Map normalized debug points onto the canvas the stroke was drawn on.

    Uses the raw stroke's bounding box: its centre becomes the origin and its
    larger dimension the unit length. This is an approximation of the exact
    normalization inverse, matching what the drawing client overlays.
    """
    raw = as_points(raw_path)
    xmin, ymin, xmax, ymax = bbox(raw)
    cx = (xmin + xmax) / 2
    cy = (ymin + ymax) / 2
    scale = max(xmax - xmin, ymax - ymin)
    return [Point(cx + p.x * scale, cy + p.y * scale) for p in points]

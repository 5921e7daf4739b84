"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple

import numpy as np
from numpy.typing import NDArray


class Point(NamedTuple):
    x: float
    y: float


def as_points(path: Iterable[Any]) -> NDArray[np.float64]:
    """Coerce Points, (x, y) pairs or {"x", "y"} mappings into an Nx2 array."""
    rows: list[tuple[float, float]] = []
    for p in path:
        if isinstance(p, Mapping):
            rows.append((float(p["x"]), float(p["y"])))
        elif hasattr(p, "x") and hasattr(p, "y"):
            rows.append((float(p.x), float(p.y)))
        else:
            x, y = p
            rows.append((float(x), float(y)))
    if not rows:
        return np.empty((0, 2))
    return np.asarray(rows, dtype=np.float64)


def to_point(row: NDArray[np.float64]) -> Point:
    return Point(float(row[0]), float(row[1]))


def distance(p1: NDArray[np.float64], p2: NDArray[np.float64]) -> float:
    return float(np.hypot(p2[0] - p1[0], p2[1] - p1[1]))


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def angles_between(v1: NDArray[np.float64], v2: NDArray[np.float64]) -> NDArray[np.float64]:
    """Unsigned angle (radians) between paired rows of two Nx2 vector arrays.

    Rows where either vector has zero length yield 0. The cosine is clamped
    to [-1, 1] before arccos so rounding overshoot never produces NaN.
    """
    m1 = np.hypot(v1[:, 0], v1[:, 1])
    m2 = np.hypot(v2[:, 0], v2[:, 1])
    denom = m1 * m2
    valid = denom > 0
    dot = v1[:, 0] * v2[:, 0] + v1[:, 1] * v2[:, 1]
    cos = np.zeros_like(dot)
    np.divide(dot, denom, out=cos, where=valid)
    angles = np.arccos(np.clip(cos, -1.0, 1.0))
    return np.where(valid, angles, 0.0)


def angle_between(v1: NDArray[np.float64], v2: NDArray[np.float64]) -> float:
    """Scalar form of :func:`angles_between`."""
    return float(angles_between(np.atleast_2d(v1), np.atleast_2d(v2))[0])


def cyclic_index_gap(a: int, b: int, n: int) -> int:
    """Index distance between a and b on a closed loop of n samples."""
    d = abs(a - b)
    return min(d, n - d)

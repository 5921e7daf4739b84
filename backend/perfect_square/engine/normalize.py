"""Input validation and path normalization.

Centroid translation → uniform scaling (max radius 0.5) → clipped moving average.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from perfect_square.engine.config import AnalyzerConfig
from perfect_square.engine.context import NormalizedPath


class DegeneratePathError(ValueError):
    """The stroke has no spatial extent and cannot be scaled."""


def has_enough_samples(points: NDArray[np.float64], min_length: int) -> bool:
    return len(points) >= min_length


def smooth(points: NDArray[np.float64], half_window: int) -> NDArray[np.float64]:
    """Symmetric moving average, window clipped at both ends.

    Sample i averages indices [i - half_window, i + half_window] that exist,
    so the first and last samples use fewer neighbours. No wrapping, no padding.
    """
    n = len(points)
    if n == 0 or half_window <= 0:
        return points.copy()

    csum = np.vstack([np.zeros((1, 2)), np.cumsum(points, axis=0)])
    idx = np.arange(n)
    lo = np.clip(idx - half_window, 0, n)
    hi = np.clip(idx + half_window + 1, 0, n)
    return (csum[hi] - csum[lo]) / (hi - lo)[:, None]


def normalize_path(
    points: NDArray[np.float64],
    config: AnalyzerConfig | None = None,
) -> NormalizedPath:
    """Recenter, rescale and smooth a raw stroke.

    Raises DegeneratePathError when every sample sits on the centroid.
    """
    config = config or AnalyzerConfig()
    if len(points) == 0:
        raise DegeneratePathError("empty path")

    center = points.mean(axis=0)
    centered = points - center

    max_dist = float(np.max(np.hypot(centered[:, 0], centered[:, 1])))
    if max_dist <= 0.0 or not np.isfinite(max_dist):
        raise DegeneratePathError("path has no spatial extent")

    scale = config.target_radius / max_dist
    scaled = centered * scale

    return NormalizedPath(
        points=scaled,
        smoothed=smooth(scaled, config.smoothing_window),
        centroid=(float(center[0]), float(center[1])),
        scale=scale,
    )

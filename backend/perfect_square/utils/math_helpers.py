"""Math helpers — score clamping, half-up rounding, coefficient of variation. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def clamp_score(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp a score into [low, high]. NaN collapses to ``low``."""
    if np.isnan(value):
        return low
    return float(min(high, max(low, value)))


def round_half_up(value: float) -> int:
    """Round to the nearest int, halves upward (84.5 -> 85, not banker's 84)."""
    return math.floor(value + 0.5)


def coefficient_of_variation(values: NDArray[np.float64]) -> float:
    """CV = population std / mean. Returns inf for a zero mean."""
    mean = float(np.mean(values))
    if abs(mean) < 1e-12:
        return float("inf")
    return float(np.std(values) / mean)

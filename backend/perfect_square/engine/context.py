"""StrokeContext — the intermediate state handed from stage to stage.

NormalizedPath → produced by the normalizer
CornerSet → produced by the corner detector
StrokeContext → what every registered metric receives
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from perfect_square.engine.config import AnalyzerConfig
from perfect_square.utils.geometry import Point, distance


@dataclass(frozen=True)
class NormalizedPath:
    """A stroke moved to its centroid and scaled to a fixed max radius."""

    # Centered + scaled samples: Nx2, same order as the raw stroke
    points: NDArray[np.float64]
    # Moving-average trace of ``points``, used for curvature only
    smoothed: NDArray[np.float64]
    # Transform that produced ``points`` from device coordinates
    centroid: tuple[float, float] = (0.0, 0.0)
    scale: float = 1.0

    def __len__(self) -> int:
        return len(self.points)

    @property
    def closure_gap(self) -> float:
        """Distance between the first and last sample."""
        if len(self.points) == 0:
            return 0.0
        return distance(self.points[0], self.points[-1])


@dataclass(frozen=True)
class CornerSet:
    """Exactly four corners, in path order."""

    indices: tuple[int, int, int, int]
    points: tuple[Point, Point, Point, Point]
    # How many corners came from curvature peaks (the rest were synthesized)
    detected: int = 4

    def as_array(self) -> NDArray[np.float64]:
        return np.asarray(self.points, dtype=np.float64)


@dataclass(frozen=True)
class StrokeContext:
    """Inputs shared by all metric evaluators."""

    path: NormalizedPath
    corners: CornerSet
    config: AnalyzerConfig = field(default_factory=AnalyzerConfig)

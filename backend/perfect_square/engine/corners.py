"""Corner detection — four dominant curvature peaks along the smoothed stroke.

Approximate by nature: this is a peak picker, not a polygon fit. For each
interior sample the turning angle between the chords i-2→i and i→i+2 is
measured; samples turning more than the threshold are candidates. The
strongest candidates are accepted greedily with a minimum index spacing
of n/8, and any shortfall is filled with samples at n/4 intervals.

A closed stroke hides its start corner inside the end margins, so when
the endpoints meet, the seam at index 0 is measured across the wrap as an
extra candidate and spacing is counted around the loop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from perfect_square.engine.config import AnalyzerConfig
from perfect_square.engine.context import CornerSet, NormalizedPath
from perfect_square.utils.geometry import angle_between, angles_between, cyclic_index_gap, to_point

logger = logging.getLogger(__name__)

CORNER_COUNT = 4


@dataclass(frozen=True)
class CornerCandidate:
    index: int
    strength: float


def turning_angles(points: NDArray[np.float64], span: int) -> NDArray[np.float64]:
    """Chord turning angle at every index in [span, n - span - 1]."""
    n = len(points)
    if n <= 2 * span:
        return np.empty(0)
    before = points[span : n - span] - points[: n - 2 * span]
    after = points[2 * span :] - points[span : n - span]
    return angles_between(before, after)


def seam_angle(points: NDArray[np.float64], span: int) -> float:
    """Turning angle across the start/end joint of a closed stroke."""
    n = len(points)
    if n <= 2 * span:
        return 0.0
    incoming = points[n - 1] - points[n - 1 - span]
    outgoing = points[span] - points[0]
    return angle_between(incoming, outgoing)


def find_candidates(path: NormalizedPath, config: AnalyzerConfig, closed: bool) -> list[CornerCandidate]:
    span = config.corner_margin
    angles = turning_angles(path.smoothed, span)
    candidates = [
        CornerCandidate(index=i + span, strength=float(a))
        for i, a in enumerate(angles)
        if a > config.corner_threshold
    ]
    if closed:
        strength = seam_angle(path.smoothed, span)
        if strength > config.corner_threshold:
            candidates.append(CornerCandidate(index=0, strength=strength))

    # Strongest first; equal strengths keep path order
    candidates.sort(key=lambda c: (-round(c.strength, config.strength_precision), c.index))
    return candidates


def select_corners(
    candidates: list[CornerCandidate],
    n: int,
    config: AnalyzerConfig,
    closed: bool = False,
) -> list[int]:
    """Greedy non-maximum suppression by index spacing."""
    min_gap = n / config.corner_separation_divisor
    accepted: list[int] = []
    for cand in candidates:
        if len(accepted) >= CORNER_COUNT:
            break
        if closed:
            gaps = (cyclic_index_gap(cand.index, idx, n) for idx in accepted)
        else:
            gaps = (abs(cand.index - idx) for idx in accepted)
        if all(g > min_gap for g in gaps):
            accepted.append(cand.index)
    return accepted


def detect_corners(path: NormalizedPath, config: AnalyzerConfig | None = None) -> CornerSet:
    """Locate exactly four corners, ordered along the path."""
    config = config or AnalyzerConfig()
    n = len(path)
    closed = path.closure_gap <= config.closure_threshold

    candidates = find_candidates(path, config, closed)
    indices = select_corners(candidates, n, config, closed)
    detected = len(indices)

    while len(indices) < CORNER_COUNT:
        indices.append(len(indices) * n // CORNER_COUNT)

    if detected < CORNER_COUNT:
        logger.debug(
            "Corner detection: %d/%d peaks from %d candidates, synthesized the rest",
            detected,
            CORNER_COUNT,
            len(candidates),
        )

    indices.sort()
    return CornerSet(
        indices=tuple(indices),
        points=tuple(to_point(path.points[i]) for i in indices),
        detected=detected,
    )

"""Shared test fixtures — synthetic strokes in device pixels."""

from __future__ import annotations

import math

import numpy as np
import pytest

from perfect_square.storage.scores import ScoreStore

UNIT_SQUARE = [(-0.5, -0.5), (0.5, -0.5), (0.5, 0.5), (-0.5, 0.5)]


def square_path(
    samples_per_side: int = 25,
    size: float = 1.0,
    center: tuple[float, float] = (0.0, 0.0),
    rotation: float = 0.0,
    close: bool = True,
    drop_last: int = 0,
) -> list[tuple[float, float]]:
    """Square traced corner to corner, starting at the first corner.

    ``close`` appends the starting corner again; ``drop_last`` trims samples
    off the end to leave a gap.
    """
    corners = [(x * size, y * size) for x, y in UNIT_SQUARE]
    pts: list[tuple[float, float]] = []
    for i in range(4):
        ax, ay = corners[i]
        bx, by = corners[(i + 1) % 4]
        for k in range(samples_per_side):
            t = k / samples_per_side
            pts.append((ax + (bx - ax) * t, ay + (by - ay) * t))
    if close:
        pts.append(corners[0])
    if drop_last:
        pts = pts[:-drop_last]

    cos_r, sin_r = math.cos(rotation), math.sin(rotation)
    cx, cy = center
    return [(cx + x * cos_r - y * sin_r, cy + x * sin_r + y * cos_r) for x, y in pts]


def circle_path(
    samples: int = 36,
    radius: float = 100.0,
    center: tuple[float, float] = (200.0, 200.0),
) -> list[tuple[float, float]]:
    cx, cy = center
    return [
        (cx + radius * math.cos(2 * math.pi * k / samples), cy + radius * math.sin(2 * math.pi * k / samples))
        for k in range(samples)
    ]


def noisy(path: list[tuple[float, float]], sigma: float, seed: int = 0) -> list[tuple[float, float]]:
    rng = np.random.default_rng(seed)
    arr = np.asarray(path) + rng.normal(0.0, sigma, size=(len(path), 2))
    return [(float(x), float(y)) for x, y in arr]


@pytest.fixture
def perfect_square() -> list[tuple[float, float]]:
    return square_path()


@pytest.fixture
def device_square() -> list[tuple[float, float]]:
    return square_path(size=200.0, center=(200.0, 200.0))


@pytest.fixture
def circle() -> list[tuple[float, float]]:
    return circle_path()


@pytest.fixture
def score_store(tmp_path) -> ScoreStore:
    return ScoreStore(data_dir=tmp_path / "scores")

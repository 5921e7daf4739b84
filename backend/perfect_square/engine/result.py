"""ScoreResult — the immutable output of one analyzed stroke."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from perfect_square.utils.geometry import Point

METRIC_NAMES = ("closure", "sides", "angles", "straightness")


@dataclass(frozen=True)
class MetricScores:
    closure: int = 0
    sides: int = 0
    angles: int = 0
    straightness: int = 0

    def as_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in METRIC_NAMES}


@dataclass(frozen=True)
class DebugGeometry:
    """Detected corners and the reference square, in normalized space."""

    corners: tuple[Point, ...]
    ideal_square: tuple[Point, ...]


@dataclass(frozen=True)
class ScoreResult:
    total: int
    metrics: MetricScores
    feedback: str
    debug: DebugGeometry | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "total": self.total,
            "metrics": self.metrics.as_dict(),
            "feedback": self.feedback,
        }
        if self.debug is not None:
            data["debug"] = {
                "corners": [{"x": p.x, "y": p.y} for p in self.debug.corners],
                "idealSquare": [{"x": p.x, "y": p.y} for p in self.debug.ideal_square],
            }
        return data

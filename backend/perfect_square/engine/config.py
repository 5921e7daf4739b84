"""Analyzer configuration — every tunable constant of the scoring engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalyzerConfig:
    """Constants of the squareness pipeline.

    The metric multipliers are empirical; changing them shifts every score.
    """

    # Input validation
    min_points: int = 20

    # Normalization
    target_radius: float = 0.5  # max distance from centroid after scaling
    smoothing_window: int = 5  # half-window, samples each side

    # Corner detection
    corner_margin: int = 2  # chord span and excluded samples at each end
    corner_threshold: float = 0.3  # radians
    corner_separation_divisor: int = 8  # min spacing = n / divisor indices
    strength_precision: int = 9  # decimals compared when ranking candidates

    # Metrics
    closure_threshold: float = 0.05  # normalized units
    closure_multiplier: float = 5.0
    sides_multiplier: float = 5.0
    straightness_multiplier: float = 10.0
    straightness_fallback: float = 0.5

    @property
    def closure_limit(self) -> float:
        """Gap at which the closure score reaches zero."""
        return self.closure_threshold * self.closure_multiplier

"""Analyzer — runs one stroke through validation, normalization, corners, metrics and scoring."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from typing import Any

from perfect_square.engine.config import AnalyzerConfig
from perfect_square.engine.context import StrokeContext
from perfect_square.engine.corners import detect_corners
from perfect_square.engine.ideal import ideal_square
from perfect_square.engine.normalize import DegeneratePathError, has_enough_samples, normalize_path
from perfect_square.engine.registry import MetricRegistry, get_registry
from perfect_square.engine.result import METRIC_NAMES, DebugGeometry, MetricScores, ScoreResult
from perfect_square.engine.scoring import (
    TOO_SHORT_FEEDBACK,
    evaluate_metrics,
    feedback_for,
    weighted_total,
)
from perfect_square.utils.geometry import as_points

logger = logging.getLogger(__name__)


def too_short_result() -> ScoreResult:
    return ScoreResult(total=0, metrics=MetricScores(), feedback=TOO_SHORT_FEEDBACK)


class Analyzer:
    """Stateless squareness scorer. Safe to share between threads."""

    def __init__(
        self,
        config: AnalyzerConfig | None = None,
        registry: MetricRegistry | None = None,
    ) -> None:
        self.config = config or AnalyzerConfig()
        self.registry = registry or get_registry()

    def run(self, path: Iterable[Any], min_length: int | None = None) -> ScoreResult:
        """Score a raw stroke. Never raises for finite input."""
        start = time.perf_counter()
        raw = as_points(path)
        limit = self.config.min_points if min_length is None else min_length

        if not has_enough_samples(raw, limit):
            logger.debug("Stroke rejected: %d samples (< %d)", len(raw), limit)
            return too_short_result()

        try:
            normalized = normalize_path(raw, self.config)
        except DegeneratePathError as e:
            logger.debug("Stroke rejected: %s", e)
            return too_short_result()

        corners = detect_corners(normalized, self.config)
        ctx = StrokeContext(path=normalized, corners=corners, config=self.config)

        scores = evaluate_metrics(ctx, self.registry)
        total = weighted_total(scores, self.registry)
        metrics = MetricScores(**{name: scores.get(name, 0) for name in METRIC_NAMES})

        result = ScoreResult(
            total=total,
            metrics=metrics,
            feedback=feedback_for(total),
            debug=DebugGeometry(corners=corners.points, ideal_square=ideal_square(corners)),
        )

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Analyzed stroke: %d samples, %d/4 corners detected, total %d in %.2fms",
            len(raw),
            corners.detected,
            total,
            elapsed,
        )
        return result


def analyze(
    path: Iterable[Any],
    min_length: int | None = None,
    config: AnalyzerConfig | None = None,
) -> ScoreResult:
    """Score how close a drawn stroke is to a perfect square.

    Strokes with fewer than ``min_length`` samples (20 by default) get the
    zero "too fast" result. Left as None, the limit is ``config.min_points``,
    which is 20 unless a custom config says otherwise.
    """
    return Analyzer(config=config).run(path, min_length=min_length)

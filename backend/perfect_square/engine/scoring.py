"""Score aggregation — weighted metric sum and the feedback tier table."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import perfect_square.engine.metrics  # noqa: F401  (registers the evaluators)
from perfect_square.engine.context import StrokeContext
from perfect_square.engine.registry import MetricRegistry, get_registry
from perfect_square.utils.math_helpers import clamp_score, round_half_up

logger = logging.getLogger(__name__)

# Checked top to bottom; first threshold the total reaches wins
FEEDBACK_TIERS: tuple[tuple[int, str], ...] = (
    (95, "Perfect Square"),
    (85, "Almost Perfect"),
    (70, "Good Attempt"),
)
DEFAULT_FEEDBACK = "Needs Practice"
TOO_SHORT_FEEDBACK = "Too fast! Draw more slowly."


def evaluate_metrics(
    ctx: StrokeContext,
    registry: MetricRegistry | None = None,
) -> dict[str, int]:
    """Run every registered metric and round each to an int in [0, 100]."""
    registry = registry or get_registry()
    scores: dict[str, int] = {}
    for spec in registry.all():
        value = clamp_score(spec.fn(ctx))
        scores[spec.name] = round_half_up(value)
        logger.debug("  metric %s = %.2f", spec.name, value)
    return scores


def weighted_total(
    metrics: Mapping[str, int],
    registry: MetricRegistry | None = None,
) -> int:
    """Weighted sum of rounded metric scores, heaviest metric first."""
    registry = registry or get_registry()
    total = 0.0
    for spec in registry.all():
        total += metrics.get(spec.name, 0) * spec.weight
    return round_half_up(clamp_score(total))


def feedback_for(total: int) -> str:
    for threshold, message in FEEDBACK_TIERS:
        if total >= threshold:
            return message
    return DEFAULT_FEEDBACK

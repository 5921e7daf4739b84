"""Metric registry — every metric evaluator is a standalone function registered via decorator.

Usage:
    @metric(name="sides", weight=0.30, order=2)
    def sides(ctx: StrokeContext) -> float:
        return score_from(ctx.corners)

Adding a new metric = creating one file under ``engine/metrics`` with the
decorator and importing it from the package ``__init__``. The aggregator
picks up its weight automatically.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from perfect_square.engine.context import StrokeContext

logger = logging.getLogger(__name__)


@dataclass
class MetricSpec:
    name: str
    fn: Callable[["StrokeContext"], float]
    weight: float
    # Position in the weighted sum (heaviest first)
    order: int = 0
    description: str = ""


class MetricRegistry:
    """Registry of all metric evaluators."""

    def __init__(self) -> None:
        self._metrics: dict[str, MetricSpec] = {}

    def register(self, spec: MetricSpec) -> None:
        if spec.name in self._metrics:
            raise ValueError(f"Duplicate metric name: {spec.name}")
        if spec.weight < 0:
            raise ValueError(f"Metric {spec.name} has negative weight {spec.weight}")
        self._metrics[spec.name] = spec
        logger.debug("Registered metric %s (weight %.2f)", spec.name, spec.weight)

    def get(self, name: str) -> MetricSpec:
        return self._metrics[name]

    def all(self) -> list[MetricSpec]:
        return sorted(self._metrics.values(), key=lambda s: (s.order, s.name))

    @property
    def names(self) -> list[str]:
        return [s.name for s in self.all()]

    @property
    def total_weight(self) -> float:
        return sum(s.weight for s in self._metrics.values())

    @property
    def count(self) -> int:
        return len(self._metrics)


# Module-level singleton
_registry = MetricRegistry()


def get_registry() -> MetricRegistry:
    return _registry


def metric(
    *,
    name: str,
    weight: float,
    order: int = 0,
    description: str = "",
):
    """Decorator to register a metric evaluator."""

    def decorator(fn: Callable[["StrokeContext"], float]):
        _registry.register(
            MetricSpec(
                name=name,
                fn=fn,
                weight=weight,
                order=order,
                description=description,
            )
        )
        return fn

    return decorator

"""Metric evaluators. Importing this package registers all of them."""

from perfect_square.engine.metrics import angles, closure, sides, straightness

__all__ = ["angles", "closure", "sides", "straightness"]

"""Perfect Square drawing-analysis engine."""

from perfect_square.engine.analyzer import Analyzer, analyze
from perfect_square.engine.config import AnalyzerConfig
from perfect_square.engine.registry import get_registry, metric
from perfect_square.engine.result import DebugGeometry, MetricScores, ScoreResult

__all__ = [
    "analyze",
    "Analyzer",
    "AnalyzerConfig",
    "metric",
    "get_registry",
    "ScoreResult",
    "MetricScores",
    "DebugGeometry",
]

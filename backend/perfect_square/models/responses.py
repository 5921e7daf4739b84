"""API response models. Serialized with camelCase aliases."""

from __future__ import annotations

from pydantic import Field

from perfect_square.models.requests import ApiModel, MetricsModel, PointModel


class HealthResponse(ApiModel):
    status: str = "ok"
    version: str = "0.1.0"
    metrics_registered: int = 0


class DebugModel(ApiModel):
    corners: list[PointModel] = Field(default_factory=list)
    ideal_square: list[PointModel] = Field(default_factory=list)


class AnalyzeResponse(ApiModel):
    total: int = 0
    metrics: MetricsModel = Field(default_factory=MetricsModel)
    feedback: str = ""
    debug: DebugModel | None = None
    device_debug: DebugModel | None = None
    processing_time_ms: float = 0.0


class ScoreRecordResponse(ApiModel):
    id: int
    score: int
    metrics: MetricsModel
    created_at: str

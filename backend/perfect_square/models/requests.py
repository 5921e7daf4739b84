"""API request models.

The HTTP contract is camelCase on the wire (``idealSquare``, ``minLength``)
and snake_case in Python. Requests accept either spelling.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PointModel(ApiModel):
    x: float
    y: float


class MetricsModel(ApiModel):
    closure: int = Field(0, ge=0, le=100)
    sides: int = Field(0, ge=0, le=100)
    angles: int = Field(0, ge=0, le=100)
    straightness: int = Field(0, ge=0, le=100)


class AnalyzeRequest(ApiModel):
    points: list[PointModel] = Field(..., description="Raw stroke samples in device pixels, in drawing order")
    min_length: int | None = Field(
        default=None,
        ge=1,
        description="Minimum samples before scoring (defaults to the server setting)",
    )
    device_debug: bool = Field(
        default=False,
        description="Also return debug geometry mapped back onto the stroke's canvas",
    )


class ScoreCreateRequest(ApiModel):
    score: int = Field(..., ge=0, le=100, description="Total score of the stroke")
    metrics: MetricsModel = Field(default_factory=MetricsModel)

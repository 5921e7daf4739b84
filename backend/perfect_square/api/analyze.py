"""POST /api/analyze — score one completed stroke."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from perfect_square.config import Settings
from perfect_square.dependencies import get_settings
from perfect_square.engine import Analyzer
from perfect_square.engine.ideal import to_device_space
from perfect_square.engine.result import DebugGeometry
from perfect_square.models.requests import AnalyzeRequest, MetricsModel, PointModel
from perfect_square.models.responses import AnalyzeResponse, DebugModel

router = APIRouter()

_analyzer = Analyzer()


def _debug_model(debug: DebugGeometry) -> DebugModel:
    return DebugModel(
        corners=[PointModel(x=p.x, y=p.y) for p in debug.corners],
        ideal_square=[PointModel(x=p.x, y=p.y) for p in debug.ideal_square],
    )


@router.post("/analyze", response_model=AnalyzeResponse, response_model_exclude_none=True)
async def analyze(
    req: AnalyzeRequest,
    settings: Settings = Depends(get_settings),
) -> AnalyzeResponse:
    start = time.perf_counter()

    raw = [(p.x, p.y) for p in req.points]
    min_length = req.min_length if req.min_length is not None else settings.min_points
    result = _analyzer.run(raw, min_length=min_length)

    response = AnalyzeResponse(
        total=result.total,
        metrics=MetricsModel(**result.metrics.as_dict()),
        feedback=result.feedback,
    )
    if result.debug is not None:
        response.debug = _debug_model(result.debug)
        if req.device_debug:
            response.device_debug = _debug_model(
                DebugGeometry(
                    corners=tuple(to_device_space(result.debug.corners, raw)),
                    ideal_square=tuple(to_device_space(result.debug.ideal_square, raw)),
                )
            )

    response.processing_time_ms = round((time.perf_counter() - start) * 1000, 3)
    return response

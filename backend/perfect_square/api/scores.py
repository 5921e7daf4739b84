"""Leaderboard endpoints — store and list scores."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, Query

from perfect_square.config import Settings
from perfect_square.dependencies import get_settings, get_store
from perfect_square.models.requests import ScoreCreateRequest
from perfect_square.models.responses import ScoreRecordResponse
from perfect_square.storage.scores import ScoreStore

router = APIRouter()


@router.post("/scores", response_model=ScoreRecordResponse, status_code=201)
async def create_score(
    req: ScoreCreateRequest,
    store: ScoreStore = Depends(get_store),
) -> ScoreRecordResponse:
    record = store.create_score(req.score, req.metrics.model_dump())
    return ScoreRecordResponse(**asdict(record))


@router.get("/scores", response_model=list[ScoreRecordResponse])
async def list_scores(
    limit: int | None = Query(default=None, ge=1, le=100),
    store: ScoreStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> list[ScoreRecordResponse]:
    records = store.top_scores(limit or settings.leaderboard_limit)
    return [ScoreRecordResponse(**asdict(r)) for r in records]

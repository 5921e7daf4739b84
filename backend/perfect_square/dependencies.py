"""FastAPI dependency injection."""

from __future__ import annotations

from perfect_square.config import settings
from perfect_square.storage.scores import ScoreStore, get_score_store


def get_settings():
    return settings


def get_store() -> ScoreStore:
    return get_score_store(settings.data_dir)

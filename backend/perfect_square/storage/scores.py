"""Score store — JSONL-backed leaderboard of completed strokes.

Each record keeps only what the leaderboard needs:
- the total score and the four sub-metrics
- an incrementing id and a UTC creation timestamp

Retrieval returns the best N records, score descending.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from perfect_square.engine.result import METRIC_NAMES, ScoreResult

logger = logging.getLogger(__name__)

# Default data directory
_DEFAULT_DATA_DIR = Path(__file__).parent / "data"


@dataclass
class ScoreRecord:
    """A stored score."""

    id: int
    score: int
    metrics: dict[str, int] = field(default_factory=dict)
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> ScoreRecord:
        """Rebuild a record from one decoded JSONL line.

        Raises KeyError or TypeError when the line decodes but
        does not have the shape ``create_score`` writes.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"record must be an object, got {type(data).__name__}")
        metrics = data.get("metrics", {})
        if not isinstance(metrics, Mapping):
            raise TypeError(f"metrics must be an object, got {type(metrics).__name__}")
        created_at = data.get("created_at", "")
        if not isinstance(created_at, str):
            raise TypeError("created_at must be a string")
        return cls(
            id=_require_int(data["id"], "id"),
            score=_require_int(data["score"], "score"),
            metrics={str(k): _require_int(v, f"metrics.{k}") for k, v in metrics.items()},
            created_at=created_at,
        )


def _require_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    return value


class ScoreStore:
    """Append-only JSONL score store."""

    def __init__(self, data_dir: Path | None = None) -> None:
        self.data_dir = data_dir or _DEFAULT_DATA_DIR
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.scores_file = self.data_dir / "scores.jsonl"
        self._lock = threading.Lock()

    def create_score(self, score: int, metrics: Mapping[str, int]) -> ScoreRecord:
        """Store a score and return it with its assigned id and timestamp."""
        with self._lock:
            records = self._load_records()
            next_id = max((r.id for r in records), default=0) + 1
            record = ScoreRecord(
                id=next_id,
                score=int(score),
                metrics={name: int(metrics.get(name, 0)) for name in METRIC_NAMES},
                created_at=datetime.now(timezone.utc).isoformat(),
            )
            with open(self.scores_file, "a", encoding="utf-8") as f:
                f.write(json.dumps(asdict(record), ensure_ascii=False) + "\n")
        logger.info("Recorded score %d (id %d)", record.score, record.id)
        return record

    def record_result(self, result: ScoreResult) -> ScoreRecord:
        """Store the persisted part of an analysis result: total and metrics."""
        return self.create_score(result.total, result.metrics.as_dict())

    def top_scores(self, limit: int = 10) -> list[ScoreRecord]:
        """Best ``limit`` records; equal scores keep insertion order."""
        if limit <= 0:
            return []
        with self._lock:
            records = self._load_records()
        records.sort(key=lambda r: (-r.score, r.id))
        return records[:limit]

    def count(self) -> int:
        with self._lock:
            return len(self._load_records())

    def _load_records(self) -> list[ScoreRecord]:
        if not self.scores_file.exists():
            return []
        records = []
        with open(self.scores_file, encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    records.append(ScoreRecord.from_dict(json.loads(line)))
                except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                    logger.warning("Skipping corrupt score record at line %d: %s", lineno, e)
        return records


# Singleton
_store: ScoreStore | None = None


def get_score_store(data_dir: Path | None = None) -> ScoreStore:
    """Get or create the global ScoreStore singleton."""
    global _store
    if _store is None:
        _store = ScoreStore(data_dir)
    return _store

# shakefizz/storage.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from shakefizz.config import (
    MAX_FIZZ,
    KEY_BEST_SCORE,
    KEY_BEST_RANK,
    KEY_BEST_DRINK,
    KEY_BEST_TIMESTAMP,
    KEY_FIZZ_REMAINING,
)
from shakefizz.rank import Rank, classify

logger = logging.getLogger(__name__)


class MemoryStore:
    """get/set 만 있는 키-값 저장소. 테스트 더블 겸 기본값."""

    def __init__(self, initial: dict[str, object] | None = None):
        self._values: dict[str, object] = dict(initial or {})

    def get(self, key: str, default: object = None) -> object:
        return self._values.get(key, default)

    def set(self, key: str, value: object) -> None:
        self._values[key] = value


class JsonFileStore:
    """같은 get/set 을 JSON 파일 하나에 저장한다."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _load(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.warning("could not read %s, starting from empty", self.path)
            return {}
        if not isinstance(payload, dict):
            logger.warning("unexpected payload in %s, starting from empty", self.path)
            return {}
        return payload

    def get(self, key: str, default: object = None) -> object:
        return self._load().get(key, default)

    def set(self, key: str, value: object) -> None:
        payload = self._load()
        payload[key] = value
        self.path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


@dataclass(frozen=True)
class BestScoreRecord:
    score: float
    rank: Rank
    drink_id: str | None
    timestamp_label: str | None


class BestScoreBook:
    """저장소 위에 얹은 최고 기록 읽기/쓰기."""

    def __init__(self, store):
        self.store = store

    @property
    def best_score(self) -> float:
        try:
            return float(self.store.get(KEY_BEST_SCORE, 0.0))
        except (TypeError, ValueError):
            logger.warning("stored best score is not a number, treating as 0")
            return 0.0

    def record(self) -> BestScoreRecord:
        score = self.best_score
        try:
            rank = Rank(self.store.get(KEY_BEST_RANK))
        except ValueError:
            rank = classify(score)
        return BestScoreRecord(
            score=score,
            rank=rank,
            drink_id=self.store.get(KEY_BEST_DRINK),
            timestamp_label=self.store.get(KEY_BEST_TIMESTAMP),
        )

    def is_new_best(self, score: float) -> bool:
        return score > self.best_score

    def save(self, score: float, rank: Rank, drink_id: str, timestamp_label: str) -> None:
        self.store.set(KEY_BEST_SCORE, float(score))
        self.store.set(KEY_BEST_RANK, rank.value)
        self.store.set(KEY_BEST_DRINK, drink_id)
        self.store.set(KEY_BEST_TIMESTAMP, timestamp_label)
        logger.info("new best score %.2fm (%s, %s)", score, rank.value, drink_id)


class StaminaWallet:
    """판을 시작할 때마다 fizz 1개를 쓴다. 0 아래로는 안 내려간다."""

    def __init__(self, store, max_fizz: int = MAX_FIZZ):
        self.store = store
        self.max_fizz = max_fizz

    @property
    def fizz_remaining(self) -> int:
        raw = self.store.get(KEY_FIZZ_REMAINING, self.max_fizz)
        try:
            value = int(raw)
        except (TypeError, ValueError):
            logger.warning("stored fizz %r is not an integer, refilling", raw)
            value = self.max_fizz
        return max(0, min(self.max_fizz, value))

    def can_consume(self) -> bool:
        return self.fizz_remaining > 0

    def consume(self) -> bool:
        remaining = self.fizz_remaining
        if remaining <= 0:
            return False
        self.store.set(KEY_FIZZ_REMAINING, remaining - 1)
        return True

    def refill(self, amount: int | None = None) -> int:
        if amount is None:
            target = self.max_fizz
        else:
            target = min(self.max_fizz, self.fizz_remaining + max(0, amount))
        self.store.set(KEY_FIZZ_REMAINING, target)
        return target

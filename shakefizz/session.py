# shakefizz/session.py
import uuid
from dataclasses import dataclass, field
from datetime import datetime

from shakefizz.rank import Rank


@dataclass(frozen=True)
class Session:
    """끝난 플레이 한 판의 결과. 만들어진 뒤로는 바뀌지 않는다."""
    score: float
    rank: Rank
    drink_id: str
    total_impulse_units: int
    duration_played: float
    timestamp: datetime
    is_personal_best: bool = False
    top_speed: float = 0.0
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def timestamp_label(self) -> str:
        return self.timestamp.strftime("%Y-%m-%d %H:%M")

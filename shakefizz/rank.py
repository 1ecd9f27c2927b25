# shakefizz/rank.py
from enum import Enum

from shakefizz.config import RANK_S, RANK_A, RANK_B


class Rank(Enum):
    S = "S"
    A = "A"
    B = "B"
    C = "C"

    @property
    def color_hex(self) -> str:
        return _COLORS[self]

    @property
    def order(self) -> int:
        # 클수록 높은 등급
        return _ORDER[self]

    def __lt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.order < other.order

    def __le__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.order <= other.order

    def __gt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.order > other.order

    def __ge__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.order >= other.order


_COLORS = {
    Rank.S: "#FF00FF",
    Rank.A: "#00FFFF",
    Rank.B: "#FFFF00",
    Rank.C: "#808080",
}

_ORDER = {Rank.C: 0, Rank.B: 1, Rank.A: 2, Rank.S: 3}


def classify(meters: float) -> Rank:
    """
    분출 높이(m) -> 등급.
    각 등급은 하한 포함, 상한은 다음 등급 하한으로 배제. NaN은 C.
    """
    if meters >= RANK_S:
        return Rank.S
    if meters >= RANK_A:
        return Rank.A
    if meters >= RANK_B:
        return Rank.B
    return Rank.C

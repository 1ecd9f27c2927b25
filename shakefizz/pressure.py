# shakefizz/pressure.py
import logging
import math

from shakefizz.config import (
    MOTION_THRESHOLD,
    GAIN_CONSTANT,
    MAX_PRESSURE,
    HEIGHT_SCALE,
    AGITATION_GAIN,
    AGITATION_CAP,
    AGITATION_DECAY,
    AGITATION_EPSILON,
)

logger = logging.getLogger(__name__)


def motion_magnitude(x: float, y: float, z: float) -> float:
    """유저 가속도 벡터(중력 제거된 값)의 크기."""
    return math.sqrt(x * x + y * y + z * z)


class PressureAccumulator:
    """
    흔들기 샘플 / 탭 임펄스를 받아 캔 안의 압력을 쌓는다.
    - current_pressure : 0 ~ MAX_PRESSURE, reset() 전까지 줄지 않음
    - projected_height : 항상 current_pressure * HEIGHT_SCALE
    - agitation        : 출렁임. 안 흔들면 샘플마다 감쇠
    게임 상태는 모른다.
    """

    def __init__(self):
        self.modifier = 1.0
        self.current_pressure = 0.0
        self.projected_height = 0.0
        self.agitation = 0.0

        self.shake_intensity = 0.0
        self.is_shaking = False
        self.peak_magnitude = 0.0

    def reset(self):
        self.current_pressure = 0.0
        self.projected_height = 0.0
        self.agitation = 0.0
        self.shake_intensity = 0.0
        self.is_shaking = False
        self.peak_magnitude = 0.0

    def set_modifier(self, multiplier: float) -> bool:
        """
        음료 fizz 배율. 음수, NaN, inf 는 무시하고 이전 값을 유지한다.
        0 은 받아준다 (fizz 0% 음료는 압력이 안 쌓임).
        """
        if not math.isfinite(multiplier) or multiplier < 0.0:
            logger.warning("ignoring invalid fizz modifier %r", multiplier)
            return False
        self.modifier = float(multiplier)
        return True

    # -------- 입력 --------
    def add_motion_sample(self, magnitude: float):
        if not math.isfinite(magnitude) or magnitude < 0.0:
            magnitude = 0.0

        self.shake_intensity = magnitude
        self.peak_magnitude = max(self.peak_magnitude, magnitude)

        if magnitude > MOTION_THRESHOLD:
            self.is_shaking = True
            gain = magnitude * GAIN_CONSTANT * self.modifier
            self._add_pressure(gain)
            self.agitation = min(
                self.agitation + magnitude * AGITATION_GAIN, AGITATION_CAP
            )
        else:
            self.is_shaking = False
            self.agitation *= AGITATION_DECAY
            if self.agitation < AGITATION_EPSILON:
                self.agitation = 0.0

        self._update_height()

    def add_impulse(self, amount: float):
        """탭 입력. 문턱값, 출렁임 없이 바로 압력에 더한다."""
        if math.isfinite(amount) and amount > 0.0:
            self._add_pressure(amount * self.modifier)
        self._update_height()

    # -------- 내부 --------
    def _add_pressure(self, gain: float):
        self.current_pressure = min(self.current_pressure + gain, MAX_PRESSURE)

    def _update_height(self):
        self.projected_height = self.current_pressure * HEIGHT_SCALE

    @property
    def is_saturated(self) -> bool:
        return self.current_pressure >= MAX_PRESSURE

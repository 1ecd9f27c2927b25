# shakefizz/timer.py
from shakefizz.config import (
    COUNTDOWN_START,
    COUNTDOWN_INTERVAL,
    GO_HOLD_SECONDS,
    PLAY_DURATION,
    TIME_EPSILON,
)


class SessionTimer:
    """
    카운트다운(3-2-1-GO) -> 제한 시간 플레이.
    스스로 시간을 재지 않고, 바깥에서 tick 을 넣어준다.
    IDLE -> COUNTING_DOWN -> RUNNING -> EXPIRED (앞으로만, cancel() 로만 IDLE 복귀)
    """
    PHASE_IDLE = "idle"
    PHASE_COUNTING_DOWN = "counting_down"
    PHASE_RUNNING = "running"
    PHASE_EXPIRED = "expired"

    def __init__(self):
        self.phase = SessionTimer.PHASE_IDLE
        self.countdown_value = 0
        self.duration = PLAY_DURATION
        self.time_remaining = PLAY_DURATION
        self._countdown_clock = 0.0

    # -------- 카운트다운 --------
    def start_countdown(self) -> bool:
        if self.phase != SessionTimer.PHASE_IDLE:
            return False
        self.countdown_value = COUNTDOWN_START
        self._countdown_clock = 0.0
        self.phase = SessionTimer.PHASE_COUNTING_DOWN
        return True

    def tick_countdown(self):
        """COUNTDOWN_INTERVAL 마다 한 번. 1 다음은 0("GO")에서 멈춘다."""
        if self.phase != SessionTimer.PHASE_COUNTING_DOWN:
            return
        if self.countdown_value > 1:
            self.countdown_value -= 1
        else:
            self.countdown_value = 0

    def advance_countdown(self, dt: float) -> bool:
        """
        dt 만큼 카운트다운을 진행.
        "GO"(0)를 GO_HOLD_SECONDS 동안 유지했으면 True.
        """
        if self.phase != SessionTimer.PHASE_COUNTING_DOWN:
            return False

        self._countdown_clock += max(0.0, dt)
        while (self.countdown_value > 0
               and self._countdown_clock + TIME_EPSILON >= COUNTDOWN_INTERVAL):
            self._countdown_clock -= COUNTDOWN_INTERVAL
            self.tick_countdown()

        if self.countdown_value == 0:
            return self._countdown_clock + TIME_EPSILON >= GO_HOLD_SECONDS
        return False

    @property
    def is_counting_down(self) -> bool:
        return self.phase == SessionTimer.PHASE_COUNTING_DOWN

    # -------- 플레이 시간 --------
    def start_running(self, duration: float = PLAY_DURATION) -> bool:
        if self.phase not in (SessionTimer.PHASE_IDLE,
                              SessionTimer.PHASE_COUNTING_DOWN):
            return False
        self.duration = max(0.0, duration)
        self.time_remaining = self.duration
        self.countdown_value = 0
        self.phase = SessionTimer.PHASE_RUNNING
        if self.time_remaining <= 0.0:
            self.phase = SessionTimer.PHASE_EXPIRED
        return True

    def tick_running(self, delta: float):
        if self.phase != SessionTimer.PHASE_RUNNING:
            return
        self.time_remaining = max(0.0, self.time_remaining - max(0.0, delta))
        if self.time_remaining <= TIME_EPSILON:
            self.time_remaining = 0.0
            self.phase = SessionTimer.PHASE_EXPIRED

    @property
    def is_time_up(self) -> bool:
        return self.phase == SessionTimer.PHASE_EXPIRED

    @property
    def elapsed(self) -> float:
        if self.phase in (SessionTimer.PHASE_RUNNING, SessionTimer.PHASE_EXPIRED):
            return self.duration - self.time_remaining
        return 0.0

    def stop(self):
        """플레이 도중 끝내기. 남은 시간은 그대로 두고 더 이상 틱을 받지 않는다."""
        if self.phase == SessionTimer.PHASE_RUNNING:
            self.phase = SessionTimer.PHASE_EXPIRED

    # -------- 취소 --------
    def cancel(self):
        """어느 단계에서든 IDLE 로. 여러 번 불러도 된다."""
        self.phase = SessionTimer.PHASE_IDLE
        self.countdown_value = 0
        self.duration = PLAY_DURATION
        self.time_remaining = PLAY_DURATION
        self._countdown_clock = 0.0

    reset = cancel

# shakefizz/game.py
import logging
import math
from datetime import datetime

from shakefizz.config import PLAY_DURATION, TAP_IMPULSE
from shakefizz.pressure import PressureAccumulator, motion_magnitude
from shakefizz.rank import classify
from shakefizz.session import Session
from shakefizz.storage import MemoryStore, BestScoreBook, StaminaWallet
from shakefizz.timer import SessionTimer

logger = logging.getLogger(__name__)


class GameSessionController:
    """
    한 판의 흐름을 관리한다.
    SELECTION -> SAFETY_ACKNOWLEDGE -> COUNTDOWN -> PLAYING -> RESULT
    RESULT 에서만 SELECTION(리셋) / SAFETY_ACKNOWLEDGE(재도전)으로 돌아간다.
    잘못된 상태에서 불린 조작은 조용히 무시한다.
    """
    STATE_SELECTION = "selection"
    STATE_SAFETY_ACKNOWLEDGE = "safety_acknowledge"
    STATE_COUNTDOWN = "countdown"
    STATE_PLAYING = "playing"
    STATE_RESULT = "result"

    def __init__(self, store=None, play_duration: float = PLAY_DURATION,
                 now=datetime.now):
        if store is None:
            store = MemoryStore()
        self.best_scores = BestScoreBook(store)
        self.wallet = StaminaWallet(store)
        self.play_duration = play_duration
        self._now = now

        self.game_state = GameSessionController.STATE_SELECTION
        self.selected_drink = None
        self.current_session = None

        self.accumulator = PressureAccumulator()
        self.timer = SessionTimer()

        self._listeners = []

    # -------- 구독 --------
    def subscribe(self, callback):
        """상태/값이 바뀔 때마다 callback(controller). 해제 함수를 돌려준다."""
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self):
        for callback in list(self._listeners):
            callback(self)

    def _set_state(self, state: str):
        logger.info("game state %s -> %s", self.game_state, state)
        self.game_state = state

    def _reject(self, action: str) -> bool:
        logger.debug("%s ignored in state %s", action, self.game_state)
        return False

    # -------- 선택 / 경고 --------
    def select_drink(self, drink) -> bool:
        if self.game_state != GameSessionController.STATE_SELECTION:
            return self._reject("select_drink")
        if drink.is_locked:
            logger.debug("drink %s is locked", drink.id)
            return False
        self.selected_drink = drink
        self._notify()
        return True

    def proceed_to_warning(self) -> bool:
        if self.game_state != GameSessionController.STATE_SELECTION:
            return self._reject("proceed_to_warning")
        if self.selected_drink is None:
            logger.debug("proceed_to_warning without a drink")
            return False
        if not self.wallet.can_consume():
            logger.debug("proceed_to_warning with no fizz left")
            return False
        self._set_state(GameSessionController.STATE_SAFETY_ACKNOWLEDGE)
        self._notify()
        return True

    def acknowledge_warning(self) -> bool:
        if self.game_state != GameSessionController.STATE_SAFETY_ACKNOWLEDGE:
            return self._reject("acknowledge_warning")
        if self.selected_drink is None:
            return self._reject("acknowledge_warning")
        # 상태 전이 전에 fizz 를 먼저 차감, 실패하면 그대로 머문다
        if not self.wallet.consume():
            logger.debug("acknowledge_warning with no fizz left")
            return False

        self.accumulator.reset()
        self.accumulator.set_modifier(self.selected_drink.fizz_modifier)
        self.timer.cancel()
        self.timer.start_countdown()
        self.current_session = None
        self._set_state(GameSessionController.STATE_COUNTDOWN)
        self._notify()
        return True

    # -------- 시간 --------
    def tick(self, dt: float):
        """바깥 스케줄러가 넣어주는 경과 시간(초). 모든 타이머는 여기로만 진행된다."""
        if not math.isfinite(dt) or dt <= 0.0:
            return

        if self.game_state == GameSessionController.STATE_COUNTDOWN:
            before = self.timer.countdown_value
            if self.timer.advance_countdown(dt):
                self.timer.start_running(self.play_duration)
                self._set_state(GameSessionController.STATE_PLAYING)
                self._notify()
            elif self.timer.countdown_value != before:
                self._notify()

        elif self.game_state == GameSessionController.STATE_PLAYING:
            self.timer.tick_running(dt)
            if self.timer.is_time_up:
                self._finish()
            else:
                self._notify()

    # -------- 플레이 입력 --------
    def add_motion_sample(self, magnitude: float) -> bool:
        if self.game_state != GameSessionController.STATE_PLAYING:
            return False
        self.accumulator.add_motion_sample(magnitude)
        self._notify()
        return True

    def add_acceleration(self, x: float, y: float, z: float) -> bool:
        return self.add_motion_sample(motion_magnitude(x, y, z))

    def tap(self) -> bool:
        if self.game_state != GameSessionController.STATE_PLAYING:
            return False
        self.accumulator.add_impulse(TAP_IMPULSE)
        self._notify()
        return True

    def finish_session(self) -> bool:
        if self.game_state != GameSessionController.STATE_PLAYING:
            return self._reject("finish_session")
        self._finish()
        return True

    def _finish(self):
        self._stop_play()

        drink = self.selected_drink
        score = self.accumulator.projected_height
        rank = classify(score)
        timestamp = self._now()
        is_best = self.best_scores.is_new_best(score)

        session = Session(
            score=score,
            rank=rank,
            drink_id=drink.id,
            total_impulse_units=int(math.floor(self.accumulator.current_pressure)),
            duration_played=self.timer.elapsed,
            timestamp=timestamp,
            is_personal_best=is_best,
            top_speed=self.accumulator.peak_magnitude,
        )
        if is_best:
            self.best_scores.save(score, rank, drink.id, session.timestamp_label)

        self.current_session = session
        logger.info("session finished: %.2fm rank %s (%s)", score, rank.value, drink.id)
        self._set_state(GameSessionController.STATE_RESULT)
        self._notify()

    def _stop_play(self):
        # 센싱 중단 + 타이머 무효화. 몇 번 불러도 괜찮다.
        self.timer.stop()

    # -------- 리셋 / 재도전 --------
    def reset_game(self):
        self.timer.cancel()
        self.accumulator.reset()
        self.current_session = None
        self._set_state(GameSessionController.STATE_SELECTION)
        self._notify()

    def retry_game(self) -> bool:
        if self.game_state != GameSessionController.STATE_RESULT:
            return self._reject("retry_game")
        self.timer.cancel()
        self.accumulator.reset()
        self.current_session = None
        self._set_state(GameSessionController.STATE_SAFETY_ACKNOWLEDGE)
        self._notify()
        return True

    # -------- 읽기 --------
    @property
    def current_pressure(self) -> float:
        return self.accumulator.current_pressure

    @property
    def projected_height(self) -> float:
        return self.accumulator.projected_height

    @property
    def agitation(self) -> float:
        return self.accumulator.agitation

    @property
    def countdown_value(self) -> int:
        return self.timer.countdown_value

    @property
    def time_remaining(self) -> float:
        return self.timer.time_remaining

    @property
    def fizz_remaining(self) -> int:
        return self.wallet.fizz_remaining

    def refill_fizz(self, amount=None) -> int:
        remaining = self.wallet.refill(amount)
        self._notify()
        return remaining

# shakefizz/hud.py
class SelectionHud:
    """
    선택 화면에 띄우는 fizz 수 / 최고 기록 캐시.
    매 프레임 저장소를 읽지 않고, 컨트롤러 알림이 올 때만 다시 읽는다.
    플레이 중 틱 알림은 상태가 바뀔 때만 반영.
    """

    def __init__(self, game):
        self.game = game
        self._last_state = game.game_state
        self.refresh()
        self.unsubscribe = game.subscribe(self._on_change)

    def refresh(self):
        self.fizz_remaining = self.game.fizz_remaining
        self.best = self.game.best_scores.record()

    def _on_change(self, game):
        changed = game.game_state != self._last_state
        self._last_state = game.game_state
        if changed or game.game_state == game.STATE_SELECTION:
            self.refresh()

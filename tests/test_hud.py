from __future__ import annotations

from shakefizz.drinks import ULTRA_COLA
from shakefizz.game import GameSessionController
from shakefizz.hud import SelectionHud
from shakefizz.storage import MemoryStore


class CountingStore(MemoryStore):
    def __init__(self, initial=None):
        super().__init__(initial)
        self.reads = 0

    def get(self, key, default=None):
        self.reads += 1
        return super().get(key, default)


def test_hud_does_not_read_store_on_every_tick() -> None:
    store = CountingStore()
    game = GameSessionController(store=store)
    hud = SelectionHud(game)
    game.select_drink(ULTRA_COLA)
    game.proceed_to_warning()
    game.acknowledge_warning()
    for _ in range(4):
        game.tick(1.0)
    assert game.game_state == GameSessionController.STATE_PLAYING

    reads_before = store.reads
    for _ in range(60):
        game.tick(0.01)
        hud.fizz_remaining
        hud.best

    assert store.reads == reads_before


def test_hud_refreshes_after_refill_and_result() -> None:
    game = GameSessionController(store=MemoryStore({"fizz_remaining": 1}))
    hud = SelectionHud(game)
    assert hud.fizz_remaining == 1

    game.refill_fizz()
    assert hud.fizz_remaining == 5

    game.select_drink(ULTRA_COLA)
    game.proceed_to_warning()
    game.acknowledge_warning()
    assert hud.fizz_remaining == 4
    for _ in range(4):
        game.tick(1.0)
    for _ in range(10):
        game.tap()
    game.finish_session()

    assert hud.best.score == game.current_session.score


def test_hud_stops_listening_after_unsubscribe() -> None:
    game = GameSessionController(store=MemoryStore())
    hud = SelectionHud(game)
    hud.unsubscribe()

    game.refill_fizz(0)
    game.wallet.consume()
    game.refill_fizz(0)

    assert hud.fizz_remaining == 5

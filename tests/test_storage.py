from __future__ import annotations

import json

from shakefizz.rank import Rank
from shakefizz.storage import BestScoreBook, JsonFileStore, MemoryStore, StaminaWallet


def test_memory_store_get_set() -> None:
    store = MemoryStore({"a": 1})

    store.set("b", 2)

    assert store.get("a") == 1
    assert store.get("b") == 2
    assert store.get("missing", "x") == "x"


def test_json_store_persists_between_instances(tmp_path) -> None:
    path = tmp_path / "save.json"
    JsonFileStore(path).set("best_score", 12.5)

    assert JsonFileStore(path).get("best_score") == 12.5
    assert json.loads(path.read_text(encoding="utf-8")) == {"best_score": 12.5}


def test_json_store_treats_broken_file_as_empty(tmp_path) -> None:
    path = tmp_path / "save.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileStore(path)

    assert store.get("best_score", 0.0) == 0.0

    store.set("best_score", 3.0)
    assert store.get("best_score") == 3.0


def test_json_store_ignores_non_object_payload(tmp_path) -> None:
    path = tmp_path / "save.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert JsonFileStore(path).get("fizz_remaining") is None


def test_best_score_book_round_trip() -> None:
    book = BestScoreBook(MemoryStore())
    assert book.best_score == 0.0
    assert book.is_new_best(0.1)
    assert not book.is_new_best(0.0)

    book.save(21.0, Rank.S, "ultra_cola", "2026-10-19 12:00")
    record = book.record()

    assert record.score == 21.0
    assert record.rank is Rank.S
    assert record.drink_id == "ultra_cola"
    assert record.timestamp_label == "2026-10-19 12:00"
    assert not book.is_new_best(21.0)


def test_best_score_book_survives_garbage() -> None:
    book = BestScoreBook(MemoryStore({"best_score": "lots", "best_rank": "Z"}))

    assert book.best_score == 0.0
    assert book.record().rank is Rank.C


def test_wallet_starts_full_and_stops_at_zero() -> None:
    wallet = StaminaWallet(MemoryStore(), max_fizz=2)
    assert wallet.fizz_remaining == 2

    assert wallet.consume()
    assert wallet.consume()
    assert wallet.consume() is False
    assert wallet.fizz_remaining == 0
    assert not wallet.can_consume()


def test_wallet_refill_is_capped() -> None:
    wallet = StaminaWallet(MemoryStore({"fizz_remaining": 1}), max_fizz=5)

    assert wallet.refill(2) == 3
    assert wallet.refill(10) == 5
    assert wallet.refill(-4) == 5
    wallet.consume()
    assert wallet.refill() == 5


def test_wallet_clamps_stored_values() -> None:
    assert StaminaWallet(MemoryStore({"fizz_remaining": -3})).fizz_remaining == 0
    assert StaminaWallet(MemoryStore({"fizz_remaining": 99}), max_fizz=5).fizz_remaining == 5
    assert StaminaWallet(MemoryStore({"fizz_remaining": "?"}), max_fizz=4).fizz_remaining == 4

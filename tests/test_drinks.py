from __future__ import annotations

import dataclasses

import pytest

from shakefizz.drinks import DRINKS, DrinkProfile, get_drink, unlocked_drinks


def test_catalog_matches_known_drinks() -> None:
    assert [d.id for d in DRINKS] == ["ultra_cola", "lime_burst", "beast_fuel", "ginger_shock"]
    assert get_drink("ultra_cola").fizz_modifier == pytest.approx(0.85)
    assert get_drink("ginger_shock").is_locked


def test_unlocked_drinks_excludes_locked() -> None:
    assert all(not d.is_locked for d in unlocked_drinks())
    assert len(unlocked_drinks()) == 3


def test_profiles_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DRINKS[0].fizz_percent = 10


@pytest.mark.parametrize("fizz", [-1, 101])
def test_out_of_range_fizz_is_rejected(fizz: int) -> None:
    with pytest.raises(ValueError):
        DrinkProfile("flat", "FLAT", fizz)


def test_unknown_drink_raises_key_error() -> None:
    with pytest.raises(KeyError):
        get_drink("water")

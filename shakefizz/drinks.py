# shakefizz/drinks.py
from dataclasses import dataclass


@dataclass(frozen=True)
class DrinkProfile:
    """선택 가능한 음료 하나. 런타임에 바뀌지 않는다."""
    id: str
    display_name: str
    fizz_percent: int
    speed_percent: int = 50
    power_percent: int = 50
    is_locked: bool = False

    def __post_init__(self):
        for name in ("fizz_percent", "speed_percent", "power_percent"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"{self.id}: {name} must be 0..100, got {value}")

    @property
    def fizz_modifier(self) -> float:
        return self.fizz_percent / 100.0


ULTRA_COLA = DrinkProfile("ultra_cola", "ULTRA COLA", 85, 60, 70)
LIME_BURST = DrinkProfile("lime_burst", "LIME BURST", 70, 92, 60)
BEAST_FUEL = DrinkProfile("beast_fuel", "BEAST FUEL", 60, 80, 98)
GINGER_SHOCK = DrinkProfile("ginger_shock", "GINGER SHOCK", 95, 50, 90, is_locked=True)

DRINKS = (ULTRA_COLA, LIME_BURST, BEAST_FUEL, GINGER_SHOCK)

_BY_ID = {d.id: d for d in DRINKS}


def get_drink(drink_id: str) -> DrinkProfile:
    return _BY_ID[drink_id]


def unlocked_drinks():
    return [d for d in DRINKS if not d.is_locked]

"""Shop items and battle skills."""

from dataclasses import dataclass


def _percent_of(value: int, percent: int) -> int:
    """Scale ``value`` by ``percent`` / 100, truncating toward zero."""
    product = value * percent
    quotient = abs(product) // 100
    return quotient if product >= 0 else -quotient


@dataclass(frozen=True)
class Item:
    """Something sold in the shop.

    ``attack_plus`` and ``defense_plus`` are percentage multipliers
    (100 leaves a stat unchanged); ``heal_amount`` is non-zero for consumables.
    """

    name: str
    price: int
    attack_plus: int
    defense_plus: int
    heal_amount: int


@dataclass(frozen=True)
class Skill:
    """An attack with a base damage and a success chance in percent."""

    name: str
    damage: int
    success_rate: int

    def calculate_damage(self, player_attack_percent: int) -> int:
        """Damage after applying the player's attack percentage."""
        return _percent_of(self.damage, player_attack_percent)
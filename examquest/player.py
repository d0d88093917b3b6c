"""The player character: stats, gold, experience, grades and items."""

from __future__ import annotations

import math
from typing import Optional

from .character import Character
from .items import Item

PLAYER_MAX_HP = 100
MONSTER_ITEM_LIMIT = 5
MONSTER_HEAL = 30
_PERMANENT_ITEM_IDS = frozenset({1, 2, 3})


def _percent_of(value: int, percent: int) -> int:
    product = value * percent
    quotient = abs(product) // 100
    return quotient if product >= 0 else -quotient


class Player(Character):
    """The student who has to get through the exams."""

    def __init__(self, name: str = "") -> None:
        super().__init__(100, 100, 100)
        self.name = name
        self.gold = 5000
        self.xp = 0
        self.max_xp = 1000
        self.level = 1
        self.gpa = 0.0
        self.inventory: list[Item] = []
        self.monster_item_count = 0
        self._purchased: set[int] = set()

    def is_item_purchased(self, item_id: int) -> bool:
        """Whether permanent item 1, 2 or 3 has been bought."""
        return item_id in self._purchased

    def purchase_item(self, item_id: int) -> None:
        """Mark permanent item 1, 2 or 3 as bought; other ids are ignored."""
        if item_id in _PERMANENT_ITEM_IDS:
            self._purchased.add(item_id)

    def add_item(self, item: Item) -> None:
        self.inventory.append(item)

    def add_gold(self, amount: int) -> None:
        self.gold += amount

    def add_hp(self, amount: int) -> None:
        """Heal, capped at the base maximum of 100 hit points."""
        self.hp = min(self.hp + amount, PLAYER_MAX_HP)

    def add_attack_multiplier(self, percent: int) -> None:
        """Scale attack by ``percent`` (120 means 1.2 times)."""
        self.attack = _percent_of(self.attack, percent)

    def add_defense_multiplier(self, percent: int) -> None:
        """Scale defence by ``percent`` (120 means 1.2 times)."""
        self.defense = _percent_of(self.defense, percent)

    def level_up(self) -> Optional[str]:
        """Apply any pending level gain; return the announcement, if any."""
        if self.xp < self.max_xp:
            return None
        self.level += self.xp // self.max_xp
        self.xp %= self.max_xp
        self.max_hp += 20
        self.hp = self.max_hp
        return f"{self.name} 님이 레벨 {self.level}로 상승했습니다!"

    def add_xp(self, amount: int) -> Optional[str]:
        """Gain experience and level up if enough has been collected."""
        self.xp += amount
        return self.level_up()

    def add_gpa(self, gpa: float) -> None:
        """Add the grade points earned in one exam."""
        self.gpa += gpa

    def average_gpa(self, remaining_bosses: int) -> float:
        """Average grade over the exams taken, out of three in total."""
        if self.gpa == 0:
            return 0.0
        taken = 3 - remaining_bosses
        if taken == 0:
            average = math.copysign(math.inf, self.gpa)
        else:
            average = self.gpa / taken
        return max(average, 0.0)

    def use_monster_item(self) -> bool:
        """Drink an energy drink to heal; False when none are left."""
        if self.monster_item_count <= 0:
            return False
        self.add_hp(MONSTER_HEAL)
        self.monster_item_count -= 1
        return True

    def add_monster_item(self) -> None:
        """Gain one energy drink, holding at most five."""
        if self.monster_item_count < MONSTER_ITEM_LIMIT:
            self.monster_item_count += 1
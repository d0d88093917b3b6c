"""Combatants: the shared character base and the exam bosses."""


class Character:
    """A combatant with hit points, attack and defence percentages."""

    def __init__(self, max_hp: int, attack: int, defense: int) -> None:
        self.max_hp = max_hp
        self.hp = max_hp
        self.attack = attack
        self.defense = defense

    def take_damage(self, amount: int) -> None:
        """Lose ``amount`` hit points, never dropping below zero."""
        self.hp = max(self.hp - amount, 0)

    def is_alive(self) -> bool:
        return self.hp > 0

    def is_dead(self) -> bool:
        return self.hp <= 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(hp={self.hp}/{self.max_hp}, "
            f"attack={self.attack}, defense={self.defense})"
        )


class Boss(Character):
    """A named opponent: a professor or a classmate."""

    def __init__(self, name: str, max_hp: int, attack: int, defense: int) -> None:
        super().__init__(max_hp, attack, defense)
        self.name = name

    def __repr__(self) -> str:
        return (
            f"Boss(name={self.name!r}, hp={self.hp}/{self.max_hp}, "
            f"attack={self.attack}, defense={self.defense})"
        )
"""The campus store where gold buys study gear and energy drinks."""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from .items import Item
from .player import MONSTER_ITEM_LIMIT, Player
from .story import Console

_INTEGER = re.compile(r"\s*([+-]?\d+)")
_HEADER_RULE = "==========================\n"

SHOP_ITEMS = (
    Item("전공책", 1500, 120, 100, 0),
    Item("계산기", 1000, 110, 100, 0),
    Item("휴대폰", 4000, 130, 100, 0),
    Item("몬스터", 2000, 100, 100, 30),
)


class PurchaseResult(Enum):
    """The outcome of trying to buy something."""

    PURCHASED = "purchased"
    ALREADY_OWNED = "already_owned"
    NOT_ENOUGH_GOLD = "not_enough_gold"
    LIMIT_REACHED = "limit_reached"
    CANCELLED = "cancelled"


class Shop:
    """Sells permanent stat items and consumable energy drinks."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console if console is not None else Console()
        self.items = SHOP_ITEMS

    @property
    def back_choice(self) -> int:
        return len(self.items) + 1

    def purchase(self, player: Player, choice: int) -> PurchaseResult:
        """Buy the item numbered ``choice`` (from 1); the last number goes back."""
        if not 1 <= choice <= self.back_choice:
            raise ValueError(f"no shop entry numbered {choice}")
        if choice == self.back_choice:
            return PurchaseResult.CANCELLED
        item = self.items[choice - 1]
        consumable = item.heal_amount != 0
        if not consumable and player.is_item_purchased(choice):
            return PurchaseResult.ALREADY_OWNED
        if player.gold < item.price:
            return PurchaseResult.NOT_ENOUGH_GOLD
        if consumable:
            if player.monster_item_count >= MONSTER_ITEM_LIMIT:
                return PurchaseResult.LIMIT_REACHED
            player.add_gold(-item.price)
            player.add_monster_item()
            player.add_attack_multiplier(item.attack_plus)
            return PurchaseResult.PURCHASED
        player.add_gold(-item.price)
        player.purchase_item(choice)
        player.add_attack_multiplier(item.attack_plus)
        player.add_defense_multiplier(item.defense_plus)
        return PurchaseResult.PURCHASED

    def _read_choice(self) -> int:
        """Read a number like a stream extraction; anything else reads as 0."""
        while True:
            line = self.console.read_line()
            if line.strip():
                break
        match = _INTEGER.match(line)
        return int(match.group(1)) if match else 0

    def _header(self, player: Player) -> str:
        return (
            "\n"
            + _HEADER_RULE
            + "    상점에 들어왔습니다!   \n"
            + _HEADER_RULE
            + f" 현재 잔액 : {player.gold}원\n"
            + f" 현재 체력 : {player.hp} / {player.max_hp} HP\n"
            + f" 현재 공격력 : {player.attack}%\n"
            + f" 현재 방어력 : {player.defense}%\n"
            + _HEADER_RULE
        )

    def enter(self, player: Player) -> None:
        """Run the shop menu until the player leaves."""
        console = self.console
        while True:
            console.clear()
            console.write(self._header(player))
            console.write("1. 아이템 구매\n2. 상점 나가기\n선택 : ")
            choice = self._read_choice()
            if choice == 1:
                self.buy_item(player)
            elif choice == 2:
                console.write("\n상점에서 나갑니다.\n")
                console.pause(2)
                return
            else:
                console.write("잘못된 선택입니다. 다시 입력하세요.\n")
                console.pause(2)

    def _catalogue(self, player: Player) -> str:
        lines = ["\n판매 중인 아이템 "]
        for number, item in enumerate(self.items, start=1):
            entry = f"{number}. {item.name} : {item.price}원"
            if item.heal_amount != 0:
                entry += f" [보유: {player.monster_item_count}/{MONSTER_ITEM_LIMIT}]"
            elif player.is_item_purchased(number):
                entry += "(구매완료)"
            lines.append(entry)
        lines.append(f"{self.back_choice}. 돌아가기")
        return "\n".join(lines) + "\n선택 : "

    def buy_item(self, player: Player) -> PurchaseResult:
        """Let the player pick one item and report how the purchase went."""
        console = self.console
        while True:
            console.clear()
            console.write(self._header(player))
            console.write(self._catalogue(player))
            choice = self._read_choice()
            if 1 <= choice <= self.back_choice:
                break
            console.write("잘못된 선택입니다. 다시 입력하세요.\n")
            console.pause(1.5)

        result = self.purchase(player, choice)
        if result is PurchaseResult.CANCELLED:
            return result
        item = self.items[choice - 1]
        if result is PurchaseResult.ALREADY_OWNED:
            console.write("\n이미 구매한 아이템입니다.\n")
            console.pause(2)
        elif result is PurchaseResult.NOT_ENOUGH_GOLD:
            console.write("\n잔액이 부족합니다.\n")
            console.pause(2)
            console.write("돈을 더 벌고 구매해주세요.\n")
            console.pause(2)
        elif result is PurchaseResult.LIMIT_REACHED:
            console.write(
                f"\n이 아이템은 최대 {MONSTER_ITEM_LIMIT}개까지 구매할 수 있습니다.\n"
            )
            console.pause(2)
        elif item.heal_amount != 0:
            console.write(f"\n{item.name}을(를) 구매했습니다.\n")
            console.pause(1)
            console.write(f"{item.price}원이 차감됩니다.\n")
            console.pause(1)
            console.write(
                f"몬스터 아이템 보유 수량: {player.monster_item_count}"
                f"/{MONSTER_ITEM_LIMIT}\n"
            )
            console.pause(1.5)
        else:
            console.write(f"\n{item.name}을(를) 구매했습니다.\n")
            console.pause(2)
            console.write(f"{item.price}원이 차감됩니다.\n")
            console.pause(2)
        return result
"""Turn-based exam battles against professors and classmates."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Protocol

from .character import Boss, Character
from .items import Skill
from .player import Player
from .story import Console

BASIC_ATTACK = Skill("평타", 10, 100)
GUESS = Skill("찍기", 50, 50)
CHEAT = Skill("컨닝", 70, 30)
SKILLS = {"1": BASIC_ATTACK, "2": GUESS, "3": CHEAT}

BOSS_SUCCESS_RATE = 70
MIN_BOSS_DAMAGE = 5
MIN_DAMAGE_TO_PLAYER = 1

_STATUS_RULE = "===========================\n"
_RESULT_RULE = "====================\n"
_LABEL_WIDTH = 12


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class _Reward:
    min_hp: int
    gold: int
    xp: int
    gpa: Optional[float] = None
    message: str = ""


@dataclass(frozen=True)
class _Encounter:
    solve_label: str
    victory_message: str
    rewards: tuple
    taunt: Optional[str] = None


_EXAM = _Encounter(
    solve_label="1. 문제 풀기\n",
    victory_message="시험지를 다 풀었습니다!\n",
    rewards=(
        _Reward(70, 1000, 800, 4.0, "문제를 다 맞아 A학점을 맞았습니다!\n\n"),
        _Reward(40, 800, 600, 3.0, "몇몇 문제를 틀려 B학점을 맞았습니다!\n\n"),
        _Reward(1, 500, 300, 2.0, "많은 문제를 틀려 C학점을 맞았습니다!\n\n"),
    ),
    taunt=" : 이 문제도 풀어보시지!\n",
)

_FRIEND = _Encounter(
    solve_label="1. 문제 풀어주기\n",
    victory_message="문제를 풀어주고 지식을 습득했습니다!\n",
    rewards=(
        _Reward(70, 400, 300),
        _Reward(1, 300, 200),
    ),
)


def _pad_label(label: str) -> str:
    """Left-align ``label`` in a field measured in UTF-8 bytes."""
    padding = _LABEL_WIDTH - len(label.encode("utf-8"))
    return label + " " * max(padding, 0)


class BattleSystem:
    """Runs battles on a console, drawing hit chances from ``rng``."""

    def __init__(
        self,
        console: Optional[Console] = None,
        rng: Optional[_RandomSource] = None,
    ) -> None:
        self.console = console if console is not None else Console()
        self.rng = rng if rng is not None else random.Random()
        self._pending = ""

    def _read_choice(self, keep_rest: bool = False) -> str:
        """Read the next non-blank character typed.

        Unless ``keep_rest`` is set, the rest of that input line is dropped.
        """
        while not self._pending.strip():
            self._pending = self.console.read_line()
        text = self._pending.lstrip()
        self._pending = text[1:] if keep_rest else ""
        return text[0]

    def is_attack_successful(self, success_rate: int) -> bool:
        """Roll a percentage and compare it with ``success_rate``."""
        return self.rng.randrange(100) < success_rate

    def status_text(self, player: Player, boss: Boss) -> str:
        """The hit point panel shown during a battle."""
        return (
            _STATUS_RULE
            + f"{_pad_label('플레이어')} : {player.hp:>3} / {player.max_hp:>3} HP\n"
            + f"{_pad_label(boss.name)} : {boss.hp:>3} / {boss.max_hp:>3} HP\n"
            + _STATUS_RULE
            + "\n"
        )

    def attack(
        self, attacker: Character, defender: Character, damage: int, success_rate: int
    ) -> int:
        """Attempt one attack and return the damage dealt (0 on a miss).

        A player defending reduces the damage by their defence percentage.
        """
        console = self.console
        console.write(f"{attacker.name}의 공격!\n")
        dealt = 0
        if self.is_attack_successful(success_rate):
            dealt = damage
            if isinstance(defender, Player):
                dealt = max(damage * 100 // defender.defense, MIN_DAMAGE_TO_PLAYER)
            defender.take_damage(dealt)
            message = f"공격 성공! {defender.name}에게 {dealt} 피해!"
            if dealt != damage:
                message += f" (기본 {damage}에서 방어력 {defender.defense}% 반영)"
            console.write(message + "\n")
        else:
            console.write("공격 실패!\n")
        console.pause(1)
        return dealt

    def _skill_menu(self, player: Player) -> str:
        lines = ["\n어떤 공격을 사용할까요?"]
        for key, skill in SKILLS.items():
            lines.append(
                f"{key}. {skill.name} ({skill.calculate_damage(player.attack)} 데미지, "
                f"{skill.success_rate}% 성공)"
            )
        return "\n".join(lines) + "\n선택: "

    def _reward(self, player: Player, encounter: _Encounter) -> None:
        for reward in encounter.rewards:
            if player.hp >= reward.min_hp:
                self.console.write(reward.message)
                player.add_gold(reward.gold)
                if reward.gpa is not None:
                    player.add_gpa(reward.gpa)
                announcement = player.add_xp(reward.xp)
                if announcement:
                    self.console.write(announcement + "\n")
                return

    def _use_item(self, player: Player) -> bool:
        """Offer the item menu; False when there was nothing to use."""
        console = self.console
        if player.monster_item_count <= 0:
            console.write("아이템이 없습니다.\n")
            console.pause(1)
            console.clear()
            return False
        console.write("\n1. 몬스터\n2. 돌아가기\n선택: ")
        if self._read_choice() == "1":
            if player.use_monster_item():
                console.write("몬스터 아이템을 사용하여 체력을 회복했습니다!\n")
            else:
                console.write("몬스터 아이템이 없습니다.\n")
            console.pause(1)
        return True

    def _battle(self, player: Player, boss: Boss, encounter: _Encounter) -> bool:
        console = self.console
        while True:
            if encounter.taunt is not None:
                console.write(boss.name + encounter.taunt)
            console.write("======== 전투 화면 ========\n")
            console.write(self.status_text(player, boss))
            console.write(encounter.solve_label + "2. 아이템 사용\n선택: ")
            choice = self._read_choice()

            if choice == "1":
                console.write(self._skill_menu(player))
                skill = SKILLS.get(self._read_choice(keep_rest=True))
                if skill is None:
                    console.write("잘못된 입력입니다.\n")
                    console.pause(1)
                    console.clear()
                    continue
                console.clear()
                console.write(self.status_text(player, boss))
                self.attack(
                    player, boss, skill.calculate_damage(player.attack), skill.success_rate
                )
                if boss.is_dead():
                    console.clear()
                    console.write(_RESULT_RULE + encounter.victory_message + _RESULT_RULE)
                    self._reward(player, encounter)
                    return True

                boss_damage = max(boss.attack * 100 // player.defense, MIN_BOSS_DAMAGE)
                self.attack(boss, player, boss_damage, BOSS_SUCCESS_RATE)
                if player.is_dead():
                    console.clear()
                    console.write(
                        _RESULT_RULE
                        + "문제를 다 풀지 못했습니다! 게임 오버!\n"
                        + _RESULT_RULE
                    )
                    return False
            elif choice == "2":
                if not self._use_item(player):
                    continue
            else:
                console.write("알맞은 옵션을 선택해주세요.\n")
                console.pause(1.5)
            console.clear()

    def fight(self, player: Player, boss: Boss) -> bool:
        """Sit a professor's exam; True if the exam was finished."""
        console = self.console
        console.clear()
        console.write(f"{player.name}(이)가 {boss.name}에게 시험지를 받았다!\n")
        console.pause(1)
        console.clear()
        return self._battle(player, boss, _EXAM)

    def fight_friend(self, player: Player, boss: Boss) -> bool:
        """Meet a classmate who may ask for help; True if helped to the end."""
        console = self.console
        console.clear()
        console.write(f"{player.name}(이)가 {boss.name}에게 붙잡혔다!\n")
        console.pause(1)
        console.clear()
        while True:
            console.write(
                f"{boss.name} : 이거 어떻게 풀어?\n"
                "======== 선택 화면 ========\n"
                "1. 친구의 물음에 응한다\n"
                "2. 무시한다\n"
                "선택: "
            )
            choice = self._read_choice()
            if choice == "2":
                console.write("친구의 물음을 무시하고 지나칩니다.\n")
                return False
            if choice == "1":
                break
            console.write("잘못된 입력입니다. 다시 선택해주세요.\n")
            console.pause(1)
            console.clear()
        console.clear()
        return self._battle(player, boss, _FRIEND)
"""The game loop: walking the campus, meeting classmates and sitting exams."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

from .battle import BattleSystem
from .character import Boss
from .gamemap import GameMap
from .player import Player
from .shop import Shop
from .story import (
    PRESS_ANY_KEY,
    Console,
    print_boss_encounter_story,
    print_line,
    print_lose_story,
    print_start_story,
    print_win_story,
    show_ending,
)

START_POSITION = (1, 1)
PROFESSOR_MARK = "교수님"
FRIEND_CHANCE = 5
FRIEND_FIRST_INDEX = 3
FRIEND_COUNT = 3

BOSS_POSITIONS = {
    (21, 2): 0,
    (6, 14): 1,
    (24, 18): 2,
}

_MOVES = {
    "w": (0, -1),
    "s": (0, 1),
    "a": (-1, 0),
    "d": (1, 0),
}
_WALKABLE = frozenset({" ", "S", "B"})


def default_bosses() -> list[Boss]:
    """The three professors followed by the three classmates."""
    return [
        Boss("김코딩 교수님", 100, 40, 10),
        Boss("조객체 교수님", 100, 50, 5),
        Boss("박게임 교수님", 100, 30, 30),
        Boss("친구1", 80, 20, 1),
        Boss("친구2", 80, 10, 3),
        Boss("친구3", 80, 5, 5),
    ]


class Controller:
    """Moves the player around the map and starts shops and battles."""

    def __init__(
        self,
        player: Player,
        bosses: Sequence[Boss],
        game_map: GameMap,
        console: Optional[Console] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.player = player
        self.bosses = list(bosses)
        self.game_map = game_map
        self.console = console if console is not None else Console()
        self.rng = rng if rng is not None else random.Random()
        self.defeated = [False] * len(self.bosses)
        self.boss_positions = dict(BOSS_POSITIONS)
        self.player_x, self.player_y = START_POSITION

    @property
    def position(self) -> tuple[int, int]:
        return (self.player_x, self.player_y)

    def remaining_boss_count(self) -> int:
        """Professors whose exams have not been taken yet."""
        return sum(
            1
            for boss, done in zip(self.bosses, self.defeated)
            if not done and PROFESSOR_MARK in boss.name
        )

    def _battle_system(self) -> BattleSystem:
        return BattleSystem(self.console, self.rng)

    def _wake_in_dorm_if_fainted(self) -> bool:
        """Send a knocked-out player back to the start with full health."""
        if self.remaining_boss_count() == 0 or not self.player.is_dead():
            return False
        self.console.clear()
        print_line(self.console, "플레이어가 기절했다가 기숙사에서 깨어났습니다..\n")
        self.console.write(PRESS_ANY_KEY)
        self.console.read_key()
        self.player.hp = self.player.max_hp
        self.player_x, self.player_y = START_POSITION
        return True

    def move_player(self, key: str) -> bool:
        """Step in the direction of a WASD key; True if the player moved."""
        step = _MOVES.get(key.lower()) if len(key) == 1 else None
        if step is None:
            return False
        new_x, new_y = self.player_x + step[0], self.player_y + step[1]
        if self.game_map.get_tile(new_x, new_y) not in _WALKABLE:
            return False
        self.player_x, self.player_y = new_x, new_y

        if self.rng.randrange(100) < FRIEND_CHANCE:
            friend = self.bosses[FRIEND_FIRST_INDEX + self.rng.randrange(FRIEND_COUNT)]
            self.console.write(f"{friend.name}와(과) 조우했습니다!\n")
            self._battle_system().fight_friend(self.player, friend)
            friend.hp = friend.max_hp
            self.console.pause(1.5)
            self._wake_in_dorm_if_fainted()
        return True

    def _face_professor(self, index: int) -> None:
        console = self.console
        boss = self.bosses[index]
        print_boss_encounter_story(console, self.player)
        self._battle_system().fight(self.player, boss)
        self.defeated[index] = True
        self.game_map.set_tile(self.player_x, self.player_y, " ")
        if boss.is_dead():
            console.write(f"\n{boss.name} 을(를) 처치했습니다!\n\n")
            print_win_story(console, self.player)
        else:
            console.write(f"\n{boss.name} 과의 전투에서 패배했습니다...\n\n")
            print_lose_story(console, self.player)

    def start_game(self) -> None:
        """Ask for a name, tell the story and run until quit or the end."""
        console = self.console
        player = self.player
        player.name = console.read_line("주인공의 이름을 입력하세요 : ")
        console.clear()
        print_start_story(console, player)

        self.game_map.initialize()
        for x, y in self.boss_positions:
            self.game_map.set_tile(x, y, "B")

        while True:
            self.game_map.show(
                console, player, self.player_x, self.player_y, self.remaining_boss_count()
            )
            key = console.read_key()
            if key in ("q", "Q"):
                break
            if not self.move_player(key):
                continue

            if self.game_map.get_tile(self.player_x, self.player_y) == "S":
                Shop(console).enter(player)

            index = self.boss_positions.get(self.position)
            if index is not None and not self.defeated[index]:
                self._face_professor(index)
                if self._wake_in_dorm_if_fainted():
                    continue

            if self.remaining_boss_count() <= 0:
                show_ending(console, player)
                break

        console.write("\n게임 종료!\n시험치느라 고생하셨습니다!\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="examquest", description="Survive the last day of final exams."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    console = Console()
    controller = Controller(
        Player(""), default_bosses(), GameMap(), console, random.Random(args.seed)
    )
    try:
        controller.start_game()
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
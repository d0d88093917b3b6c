"""The campus map: a grid of tiles with the player and a status panel."""

from __future__ import annotations

import unicodedata
from typing import Iterable

from .player import Player
from .story import Console

MAP_WIDTH = 30
MAP_HEIGHT = 20

_RULE = "=" * 26

_LAYOUT = (
    "+----------------------------+",
    "|     |        |   <코딩>" + " " * 4 + "|",
    "|     |        |             |",
    "|              +-----------  |",
    "|                            |",
    "|                            |",
    "|     +-----                 |",
    "|     | S              +-----|",
    "|     +-----           |     |",
    "|                      |     |",
    "|                      |     |",
    "|                            |",
    "|----------                  |",
    "| <객체지향>" + " " * 17 + "|",
    "|                            |",
    "|----------                  |",
    "|                   +--------|",
    "|    ----+" + " " * 10 + "|<게이밍>|",
    "|        |                   |",
    "+----------------------------+",
)

_INVENTORY_ROWS = {8: (1, "전공책"), 9: (2, "계산기"), 10: (3, "휴대폰")}


def _cells(row: str) -> list[str]:
    """Split a row into screen cells; a wide character takes two cells."""
    cells: list[str] = []
    for char in row:
        cells.append(char)
        if unicodedata.east_asian_width(char) in ("W", "F"):
            cells.append("")
    return cells


def _build_layout(rows: Iterable[str]) -> tuple[tuple[str, ...], ...]:
    grid = tuple(tuple(_cells(row)) for row in rows)
    if len(grid) != MAP_HEIGHT or any(len(row) != MAP_WIDTH for row in grid):
        raise ValueError("map layout does not match the map size")
    return grid


_GRID = _build_layout(_LAYOUT)


class GameMap:
    """The walkable campus grid, indexed as ``(x, y)`` screen cells."""

    def __init__(self) -> None:
        self._tiles: list[list[str]] = []
        self.initialize()

    def initialize(self) -> None:
        """Restore every tile to the original layout."""
        self._tiles = [list(row) for row in _GRID]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < MAP_WIDTH and 0 <= y < MAP_HEIGHT):
            raise IndexError(f"tile ({x}, {y}) is outside the map")

    def get_tile(self, x: int, y: int) -> str:
        self._check(x, y)
        return self._tiles[y][x]

    def set_tile(self, x: int, y: int, symbol: str) -> None:
        self._check(x, y)
        self._tiles[y][x] = symbol

    def _panel(self, y: int, player: Player, remaining_bosses: int) -> str:
        if y in (0, 4, 6, 12):
            return _RULE
        if y == 1:
            return f"체력 : {player.hp} / {player.max_hp} HP"
        if y == 2:
            return f"방어력 : {player.defense}%"
        if y == 3:
            return f"공부력 : {player.attack}%"
        if y == 5:
            return f"골드 : {player.gold}"
        if y == 7:
            return "인벤토리"
        if y in _INVENTORY_ROWS:
            item_id, label = _INVENTORY_ROWS[y]
            return label if player.is_item_purchased(item_id) else ""
        if y == 11:
            count = player.monster_item_count
            return f"몬스터 ({count} / 5)" if count >= 1 else ""
        if y == 13:
            return f"현재 평균 학점 : {player.average_gpa(remaining_bosses):g}"
        return ""

    def render(
        self, player: Player, player_x: int, player_y: int, remaining_bosses: int
    ) -> str:
        """The whole screen: header, map with the player, and status panel."""
        lines = [
            f"주인공 : {player.name}\t( {player.level}레벨 )  "
            f"[ {player.xp} / {player.max_xp} XP ]",
            "이동 : W(위), A(왼쪽), S(아래), D(오른쪽), 종료: Q",
            f"남은 시험 수 : {remaining_bosses}개",
        ]
        for y, row in enumerate(self._tiles):
            cells = "".join(
                "@" if (x, y) == (player_x, player_y) else tile
                for x, tile in enumerate(row)
            )
            lines.append(cells + "   " + self._panel(y, player, remaining_bosses))
        return "\n".join(lines) + "\n"

    def show(
        self,
        console: Console,
        player: Player,
        player_x: int,
        player_y: int,
        remaining_bosses: int,
    ) -> None:
        """Clear the screen and draw the map."""
        console.clear()
        console.write(self.render(player, player_x, player_y, remaining_bosses))
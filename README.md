# examquest

A small turn-based role-playing game that runs in the terminal. It is the last
day of final exams and three exams are left. Walk around the campus map, visit
the shop, get stopped by classmates who want help with a problem, and sit the
three professors' exams to earn your grades. All in-game text is in Korean.

## Installing

```
pip install .
```

## Playing

```
examquest
examquest --seed 42
```

`--seed` fixes the random number generator so that hit rolls and classmate
encounters repeat from run to run. The command exits with status 0 when the
game ends or you quit, and 1 if input runs out or is interrupted (Ctrl+C).

Enter your hero's name when asked, then move with single key presses:

- `W` / `A` / `S` / `D`: move up, left, down, right
- `Q`: quit

Map symbols:

- `@`: you
- `B`: a professor waiting with an exam
- `S`: the shop

The panel to the right of the map shows HP, defence, study power (attack),
gold, the items you own, and your current average grade.

### Battles

Stepping on a professor's tile starts an exam. On your turn you either solve a
problem with one of three attacks, each scaled by your study power, or drink a
Monster to recover 30 HP (never above 100):

| Attack | Base damage | Success rate |
|--------|-------------|--------------|
| 평타   | 10          | 100%         |
| 찍기   | 50          | 50%          |
| 컨닝   | 70          | 30%          |

The professor then strikes back with a 70% chance to hit. Damage taken is
reduced by your defence, with a minimum per hit.

Finishing an exam with 70 HP or more earns an A (4.0), 40 or more a B (3.0),
and anything above 0 a C (2.0), along with gold and experience. Running out of
HP fails the exam with 0.0. Each professor is faced only once, pass or fail.
If you faint while exams are still left, you wake up in the dorm at the start
position with full HP.

Every step has a 5% chance that a classmate stops you. You can ignore them or
help, which is an optional battle that pays gold and experience. Every 1000
experience points raise your level, adding 20 to maximum HP and healing you
fully.

### Shop

The shop sells a textbook (전공책), a calculator (계산기) and a phone (휴대폰),
each a one-time purchase that multiplies your study power by 1.2, 1.1 and 1.3,
and Monster drinks (몬스터), of which you can hold up to five.

### Endings

After the third exam your average grade picks one of four endings: 4.0 and
above, 3.0 and above, 2.0 and above, or below that.

## Using the pieces from Python

The game is built from plain classes that can be driven without a terminal.
`examquest.story.Console` takes any text streams for output and input, plus a
`sleep` function, so the whole game can run on `io.StringIO` objects:

```python
from examquest.player import Player
from examquest.shop import PurchaseResult, Shop

player = Player("Mina")
shop = Shop()
assert shop.purchase(player, 1) is PurchaseResult.PURCHASED
print(player.gold, player.attack)  # 3500 120
assert shop.purchase(player, 1) is PurchaseResult.ALREADY_OWNED
```

Other entry points:

- `examquest.controller.Controller(player, bosses, game_map, console, rng)` runs
  the game loop with `start_game()`; `default_bosses()` gives the three
  professors and three classmates.
- `examquest.battle.BattleSystem(console, rng)` runs `fight()` and
  `fight_friend()`.
- `examquest.gamemap.GameMap.render(player, x, y, remaining_bosses)` returns
  the map screen as a string.
- `examquest.story.ending_for(average_gpa)` returns the `Ending` a grade earns.

## What it does not do

There is no saving or loading: progress lasts only as long as one run.

## Running the tests

```
pip install .[test]
pytest
```
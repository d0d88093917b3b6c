import io

import pytest

from examquest.battle import BattleSystem
from examquest.character import Boss
from examquest.player import MONSTER_HEAL, Player
from examquest.story import Console


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


def _battle(text="", roll=0):
    out = io.StringIO()
    console = Console(out=out, inp=io.StringIO(text), sleep=lambda s: None)
    return BattleSystem(console=console, rng=_FixedRng(roll)), out


def _player():
    return Player("민수")


def test_attack_success_threshold():
    system, _ = _battle(roll=49)
    assert system.is_attack_successful(50) is True
    assert system.is_attack_successful(49) is False


def test_attack_on_boss_applies_damage_unchanged():
    system, out = _battle()
    boss = Boss("친구1", 80, 20, 1)
    dealt = system.attack(_player(), boss, 25, 100)
    assert dealt == 25
    assert boss.hp == 80 - 25
    assert "공격 성공!" in out.getvalue()
    assert "반영" not in out.getvalue()


def test_attack_on_player_with_normal_defense():
    system, _ = _battle()
    player = _player()
    dealt = system.attack(Boss("친구2", 80, 10, 3), player, 30, 100)
    assert dealt == 30
    assert player.hp == player.max_hp - 30


def test_attack_on_player_deals_at_least_one():
    system, out = _battle()
    player = _player()
    player.defense = 100000
    dealt = system.attack(Boss("친구3", 80, 5, 5), player, 5, 100)
    assert dealt == 1
    assert player.hp == player.max_hp - 1
    assert "(기본 5에서 방어력 100000% 반영)" in out.getvalue()


def test_attack_miss_leaves_hp():
    system, out = _battle(roll=99)
    boss = Boss("친구1", 80, 20, 1)
    assert system.attack(_player(), boss, 50, 50) == 0
    assert boss.hp == 80
    assert "공격 실패!" in out.getvalue()


def test_status_text_layout():
    system, _ = _battle()
    text = system.status_text(_player(), Boss("친구1", 80, 20, 1))
    assert "플레이어 : 100 / 100 HP\n" in text
    assert "친구1      :  80 /  80 HP\n" in text
    assert text.startswith("===========================\n")


def test_fight_win_with_full_hp_gives_a_grade():
    system, out = _battle("1\n1\n")
    player = _player()
    gold = player.gold
    boss = Boss("김코딩 교수님", 10, 40, 10)
    assert system.fight(player, boss) is True
    assert boss.is_dead()
    assert player.gold - gold == 1000
    assert player.gpa == 4.0
    assert player.xp == 800
    assert "A학점" in out.getvalue()


def test_fight_win_with_mid_hp_gives_b_grade():
    system, out = _battle("1\n1\n")
    player = _player()
    player.hp = 50
    gold = player.gold
    assert system.fight(player, Boss("조객체 교수님", 10, 50, 5)) is True
    assert player.gold - gold == 800
    assert player.gpa == 3.0
    assert player.xp == 600
    assert "B학점" in out.getvalue()


def test_fight_win_with_low_hp_gives_c_grade():
    system, _ = _battle("1\n1\n")
    player = _player()
    player.hp = 10
    gold = player.gold
    assert system.fight(player, Boss("박게임 교수님", 10, 30, 30)) is True
    assert player.gold - gold == 500
    assert player.gpa == 2.0


def test_fight_loss_gives_nothing():
    system, out = _battle("1\n1\n")
    player = _player()
    gold = player.gold
    boss = Boss("김코딩 교수님", 1000, 1000, 10)
    assert system.fight(player, boss) is False
    assert player.is_dead()
    assert player.gold == gold
    assert player.gpa == 0
    assert "게임 오버" in out.getvalue()


def test_fight_invalid_skill_then_valid():
    system, out = _battle("1\n9\n1\n1\n")
    boss = Boss("김코딩 교수님", 10, 40, 10)
    assert system.fight(_player(), boss) is True
    assert "잘못된 입력입니다." in out.getvalue()


def test_fight_invalid_menu_choice_reprompts():
    system, out = _battle("x\n1\n1\n")
    assert system.fight(_player(), Boss("김코딩 교수님", 10, 40, 10)) is True
    assert "알맞은 옵션을 선택해주세요." in out.getvalue()


def test_fight_use_monster_item():
    system, out = _battle("2\n1\n1\n1\n")
    player = _player()
    player.hp = 50
    player.add_monster_item()
    assert system.fight(player, Boss("김코딩 교수님", 10, 40, 10)) is True
    assert player.monster_item_count == 0
    assert player.hp == 50 + MONSTER_HEAL
    assert "몬스터 아이템을 사용하여 체력을 회복했습니다!" in out.getvalue()


def test_fight_without_items_reports_none():
    system, out = _battle("2\n1\n1\n")
    assert system.fight(_player(), Boss("김코딩 교수님", 10, 40, 10)) is True
    assert "아이템이 없습니다." in out.getvalue()


def test_fight_level_up_is_announced():
    system, out = _battle("1\n1\n")
    player = _player()
    player.xp = 500
    system.fight(player, Boss("김코딩 교수님", 10, 40, 10))
    assert player.level == 2
    assert player.xp < player.max_xp
    assert "레벨 2로 상승" in out.getvalue()


def test_fight_runs_out_of_input():
    system, _ = _battle("")
    with pytest.raises(EOFError):
        system.fight(_player(), Boss("김코딩 교수님", 10, 40, 10))


def test_fight_friend_ignored():
    system, out = _battle("2\n")
    player = _player()
    gold = player.gold
    boss = Boss("친구1", 80, 20, 1)
    assert system.fight_friend(player, boss) is False
    assert boss.hp == 80
    assert player.gold == gold
    assert "무시하고" in out.getvalue()


def test_fight_friend_invalid_then_ignore():
    system, out = _battle("x\n2\n")
    assert system.fight_friend(_player(), Boss("친구2", 80, 10, 3)) is False
    assert "다시 선택해주세요" in out.getvalue()


def test_fight_friend_win_rewards_without_grade():
    system, out = _battle("1\n1\n1\n")
    player = _player()
    gold = player.gold
    assert system.fight_friend(player, Boss("친구3", 10, 5, 5)) is True
    assert player.gold - gold == 400
    assert player.xp == 300
    assert player.gpa == 0
    assert "지식을 습득했습니다!" in out.getvalue()


def test_fight_friend_win_with_low_hp():
    system, _ = _battle("1\n1\n1\n")
    player = _player()
    player.hp = 20
    gold = player.gold
    assert system.fight_friend(player, Boss("친구1", 10, 20, 1)) is True
    assert player.gold - gold == 300
    assert player.xp == 200
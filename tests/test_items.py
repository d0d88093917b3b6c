import dataclasses

import pytest

from examquest.items import Item, Skill


def test_item_holds_its_values():
    item = Item("전공책", 1500, 120, 100, 0)
    assert item.name == "전공책"
    assert item.price == 1500
    assert item.attack_plus == 120
    assert item.defense_plus == 100
    assert item.heal_amount == 0


def test_item_is_immutable():
    item = Item("몬스터", 2000, 100, 100, 30)
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.price = 0
    assert item.price == 2000


def test_items_compare_by_value():
    first = Item("계산기", 1000, 110, 100, 0)
    second = Item("계산기", 1000, 110, 100, 0)
    other = Item("휴대폰", 4000, 130, 100, 0)
    assert (first == second) is True
    assert (first == other) is False
    assert len({first, second}) == 1


def test_skill_fields():
    skill = Skill("컨닝", 70, 30)
    assert (skill.name, skill.damage, skill.success_rate) == ("컨닝", 70, 30)


@pytest.mark.parametrize("damage", [10, 50, 70])
def test_full_attack_keeps_base_damage(damage):
    assert Skill("s", damage, 100).calculate_damage(100) == damage


def test_scaled_damage():
    assert Skill("찍기", 50, 50).calculate_damage(120) == 60


def test_zero_attack_gives_zero_damage():
    assert Skill("찍기", 50, 50).calculate_damage(0) == 0


def test_damage_never_exceeds_exact_scaling():
    skill = Skill("컨닝", 70, 30)
    for percent in range(0, 300, 7):
        result = skill.calculate_damage(percent)
        assert result * 100 <= 70 * percent < (result + 1) * 100
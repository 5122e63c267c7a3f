"""
Tests for the melee, magic and ranged attack strategies.
"""

import pytest

from arena.combat.attack_strategies import (
    MagicAttackStrategy,
    MeleeAttackStrategy,
    RangedAttackStrategy,
)
from arena.core.constants import AttackStyle
from arena.core.error_handling import InsufficientResource


@pytest.fixture
def target(make_combatant):
    return make_combatant(name="Target", max_health=100)


def test_melee_damage(make_combatant, target):
    """
    Test that melee deals attack power plus 20%.
    """
    attacker = make_combatant(attack_power=50)
    assert MeleeAttackStrategy().calculate_damage(attacker, target) == 60


def test_melee_has_no_side_effects(make_combatant, target):
    attacker = make_combatant(attack_power=50, max_mana=30)
    before = attacker.stats
    MeleeAttackStrategy().calculate_damage(attacker, target)
    assert attacker.stats == before
    assert target.health == 100


def test_magic_damage_and_mana_cost(make_combatant, target):
    """
    Test that magic adds a mana bonus and spends 10 mana.
    """
    attacker = make_combatant(attack_power=60, max_mana=50)
    assert MagicAttackStrategy().calculate_damage(attacker, target) == 65
    assert attacker.mana == 40


def test_magic_bonus_uses_mana_before_cost(make_combatant, target):
    """
    Test that the bonus is computed from the mana held before paying.
    """
    attacker = make_combatant(attack_power=10, max_mana=19, mana=10)
    # 10 // 10 = 1 bonus, even though mana drops to 0.
    assert MagicAttackStrategy().calculate_damage(attacker, target) == 11
    assert attacker.mana == 0


def test_magic_without_mana_raises(make_combatant, target):
    """
    Test that magic with less than 10 mana propagates InsufficientResource.
    """
    attacker = make_combatant(attack_power=60, max_mana=50, mana=9)
    with pytest.raises(InsufficientResource):
        MagicAttackStrategy().calculate_damage(attacker, target)
    assert attacker.mana == 9


def test_ranged_damage_without_critical(make_combatant):
    """
    Test that ranged deals 80% of attack power against a healthy target.
    """
    attacker = make_combatant(attack_power=50)
    target = make_combatant(name="Target", max_health=100, health=80)
    assert RangedAttackStrategy().calculate_damage(attacker, target) == 40


def test_ranged_damage_with_critical(make_combatant):
    """
    Test that ranged crits for 50% more against a target below 30% health.
    """
    attacker = make_combatant(attack_power=50)
    target = make_combatant(name="Target", max_health=100, health=20)
    assert RangedAttackStrategy().calculate_damage(attacker, target) == 60


def test_ranged_critical_threshold_is_strict(make_combatant):
    """
    Test that a target at exactly 30% health does not take a critical hit.
    """
    attacker = make_combatant(attack_power=50)
    target = make_combatant(name="Target", max_health=100, health=30)
    assert RangedAttackStrategy().calculate_damage(attacker, target) == 40


def test_ranged_truncates_before_critical(make_combatant):
    """
    Test that the base is truncated before the critical multiplier.
    """
    attacker = make_combatant(attack_power=51)
    target = make_combatant(name="Target", max_health=100, health=10)
    # int(51 * 0.8) = 40, then int(40 * 1.5) = 60 (a single floor would give 61).
    assert RangedAttackStrategy().calculate_damage(attacker, target) == 60


def test_ranged_critical_through_combat(archer, warrior):
    """
    Test that an archer's damage against a warrior rises once it is wounded.
    """
    first = archer.attack(warrior)
    warrior.set_health(int(warrior.max_health * 0.2))
    assert archer.attack(warrior) > first


def test_strategies_report_their_style():
    assert MeleeAttackStrategy().style == AttackStyle.MELEE
    assert MagicAttackStrategy().style == AttackStyle.MAGIC
    assert RangedAttackStrategy().style == AttackStyle.RANGED
    assert str(RangedAttackStrategy()) == "RANGED"

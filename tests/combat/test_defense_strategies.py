"""
Tests for the standard and heavy armor defense strategies.
"""

import pytest

from arena.combat.defense_strategies import (
    HeavyArmorDefenseStrategy,
    StandardDefenseStrategy,
)
from arena.core.constants import DefenseStyle


def test_standard_defense(make_combatant):
    """
    Test that standard defense subtracts half the defense stat.
    """
    defender = make_combatant(defense=20)
    assert StandardDefenseStrategy().calculate_damage_reduction(defender, 50) == 40


def test_standard_defense_never_negative(make_combatant):
    """
    Test that a defense larger than the hit absorbs it fully.
    """
    defender = make_combatant(defense=100)
    assert StandardDefenseStrategy().calculate_damage_reduction(defender, 10) == 0
    assert StandardDefenseStrategy().calculate_damage_reduction(defender, 0) == 0


def test_heavy_armor_subtracts_full_defense(make_combatant):
    """
    Test that heavy armor subtracts the full defense when above the floor.
    """
    defender = make_combatant(defense=30)
    assert HeavyArmorDefenseStrategy().calculate_damage_reduction(defender, 100) == 70


def test_heavy_armor_lets_a_quarter_through(make_combatant):
    """
    Test that heavy armor caps mitigation at 75%.
    """
    defender = make_combatant(defense=80)
    assert HeavyArmorDefenseStrategy().calculate_damage_reduction(defender, 100) == 25


def test_heavy_armor_floor_truncates(make_combatant):
    """
    Test that the quarter floor is truncated, so tiny hits can be absorbed.
    """
    defender = make_combatant(defense=30)
    assert HeavyArmorDefenseStrategy().calculate_damage_reduction(defender, 3) == 0


@pytest.mark.parametrize("incoming", [0, 1, 7, 48, 100, 999])
@pytest.mark.parametrize("defense", [0, 10, 30, 200])
def test_mitigation_stays_within_incoming(make_combatant, incoming, defense):
    """
    Test that every defense strategy returns a value in [0, incoming].
    """
    defender = make_combatant(defense=defense)
    for strategy in (StandardDefenseStrategy(), HeavyArmorDefenseStrategy()):
        result = strategy.calculate_damage_reduction(defender, incoming)
        assert 0 <= result <= incoming


def test_defense_is_pure(make_combatant):
    defender = make_combatant(defense=30)
    before = defender.stats
    HeavyArmorDefenseStrategy().calculate_damage_reduction(defender, 100)
    StandardDefenseStrategy().calculate_damage_reduction(defender, 100)
    assert defender.stats == before


def test_defense_styles():
    assert StandardDefenseStrategy().style == DefenseStyle.STANDARD
    assert HeavyArmorDefenseStrategy().style == DefenseStyle.HEAVY_ARMOR

"""
Tests for the battle turn skeleton and its variants.
"""

import pytest

from arena.combat.battle_sequence import (
    BattleSequence,
    PowerAttackSequence,
    StandardBattleSequence,
    create_battle_sequence,
)
from arena.core.constants import SequenceKind
from arena.core.error_handling import InsufficientResource, ValidationError


class RecordingSequence(StandardBattleSequence):
    """Standard sequence that records the order in which its steps run."""

    def __init__(self, attacker, defender):
        super().__init__(attacker, defender)
        self.steps = []

    def pre_attack_action(self):
        self.steps.append("pre")

    def perform_attack(self):
        self.steps.append("attack")
        return super().perform_attack()

    def post_attack_action(self):
        self.steps.append("post")


def test_steps_run_once_in_order(warrior, mage):
    """
    Test that the skeleton runs pre, attack and post exactly once each.
    """
    sequence = RecordingSequence(warrior, mage)
    sequence.execute_turn()
    assert sequence.steps == ["pre", "attack", "post"]


def test_standard_turn_damages_defender(warrior, mage):
    """
    Test that a standard turn applies the mitigated damage to the defender.
    """
    damage = StandardBattleSequence(warrior, mage).execute_turn()
    # Melee: int(40 * 1.2) = 48. Standard: 48 - 10 // 2 = 43.
    assert damage == 43
    assert mage.health == 80 - 43
    assert warrior.health == warrior.max_health


def test_power_attack_recoil(warrior, mage):
    """
    Test that a power attack costs the attacker 10% of its maximum health.
    """
    sequence = PowerAttackSequence(warrior, mage)
    damage = sequence.execute_turn()
    assert damage == 43
    assert sequence.recoil == 15
    assert warrior.health == 135


def test_recoil_applies_even_if_defender_dies(warrior, make_combatant):
    """
    Test that recoil happens after a killing blow.
    """
    victim = make_combatant(name="Victim", max_health=10)
    PowerAttackSequence(warrior, victim).execute_turn()
    assert victim.is_dead()
    assert warrior.health == 135


def test_recoil_clamps_at_zero(warrior, mage):
    """
    Test that recoil can kill the attacker but never pushes health below 0.
    """
    warrior.set_health(5)
    PowerAttackSequence(warrior, mage).execute_turn()
    assert warrior.health == 0
    assert warrior.is_dead()


def test_failed_power_attack_skips_recoil(mage, warrior):
    """
    Test that when the attack step fails, the post step never runs.
    """
    mage.set_mana(0)
    sequence = PowerAttackSequence(mage, warrior)
    with pytest.raises(InsufficientResource):
        sequence.execute_turn()
    assert sequence.recoil is None
    assert mage.health == mage.max_health
    assert warrior.health == warrior.max_health


def test_base_sequence_requires_attack_step(warrior, mage):
    class EmptySequence(BattleSequence):
        kind = SequenceKind.STANDARD

    with pytest.raises(NotImplementedError):
        EmptySequence(warrior, mage).execute_turn()


def test_create_battle_sequence(warrior, mage):
    """
    Test that the factory returns the sequence class for each kind.
    """
    assert isinstance(
        create_battle_sequence(SequenceKind.STANDARD, warrior, mage),
        StandardBattleSequence,
    )
    power = create_battle_sequence(SequenceKind.POWER_ATTACK, warrior, mage)
    assert isinstance(power, PowerAttackSequence)
    assert power.attacker is warrior
    assert power.defender is mage
    with pytest.raises(ValidationError):
        create_battle_sequence("POWER_ATTACK", warrior, mage)

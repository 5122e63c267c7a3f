"""
Battle sequence module for the arena.

Defines the fixed skeleton of a combat turn (pre-attack step, attack step,
post-attack step). Variants override the steps; the ordering never changes.
"""

from typing import Any

from arena.core.constants import POWER_ATTACK_RECOIL_RATIO, SequenceKind
from arena.core.error_handling import require_enum_type
from arena.core.logging import log_debug


class BattleSequence:
    """
    Base class for a single combat turn of one attacker against one defender.

    Attributes:
        attacker (Any):
            The combatant acting this turn.
        defender (Any):
            The combatant being attacked.
        damage_dealt (int | None):
            Damage dealt by the attack step, None until the turn has run.

    """

    kind: SequenceKind

    def __init__(self, attacker: Any, defender: Any) -> None:
        self.attacker = attacker
        self.defender = defender
        self.damage_dealt: int | None = None

    def execute_turn(self) -> int:
        """
        Runs the turn: pre-attack step, attack step, post-attack step, once
        each and in that order.

        Returns:
            int:
                The damage dealt by the attack step.

        """
        log_debug(
            f"{self.kind} turn: {self.attacker.name} -> {self.defender.name}",
        )
        self.pre_attack_action()
        self.damage_dealt = self.perform_attack()
        self.post_attack_action()
        return self.damage_dealt

    def pre_attack_action(self) -> None:
        """Hook run before the attack. Does nothing by default."""

    def perform_attack(self) -> int:
        """Performs the attack step and returns the damage dealt.

        Raises:
            NotImplementedError: This method must be implemented by subclasses.

        """
        raise NotImplementedError("Subclasses must implement perform_attack")

    def post_attack_action(self) -> None:
        """Hook run after the attack. Does nothing by default."""


class StandardBattleSequence(BattleSequence):
    """A plain attack with no special pre or post steps."""

    kind = SequenceKind.STANDARD

    def perform_attack(self) -> int:
        # Mitigation and the health change both happen inside attack().
        return self.attacker.attack(self.defender)


class PowerAttackSequence(StandardBattleSequence):
    """
    An attack followed by recoil: the attacker loses a tenth of its maximum
    health, bypassing its own defense. The recoil is applied every turn,
    whatever happened to the defender.
    """

    kind = SequenceKind.POWER_ATTACK

    def __init__(self, attacker: Any, defender: Any) -> None:
        super().__init__(attacker, defender)
        self.recoil: int | None = None

    def post_attack_action(self) -> None:
        self.recoil = int(self.attacker.max_health * POWER_ATTACK_RECOIL_RATIO)
        self.attacker.set_health(self.attacker.health - self.recoil)
        log_debug(
            f"{self.attacker.name} suffers {self.recoil} recoil",
            {"hp": self.attacker.health},
        )


_SEQUENCES: dict[SequenceKind, type[BattleSequence]] = {
    SequenceKind.STANDARD: StandardBattleSequence,
    SequenceKind.POWER_ATTACK: PowerAttackSequence,
}


def create_battle_sequence(kind: SequenceKind, attacker: Any, defender: Any) -> BattleSequence:
    """Creates the battle sequence of the given kind."""
    require_enum_type(kind, SequenceKind, "sequence kind")
    return _SEQUENCES[kind](attacker, defender)

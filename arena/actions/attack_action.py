"""
Attack action module for the arena.

Wraps `Combatant.attack` as a reversible action.
"""

from typing import Any, Literal

from pydantic import Field, PrivateAttr

from .base_action import BaseAction


class AttackAction(BaseAction):
    """One attack of an attacker against a target.

    Undo gives the target back the health it actually lost. Resource costs
    paid by the attacker (e.g. a mage's mana) are not refunded.
    """

    action_type: Literal["AttackAction"] = "AttackAction"
    attacker: Any = Field(
        description="The combatant performing the attack.",
    )
    target: Any = Field(
        description="The combatant being attacked.",
    )

    _damage_dealt: int = PrivateAttr(default=0)
    _health_lost: int = PrivateAttr(default=0)

    @property
    def description(self) -> str:
        return f"{self.attacker.name} attacks {self.target.name}"

    @property
    def damage_dealt(self) -> int:
        """Damage reported by the attack (after mitigation)."""
        return self._damage_dealt

    def _apply(self) -> int:
        before = self.target.health
        self._damage_dealt = self.attacker.attack(self.target)
        # The target may bottom out at 0, so remember what was really lost.
        self._health_lost = before - self.target.health
        return self._damage_dealt

    def _revert(self) -> None:
        self.target.heal(self._health_lost)

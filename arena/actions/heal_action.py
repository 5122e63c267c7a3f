"""
Heal action module for the arena.

Wraps `Combatant.heal` as a reversible action.
"""

from typing import Any, Literal

from pydantic import Field, PrivateAttr

from .base_action import BaseAction


class HealAction(BaseAction):
    """Heals a target by a nominal amount.

    The healing actually applied is captured at execution time, so a heal
    that was clamped at max health undoes back to the exact pre-heal value.
    """

    action_type: Literal["HealAction"] = "HealAction"
    target: Any = Field(
        description="The combatant being healed.",
    )
    amount: int = Field(
        ge=0,
        description="The nominal amount of healing requested.",
    )

    _healing_done: int = PrivateAttr(default=0)

    @property
    def description(self) -> str:
        return f"Heal {self.target.name} for {self.amount} HP"

    def _apply(self) -> int:
        before = self.target.health
        self.target.heal(self.amount)
        after = self.target.health
        self._healing_done = after - before
        return self._healing_done

    def _revert(self) -> None:
        self.target.set_health(self.target.health - self._healing_done)

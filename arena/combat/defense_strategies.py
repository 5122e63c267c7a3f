"""
Defense strategy module for the arena.

Defines the interchangeable algorithms that decide how much incoming damage
gets through a defender's defense. Defense strategies are pure.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from arena.core.constants import HEAVY_ARMOR_MIN_PASS_THROUGH, DefenseStyle


class DefenseStrategy(BaseModel):
    """Base class for all defense strategies.

    Subclasses implement `calculate_damage_reduction`, returning the damage
    left after mitigation, between 0 and the incoming damage.
    """

    model_config = ConfigDict(frozen=True)

    @property
    def style(self) -> DefenseStyle:
        raise NotImplementedError("Subclasses must define their defense style")

    def calculate_damage_reduction(self, defender: Any, incoming_damage: int) -> int:
        """Computes the damage that gets through the defender's defense.

        Args:
            defender (Any): The combatant being hit.
            incoming_damage (int): The raw damage of the attack.

        Returns:
            int: The damage after mitigation.

        Raises:
            NotImplementedError: This method must be implemented by subclasses.

        """
        raise NotImplementedError("Subclasses must implement calculate_damage_reduction")

    def to_dict(self) -> dict[str, Any]:
        return {"class": self.__class__.__name__}

    def __str__(self) -> str:
        return str(self.style)


class StandardDefenseStrategy(DefenseStrategy):
    """Reduces damage by half of the defense stat, never below zero."""

    strategy_type: Literal["StandardDefenseStrategy"] = "StandardDefenseStrategy"

    @property
    def style(self) -> DefenseStyle:
        return DefenseStyle.STANDARD

    def calculate_damage_reduction(self, defender: Any, incoming_damage: int) -> int:
        reduction = defender.stats.defense // 2
        return max(0, incoming_damage - reduction)


class HeavyArmorDefenseStrategy(DefenseStrategy):
    """Reduces damage by the full defense stat, capped at 75% mitigation.

    At least a quarter of the incoming damage (truncated) always gets through,
    so very small hits can still be fully absorbed.
    """

    strategy_type: Literal["HeavyArmorDefenseStrategy"] = "HeavyArmorDefenseStrategy"

    @property
    def style(self) -> DefenseStyle:
        return DefenseStyle.HEAVY_ARMOR

    def calculate_damage_reduction(self, defender: Any, incoming_damage: int) -> int:
        actual = incoming_damage - defender.stats.defense
        min_allowed = int(incoming_damage * HEAVY_ARMOR_MIN_PASS_THROUGH)
        return max(min_allowed, actual)

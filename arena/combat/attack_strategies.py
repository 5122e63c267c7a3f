"""
Attack strategy module for the arena.

Defines the interchangeable algorithms that turn an attacker's stats into a
raw damage number. Strategies hold no state of their own; the only side
effect allowed is spending the attacker's resources.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from arena.core.constants import (
    MAGIC_MANA_BONUS_DIVISOR,
    MAGIC_MANA_COST,
    MELEE_DAMAGE_MULTIPLIER,
    RANGED_ACCURACY_MULTIPLIER,
    RANGED_CRITICAL_MULTIPLIER,
    RANGED_CRITICAL_THRESHOLD,
    AttackStyle,
)


class AttackStrategy(BaseModel):
    """Base class for all attack strategies.

    Subclasses implement `calculate_damage`, which returns a non-negative
    integer and may spend the attacker's resources as a side effect.
    """

    model_config = ConfigDict(frozen=True)

    @property
    def style(self) -> AttackStyle:
        raise NotImplementedError("Subclasses must define their attack style")

    def calculate_damage(self, attacker: Any, target: Any) -> int:
        """Computes the raw damage dealt by the attacker to the target.

        Args:
            attacker (Any): The combatant performing the attack.
            target (Any): The combatant being attacked.

        Returns:
            int: The raw (unmitigated) damage.

        Raises:
            NotImplementedError: This method must be implemented by subclasses.

        """
        raise NotImplementedError("Subclasses must implement calculate_damage")

    def to_dict(self) -> dict[str, Any]:
        return {"class": self.__class__.__name__}

    def __str__(self) -> str:
        return str(self.style)


class MeleeAttackStrategy(AttackStrategy):
    """Straightforward physical damage: attack power plus 20%."""

    strategy_type: Literal["MeleeAttackStrategy"] = "MeleeAttackStrategy"

    @property
    def style(self) -> AttackStyle:
        return AttackStyle.MELEE

    def calculate_damage(self, attacker: Any, target: Any) -> int:
        return int(attacker.stats.attack_power * MELEE_DAMAGE_MULTIPLIER)


class MagicAttackStrategy(AttackStrategy):
    """Attack power plus a bonus from current mana, paid for with mana.

    The bonus is computed from the mana held before paying the cost. When the
    attacker cannot pay, `InsufficientResource` propagates to the caller and
    no damage is produced.
    """

    strategy_type: Literal["MagicAttackStrategy"] = "MagicAttackStrategy"

    @property
    def style(self) -> AttackStyle:
        return AttackStyle.MAGIC

    def calculate_damage(self, attacker: Any, target: Any) -> int:
        mana_bonus = attacker.stats.mana // MAGIC_MANA_BONUS_DIVISOR
        total = attacker.stats.attack_power + mana_bonus
        attacker.use_mana(MAGIC_MANA_COST)
        return total


class RangedAttackStrategy(AttackStrategy):
    """Reduced-accuracy physical damage that crits wounded targets.

    The base is truncated before the critical multiplier is applied, and the
    critical check looks at the target's health before this attack lands.
    """

    strategy_type: Literal["RangedAttackStrategy"] = "RangedAttackStrategy"

    @property
    def style(self) -> AttackStyle:
        return AttackStyle.RANGED

    def is_critical(self, target: Any) -> bool:
        return target.stats.health_ratio < RANGED_CRITICAL_THRESHOLD

    def calculate_damage(self, attacker: Any, target: Any) -> int:
        base = int(attacker.stats.attack_power * RANGED_ACCURACY_MULTIPLIER)
        if self.is_critical(target):
            return int(base * RANGED_CRITICAL_MULTIPLIER)
        return base

"""
Combatant builder module for the arena.

Provides a fluent builder that collects the five mandatory fields of a
Combatant and validates them in a fixed order when `build` is called.
"""

from typing import Any

from arena.combat.attack_strategies import AttackStrategy
from arena.combat.defense_strategies import DefenseStrategy
from arena.core.constants import Archetype
from arena.core.error_handling import ValidationError

from .character_stats import StatBlock
from .main import Combatant

# Order in which missing fields are reported.
REQUIRED_FIELDS = ("name", "archetype", "stats", "attack_strategy", "defense_strategy")


class CombatantBuilder:
    """
    Fluent builder for Combatant.

    Example:
        ```python
        hero = (
            CombatantBuilder()
            .name("Hero")
            .archetype(Archetype.WARRIOR)
            .stats(StatBlock.create(100, 50, 20))
            .attack_strategy(MeleeAttackStrategy())
            .defense_strategy(StandardDefenseStrategy())
            .build()
        )
        ```
    """

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    def name(self, name: str) -> "CombatantBuilder":
        self._fields["name"] = name
        return self

    def archetype(self, archetype: Archetype) -> "CombatantBuilder":
        self._fields["archetype"] = archetype
        return self

    def stats(self, stats: StatBlock) -> "CombatantBuilder":
        self._fields["stats"] = stats
        return self

    def attack_strategy(self, strategy: AttackStrategy) -> "CombatantBuilder":
        self._fields["attack_strategy"] = strategy
        return self

    def defense_strategy(self, strategy: DefenseStrategy) -> "CombatantBuilder":
        self._fields["defense_strategy"] = strategy
        return self

    def missing_fields(self) -> list[str]:
        """Returns the mandatory fields not set yet, in reporting order."""
        missing = []
        for field in REQUIRED_FIELDS:
            value = self._fields.get(field)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(field)
        return missing

    def build(self) -> Combatant:
        """
        Builds the combatant.

        Returns:
            Combatant: The new combatant.

        Raises:
            ValidationError: Naming the first missing mandatory field.

        """
        missing = self.missing_fields()
        if missing:
            raise ValidationError(f"Cannot build combatant: '{missing[0]}' is required")
        return Combatant(**self._fields)

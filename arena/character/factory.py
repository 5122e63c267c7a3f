"""
Archetype factory module for the arena.

Holds the fixed stat template and strategy pair of each archetype and
builds ready-to-fight combatants from them.
"""

from typing import NamedTuple

from arena.combat.strategy_factory import create_attack_strategy, create_defense_strategy
from arena.core.constants import Archetype, AttackStyle, DefenseStyle
from arena.core.error_handling import require_enum_type

from .builder import CombatantBuilder
from .character_stats import StatBlock
from .main import Combatant


class ArchetypeTemplate(NamedTuple):
    """Stats and strategies shared by every combatant of one archetype."""

    max_health: int
    attack_power: int
    defense: int
    max_mana: int
    attack_style: AttackStyle
    defense_style: DefenseStyle


ARCHETYPE_TEMPLATES: dict[Archetype, ArchetypeTemplate] = {
    Archetype.WARRIOR: ArchetypeTemplate(150, 40, 30, 0, AttackStyle.MELEE, DefenseStyle.HEAVY_ARMOR),
    Archetype.MAGE: ArchetypeTemplate(80, 60, 10, 100, AttackStyle.MAGIC, DefenseStyle.STANDARD),
    Archetype.ARCHER: ArchetypeTemplate(100, 50, 15, 0, AttackStyle.RANGED, DefenseStyle.STANDARD),
    Archetype.ROGUE: ArchetypeTemplate(90, 55, 20, 0, AttackStyle.MELEE, DefenseStyle.STANDARD),
}


def create_combatant(archetype: Archetype, name: str) -> Combatant:
    """
    Creates a combatant of the given archetype at full health and mana.

    Args:
        archetype (Archetype): The archetype to instantiate.
        name (str): The combatant's name.

    Returns:
        Combatant: The new combatant.

    """
    require_enum_type(archetype, Archetype, "archetype")
    template = ARCHETYPE_TEMPLATES[archetype]
    return (
        CombatantBuilder()
        .name(name)
        .archetype(archetype)
        .stats(
            StatBlock.create(
                template.max_health,
                template.attack_power,
                template.defense,
                template.max_mana,
            )
        )
        .attack_strategy(create_attack_strategy(template.attack_style))
        .defense_strategy(create_defense_strategy(template.defense_style))
        .build()
    )


def create_warrior(name: str) -> Combatant:
    return create_combatant(Archetype.WARRIOR, name)


def create_mage(name: str) -> Combatant:
    return create_combatant(Archetype.MAGE, name)


def create_archer(name: str) -> Combatant:
    return create_combatant(Archetype.ARCHER, name)


def create_rogue(name: str) -> Combatant:
    return create_combatant(Archetype.ROGUE, name)

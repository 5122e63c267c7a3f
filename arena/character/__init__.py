"""
Character system module for the arena.

This module handles combatant creation and state, including the immutable
stat block, the combatant itself, the validating builder and the archetype
factory.
"""

from .builder import CombatantBuilder
from .character_stats import StatBlock
from .factory import (
    ARCHETYPE_TEMPLATES,
    ArchetypeTemplate,
    create_archer,
    create_combatant,
    create_mage,
    create_rogue,
    create_warrior,
)
from .main import Combatant

__all__ = [
    # Import from builder.py
    "CombatantBuilder",
    # Import from character_stats.py
    "StatBlock",
    # Import from factory.py
    "ARCHETYPE_TEMPLATES",
    "ArchetypeTemplate",
    "create_archer",
    "create_combatant",
    "create_mage",
    "create_rogue",
    "create_warrior",
    # Import from main.py
    "Combatant",
]

"""
Combat system module for the arena.

This module handles the combat mechanics: attack and defense strategies,
the battle turn sequences and the duel loop.
"""

from .attack_strategies import (
    AttackStrategy,
    MagicAttackStrategy,
    MeleeAttackStrategy,
    RangedAttackStrategy,
)
from .battle_sequence import (
    BattleSequence,
    PowerAttackSequence,
    StandardBattleSequence,
    create_battle_sequence,
)
from .defense_strategies import (
    DefenseStrategy,
    HeavyArmorDefenseStrategy,
    StandardDefenseStrategy,
)
from .duel import Duel, DuelResult, TurnRecord
from .strategy_factory import (
    create_attack_strategy,
    create_defense_strategy,
    strategy_from_dict,
)

__all__ = [
    "AttackStrategy",
    "MagicAttackStrategy",
    "MeleeAttackStrategy",
    "RangedAttackStrategy",
    "BattleSequence",
    "PowerAttackSequence",
    "StandardBattleSequence",
    "create_battle_sequence",
    "DefenseStrategy",
    "HeavyArmorDefenseStrategy",
    "StandardDefenseStrategy",
    "Duel",
    "DuelResult",
    "TurnRecord",
    "create_attack_strategy",
    "create_defense_strategy",
    "strategy_from_dict",
]

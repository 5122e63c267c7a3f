"""
Factory functions for creating and deserializing combat strategies.

Maps the AttackStyle and DefenseStyle enumerations to strategy classes, and
rebuilds strategies from the dictionaries produced by their `to_dict`.
"""

from typing import Any

from catchery import log_warning

from arena.core.constants import AttackStyle, DefenseStyle
from arena.core.error_handling import require_enum_type

from .attack_strategies import (
    AttackStrategy,
    MagicAttackStrategy,
    MeleeAttackStrategy,
    RangedAttackStrategy,
)
from .defense_strategies import (
    DefenseStrategy,
    HeavyArmorDefenseStrategy,
    StandardDefenseStrategy,
)

_ATTACK_STRATEGIES: dict[AttackStyle, type[AttackStrategy]] = {
    AttackStyle.MELEE: MeleeAttackStrategy,
    AttackStyle.MAGIC: MagicAttackStrategy,
    AttackStyle.RANGED: RangedAttackStrategy,
}

_DEFENSE_STRATEGIES: dict[DefenseStyle, type[DefenseStrategy]] = {
    DefenseStyle.STANDARD: StandardDefenseStrategy,
    DefenseStyle.HEAVY_ARMOR: HeavyArmorDefenseStrategy,
}


def create_attack_strategy(style: AttackStyle) -> AttackStrategy:
    """Creates the attack strategy matching the given style."""
    require_enum_type(style, AttackStyle, "attack style")
    return _ATTACK_STRATEGIES[style]()


def create_defense_strategy(style: DefenseStyle) -> DefenseStrategy:
    """Creates the defense strategy matching the given style."""
    require_enum_type(style, DefenseStyle, "defense style")
    return _DEFENSE_STRATEGIES[style]()


def strategy_from_dict(data: dict[str, Any]) -> AttackStrategy | DefenseStrategy | None:
    """
    Creates a strategy instance from a dictionary.

    The correct class is chosen from the 'class' field, as written by the
    strategies' `to_dict`.

    Supported Strategy Classes:
        - "MeleeAttackStrategy", "MagicAttackStrategy", "RangedAttackStrategy"
        - "StandardDefenseStrategy", "HeavyArmorDefenseStrategy"

    Args:
        data: Dictionary containing a 'class' field.

    Returns:
        AttackStrategy | DefenseStrategy | None: The strategy, or None if the
        class is not recognized.

    """
    strategy_class = data.get("class", "")

    for cls in (*_ATTACK_STRATEGIES.values(), *_DEFENSE_STRATEGIES.values()):
        if cls.__name__ == strategy_class:
            return cls()

    log_warning(
        f"Unknown strategy class '{strategy_class}'",
        {"class": strategy_class, "context": "strategy_from_dict"},
    )
    return None

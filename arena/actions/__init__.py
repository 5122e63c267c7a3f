"""
Actions system module for the arena.

This module contains the reversible combat actions (attack and heal) and the
history that executes them and undoes them in reverse order.
"""

from .action_history import ActionHistory
from .attack_action import AttackAction
from .base_action import BaseAction
from .heal_action import HealAction

__all__ = ["ActionHistory", "AttackAction", "BaseAction", "HealAction"]

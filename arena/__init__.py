"""
Arena: a turn-based combat resolution engine.

This package contains the combatant model, the pluggable attack and defense
strategies, undoable actions, battle turn sequences and the demo.
"""

__version__ = "0.1.0"

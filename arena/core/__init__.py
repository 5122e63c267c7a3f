"""
Core system module for the arena.

This module contains the fundamental components shared by the rest of the
engine: tuning constants and enumerations, exceptions and validation helpers,
logging setup and console utilities.
"""

from .constants import (
    Archetype,
    AttackStyle,
    DefenseStyle,
    SequenceKind,
)
from .error_handling import (
    ActionStateError,
    GameException,
    InsufficientResource,
    InvalidStrategyAssignment,
    ValidationError,
)
from .logging import get_logger, setup_logging
from .utils import clamp, cprint, crule, make_bar

__all__ = [
    # Import from constants.py
    "Archetype",
    "AttackStyle",
    "DefenseStyle",
    "SequenceKind",
    # Import from error_handling.py
    "ActionStateError",
    "GameException",
    "InsufficientResource",
    "InvalidStrategyAssignment",
    "ValidationError",
    # Import from logging.py
    "get_logger",
    "setup_logging",
    # Import from utils.py
    "clamp",
    "cprint",
    "crule",
    "make_bar",
]

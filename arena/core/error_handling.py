"""
Centralized exceptions and validation helpers.
"""

from typing import Any, Optional

from .logging import log_debug


class GameException(Exception):
    """Base class for every error raised by the combat engine."""


class ValidationError(GameException, ValueError):
    """Raised when stats, combatants or amounts fail validation."""


class InsufficientResource(GameException):
    """Raised when a combatant tries to spend more of a resource than it has."""

    def __init__(self, resource: str, requested: int, available: int) -> None:
        self.resource = resource
        self.requested = requested
        self.available = available
        super().__init__(
            f"Not enough {resource}: requested {requested}, available {available}"
        )


class InvalidStrategyAssignment(GameException, TypeError):
    """Raised when a missing or mismatched strategy is assigned to a combatant."""


class ActionStateError(GameException):
    """Raised when an action is executed or undone out of order."""


# ==============================================================================
# VALIDATION HELPERS
# ==============================================================================
# These helpers provide a clean, readable way to validate inputs with consistent
# error messages. They never correct values, they only reject them.


def require_non_empty_string(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> str:
    """
    Validates that a value is a non-empty string.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        str: The validated string value

    Raises:
        ValidationError: If validation fails
    """
    if not isinstance(value, str) or not value.strip():
        log_debug(
            f"{param_name} must be a non-empty string, got: {value!r}",
            {**(context or {}), "param_name": param_name},
        )
        raise ValidationError(f"Invalid {param_name}: {value!r}")
    return value


def require_non_negative_int(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> int:
    """
    Validates that a value is an integer greater than or equal to zero.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        int: The validated integer

    Raises:
        ValidationError: If validation fails
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        log_debug(
            f"{param_name} must be a non-negative integer, got: {value!r}",
            {**(context or {}), "param_name": param_name},
        )
        raise ValidationError(f"{param_name} must be a non-negative integer, got {value!r}")
    return value


def require_enum_type(
    value: Any, enum_class: type, param_name: str, context: Optional[dict[str, Any]] = None
) -> Any:
    """
    Validates that a value is of the specified enum type.

    Args:
        value: The value to validate
        enum_class: The expected enum class
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        The validated enum value

    Raises:
        ValidationError: If validation fails
    """
    if not isinstance(value, enum_class):
        log_debug(
            f"{param_name} must be {enum_class.__name__} enum, got: {type(value).__name__}",
            {**(context or {}), "param_name": param_name},
        )
        raise ValidationError(
            f"Invalid {param_name}: expected {enum_class.__name__}, got {type(value).__name__}"
        )
    return value

"""
Tests for the exception hierarchy, validation helpers and logging helpers.
"""

import logging

import pytest

from arena.core.constants import Archetype, AttackStyle
from arena.core.error_handling import (
    GameException,
    InsufficientResource,
    InvalidStrategyAssignment,
    ValidationError,
    require_enum_type,
    require_non_empty_string,
    require_non_negative_int,
)
from arena.core.logging import LOGGER_NAME, get_logger, log_debug


def test_exception_hierarchy():
    """
    Test that engine errors share a base and keep their builtin meaning.
    """
    assert issubclass(ValidationError, GameException)
    assert issubclass(ValidationError, ValueError)
    assert issubclass(InvalidStrategyAssignment, TypeError)
    error = InsufficientResource("mana", 10, 3)
    assert isinstance(error, GameException)
    assert str(error) == "Not enough mana: requested 10, available 3"


@pytest.mark.parametrize("value", [0, 1, 500])
def test_require_non_negative_int_accepts(value):
    assert require_non_negative_int(value, "amount") == value


@pytest.mark.parametrize("value", [-1, 1.5, "3", True, None])
def test_require_non_negative_int_rejects(value):
    with pytest.raises(ValidationError, match="amount"):
        require_non_negative_int(value, "amount")


def test_require_non_empty_string():
    assert require_non_empty_string("Hero", "name") == "Hero"
    for value in ("", "   ", None, 42):
        with pytest.raises(ValidationError):
            require_non_empty_string(value, "name")


def test_require_enum_type():
    assert require_enum_type(Archetype.MAGE, Archetype, "archetype") is Archetype.MAGE
    with pytest.raises(ValidationError, match="expected Archetype"):
        require_enum_type(AttackStyle.MAGIC, Archetype, "archetype")


def test_log_debug_appends_context(caplog):
    """
    Test that context dictionaries are rendered as key=value pairs.
    """
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    log_debug("Executed", {"result": 43})
    log_debug("Spent mana", {"mana": 5, "needed": 10})
    log_debug("Nothing to undo")
    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "Executed [result=43]",
        "Spent mana [mana=5 needed=10]",
        "Nothing to undo",
    ]


def test_log_debug_is_silent_above_debug(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)
    log_debug("hidden")
    assert not caplog.records


def test_get_logger_namespacing():
    assert get_logger().name == "arena"
    assert get_logger("actions").name == "arena.actions"

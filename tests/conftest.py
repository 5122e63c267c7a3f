"""
Shared fixtures for the arena tests.
"""

import pytest
from rich.console import Console

from arena.character.character_stats import StatBlock
from arena.character.factory import (
    create_archer,
    create_mage,
    create_rogue,
    create_warrior,
)
from arena.character.main import Combatant
from arena.combat.attack_strategies import AttackStrategy, MeleeAttackStrategy
from arena.combat.defense_strategies import DefenseStrategy, StandardDefenseStrategy
from arena.core import utils
from arena.core.constants import Archetype


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """Prints through a colorless console so capsys sees plain text."""
    monkeypatch.setattr(
        utils,
        "_console",
        Console(markup=True, width=120, color_system=None, highlight=False),
    )


@pytest.fixture
def make_combatant():
    """Returns a function building a combatant with arbitrary vitals."""

    def _make(
        name: str = "Dummy",
        archetype: Archetype = Archetype.WARRIOR,
        max_health: int = 100,
        health: int | None = None,
        attack_power: int = 50,
        defense: int = 0,
        max_mana: int = 0,
        mana: int | None = None,
        attack_strategy: AttackStrategy | None = None,
        defense_strategy: DefenseStrategy | None = None,
    ) -> Combatant:
        stats = StatBlock(
            max_health=max_health,
            health=max_health if health is None else health,
            attack_power=attack_power,
            defense=defense,
            max_mana=max_mana,
            mana=max_mana if mana is None else mana,
        )
        return Combatant(
            name=name,
            archetype=archetype,
            stats=stats,
            attack_strategy=attack_strategy or MeleeAttackStrategy(),
            defense_strategy=defense_strategy or StandardDefenseStrategy(),
        )

    return _make


@pytest.fixture
def warrior():
    return create_warrior("Conan")


@pytest.fixture
def mage():
    return create_mage("Gandalf")


@pytest.fixture
def archer():
    return create_archer("Legolas")


@pytest.fixture
def rogue():
    return create_rogue("Rogue")

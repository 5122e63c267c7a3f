"""
Module for printing combatants, action histories and duel results in a
formatted way.
"""

from typing import Iterable

from arena.actions.base_action import BaseAction
from arena.character.main import Combatant
from arena.combat.duel import DuelResult

from . import constants
from .utils import cprint, make_bar


def health_bar(combatant: Combatant, length: int = 20) -> str:
    """
    Returns a colored health bar for the combatant.

    The bar turns yellow at half health and red below a quarter.
    """
    ratio = combatant.stats.health_ratio
    color = "green"
    if ratio < 0.25:
        color = "red"
    elif ratio < 0.5:
        color = "yellow"
    return make_bar(combatant.health, combatant.max_health, length, color)


def print_combatant_sheet(combatant: Combatant, padding: int = 0) -> None:
    """
    Prints the details of a combatant in a formatted way.

    Args:
        combatant (Combatant): The combatant to display.
        padding (int): Left padding for the output. Defaults to 0.

    """
    pad = " " * padding
    stats = combatant.stats
    status = "[green]alive[/]" if combatant.is_alive() else "[red]dead[/]"
    cprint(
        f"{pad}{combatant.archetype.emoji} {combatant.colored_name} "
        f"({combatant.archetype.colored_name}), {status}"
    )
    cprint(
        f"{pad}  HP: {health_bar(combatant)} [green]{stats.health}/{stats.max_health}[/], "
        f"ATK: [yellow]{stats.attack_power}[/], DEF: [cyan]{stats.defense}[/]"
    )
    if stats.max_mana > 0:
        cprint(
            f"{pad}  Mana: {make_bar(stats.mana, stats.max_mana, 20, 'blue')} "
            f"[blue]{stats.mana}/{stats.max_mana}[/]"
        )
    cprint(
        f"{pad}  Strategies: {combatant.attack_strategy.style.colored_name} / "
        f"{combatant.defense_strategy.style.colored_name}"
    )


def print_action_history(actions: Iterable[BaseAction], padding: int = 2) -> None:
    """
    Prints an action history snapshot, oldest first.

    Args:
        actions (Iterable[BaseAction]): The actions to display.
        padding (int): Left padding for the output. Defaults to 2.

    """
    pad = " " * padding
    actions = list(actions)
    if not actions:
        cprint(f"{pad}[dim](no actions)[/]")
        return
    for index, action in enumerate(actions, start=1):
        cprint(f"{pad}{index}. [bold]{action.action_type}[/]: {action.description}")


def print_duel_result(result: DuelResult) -> None:
    """Prints the outcome of a duel, preceded by every turn when verbose."""
    if constants.GLOBAL_VERBOSE_LEVEL >= 1:
        for turn in result.turns:
            cprint(f"  {turn}")
    if result.winner is not None:
        cprint(
            f"[bold green]{result.winner.name} wins[/] after {result.rounds} round(s)"
        )
    else:
        cprint(f"[bold yellow]No winner[/] after {result.rounds} round(s)")

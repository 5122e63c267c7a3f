"""
Main entry point for the arena demo.

Walks through the engine one piece at a time: archetype construction,
interchangeable strategies, undoable actions, battle turn sequences, and
finally a full duel that combines all of them.
"""

import argparse
import logging

from arena.actions.action_history import ActionHistory
from arena.actions.attack_action import AttackAction
from arena.actions.heal_action import HealAction
from arena.character.factory import (
    create_archer,
    create_mage,
    create_rogue,
    create_warrior,
)
from arena.combat.battle_sequence import PowerAttackSequence, StandardBattleSequence
from arena.combat.duel import Duel
from arena.combat.strategy_factory import create_attack_strategy
from arena.core import constants
from arena.core.constants import AttackStyle
from arena.core.logging import setup_logging
from arena.core.sheets import (
    print_action_history,
    print_combatant_sheet,
    print_duel_result,
)
from arena.core.utils import cprint, crule


def demo_factory() -> None:
    crule("DEMO 1: FACTORY METHOD PATTERN", style="bold green")
    for combatant in (
        create_warrior("Conan"),
        create_mage("Gandalf"),
        create_archer("Legolas"),
        create_rogue("Rogue"),
    ):
        print_combatant_sheet(combatant)


def demo_strategies() -> None:
    crule("DEMO 2: STRATEGY PATTERN", style="bold green")
    mage = create_mage("Gandalf")
    for style in AttackStyle:
        mage.attack_strategy = create_attack_strategy(style)
        target = create_warrior("Training Dummy")
        damage = mage.attack(target)
        cprint(f"  {style.colored_name} attack deals [bold]{damage}[/] damage")
    cprint("  Strategies are interchangeable at runtime.", style="italic")


def demo_commands() -> None:
    crule("DEMO 3: COMMAND PATTERN", style="bold green")
    hero = create_warrior("Hero")
    enemy = create_mage("Enemy")
    history = ActionHistory()

    cprint("  [bold red]ATTACK[/]: Hero and Enemy trade blows")
    history.execute(AttackAction(attacker=hero, target=enemy))
    history.execute(AttackAction(attacker=enemy, target=hero))
    cprint("  [bold green]HEAL[/]: Hero drinks a potion")
    history.execute(HealAction(target=hero, amount=30))
    print_action_history(history.history())
    print_combatant_sheet(hero, 2)
    print_combatant_sheet(enemy, 2)

    while history.has_actions_to_undo():
        action = history.undo_last()
        cprint(f"  Undoing: {action.description}")
    print_combatant_sheet(hero, 2)
    print_combatant_sheet(enemy, 2)


def demo_sequences() -> None:
    crule("DEMO 4: TEMPLATE METHOD PATTERN", style="bold green")
    attacker = create_warrior("Attacker")

    cprint("  STANDARD Battle turn:")
    damage = StandardBattleSequence(attacker, create_warrior("Defender")).execute_turn()
    cprint(f"    dealt {damage} damage, attacker at {attacker.health} HP")

    cprint("  POWER ATTACK turn:")
    sequence = PowerAttackSequence(attacker, create_warrior("Defender"))
    damage = sequence.execute_turn()
    cprint(
        f"    dealt {damage} damage, took {sequence.recoil} recoil, "
        f"attacker at {attacker.health} HP"
    )


def demo_all_together() -> None:
    crule("DEMO 5: ALL PATTERNS WORKING TOGETHER", style="bold green")
    conan = create_warrior("Conan")
    gandalf = create_mage("Gandalf")
    history = ActionHistory()

    history.execute(AttackAction(attacker=conan, target=gandalf))
    history.execute(HealAction(target=gandalf, amount=25))
    print_action_history(history.history())

    print_duel_result(Duel(conan, gandalf).run())
    print_combatant_sheet(conan, 2)
    print_combatant_sheet(gandalf, 2)

    cprint("\n  Patterns Collaboration:", style="bold")
    cprint("    Factory and builder assemble combatants from archetype templates.")
    cprint("    Strategies compute damage and mitigation.")
    cprint("    Actions record what happened so it can be undone.")
    cprint("    Battle sequences fix the order of every turn.")
    cprint("  Together they make for flexible, maintainable code.")


def run_demo() -> None:
    """Runs every demo section in order."""
    cprint("=" * 60)
    cprint("DESIGN PATTERNS GAME DEMO", style="bold blue")
    cprint("=" * 60)
    demo_factory()
    demo_strategies()
    demo_commands()
    demo_sequences()
    demo_all_together()
    cprint("=" * 60)
    cprint("Demo complete!", style="bold green")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Turn-based combat engine demo.")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every state change of the engine and list every duel turn.",
    )
    args = parser.parse_args(argv)

    if args.verbose:
        constants.GLOBAL_VERBOSE_LEVEL = 1
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    run_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

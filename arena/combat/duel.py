"""
Duel module for the arena.

Runs alternating standard turns between exactly two combatants until one of
them falls or the round limit is reached.
"""

from typing import Any

from catchery import log_warning
from pydantic import BaseModel, Field

from arena.core.constants import DEFAULT_MAX_ROUNDS
from arena.core.error_handling import InsufficientResource, ValidationError
from arena.core.logging import log_debug

from .battle_sequence import StandardBattleSequence


class TurnRecord(BaseModel):
    """The outcome of a single turn of a duel."""

    round_number: int = Field(
        ge=1,
        description="Round in which the turn happened.",
    )
    attacker: Any = Field(
        description="The combatant who acted.",
    )
    defender: Any = Field(
        description="The combatant who was attacked.",
    )
    damage: int | None = Field(
        default=None,
        description="Damage dealt, None if the attack could not be made.",
    )

    def __str__(self) -> str:
        if self.damage is None:
            return f"Round {self.round_number}: {self.attacker.name} fails to attack"
        return (
            f"Round {self.round_number}: {self.attacker.name} hits "
            f"{self.defender.name} for {self.damage}"
        )


class DuelResult(BaseModel):
    """The outcome of a whole duel."""

    winner: Any = Field(
        default=None,
        description="The surviving combatant, None if both are still standing.",
    )
    rounds: int = Field(
        default=0,
        ge=0,
        description="Number of rounds started.",
    )
    turns: list[TurnRecord] = Field(
        default_factory=list,
        description="Every turn in the order it happened.",
    )


class Duel:
    """
    A fight between two combatants. The first combatant acts first in every
    round; a fallen combatant never acts.
    """

    def __init__(self, first: Any, second: Any, max_rounds: int = DEFAULT_MAX_ROUNDS) -> None:
        if first is second:
            raise ValidationError("A combatant cannot duel itself")
        if max_rounds < 1:
            raise ValidationError(f"max_rounds must be at least 1, got {max_rounds}")
        self.first = first
        self.second = second
        self.max_rounds = max_rounds

    def is_over(self) -> bool:
        return self.first.is_dead() or self.second.is_dead()

    def _take_turn(self, round_number: int, attacker: Any, defender: Any) -> TurnRecord:
        try:
            damage = StandardBattleSequence(attacker, defender).execute_turn()
        except InsufficientResource as e:
            log_warning(
                f"{attacker.name} cannot attack: {e}",
                {"attacker": attacker.name, "round": round_number, "context": "duel_turn"},
            )
            damage = None
        return TurnRecord(
            round_number=round_number,
            attacker=attacker,
            defender=defender,
            damage=damage,
        )

    def run(self) -> DuelResult:
        """
        Fights until one combatant is dead or max_rounds rounds have started.

        Returns:
            DuelResult: The winner (if any), the round count and every turn.

        """
        result = DuelResult()
        while not self.is_over() and result.rounds < self.max_rounds:
            result.rounds += 1
            for attacker, defender in ((self.first, self.second), (self.second, self.first)):
                if self.is_over():
                    break
                result.turns.append(self._take_turn(result.rounds, attacker, defender))

        if self.second.is_dead() and self.first.is_alive():
            result.winner = self.first
        elif self.first.is_dead() and self.second.is_alive():
            result.winner = self.second
        log_debug(
            "Duel finished",
            {
                "rounds": result.rounds,
                "winner": result.winner.name if result.winner else None,
            },
        )
        return result

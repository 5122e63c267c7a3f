"""
Character stats module for the arena.

Defines the StatBlock, the immutable record of a combatant's vitals. Every
change produces a new StatBlock with the changed field clamped into range.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from arena.core.error_handling import ValidationError
from arena.core.utils import clamp


class StatBlock(BaseModel):
    """
    Immutable numeric record of a combatant's vitals.

    Attributes:
        max_health (int):
            The maximum health, at least 1.
        health (int):
            The current health, between 0 and max_health.
        attack_power (int):
            The raw attack power fed to attack strategies.
        defense (int):
            The defense value fed to defense strategies.
        max_mana (int):
            The maximum mana, possibly 0 for non-casters.
        mana (int):
            The current mana, between 0 and max_mana.

    """

    model_config = ConfigDict(frozen=True)

    max_health: int = Field(
        ge=1,
        description="Maximum health of the combatant",
    )
    health: int = Field(
        ge=0,
        description="Current health of the combatant",
    )
    attack_power: int = Field(
        ge=0,
        description="Raw attack power used by attack strategies",
    )
    defense: int = Field(
        ge=0,
        description="Defense value used by defense strategies",
    )
    max_mana: int = Field(
        default=0,
        ge=0,
        description="Maximum mana of the combatant",
    )
    mana: int = Field(
        default=0,
        ge=0,
        description="Current mana of the combatant",
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid stats: {e}") from e

    @model_validator(mode="after")
    def check_current_values(self) -> "StatBlock":
        """Checks health and mana against their maximums."""
        if self.health > self.max_health:
            raise ValueError(
                f"health ({self.health}) cannot exceed max_health ({self.max_health})"
            )
        if self.mana > self.max_mana:
            raise ValueError(
                f"mana ({self.mana}) cannot exceed max_mana ({self.max_mana})"
            )
        return self

    @classmethod
    def create(
        cls,
        max_health: int,
        attack_power: int,
        defense: int,
        max_mana: int = 0,
    ) -> "StatBlock":
        """
        Creates a StatBlock at full health and full mana.

        Args:
            max_health (int):
                The maximum health, at least 1.
            attack_power (int):
                The attack power, at least 0.
            defense (int):
                The defense, at least 0.
            max_mana (int):
                The maximum mana, at least 0.

        Returns:
            StatBlock:
                The new stat block.

        Raises:
            ValidationError:
                If any value is out of range.

        """
        return cls(
            max_health=max_health,
            health=max_health,
            attack_power=attack_power,
            defense=defense,
            max_mana=max_mana,
            mana=max_mana,
        )

    def with_health(self, health: int) -> "StatBlock":
        """Returns a copy with health clamped into [0, max_health]."""
        return self.model_copy(update={"health": clamp(health, 0, self.max_health)})

    def with_mana(self, mana: int) -> "StatBlock":
        """Returns a copy with mana clamped into [0, max_mana]."""
        return self.model_copy(update={"mana": clamp(mana, 0, self.max_mana)})

    @property
    def health_ratio(self) -> float:
        """Returns the current health as a fraction of the maximum."""
        return self.health / self.max_health

    def is_alive(self) -> bool:
        return self.health > 0

    def is_dead(self) -> bool:
        return self.health == 0

    def __str__(self) -> str:
        return (
            f"HP: {self.health}/{self.max_health}, ATK: {self.attack_power}, "
            f"DEF: {self.defense}, MANA: {self.mana}/{self.max_mana}"
        )

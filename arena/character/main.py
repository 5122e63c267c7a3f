"""
Combatant module for the arena.

Defines the Combatant class: a named entity owning a StatBlock and a pair of
interchangeable attack and defense strategies. All health and mana changes
go through the methods below and replace the StatBlock wholesale.
"""

from arena.combat.attack_strategies import AttackStrategy
from arena.combat.defense_strategies import DefenseStrategy
from arena.core.constants import Archetype
from arena.core.error_handling import (
    InsufficientResource,
    InvalidStrategyAssignment,
    ValidationError,
    require_enum_type,
    require_non_empty_string,
    require_non_negative_int,
)
from arena.core.logging import log_debug

from .character_stats import StatBlock


class Combatant:
    """
    Represents a combatant, including its vitals and combat strategies.

    Attributes:
        name (str):
            The name of the combatant.
        archetype (Archetype):
            The kind of combatant (e.g., warrior, mage).
        stats (StatBlock):
            The current vitals, replaced on every change.
        attack_strategy (AttackStrategy):
            The strategy used to compute outgoing damage.
        defense_strategy (DefenseStrategy):
            The strategy used to mitigate incoming damage.

    """

    def __init__(
        self,
        name: str,
        archetype: Archetype,
        stats: StatBlock,
        attack_strategy: AttackStrategy,
        defense_strategy: DefenseStrategy,
    ) -> None:
        self._name = require_non_empty_string(name, "name")
        self._archetype = require_enum_type(archetype, Archetype, "archetype")
        if not isinstance(stats, StatBlock):
            raise ValidationError(
                f"stats must be a StatBlock, got {type(stats).__name__}"
            )
        self._stats = stats
        self.attack_strategy = attack_strategy
        self.defense_strategy = defense_strategy

    # ============================================================================
    # STATE ACCESSORS
    # ============================================================================

    @property
    def name(self) -> str:
        return self._name

    @property
    def archetype(self) -> Archetype:
        return self._archetype

    @property
    def stats(self) -> StatBlock:
        """Returns the current (immutable) stat block."""
        return self._stats

    @property
    def health(self) -> int:
        return self._stats.health

    @property
    def max_health(self) -> int:
        return self._stats.max_health

    @property
    def mana(self) -> int:
        return self._stats.mana

    @property
    def max_mana(self) -> int:
        return self._stats.max_mana

    @property
    def colored_name(self) -> str:
        """Returns the combatant's name colored by archetype."""
        return self.archetype.colorize(self.name)

    @property
    def attack_strategy(self) -> AttackStrategy:
        return self._attack_strategy

    @attack_strategy.setter
    def attack_strategy(self, strategy: AttackStrategy) -> None:
        if not isinstance(strategy, AttackStrategy):
            raise InvalidStrategyAssignment(
                f"{self.name}: attack strategy must be an AttackStrategy, "
                f"got {type(strategy).__name__}"
            )
        self._attack_strategy = strategy

    @property
    def defense_strategy(self) -> DefenseStrategy:
        return self._defense_strategy

    @defense_strategy.setter
    def defense_strategy(self, strategy: DefenseStrategy) -> None:
        if not isinstance(strategy, DefenseStrategy):
            raise InvalidStrategyAssignment(
                f"{self.name}: defense strategy must be a DefenseStrategy, "
                f"got {type(strategy).__name__}"
            )
        self._defense_strategy = strategy

    # ============================================================================
    # COMBAT
    # ============================================================================

    def attack(self, target: "Combatant") -> int:
        """
        Attacks the target: computes raw damage with the attack strategy, lets
        the target mitigate it and applies the mitigated damage to the target.

        Args:
            target (Combatant):
                The combatant being attacked.

        Returns:
            int:
                The damage after the target's mitigation.

        Raises:
            InsufficientResource:
                If the attack strategy cannot pay its resource cost. In that
                case neither combatant's health has changed.

        """
        raw = self._attack_strategy.calculate_damage(self, target)
        mitigated = target.defend(raw)
        target.take_damage(mitigated)
        log_debug(
            f"{self.name} attacks {target.name}",
            {"raw": raw, "mitigated": mitigated, "target_hp": target.health},
        )
        return mitigated

    def defend(self, incoming_damage: int) -> int:
        """
        Returns how much of the incoming damage gets through this combatant's
        defense. Does not change any state.
        """
        return self._defense_strategy.calculate_damage_reduction(self, incoming_damage)

    def take_damage(self, amount: int) -> int:
        """
        Reduces health by the given amount, never below 0.

        Args:
            amount (int):
                The damage to apply (already mitigated).

        Returns:
            int:
                The health actually lost.

        """
        require_non_negative_int(amount, "damage amount", {"combatant": self.name})
        before = self._stats.health
        self._stats = self._stats.with_health(before - amount)
        lost = before - self._stats.health
        log_debug(
            f"{self.name} takes {lost} damage",
            {"requested": amount, "hp": self._stats.health},
        )
        return lost

    def heal(self, amount: int) -> int:
        """
        Increases health by the given amount, up to max_health.

        Args:
            amount (int):
                The amount of healing to apply.

        Returns:
            int:
                The actual amount healed, which may be less than requested
                near the cap.

        """
        require_non_negative_int(amount, "heal amount", {"combatant": self.name})
        before = self._stats.health
        self._stats = self._stats.with_health(before + amount)
        healed = self._stats.health - before
        log_debug(
            f"{self.name} heals {healed}",
            {"requested": amount, "hp": self._stats.health},
        )
        return healed

    def set_health(self, value: int) -> None:
        """Sets health directly, bypassing defense; still clamped to range."""
        self._stats = self._stats.with_health(value)

    # ============================================================================
    # MANA
    # ============================================================================

    def use_mana(self, amount: int) -> None:
        """
        Spends mana.

        Raises:
            InsufficientResource:
                If the combatant has less mana than requested.

        """
        require_non_negative_int(amount, "mana amount", {"combatant": self.name})
        if amount > self._stats.mana:
            raise InsufficientResource("mana", amount, self._stats.mana)
        self._stats = self._stats.with_mana(self._stats.mana - amount)
        log_debug(f"{self.name} spends {amount} mana", {"mana": self._stats.mana})

    def restore_mana(self, amount: int) -> int:
        """Restores mana up to max_mana and returns the amount actually restored."""
        require_non_negative_int(amount, "mana amount", {"combatant": self.name})
        before = self._stats.mana
        self._stats = self._stats.with_mana(before + amount)
        return self._stats.mana - before

    def set_mana(self, value: int) -> None:
        """Sets mana directly; still clamped to range."""
        self._stats = self._stats.with_mana(value)

    # ============================================================================
    # STATUS
    # ============================================================================

    def is_alive(self) -> bool:
        return self._stats.is_alive()

    def is_dead(self) -> bool:
        return self._stats.is_dead()

    def __str__(self) -> str:
        return f"{self.name} ({self.archetype}) {self._stats}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', archetype={self.archetype})"

    def __hash__(self) -> int:
        return hash((self.name, self.archetype))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Combatant):
            return NotImplemented
        return (self.name, self.archetype) == (other.name, other.archetype)

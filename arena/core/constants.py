"""
Constants and enumerations for the arena.

Defines the tunable combat numbers, together with the enumerations for
archetypes, attack styles, defense styles and battle sequence kinds used
throughout the engine.
"""

from enum import Enum

# Global verbose level for demo output:
# 0 - Minimal (e.g., only final results)
# 1 - Moderate (e.g., show per-turn damage)
GLOBAL_VERBOSE_LEVEL = 0

# ============================================================================
# ATTACK TUNING
# ============================================================================

# Melee attacks deal 20% more than the raw attack power.
MELEE_DAMAGE_MULTIPLIER = 1.2

# Ranged attacks land at 80% of the attack power.
RANGED_ACCURACY_MULTIPLIER = 0.8
# Bonus applied to the (already truncated) ranged base on a critical hit.
RANGED_CRITICAL_MULTIPLIER = 1.5
# A target below this health ratio (strictly) takes a critical ranged hit.
RANGED_CRITICAL_THRESHOLD = 0.30

# Mana spent by each magic attack.
MAGIC_MANA_COST = 10
# Every this many points of current mana add one point of magic damage.
MAGIC_MANA_BONUS_DIVISOR = 10

# ============================================================================
# DEFENSE TUNING
# ============================================================================

# Heavy armor always lets at least this share of incoming damage through.
HEAVY_ARMOR_MIN_PASS_THROUGH = 0.25

# ============================================================================
# TURN TUNING
# ============================================================================

# Share of the attacker's maximum health lost to power attack recoil.
POWER_ATTACK_RECOIL_RATIO = 0.1

# Safety limit for duels that would otherwise never end.
DEFAULT_MAX_ROUNDS = 20


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class Archetype(NiceEnum):
    """Defines the kind of combatant."""

    WARRIOR = "WARRIOR"
    MAGE = "MAGE"
    ARCHER = "ARCHER"
    ROGUE = "ROGUE"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this archetype."""
        return {
            Archetype.WARRIOR: "🛡️",
            Archetype.MAGE: "🔮",
            Archetype.ARCHER: "🏹",
            Archetype.ROGUE: "🗡️",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this archetype."""
        return {
            Archetype.WARRIOR: "bold red",
            Archetype.MAGE: "bold magenta",
            Archetype.ARCHER: "bold green",
            Archetype.ROGUE: "bold yellow",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies archetype color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class AttackStyle(NiceEnum):
    """Defines the available attack strategies."""

    MELEE = "MELEE"
    MAGIC = "MAGIC"
    RANGED = "RANGED"

    @property
    def color(self) -> str:
        """Returns the color string associated with this attack style."""
        return {
            AttackStyle.MELEE: "bold red",
            AttackStyle.MAGIC: "bold magenta",
            AttackStyle.RANGED: "bold green",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.name)

    def colorize(self, message: str) -> str:
        """Applies attack style color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class DefenseStyle(NiceEnum):
    """Defines the available defense strategies."""

    STANDARD = "STANDARD"
    HEAVY_ARMOR = "HEAVY_ARMOR"

    @property
    def color(self) -> str:
        """Returns the color string associated with this defense style."""
        return {
            DefenseStyle.STANDARD: "bold cyan",
            DefenseStyle.HEAVY_ARMOR: "bold blue",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.name)

    def colorize(self, message: str) -> str:
        """Applies defense style color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class SequenceKind(NiceEnum):
    """Defines the available battle turn sequences."""

    STANDARD = "STANDARD"
    POWER_ATTACK = "POWER_ATTACK"

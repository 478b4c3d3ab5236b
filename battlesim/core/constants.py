"""
Constants and enumerations for the battle simulator.

Defines the numeric tuning constants of the combat economy and the closed
enumerations for ability effect kinds, status effect kinds, item effects and
rarities used throughout the simulator.
"""

from enum import Enum

# ---- Character & loadout limits ----

# Number of abilities every character starts with (plus race bonus slots).
NUM_ABILITIES_PER_CHAR = 3
MAX_STATUS_EFFECTS = 5

# ---- Base statistics ----

BASE_HP = 100
BASE_EP = 50
MAX_EP_COST = 50
MAX_EFFECT_VALUE = 100

# ---- Battle economy ----

DEFEND_EP_COST = 5
RECHARGE_EP_GAIN = 5
WINS_PER_REWARD = 3

# ---- Status effect tuning ----

STUN_DURATION = 2
POISON_DURATION = 3
POISON_DAMAGE_PER_TURN = 5
DEFENSE_UP_DURATION = 1
EVADE_DURATION = 1
IMMUNITY_DURATION = 1
MARKED_DURATION = 2
MARKED_BONUS_DAMAGE = 5
SHIELD_BLOCK_AMOUNT = 15
EVADE_CHANCE = 0.5

# ---- Passive items ----

PHOENIX_REVIVE_HP = 40


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class AbilityEffectType(NiceEnum):
    """Defines what an ability does when it is used in battle."""

    DAMAGE = "DAMAGE"
    HEAL = "HEAL"
    ENERGY_GAIN = "ENERGY_GAIN"
    APPLY_STATUS = "APPLY_STATUS"
    DEFENSE = "DEFENSE"
    EVADE = "EVADE"
    UTILITY = "UTILITY"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this effect type."""
        return {
            AbilityEffectType.DAMAGE: "⚔️",
            AbilityEffectType.HEAL: "💚",
            AbilityEffectType.ENERGY_GAIN: "🔋",
            AbilityEffectType.APPLY_STATUS: "😈",
            AbilityEffectType.DEFENSE: ":shield:",
            AbilityEffectType.EVADE: "💨",
            AbilityEffectType.UTILITY: "🔧",
        }.get(self, "❔")


class StatusEffectType(NiceEnum):
    """Defines the closed set of status effects a character can carry."""

    STUNNED = "STUNNED"
    POISONED = "POISONED"
    DEFENSE_UP = "DEFENSE_UP"
    EVADING = "EVADING"
    IMMUNITY = "IMMUNITY"
    SHIELDED = "SHIELDED"
    MARKED = "MARKED"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this status effect."""
        return {
            StatusEffectType.STUNNED: "💫",
            StatusEffectType.POISONED: "☠️",
            StatusEffectType.DEFENSE_UP: ":shield:",
            StatusEffectType.EVADING: "💨",
            StatusEffectType.IMMUNITY: "✨",
            StatusEffectType.SHIELDED: "🔰",
            StatusEffectType.MARKED: "🎯",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this status effect."""
        return {
            StatusEffectType.STUNNED: "bold yellow",
            StatusEffectType.POISONED: "bold green",
            StatusEffectType.DEFENSE_UP: "bold blue",
            StatusEffectType.EVADING: "bold cyan",
            StatusEffectType.IMMUNITY: "bold white",
            StatusEffectType.SHIELDED: "bold blue",
            StatusEffectType.MARKED: "bold red",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies status effect color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class SingleUseEffectType(NiceEnum):
    """Defines the effect triggered when a single-use item is consumed."""

    HEAL_HP = "HEAL_HP"
    RESTORE_EP = "RESTORE_EP"
    REVIVE = "REVIVE"
    GRANT_IMMUNITY = "GRANT_IMMUNITY"
    DAMAGE = "DAMAGE"


class PassiveEffectType(NiceEnum):
    """Defines the continuous effect granted by an equipped passive item."""

    NONE = "NONE"
    NEGATE_FIRST_STATUS = "NEGATE_FIRST_STATUS"
    REVIVE_ONCE = "REVIVE_ONCE"


class RarityType(NiceEnum):
    """Defines item rarity tiers along with the upper bound of their roll."""

    COMMON = "COMMON"
    UNCOMMON = "UNCOMMON"
    RARE = "RARE"

    @property
    def roll_upper_bound(self) -> int:
        """Returns the highest d100 roll (0-99) that lands in this tier."""
        return {
            RarityType.COMMON: 69,
            RarityType.UNCOMMON: 94,
            RarityType.RARE: 99,
        }[self]

    @property
    def color(self) -> str:
        """Returns the color string associated with this rarity."""
        return {
            RarityType.COMMON: "white",
            RarityType.UNCOMMON: "bold green",
            RarityType.RARE: "bold magenta",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies rarity color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class MoveStatus(NiceEnum):
    """Outcome of executing a single move inside a round."""

    EXECUTED = "EXECUTED"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"


class BattleState(NiceEnum):
    """Lifecycle state of the turn resolver."""

    IDLE = "IDLE"
    AWAITING_MOVES = "AWAITING_MOVES"
    EXECUTING = "EXECUTING"
    FINISHED = "FINISHED"

"""
Character management module for the simulator.

Defines the Character class: the combatant whose HP, EP, status effects and
inventory the battle engine mutates through its public API.
"""

import random

from battlesim.actions.ability import Ability
from battlesim.core.constants import (
    NUM_ABILITIES_PER_CHAR,
    PHOENIX_REVIVE_HP,
    PassiveEffectType,
    StatusEffectType,
)
from battlesim.core.error_handling import (
    ValidationError,
    require_non_blank,
    require_non_negative,
    require_not_none,
    require_range,
)
from battlesim.core.logging import log_debug, log_error
from battlesim.effects.base_effect import StatusEffect
from battlesim.effects.modifier_effect import DefenseUpEffect, EvadingEffect, MarkedEffect
from battlesim.effects.shield_effect import ShieldedEffect

from .character_class import CharacterClass
from .character_effects import CharacterEffects
from .character_inventory import CharacterInventory
from .character_race import CharacterRace
from .character_stats import CharacterStats


class Character:
    """
    Represents a combatant, including its resources, progression, ability
    loadout, status effects and inventory.

    Attributes:
        name (str):
            The name of the character.
        race (CharacterRace):
            The race of the character.
        char_class (CharacterClass):
            The class of the character.
        level (int):
            The current level.
        experience (int):
            Cumulative experience points.
        battles_won (int):
            Number of battles won.
        abilities (list[Ability]):
            The equipped ability loadout.
        rng (random.Random):
            Randomness source used for evasion rolls.

    """

    # === Static properties ===

    name: str
    race: CharacterRace
    char_class: CharacterClass
    level: int
    experience: int
    battles_won: int
    abilities: list[Ability]
    rng: random.Random

    # === Management Modules ===

    effects: CharacterEffects
    stats: CharacterStats
    inventory: CharacterInventory

    def __init__(
        self,
        name: str,
        race: CharacterRace,
        char_class: CharacterClass,
        abilities: list[Ability] | None = None,
        level: int = 1,
        rng: random.Random | None = None,
    ) -> None:
        require_non_blank(name, "character name")
        require_not_none(race, "race", {"name": name})
        require_not_none(char_class, "class", {"name": name})
        require_range(level, 1, 10_000, "level", {"name": name})

        # Initialize static properties.
        self.name = name
        self.race = race
        self.char_class = char_class
        self.level = level
        self.experience = 0
        self.battles_won = 0
        self.abilities = []
        self.rng = rng if rng is not None else random.Random()

        # Per-battle flags.
        self._stunned = False
        self.phoenix_used = False

        # Initialize modules.
        self.effects = CharacterEffects(owner=self)
        self.stats = CharacterStats(
            owner=self,
            max_hp=char_class.base_hp + race.hp_bonus,
            max_ep=char_class.base_ep + race.ep_bonus,
        )
        self.inventory = CharacterInventory(owner=self)

        if abilities:
            self.set_abilities(abilities)

    # ============================================================================
    # DELEGATED STAT PROPERTIES
    # ============================================================================

    @property
    def colored_name(self) -> str:
        return f"[bold cyan]{self.name}[/]"

    @property
    def current_hp(self) -> int:
        return self.stats.hp

    @property
    def max_hp(self) -> int:
        return self.stats.max_hp

    @property
    def current_ep(self) -> int:
        return self.stats.ep

    @property
    def max_ep(self) -> int:
        return self.stats.max_ep

    @property
    def ability_slots(self) -> int:
        """Number of abilities a full loadout holds."""
        return NUM_ABILITIES_PER_CHAR + self.race.extra_ability_slots

    @property
    def status_effects(self) -> tuple[StatusEffect, ...]:
        """Snapshot of the attached status effects, in attach order."""
        return tuple(self.effects.active_effects)

    @property
    def is_stunned(self) -> bool:
        return self._stunned

    def set_stunned(self, stunned: bool) -> None:
        self._stunned = stunned

    # ============================================================================
    # LOADOUT
    # ============================================================================

    def set_abilities(self, abilities: list[Ability]) -> None:
        """
        Replaces the ability loadout.

        Args:
            abilities (list[Ability]):
                Either empty, or exactly as many abilities as the character
                has slots, without duplicates.

        Raises:
            ValidationError: If the loadout size or content is invalid.

        """
        require_not_none(abilities, "abilities")
        if abilities and len(abilities) != self.ability_slots:
            log_error(
                "Invalid ability loadout size",
                {"name": self.name, "size": len(abilities), "slots": self.ability_slots},
            )
            raise ValidationError(
                f"{self.name} must equip exactly {self.ability_slots} abilities "
                f"(got {len(abilities)})"
            )
        if len(set(abilities)) != len(abilities):
            raise ValidationError(f"{self.name} cannot equip the same ability twice")
        self.abilities = list(abilities)

    # ============================================================================
    # RESOURCES
    # ============================================================================

    def take_damage(self, amount: int) -> int:
        """
        Applies damage after status-effect modifiers. HP never drops below 0.

        Immunity negates the hit; otherwise DefenseUp halves it (rounding
        up), a shield absorbs part of it and breaks, and Evading may dodge it.
        Marked then adds its bonus on top.

        Args:
            amount (int):
                The raw, non-negative damage.

        Returns:
            int:
                The HP actually lost.

        """
        require_non_negative(amount, "damage", {"name": self.name})
        final = amount
        if self.effects.has(StatusEffectType.IMMUNITY):
            final = 0
        else:
            defense = self.effects.get(StatusEffectType.DEFENSE_UP)
            if isinstance(defense, DefenseUpEffect):
                final = defense.reduce(final)
            shield = self.effects.get(StatusEffectType.SHIELDED)
            if isinstance(shield, ShieldedEffect):
                final = shield.absorb(final)
                self.effects.remove(StatusEffectType.SHIELDED)
            evading = self.effects.get(StatusEffectType.EVADING)
            if isinstance(evading, EvadingEffect) and evading.evades(self.rng):
                final = 0
        marked = self.effects.get(StatusEffectType.MARKED)
        if isinstance(marked, MarkedEffect):
            final += marked.bonus_damage

        actual = -self.stats.adjust_hp(-final)
        log_debug(
            f"{self.name} takes {actual} damage",
            {"raw": amount, "modified": final, "hp": self.current_hp},
        )
        return actual

    def heal(self, amount: int) -> int:
        """
        Increases the character's HP by the given amount, up to max HP.

        Returns:
            int:
                The actual amount healed

        """
        require_non_negative(amount, "heal amount", {"name": self.name})
        return self.stats.adjust_hp(amount)

    def spend_ep(self, cost: int) -> bool:
        """
        Withdraws EP if the character can afford it.

        Args:
            cost:
                The EP to spend

        Returns:
            bool:
                True if the EP was spent, False if it was insufficient (no
                change in that case).

        """
        require_non_negative(cost, "EP cost", {"name": self.name})
        if self.stats.ep < cost:
            return False
        self.stats.adjust_ep(-cost)
        return True

    def gain_ep(self, amount: int) -> int:
        """
        Increases the character's EP by the given amount, up to max EP.

        Returns:
            int:
                The actual amount of EP regained.

        """
        require_non_negative(amount, "EP gain", {"name": self.name})
        return self.stats.adjust_ep(amount)

    def is_alive(self) -> bool:
        return self.stats.hp > 0

    def is_dead(self) -> bool:
        return self.stats.hp <= 0

    # ============================================================================
    # STATUS EFFECTS
    # ============================================================================

    def add_status_effect(self, effect: StatusEffect) -> bool:
        return self.effects.add(effect)

    def remove_status_effect(self, kind: StatusEffectType) -> bool:
        return self.effects.remove(kind)

    def has_status_effect(self, kind: StatusEffectType) -> bool:
        return self.effects.has(kind)

    def process_turn_start_effects(self, log) -> None:
        """Runs the turn-start hooks of every attached status effect."""
        require_not_none(log, "combat log")
        self.effects.process_turn_start(log)

    def process_turn_end_effects(self, log) -> None:
        """Runs the turn-end hooks of every attached status effect."""
        require_not_none(log, "combat log")
        self.effects.process_turn_end(log)

    def process_skipped_action(self, log) -> None:
        """Runs the skipped-action hooks after the character lost its move."""
        require_not_none(log, "combat log")
        self.effects.process_action_skipped(log)

    def check_phoenix_feather(self, log) -> bool:
        """
        Revives the character once if it fell while wearing an item that
        grants a one-time revival. The item is consumed.

        Args:
            log (CombatLog | None):
                Log receiving the narration, if any.

        Returns:
            bool:
                True if the character was revived.

        """
        passive = self.inventory.equipped_passive
        if (
            self.is_alive()
            or self.phoenix_used
            or passive is None
            or passive.passive_effect != PassiveEffectType.REVIVE_ONCE
        ):
            return False
        self.stats.restore(min(PHOENIX_REVIVE_HP, self.max_hp), self.current_ep)
        self.phoenix_used = True
        self.inventory.remove_item(passive)
        if log is not None:
            log.add_entry(f"{self.name} is revived by {passive.name}!")
        return True

    # ============================================================================
    # PROGRESSION
    # ============================================================================

    def add_experience(self, amount: int) -> None:
        require_non_negative(amount, "experience", {"name": self.name})
        self.experience += amount

    def set_level(self, level: int) -> None:
        require_range(level, 1, 10_000, "level", {"name": self.name})
        self.level = level

    def set_max_stats(self, max_hp: int, max_ep: int) -> None:
        """Sets new maximum HP and EP and fully restores both."""
        require_range(max_hp, 1, 1_000_000, "max HP", {"name": self.name})
        require_non_negative(max_ep, "max EP", {"name": self.name})
        self.stats.set_max(max_hp, max_ep)

    def increment_battles_won(self) -> None:
        self.battles_won += 1

    # ============================================================================
    # COPYING
    # ============================================================================

    def copy_for_battle(self) -> "Character":
        """
        Creates an independent copy for a battle.

        The copy has the same resources, progression, loadout and items, but
        no status effects and fresh per-battle flags.

        Returns:
            Character:
                The battle copy.

        """
        clone = Character(
            name=self.name,
            race=self.race,
            char_class=self.char_class,
            level=self.level,
            rng=self.rng,
        )
        clone.abilities = list(self.abilities)
        clone.experience = self.experience
        clone.battles_won = self.battles_won
        clone.stats.max_hp = self.max_hp
        clone.stats.max_ep = self.max_ep
        clone.stats.restore(self.current_hp, self.current_ep)
        clone.effects.max_effects = self.effects.max_effects
        self.inventory.copy_to(clone.inventory)
        return clone

    def __str__(self) -> str:
        return (
            f"{self.name} (Lvl {self.level} {self.race.name} {self.char_class.name}, "
            f"HP: {self.current_hp}/{self.max_hp}, EP: {self.current_ep}/{self.max_ep}, "
            f"XP: {self.experience}, Wins: {self.battles_won})"
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', level={self.level})"

"""
Character effects module for the simulator.

Manages the status effects attached to a character: attaching them within the
soft cap, the per-round lifecycle hooks, and the removal of expired effects.
"""

from collections.abc import Iterator
from typing import Any

from battlesim.core.constants import MAX_STATUS_EFFECTS, PassiveEffectType, StatusEffectType
from battlesim.core.error_handling import require_not_none
from battlesim.core.logging import log_debug, log_warning
from battlesim.effects.base_effect import StatusEffect


class CharacterEffects:
    """
    Manages all status effects for a character.

    Attributes:
        _owner (Any):
            The character that owns this effects module.
        active_effects (list[StatusEffect]):
            Currently attached effects, in attach order.
        max_effects (int):
            Soft cap on simultaneous effects; extra ones are dropped.
        negation_used (bool):
            Whether an equipped negating item already absorbed an effect
            this battle.

    """

    _owner: Any
    active_effects: list[StatusEffect]
    max_effects: int
    negation_used: bool

    def __init__(self, owner: Any, max_effects: int = MAX_STATUS_EFFECTS) -> None:
        """
        Initialize the CharacterEffects module.

        Args:
            owner (Any):
                The character that owns this effects module.
            max_effects (int):
                Maximum number of simultaneous effects.

        """
        self._owner = owner
        self.active_effects = []
        self.max_effects = max_effects
        self.negation_used = False

    def __iter__(self) -> Iterator[StatusEffect]:
        return iter(list(self.active_effects))

    def __len__(self) -> int:
        return len(self.active_effects)

    # === Queries ===

    def has(self, kind: StatusEffectType) -> bool:
        return any(effect.status_type == kind for effect in self.active_effects)

    def get(self, kind: StatusEffectType) -> StatusEffect | None:
        """
        Get the first attached effect of the given kind.

        Args:
            kind (StatusEffectType): The kind to look for.

        Returns:
            StatusEffect | None: The effect, or None if not attached.

        """
        for effect in self.active_effects:
            if effect.status_type == kind:
                return effect
        return None

    # === Effect Management ===

    def add(self, effect: StatusEffect) -> bool:
        """
        Attach a status effect to the owner.

        An equipped item negating the first status effect of the battle
        swallows the effect once. Past the cap, new effects are dropped.

        Args:
            effect (StatusEffect):
                The effect to attach.

        Returns:
            bool:
                True if the effect was attached, False if it was negated or
                dropped.

        """
        require_not_none(effect, "status effect")
        passive = self._owner.inventory.equipped_passive
        if (
            passive is not None
            and passive.passive_effect == PassiveEffectType.NEGATE_FIRST_STATUS
            and not self.negation_used
        ):
            self.negation_used = True
            log_debug(
                f"{passive.name} negates {effect.display_name}",
                {"owner": self._owner.name},
            )
            return False
        if len(self.active_effects) >= self.max_effects:
            log_warning(
                "Status effect dropped, cap reached",
                {
                    "owner": self._owner.name,
                    "effect": effect.kind,
                    "max_effects": self.max_effects,
                },
            )
            return False
        self.active_effects.append(effect)
        effect.apply_effect(self._owner)
        return True

    def remove(self, kind: StatusEffectType) -> bool:
        """
        Remove every attached effect of the given kind.

        Args:
            kind (StatusEffectType):
                The kind to remove.

        Returns:
            bool:
                True if at least one effect was removed.

        """
        removed = [e for e in self.active_effects if e.status_type == kind]
        for effect in removed:
            self._detach(effect)
            effect.remove(self._owner)
        return bool(removed)

    def clear(self) -> None:
        """Remove every effect, running their cleanup hooks."""
        for effect in list(self.active_effects):
            self._detach(effect)
            effect.remove(self._owner)

    # === Round Hooks ===

    def process_turn_start(self, log: Any) -> None:
        """
        Run the turn-start hook of every effect, narrating poison damage and
        expirations.

        Args:
            log (CombatLog):
                The log receiving the narration.

        """
        for effect in list(self.active_effects):
            if not self._is_attached(effect):
                continue
            hp_before = self._owner.current_hp
            effect.on_turn_start(self._owner)
            if effect.status_type == StatusEffectType.POISONED:
                damage = hp_before - self._owner.current_hp
                if damage > 0:
                    log.add_entry(f"{self._owner.name} suffers {damage} poison damage.")
            self._expire(effect, log)

    def process_turn_end(self, log: Any) -> None:
        """
        Run the turn-end hook of every effect and remove expired ones.

        Args:
            log (CombatLog):
                The log receiving the narration.

        """
        for effect in list(self.active_effects):
            if not self._is_attached(effect):
                continue
            effect.on_turn_end(self._owner)
            self._expire(effect, log)

    def process_action_skipped(self, log: Any) -> None:
        """
        Run the skipped-action hook of every effect and remove expired ones.

        Args:
            log (CombatLog):
                The log receiving the narration.

        """
        for effect in list(self.active_effects):
            if not self._is_attached(effect):
                continue
            effect.on_action_skipped(self._owner)
            self._expire(effect, log)

    def _expire(self, effect: StatusEffect, log: Any) -> None:
        if not effect.is_expired():
            return
        self._detach(effect)
        effect.remove(self._owner)
        log.add_entry(f"{self._owner.name} is no longer {effect.kind}.")

    def _is_attached(self, effect: StatusEffect) -> bool:
        return any(e is effect for e in self.active_effects)

    def _detach(self, effect: StatusEffect) -> None:
        self.active_effects = [e for e in self.active_effects if e is not effect]

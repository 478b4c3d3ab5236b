"""
Ability move module for the simulator.

Executes an Ability in battle: withdraws its EP cost up front, then applies
the effect that matches the ability's effect type.
"""

from typing import Any

from pydantic import Field

from battlesim.core.constants import AbilityEffectType, MoveStatus, StatusEffectType
from battlesim.core.logging import log_debug, log_warning
from battlesim.effects.effect_factory import create_status_effect

from .ability import Ability
from .base_move import BaseMove, MoveOutcome


class AbilityMove(BaseMove):
    """A move wrapping one of the actor's abilities."""

    ability: Ability = Field(
        description="The ability used by this move.",
    )

    @property
    def name(self) -> str:
        return self.ability.name

    @property
    def description(self) -> str:
        return self.ability.description

    @property
    def ep_cost(self) -> int:
        return self.ability.ep_cost

    @property
    def effect_type(self) -> AbilityEffectType:
        return self.ability.effect_type

    def execute(self, actor: Any, target: Any, log: Any) -> MoveOutcome:
        """
        Use the ability.

        The EP check happens before anything else, so a move the actor cannot
        afford leaves every character untouched.

        Args:
            actor (Character): The character using the ability.
            target (Character): The opposing character.
            log (CombatLog): The log receiving the narration.

        Returns:
            MoveOutcome: EXECUTED, or FAILED on missing EP or an effect type
            with no implementation.

        """
        ability = self.ability
        if not isinstance(ability.effect_type, AbilityEffectType):
            log.add_entry(
                f"{actor.name} uses {ability.name}, but its effect is not implemented."
            )
            log_warning(
                "Unimplemented ability effect type",
                {"ability": ability.name, "effect_type": ability.effect_type},
            )
            return self._outcome(actor, MoveStatus.FAILED, "unimplemented effect type")

        if not actor.spend_ep(ability.ep_cost):
            log.add_entry(
                f"{actor.name} tries to use {ability.name} but does not have enough EP "
                f"({actor.current_ep}/{ability.ep_cost})."
            )
            return self._outcome(actor, MoveStatus.FAILED, "insufficient EP")

        log.add_entry(f"{actor.name} uses {ability.name}!")
        log_debug(
            "Dispatching ability",
            {"actor": actor.name, "ability": ability.name, "effect": ability.effect_type},
        )

        effect_type = ability.effect_type
        if effect_type == AbilityEffectType.DAMAGE:
            dealt = target.take_damage(ability.effect_value)
            log.add_entry(f"{ability.name} deals {dealt} damage to {target.name}.")
            if ability.status_effect is not None:
                self._attach(actor, ability.status_effect, log)
        elif effect_type == AbilityEffectType.HEAL:
            healed = actor.heal(ability.effect_value)
            log.add_entry(f"{actor.name} restores {healed} HP.")
        elif effect_type == AbilityEffectType.ENERGY_GAIN:
            gained = actor.gain_ep(ability.effect_value)
            log.add_entry(f"{actor.name} gains {gained} EP.")
        elif effect_type == AbilityEffectType.APPLY_STATUS:
            self._attach(target, ability.status_effect, log)
        elif effect_type == AbilityEffectType.DEFENSE:
            self._attach(actor, ability.status_effect or StatusEffectType.DEFENSE_UP, log)
        elif effect_type == AbilityEffectType.EVADE:
            self._attach(actor, ability.status_effect or StatusEffectType.EVADING, log)
        elif effect_type == AbilityEffectType.UTILITY:
            if ability.status_effect is not None:
                self._attach(actor, ability.status_effect, log)
            elif ability.effect_value > 0:
                healed = actor.heal(ability.effect_value)
                log.add_entry(f"{actor.name} restores {healed} HP.")
            else:
                self._attach(actor, StatusEffectType.DEFENSE_UP, log)

        return self._outcome(actor, MoveStatus.EXECUTED)

    @staticmethod
    def _attach(character: Any, kind: StatusEffectType | None, log: Any) -> None:
        if kind is None:
            return
        if character.add_status_effect(create_status_effect(kind)):
            log.add_entry(f"{character.name} is now {kind}.")
        else:
            log.add_entry(f"{character.name} is unaffected by {kind}.")

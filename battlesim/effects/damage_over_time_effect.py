"""
Damage over time effect module for the simulator.

Defines the poison effect, which deals a fixed amount of damage at the start
of each round until it runs out.
"""

from typing import Any, Literal

from pydantic import Field

from battlesim.core.constants import POISON_DAMAGE_PER_TURN, POISON_DURATION

from .base_effect import StatusEffect


class PoisonedEffect(StatusEffect):
    """Deals fixed damage at each turn start for a limited number of rounds."""

    kind: Literal["POISONED"] = "POISONED"
    duration: int = Field(
        default=POISON_DURATION,
        ge=0,
        description="Rounds of poison damage left.",
    )
    damage_per_turn: int = Field(
        default=POISON_DAMAGE_PER_TURN,
        ge=0,
        description="Damage dealt at the start of every round.",
    )

    def on_turn_start(self, target: Any) -> None:
        """
        Deal the poison damage, then tick the duration down.

        Args:
            target (Character): The poisoned character.

        """
        if self.duration > 0:
            target.take_damage(self.damage_per_turn)
        self._decrement_duration()

"""
Modifier effect module for the simulator.

Defines the short-lived effects that change how incoming damage is computed:
DefenseUp halves it, Evading may dodge it entirely, Immunity negates it and
Marked makes the bearer take extra damage.
"""

import math
import random
from typing import Literal

from pydantic import Field

from battlesim.core.constants import (
    DEFENSE_UP_DURATION,
    EVADE_CHANCE,
    EVADE_DURATION,
    IMMUNITY_DURATION,
    MARKED_BONUS_DAMAGE,
    MARKED_DURATION,
)

from .base_effect import StatusEffect


class DefenseUpEffect(StatusEffect):
    """Halves incoming damage, rounding up."""

    kind: Literal["DEFENSE_UP"] = "DEFENSE_UP"
    duration: int = Field(default=DEFENSE_UP_DURATION, ge=0)

    def reduce(self, damage: int) -> int:
        """
        Compute the damage left after the defensive stance.

        Args:
            damage (int): The incoming damage.

        Returns:
            int: Half the damage, rounded up.

        """
        return math.ceil(damage / 2)


class EvadingEffect(StatusEffect):
    """Gives a chance to avoid incoming damage completely."""

    kind: Literal["EVADING"] = "EVADING"
    duration: int = Field(default=EVADE_DURATION, ge=0)
    chance: float = Field(
        default=EVADE_CHANCE,
        ge=0.0,
        le=1.0,
        description="Probability of dodging a hit.",
    )

    def evades(self, rng: random.Random) -> bool:
        """
        Roll against the evasion chance.

        Args:
            rng (random.Random): The randomness source of the bearer.

        Returns:
            bool: True if the hit is dodged.

        """
        return rng.random() < self.chance


class ImmunityEffect(StatusEffect):
    """Negates incoming damage while it lasts."""

    kind: Literal["IMMUNITY"] = "IMMUNITY"
    duration: int = Field(default=IMMUNITY_DURATION, ge=0)


class MarkedEffect(StatusEffect):
    """Makes every hit against the bearer deal bonus damage."""

    kind: Literal["MARKED"] = "MARKED"
    duration: int = Field(default=MARKED_DURATION, ge=0)
    bonus_damage: int = Field(
        default=MARKED_BONUS_DAMAGE,
        ge=0,
        description="Extra damage added to each hit taken.",
    )

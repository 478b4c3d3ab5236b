"""
Shield effect module for the simulator.

The shield does not expire with time: it absorbs part of the first hit the
bearer takes and is consumed by it.
"""

from typing import Any, Literal

from pydantic import Field

from battlesim.core.constants import SHIELD_BLOCK_AMOUNT

from .base_effect import StatusEffect


class ShieldedEffect(StatusEffect):
    """Absorbs a fixed amount of damage from a single hit."""

    kind: Literal["SHIELDED"] = "SHIELDED"
    duration: int = Field(
        default=1,
        ge=0,
        description="1 while the shield is intact, 0 once it has been used.",
    )
    block_amount: int = Field(
        default=SHIELD_BLOCK_AMOUNT,
        ge=0,
        description="Damage absorbed from the hit that breaks the shield.",
    )

    @property
    def used(self) -> bool:
        return self.duration == 0

    def on_turn_start(self, target: Any) -> None:
        """The shield is not time-boxed, so rounds do not wear it down."""

    def absorb(self, damage: int) -> int:
        """
        Absorb part of a hit and break the shield.

        Args:
            damage (int): The incoming damage.

        Returns:
            int: The damage that gets through the shield.

        """
        if self.used:
            return damage
        self.duration = 0
        return max(0, damage - self.block_amount)

    def remove(self, target: Any) -> None:
        super().remove(target)
        self.duration = 0

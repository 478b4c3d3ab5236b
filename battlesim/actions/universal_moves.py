"""
Universal moves available to every character regardless of class.
"""

from typing import Any

from pydantic import Field

from battlesim.core.constants import (
    DEFEND_EP_COST,
    RECHARGE_EP_GAIN,
    MoveStatus,
    StatusEffectType,
)
from battlesim.effects.effect_factory import create_status_effect

from .base_move import BaseMove, MoveOutcome


class Defend(BaseMove):
    """Spend a little EP to take a defensive stance (DefenseUp)."""

    cost: int = Field(
        default=DEFEND_EP_COST,
        ge=0,
        description="EP spent to defend.",
    )

    @property
    def name(self) -> str:
        return "Defend"

    @property
    def description(self) -> str:
        return "Take a defensive stance, halving incoming damage."

    @property
    def ep_cost(self) -> int:
        return self.cost

    def execute(self, actor: Any, target: Any, log: Any) -> MoveOutcome:
        if not actor.spend_ep(self.cost):
            log.add_entry(f"{actor.name} does not have enough EP to defend.")
            return self._outcome(actor, MoveStatus.FAILED, "insufficient EP")
        if actor.add_status_effect(create_status_effect(StatusEffectType.DEFENSE_UP)):
            log.add_entry(f"{actor.name} takes a defensive stance.")
        else:
            log.add_entry(f"{actor.name} braces, but the stance does not take hold.")
        return self._outcome(actor, MoveStatus.EXECUTED)


class Recharge(BaseMove):
    """Free move restoring a fixed amount of EP. It cannot fail."""

    gain: int = Field(
        default=RECHARGE_EP_GAIN,
        ge=0,
        description="EP restored by recharging.",
    )

    @property
    def name(self) -> str:
        return "Recharge"

    @property
    def description(self) -> str:
        return "Focus to regain a little EP."

    def execute(self, actor: Any, target: Any, log: Any) -> MoveOutcome:
        gained = actor.gain_ep(self.gain)
        log.add_entry(f"{actor.name} recharges and gains {gained} EP.")
        return self._outcome(actor, MoveStatus.EXECUTED)

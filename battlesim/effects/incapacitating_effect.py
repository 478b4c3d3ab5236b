"""
Incapacitating effect module for the simulator.

Defines the effect that prevents a character from acting while it lasts.
"""

from typing import Any, Literal

from pydantic import Field

from battlesim.core.constants import STUN_DURATION
from battlesim.core.logging import log_debug

from .base_effect import StatusEffect


class StunnedEffect(StatusEffect):
    """
    Effect that prevents a character from taking actions.

    The stun counts the actions its bearer loses, not the rounds that pass,
    so the bearer always misses the same number of moves whether or not it
    had already acted in the round it was stunned. The stun flag is raised
    on attach and cleared when the last lost action is spent or when the
    effect is removed, whichever comes first.
    """

    kind: Literal["STUNNED"] = "STUNNED"
    duration: int = Field(
        default=STUN_DURATION,
        ge=0,
        description="Actions left to lose before the stun wears off.",
    )

    def apply_effect(self, target: Any) -> None:
        super().apply_effect(target)
        target.set_stunned(True)

    def on_turn_start(self, target: Any) -> None:
        """Round starts do not wear a stun down."""

    def on_action_skipped(self, target: Any) -> None:
        self._decrement_duration()
        if self.duration == 0:
            log_debug("Stun wore off", {"target": target.name})
            target.set_stunned(False)

    def remove(self, target: Any) -> None:
        super().remove(target)
        target.set_stunned(False)

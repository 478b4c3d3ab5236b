"""
Base status effect module for the simulator.

Defines the lifecycle shared by every status effect a character can carry:
an immediate hook on attach, a hook at the start and at the end of each
round, and a cleanup hook when the effect is removed.
"""

from typing import Any

from pydantic import BaseModel, Field

from battlesim.core.constants import StatusEffectType
from battlesim.core.logging import log_debug


class StatusEffect(BaseModel):
    """
    Base class for all time-boxed modifiers attached to a character.

    Concrete effects narrow `kind` to a single literal, which is also the
    discriminator used when effects are serialized. The remaining duration
    counts down to zero, at which point the owner removes the effect.
    """

    kind: str = Field(
        description="The status effect kind, one of StatusEffectType.",
    )
    duration: int = Field(
        ge=0,
        description="Remaining duration in rounds.",
    )

    @property
    def status_type(self) -> StatusEffectType:
        """Returns the enumeration member matching this effect's kind."""
        return StatusEffectType(self.kind)

    @property
    def display_name(self) -> str:
        return self.status_type.display_name

    @property
    def colored_name(self) -> str:
        """Returns the effect name with color formatting applied."""
        return self.status_type.colored_name

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this effect type."""
        return self.status_type.emoji

    def is_expired(self) -> bool:
        """
        Check if the effect has run out and should be removed.

        Returns:
            bool: True if no duration is left, False otherwise.

        """
        return self.duration <= 0

    def apply_effect(self, target: Any) -> None:
        """
        Immediate effect when the status is attached to the target.

        Args:
            target (Character): The character receiving the effect.

        """
        log_debug(
            f"{self.display_name} attached",
            {"target": target.name, "duration": self.duration},
        )

    def on_turn_start(self, target: Any) -> None:
        """
        Per-round effect applied at the start of the round.

        Most effects simply tick down.

        Args:
            target (Character): The character carrying the effect.

        """
        self._decrement_duration()

    def on_turn_end(self, target: Any) -> None:
        """
        Per-round effect applied at the end of the round.

        Args:
            target (Character): The character carrying the effect.

        """

    def on_action_skipped(self, target: Any) -> None:
        """
        Hook run when the target loses its move for the round.

        Args:
            target (Character): The character carrying the effect.

        """

    def remove(self, target: Any) -> None:
        """
        Cleanup performed when the effect leaves the target.

        Args:
            target (Character): The character losing the effect.

        """
        log_debug(f"{self.display_name} removed", {"target": target.name})

    def _decrement_duration(self) -> None:
        if self.duration > 0:
            self.duration -= 1

    def __str__(self) -> str:
        return f"{self.display_name} ({self.duration} turns left)"

"""
Base move module for the simulator.

Defines the executable battle action every combatant submits once per round,
and the outcome a move reports back to the resolver.
"""

from typing import Any

from pydantic import BaseModel, Field

from battlesim.core.constants import MoveStatus


class MoveOutcome(BaseModel):
    """Result of executing, failing, or skipping one move in a round."""

    actor: str = Field(
        description="Name of the character who submitted the move.",
    )
    move: str = Field(
        description="Name of the move.",
    )
    status: MoveStatus = Field(
        description="Whether the move executed, failed softly, or was skipped.",
    )
    reason: str | None = Field(
        default=None,
        description="Why the move failed or was skipped.",
    )

    @property
    def succeeded(self) -> bool:
        return self.status == MoveStatus.EXECUTED


class BaseMove(BaseModel):
    """Base class for all executable battle actions.

    A move spends the actor's EP, mutates the actor and/or the target, and
    narrates what happened in the combat log. It never raises for in-round
    failures such as missing EP: those are reported as FAILED outcomes.
    """

    priority: int = Field(
        default=0,
        description="Moves with higher priority execute first within a round.",
    )

    @property
    def name(self) -> str:
        raise NotImplementedError("Subclasses must provide a name")

    @property
    def description(self) -> str:
        return ""

    @property
    def ep_cost(self) -> int:
        return 0

    def execute(self, actor: Any, target: Any, log: Any) -> MoveOutcome:
        """Execute the move.

        Args:
            actor (Character): The character performing the move.
            target (Character): The opposing character.
            log (CombatLog): The log receiving the narration.

        Returns:
            MoveOutcome: What happened.

        Raises:
            NotImplementedError: This method must be implemented by subclasses.

        """
        raise NotImplementedError("Subclasses must implement the execute method")

    def is_affordable(self, actor: Any) -> bool:
        """
        Check if the actor currently has enough EP for this move.

        Args:
            actor (Character): The character who would use the move.

        Returns:
            bool: True if the EP cost can be paid.

        """
        return actor.current_ep >= self.ep_cost

    def _outcome(
        self, actor: Any, status: MoveStatus, reason: str | None = None
    ) -> MoveOutcome:
        return MoveOutcome(actor=actor.name, move=self.name, status=status, reason=reason)

    def __str__(self) -> str:
        return self.name

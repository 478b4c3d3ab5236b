"""
Item move module for the simulator.

Uses a single-use item from the actor's inventory, then consumes it.
"""

from typing import Any

from pydantic import Field

from battlesim.core.constants import MoveStatus
from battlesim.items.magic_item import SingleUseItem

from .base_move import BaseMove, MoveOutcome


class ItemMove(BaseMove):
    """A move that uses a single-use item. Using an item costs no EP."""

    item: SingleUseItem = Field(
        description="The item used by this move.",
    )

    @property
    def name(self) -> str:
        return f"Use {self.item.name}"

    @property
    def description(self) -> str:
        return self.item.description

    def execute(self, actor: Any, target: Any, log: Any) -> MoveOutcome:
        """
        Apply the item and remove it from the actor's inventory.

        Args:
            actor (Character): The character using the item.
            target (Character): The opposing character.
            log (CombatLog): The log receiving the narration.

        Returns:
            MoveOutcome: EXECUTED, or FAILED if the item is no longer carried.

        """
        if not actor.inventory.has_item(self.item):
            log.add_entry(f"{actor.name} reaches for {self.item.name}, but it is gone.")
            return self._outcome(actor, MoveStatus.FAILED, "item not in inventory")

        self.item.apply_effect(actor, target, log)
        actor.inventory.use_single_use_item(self.item)
        return self._outcome(actor, MoveStatus.EXECUTED)

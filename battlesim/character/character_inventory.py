"""
Character inventory management module for the simulator.

Holds the magic items a character carries and tracks the single equipped
passive item.
"""

from typing import Any

from battlesim.core.error_handling import ValidationError, require_not_none
from battlesim.core.logging import log_debug, log_error
from battlesim.items.magic_item import MagicItem, PassiveItem, SingleUseItem


class CharacterInventory:
    """
    Manages the items of a character.

    Attributes:
        items (list[MagicItem]):
            Every item carried, in acquisition order.
        equipped (MagicItem | None):
            The equipped item, always one of `items`, or None.

    """

    items: list[MagicItem]
    equipped: MagicItem | None

    def __init__(self, owner: Any) -> None:
        """
        Initialize the CharacterInventory with the owning character.

        Args:
            owner (Any):
                The Character instance this inventory belongs to.

        """
        self._owner = owner
        self.items = []
        self.equipped = None

    @property
    def single_use_items(self) -> list[SingleUseItem]:
        return [item for item in self.items if isinstance(item, SingleUseItem)]

    @property
    def equipped_passive(self) -> PassiveItem | None:
        """Returns the equipped item if it is a passive one."""
        if isinstance(self.equipped, PassiveItem):
            return self.equipped
        return None

    def has_item(self, item: MagicItem) -> bool:
        require_not_none(item, "item to check")
        return item in self.items

    def add_item(self, item: MagicItem) -> None:
        """
        Add an item to the inventory.

        Args:
            item (MagicItem): The item to add.

        """
        require_not_none(item, "item to add")
        self.items.append(item)
        log_debug(f"{self._owner.name} obtains {item.name}")

    def remove_item(self, item: MagicItem) -> bool:
        """
        Remove an item, unequipping it first if it is the equipped one.

        Args:
            item (MagicItem): The item to remove.

        Returns:
            bool: True if the item was present and has been removed.

        """
        require_not_none(item, "item to remove")
        index = self._index_of(item)
        if index is None:
            return False
        removed = self.items.pop(index)
        if self.equipped is removed:
            self.unequip()
        return True

    def equip(self, item: MagicItem) -> None:
        """
        Equip an item already present in the inventory.

        Args:
            item (MagicItem): The item to equip.

        Raises:
            ValidationError: If the item is not carried.

        """
        require_not_none(item, "item to equip")
        index = self._index_of(item)
        if index is None:
            log_error(
                "Cannot equip an item that is not in the inventory",
                {"owner": self._owner.name, "item": item.name},
            )
            raise ValidationError(
                f"Cannot equip item '{item.name}' because it is not in the inventory."
            )
        self.equipped = self.items[index]

    def unequip(self) -> None:
        self.equipped = None

    def use_single_use_item(self, item: SingleUseItem) -> None:
        """
        Consume a single-use item.

        Args:
            item (SingleUseItem): The item to consume.

        Raises:
            ValidationError: If the item is not carried.

        """
        require_not_none(item, "single-use item to use")
        if not self.remove_item(item):
            log_error(
                "Cannot use an item that is not in the inventory",
                {"owner": self._owner.name, "item": item.name},
            )
            raise ValidationError("Cannot use item: not found in inventory.")

    def copy_to(self, other: "CharacterInventory") -> None:
        """
        Copy every item into another inventory, preserving the equipped slot.

        Args:
            other (CharacterInventory): The destination inventory.

        """
        for item in self.items:
            clone = item.copy_item()
            other.items.append(clone)
            if item is self.equipped:
                other.equipped = clone

    def _index_of(self, item: MagicItem) -> int | None:
        # Prefer the exact instance, then fall back to an equal item.
        for index, carried in enumerate(self.items):
            if carried is item:
                return index
        for index, carried in enumerate(self.items):
            if carried == item:
                return index
        return None

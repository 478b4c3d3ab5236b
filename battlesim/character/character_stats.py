"""
Character stats module for the simulator.

Tracks the two bounded resources of a character, HP and EP, and keeps both
within [0, max] whatever the adjustment.
"""

from typing import Any


class CharacterStats:
    """
    Holds the current and maximum HP and EP of a character.

    Attributes:
        owner (Any):
            The Character instance that owns this CharacterStats.
        max_hp (int):
            The maximum hit points.
        max_ep (int):
            The maximum energy points.
        hp (int):
            The current hit points.
        ep (int):
            The current energy points.

    """

    def __init__(self, owner: Any, max_hp: int, max_ep: int) -> None:
        """
        Initializes the CharacterStats at full HP and EP.

        Args:
            owner (Any):
                The Character instance that owns this CharacterStats.
            max_hp (int):
                The maximum hit points.
            max_ep (int):
                The maximum energy points.

        """
        self.owner: Any = owner
        self.max_hp: int = max_hp
        self.max_ep: int = max_ep
        self.hp: int = max_hp
        self.ep: int = max_ep

    def adjust_hp(self, amount: int) -> int:
        """
        Adjusts the character's current HP by the specified amount.

        Args:
            amount (int):
                The amount to adjust HP by (positive or negative).

        Returns:
            int:
                The actual amount adjusted (may be less than requested if at max
                or min).

        """
        new_hp = max(0, min(self.hp + amount, self.max_hp))
        actual_adjustment = new_hp - self.hp
        self.hp = new_hp
        return actual_adjustment

    def adjust_ep(self, amount: int) -> int:
        """
        Adjusts the character's current EP by the specified amount.

        Args:
            amount (int):
                The amount to adjust EP by (positive or negative).

        Returns:
            int:
                The actual amount adjusted (may be less than requested if at max
                or min).

        """
        new_ep = max(0, min(self.ep + amount, self.max_ep))
        actual_adjustment = new_ep - self.ep
        self.ep = new_ep
        return actual_adjustment

    def set_max(self, max_hp: int, max_ep: int) -> None:
        """
        Sets new maximums and fully restores both resources.

        Args:
            max_hp (int): The new maximum HP.
            max_ep (int): The new maximum EP.

        """
        self.max_hp = max_hp
        self.max_ep = max_ep
        self.hp = max_hp
        self.ep = max_ep

    def restore(self, hp: int, ep: int) -> None:
        """
        Sets current HP and EP, clamped to their bounds.

        Args:
            hp (int): The desired current HP.
            ep (int): The desired current EP.

        """
        self.hp = max(0, min(hp, self.max_hp))
        self.ep = max(0, min(ep, self.max_ep))

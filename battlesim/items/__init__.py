"""
Magic items for the simulator: consumables, passive equipment and reward
rolls.
"""

from .magic_item import AnyMagicItem, MagicItem, PassiveItem, SingleUseItem
from .reward import roll_rarity, roll_reward

__all__ = [
    "AnyMagicItem",
    "MagicItem",
    "PassiveItem",
    "SingleUseItem",
    "roll_rarity",
    "roll_reward",
]

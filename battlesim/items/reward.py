"""
Reward rolls for the simulator.

A d100 roll (0-99) picks the rarity tier, then an item is drawn uniformly from
that tier's pool.
"""

import random
from typing import Any

from battlesim.core.constants import RarityType
from battlesim.core.error_handling import ValidationError, require_not_none
from battlesim.core.logging import log_debug, log_error

from .magic_item import MagicItem


def roll_rarity(rng: random.Random) -> RarityType:
    """
    Roll the rarity tier of a reward.

    Args:
        rng (random.Random): The randomness source.

    Returns:
        RarityType: COMMON for 0-69, UNCOMMON for 70-94, RARE for 95-99.

    """
    roll = rng.randrange(100)
    for rarity in (RarityType.COMMON, RarityType.UNCOMMON, RarityType.RARE):
        if roll <= rarity.roll_upper_bound:
            return rarity
    return RarityType.RARE


def roll_reward(rng: random.Random, repo: Any) -> MagicItem:
    """
    Roll a random reward item.

    Args:
        rng (random.Random): The randomness source.
        repo (ContentRepository): The repository holding the item templates.

    Returns:
        MagicItem: A fresh copy of the rolled item.

    Raises:
        ValidationError: If the rolled tier has no items.

    """
    require_not_none(rng, "random generator")
    require_not_none(repo, "content repository")
    rarity = roll_rarity(rng)
    pool = repo.items_of_rarity(rarity)
    if not pool:
        log_error("No items available for rarity", {"rarity": rarity})
        raise ValidationError(f"No {rarity.display_name} items to award")
    template = pool[rng.randrange(len(pool))]
    log_debug("Rolled reward", {"rarity": rarity, "item": template.name})
    return template.copy_item()

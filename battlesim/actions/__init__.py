"""
Battle actions for the simulator: ability descriptors and the moves a
combatant can submit in a round.
"""

from .ability import Ability
from .ability_move import AbilityMove
from .base_move import BaseMove, MoveOutcome
from .item_move import ItemMove
from .universal_moves import Defend, Recharge

__all__ = [
    "Ability",
    "AbilityMove",
    "BaseMove",
    "MoveOutcome",
    "ItemMove",
    "Defend",
    "Recharge",
]

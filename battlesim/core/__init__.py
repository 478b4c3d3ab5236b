"""
Core system module for the battle simulator.

This module contains the fundamental components shared by every other
package: game constants, combat rules, the error taxonomy, logging and
display utilities. The content repository lives in core.content and is
imported from there directly.
"""

from .config import CombatRules, load_rules
from .constants import (
    AbilityEffectType,
    BattleState,
    MoveStatus,
    PassiveEffectType,
    RarityType,
    SingleUseEffectType,
    StatusEffectType,
)
from .error_handling import (
    GameException,
    ValidationError,
    require_non_blank,
    require_non_negative,
    require_not_none,
    require_range,
)
from .logging import get_logger, setup_logging
from .utils import cprint, crule, make_bar

__all__ = [
    # Import from config.py
    "CombatRules",
    "load_rules",
    # Import from constants.py
    "AbilityEffectType",
    "BattleState",
    "MoveStatus",
    "PassiveEffectType",
    "RarityType",
    "SingleUseEffectType",
    "StatusEffectType",
    # Import from error_handling.py
    "GameException",
    "ValidationError",
    "require_non_blank",
    "require_non_negative",
    "require_not_none",
    "require_range",
    # Import from logging.py
    "get_logger",
    "setup_logging",
    # Import from utils.py
    "cprint",
    "crule",
    "make_bar",
]

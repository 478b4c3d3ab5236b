"""
Combat engine for the battle simulator: the combat log, battle state, turn
resolution, progression, rewards and AI strategies.
"""

from .battle import Battle
from .combat_log import CombatLog
from .leveling import LevelingSystem
from .npc_ai import AIController, AIStrategy, SimpleBot, SmartBot
from .rewards import VictoryRewards
from .turn_resolver import BattleEndHook, RoundReport, TurnResolver

__all__ = [
    "Battle",
    "CombatLog",
    "LevelingSystem",
    "AIController",
    "AIStrategy",
    "SimpleBot",
    "SmartBot",
    "VictoryRewards",
    "BattleEndHook",
    "RoundReport",
    "TurnResolver",
]

"""
Victory rewards for the simulator.

VictoryRewards is the bundled battle-end hook: it awards XP, counts the win,
applies level-ups, and grants a reward item every few wins.
"""

import random
from typing import Any

from battlesim.core.config import CombatRules
from battlesim.core.error_handling import require_not_none
from battlesim.core.logging import log_info
from battlesim.items.reward import roll_reward

from .combat_log import CombatLog
from .leveling import LevelingSystem


class VictoryRewards:
    """
    Battle-end hook rewarding the winner.

    Attributes:
        leveling (LevelingSystem):
            Service computing XP and level-ups.
        repo (ContentRepository | None):
            Source of reward items; no items are granted without one.
        rng (random.Random):
            Randomness source for reward rolls.

    """

    def __init__(
        self,
        leveling: LevelingSystem | None = None,
        repo: Any | None = None,
        rng: random.Random | None = None,
        rules: CombatRules | None = None,
    ) -> None:
        self.rules = rules or (leveling.rules if leveling else CombatRules())
        self.leveling = leveling or LevelingSystem(self.rules)
        self.repo = repo
        self.rng = rng if rng is not None else random.Random()

    def __call__(self, winner: Any, loser: Any, log: CombatLog) -> None:
        """
        Reward the winner of a battle.

        Args:
            winner (Character): The winning character.
            loser (Character): The defeated character.
            log (CombatLog): The log of the finished battle.

        """
        require_not_none(log, "combat log")
        xp = self.leveling.xp_for_victory(winner, loser)
        winner.add_experience(xp)
        log.add_entry(f"{winner.name} gains {xp} XP.")
        winner.increment_battles_won()

        if self.leveling.process_level_up(winner):
            log.add_entry(f"{winner.name} reached level {winner.level}!")

        if self.repo is not None and winner.battles_won % self.rules.wins_per_reward == 0:
            item = roll_reward(self.rng, self.repo)
            winner.inventory.add_item(item)
            log.add_entry(
                f"{winner.name} receives {item.name} ({item.rarity.display_name})!"
            )
        log_info(
            "Victory rewards granted",
            {"winner": winner.name, "xp": xp, "wins": winner.battles_won},
        )

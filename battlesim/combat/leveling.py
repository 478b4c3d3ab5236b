"""
Leveling service for the simulator.

Stateless progression rules: the XP awarded for a victory and the level-ups
triggered by accumulated XP, both driven by CombatRules.
"""

from typing import Any

from battlesim.core.config import CombatRules
from battlesim.core.error_handling import ValidationError, require_not_none
from battlesim.core.logging import log_debug, log_error


class LevelingSystem:
    """Computes XP awards and applies level-ups."""

    def __init__(self, rules: CombatRules | None = None) -> None:
        self.rules = rules or CombatRules()

    def xp_for_victory(self, winner: Any, loser: Any) -> int:
        """
        Compute the XP awarded to the winner of a battle.

        Args:
            winner (Character): The winning character.
            loser (Character): The defeated character.

        Returns:
            int: base XP plus a bonus per level of the loser.

        Raises:
            ValidationError: If either side is None or both are the same.

        """
        require_not_none(winner, "winner")
        require_not_none(loser, "loser")
        if winner is loser:
            log_error("Winner and loser must differ", {"name": winner.name})
            raise ValidationError("Winner and loser must be different characters.")
        return self.rules.xp_base + self.rules.xp_per_loser_level * loser.level

    def level_for_xp(self, experience: int) -> int:
        """
        Get the highest level whose threshold is reached.

        Args:
            experience (int): Cumulative XP.

        Returns:
            int: The matching level.

        """
        level = 1
        for threshold_level, threshold in self.rules.level_thresholds.items():
            if experience >= threshold:
                level = threshold_level
        return level

    def process_level_up(self, character: Any) -> bool:
        """
        Raise the character's level if its XP allows it.

        Each level gained adds max HP and max EP; HP and EP are then fully
        restored.

        Args:
            character (Character): The character to level up.

        Returns:
            bool: True if the character gained at least one level.

        """
        require_not_none(character, "character")
        new_level = self.level_for_xp(character.experience)
        if new_level <= character.level:
            return False
        gained = new_level - character.level
        character.set_level(new_level)
        character.set_max_stats(
            character.max_hp + self.rules.hp_gain_per_level * gained,
            character.max_ep + self.rules.ep_gain_per_level * gained,
        )
        log_debug(
            f"{character.name} reached level {new_level}",
            {"gained": gained, "max_hp": character.max_hp, "max_ep": character.max_ep},
        )
        return True

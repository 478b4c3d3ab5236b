"""
Battle state holder for the simulator.
"""

from typing import Any

from battlesim.core.error_handling import ValidationError, require_not_none
from battlesim.core.logging import log_error

from .combat_log import CombatLog


class Battle:
    """
    Holds the two combatants of a battle, its round counter, its finished
    flag and its combat log. Only the TurnResolver mutates it.

    Attributes:
        combatant_one (Character):
            The first combatant.
        combatant_two (Character):
            The second combatant.
        round (int):
            The current round, starting at 1.
        finished (bool):
            Whether the battle is over.
        winner (Character | None):
            The winner once finished, None for a draw or an ongoing battle.
        log (CombatLog):
            The narration of the battle.

    """

    def __init__(self, combatant_one: Any, combatant_two: Any) -> None:
        require_not_none(combatant_one, "first combatant")
        require_not_none(combatant_two, "second combatant")
        if combatant_one is combatant_two:
            log_error("A battle needs two distinct combatants", {"name": combatant_one.name})
            raise ValidationError("A character cannot battle itself.")
        self.combatant_one = combatant_one
        self.combatant_two = combatant_two
        self.round = 1
        self.finished = False
        self.winner: Any | None = None
        self.log = CombatLog()
        self.log.clear()
        self.log.add_entry(
            f"Battle started between {combatant_one.name} and {combatant_two.name}."
        )

    @property
    def combatants(self) -> tuple[Any, Any]:
        return (self.combatant_one, self.combatant_two)

    def involves(self, character: Any) -> bool:
        return character is self.combatant_one or character is self.combatant_two

    def opponent_of(self, character: Any) -> Any:
        """
        Get the opponent of one of the combatants.

        Args:
            character (Character): One of the two combatants.

        Returns:
            Character: The other combatant.

        Raises:
            ValidationError: If the character is not in this battle.

        """
        if character is self.combatant_one:
            return self.combatant_two
        if character is self.combatant_two:
            return self.combatant_one
        raise ValidationError(f"{character.name} is not part of this battle.")

    def next_round(self) -> None:
        self.round += 1
        self.log.add_entry(f"── Round {self.round} ──")

    def finish(self, winner: Any | None) -> None:
        self.finished = True
        self.winner = winner

"""
Turn resolution for the simulator.

The TurnResolver owns round progression: it collects one move per combatant,
runs the status-effect hooks, executes the moves by priority, and detects the
end of the battle.
"""

from collections.abc import Callable
from typing import Any

from catchery import log_warning
from pydantic import BaseModel, Field

from battlesim.actions.base_move import BaseMove, MoveOutcome
from battlesim.actions.item_move import ItemMove
from battlesim.actions.universal_moves import Defend, Recharge
from battlesim.core.config import CombatRules
from battlesim.core.constants import BattleState, MoveStatus
from battlesim.core.error_handling import ValidationError, require_not_none
from battlesim.core.logging import log_debug, log_error, log_info
from battlesim.items.magic_item import SingleUseItem

from .battle import Battle
from .combat_log import CombatLog
from .npc_ai import AIController

BattleEndHook = Callable[[Any, Any, CombatLog], None]


class RoundReport(BaseModel):
    """Summary of one executed round."""

    round: int = Field(
        description="The round that was executed.",
    )
    outcomes: list[MoveOutcome] = Field(
        default_factory=list,
        description="Outcome of each move, in execution order.",
    )
    finished: bool = Field(
        default=False,
        description="Whether the battle ended with this round.",
    )
    winner: str | None = Field(
        default=None,
        description="Name of the winner, None while ongoing or on a draw.",
    )


class TurnResolver:
    """
    Drives battles round by round.

    Attributes:
        rules (CombatRules):
            The numeric rules for universal moves and effect caps.
        battle (Battle | None):
            The battle in progress, None when idle or finished.
        last_battle (Battle | None):
            The most recently started battle, kept after it finishes.

    """

    def __init__(
        self,
        rules: CombatRules | None = None,
        end_hooks: list[BattleEndHook] | None = None,
    ) -> None:
        self.rules = rules or CombatRules()
        self.battle: Battle | None = None
        self.last_battle: Battle | None = None
        self._end_hooks: list[BattleEndHook] = list(end_hooks or [])
        # Insertion order is the tie-break between equal priorities.
        self._selections: dict[Any, BaseMove] = {}
        self._executing = False
        self._ai: AIController | None = None
        self._ai_character: Any | None = None

    # ============================================================================
    # STATE
    # ============================================================================

    @property
    def state(self) -> BattleState:
        if self._executing:
            return BattleState.EXECUTING
        if self.battle is not None:
            return BattleState.AWAITING_MOVES
        if self.last_battle is not None and self.last_battle.finished:
            return BattleState.FINISHED
        return BattleState.IDLE

    @property
    def log(self) -> CombatLog | None:
        """The log of the current battle, or of the last one once finished."""
        battle = self.battle or self.last_battle
        return battle.log if battle else None

    def has_submitted(self, combatant: Any) -> bool:
        return combatant in self._selections

    def add_battle_end_hook(self, hook: BattleEndHook) -> None:
        """
        Register a callable invoked as hook(winner, loser, log) when a battle
        ends with a winner.
        """
        require_not_none(hook, "battle end hook")
        self._end_hooks.append(hook)

    # ============================================================================
    # STARTING BATTLES
    # ============================================================================

    def start_battle(self, combatant_one: Any, combatant_two: Any) -> Battle:
        """
        Start a battle between two distinct, living characters.

        Args:
            combatant_one (Character): The first combatant.
            combatant_two (Character): The second combatant.

        Returns:
            Battle: The new battle.

        Raises:
            ValidationError: If a combatant is missing, dead, or both are the
            same character.

        """
        require_not_none(combatant_one, "first combatant")
        require_not_none(combatant_two, "second combatant")
        if not combatant_one.is_alive() or not combatant_two.is_alive():
            log_error(
                "Cannot start a battle with a defeated combatant",
                {"one": combatant_one.name, "two": combatant_two.name},
            )
            raise ValidationError("Both characters must be alive to start a battle.")
        if self.battle is not None:
            log_warning(
                "Abandoning the battle in progress to start a new one.",
                {"round": self.battle.round},
            )

        battle = Battle(combatant_one, combatant_two)
        for combatant in battle.combatants:
            combatant.effects.max_effects = self.rules.max_status_effects

        self.battle = battle
        self.last_battle = battle
        self._selections.clear()
        self._ai = None
        self._ai_character = None
        log_info(
            "Battle started",
            {"one": combatant_one.name, "two": combatant_two.name},
        )
        return battle

    def start_battle_vs_bot(self, human: Any, bot: Any, controller: AIController) -> Battle:
        """
        Start a battle in which one side is driven by an AI controller. The
        bot picks its first move immediately, and again after every round.

        Args:
            human (Character): The character whose moves are submitted by the caller.
            bot (Character): The AI-controlled character.
            controller (AIController): The controller choosing the bot's moves.

        Returns:
            Battle: The new battle.

        """
        require_not_none(controller, "AI controller")
        battle = self.start_battle(human, bot)
        self._ai = controller
        self._ai_character = bot
        self._queue_ai_move()
        return battle

    # ============================================================================
    # SUBMISSIONS
    # ============================================================================

    def submit_move(self, combatant: Any, move: BaseMove) -> RoundReport | None:
        """
        Record a combatant's move for the current round. Once both sides have
        a move, the round is executed before returning.

        Args:
            combatant (Character): One of the two combatants.
            move (BaseMove): The move to execute.

        Returns:
            RoundReport | None: The report of the executed round, or None while
            the other side has not submitted yet.

        Raises:
            ValidationError: If no battle is active, an argument is None, or
            the combatant is not part of the battle.

        """
        battle = self._require_battle()
        require_not_none(combatant, "combatant")
        require_not_none(move, "move")
        if not battle.involves(combatant):
            log_error("Move submitted by an outsider", {"name": combatant.name})
            raise ValidationError("Character is not part of the current battle.")

        self._selections[combatant] = move
        log_debug("Move submitted", {"actor": combatant.name, "move": move.name})
        if len(self._selections) < 2:
            return None
        return self._execute_round(battle)

    def defend(self, user: Any) -> RoundReport | None:
        return self.submit_move(user, Defend(cost=self.rules.defend_ep_cost))

    def recharge(self, user: Any) -> RoundReport | None:
        return self.submit_move(user, Recharge(gain=self.rules.recharge_ep_gain))

    def use_item(self, user: Any, item: SingleUseItem) -> RoundReport | None:
        require_not_none(item, "item")
        return self.submit_move(user, ItemMove(item=item))

    # ============================================================================
    # ROUND EXECUTION
    # ============================================================================

    def _execute_round(self, battle: Battle) -> RoundReport:
        log = battle.log
        round_number = battle.round
        outcomes: list[MoveOutcome] = []
        self._executing = True
        try:
            for combatant in battle.combatants:
                if combatant.is_alive():
                    combatant.process_turn_start_effects(log)
                    combatant.check_phoenix_feather(log)

            order = sorted(
                self._selections.items(),
                key=lambda selection: selection[1].priority,
                reverse=True,
            )
            for actor, move in order:
                outcomes.append(self._execute_move(battle, actor, move))

            for combatant in battle.combatants:
                if combatant.is_alive():
                    combatant.process_turn_end_effects(log)
        finally:
            self._selections.clear()
            self._executing = False

        return self._conclude_round(battle, round_number, outcomes)

    def _execute_move(self, battle: Battle, actor: Any, move: BaseMove) -> MoveOutcome:
        target = battle.opponent_of(actor)
        if not actor.is_alive() or not target.is_alive():
            return MoveOutcome(
                actor=actor.name,
                move=move.name,
                status=MoveStatus.SKIPPED,
                reason="a combatant is down",
            )
        if actor.is_stunned:
            battle.log.add_entry(f"{actor.name} is stunned and cannot act.")
            actor.process_skipped_action(battle.log)
            return MoveOutcome(
                actor=actor.name,
                move=move.name,
                status=MoveStatus.SKIPPED,
                reason="stunned",
            )
        outcome = move.execute(actor, target, battle.log)
        target.check_phoenix_feather(battle.log)
        actor.check_phoenix_feather(battle.log)
        log_debug(
            "Move resolved",
            {"actor": actor.name, "move": move.name, "status": outcome.status},
        )
        return outcome

    def _conclude_round(
        self, battle: Battle, round_number: int, outcomes: list[MoveOutcome]
    ) -> RoundReport:
        one, two = battle.combatants
        if one.is_alive() and two.is_alive():
            battle.next_round()
            if self._ai is not None:
                self._queue_ai_move()
            return RoundReport(round=round_number, outcomes=outcomes)

        # The battle is over: return to a state with no active battle first.
        self.battle = None
        self._ai = None
        self._ai_character = None

        if not one.is_alive() and not two.is_alive():
            battle.log.add_entry("Both combatants fall. The battle ends in a draw.")
            battle.finish(None)
            log_info("Battle ended in a draw", {"round": round_number})
            return RoundReport(round=round_number, outcomes=outcomes, finished=True)

        winner, loser = (one, two) if one.is_alive() else (two, one)
        battle.log.add_entry(f"{winner.name} wins!")
        battle.finish(winner)
        log_info("Battle ended", {"winner": winner.name, "round": round_number})
        for hook in self._end_hooks:
            hook(winner, loser, battle.log)
        return RoundReport(
            round=round_number,
            outcomes=outcomes,
            finished=True,
            winner=winner.name,
        )

    # ============================================================================
    # HELPERS
    # ============================================================================

    def _require_battle(self) -> Battle:
        if self.battle is None:
            log_error("No battle in progress", {"state": self.state})
            raise ValidationError("No battle is in progress.")
        return self.battle

    def _queue_ai_move(self) -> None:
        battle = self._require_battle()
        bot = self._ai_character
        assert self._ai is not None and bot is not None
        move = self._ai.request_move(bot, battle.opponent_of(bot))
        self._selections[bot] = move
        log_debug("AI move queued", {"bot": bot.name, "move": move.name})

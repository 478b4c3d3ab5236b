"""
Decision making for computer-controlled combatants.

Strategies pick one move per round from the bot's abilities, its single-use
items and the universal moves. All randomness comes from an injected
random.Random so that a fixed seed reproduces the same choices.
"""

import math
import random
from typing import Any

from battlesim.actions.ability_move import AbilityMove
from battlesim.actions.base_move import BaseMove
from battlesim.actions.item_move import ItemMove
from battlesim.actions.universal_moves import Recharge
from battlesim.core.config import CombatRules
from battlesim.core.constants import (
    AbilityEffectType,
    SingleUseEffectType,
    StatusEffectType,
)
from battlesim.core.error_handling import require_not_none
from battlesim.core.logging import log_debug
from battlesim.effects.modifier_effect import MarkedEffect
from battlesim.effects.shield_effect import ShieldedEffect

# =============================================================================
# Support Functions
# =============================================================================


def _affordable_ability_moves(bot: Any) -> list[AbilityMove]:
    return [
        AbilityMove(ability=ability)
        for ability in bot.abilities
        if ability.ep_cost <= bot.current_ep
    ]


def _usable_item_moves(bot: Any) -> list[ItemMove]:
    # A living bot has no use for a revive.
    return [
        ItemMove(item=item)
        for item in bot.inventory.single_use_items
        if item.effect_type != SingleUseEffectType.REVIVE
    ]


def _raw_damage(move: BaseMove) -> int:
    """Returns the nominal damage of a move, 0 for non-damaging moves."""
    if isinstance(move, AbilityMove) and move.effect_type == AbilityEffectType.DAMAGE:
        return move.ability.effect_value
    if isinstance(move, ItemMove) and move.item.effect_type == SingleUseEffectType.DAMAGE:
        return move.item.effect_value
    return 0


def _guaranteed_damage(amount: int, target: Any) -> int:
    """
    Lower bound of the damage a hit deals once the target's status effects
    are accounted for.

    Args:
        amount (int): The nominal damage.
        target (Character): The character being hit.

    Returns:
        int: The damage the hit is certain to deal.

    """
    if amount <= 0:
        return 0
    if target.has_status_effect(StatusEffectType.IMMUNITY):
        final = 0
    elif target.has_status_effect(StatusEffectType.EVADING):
        # Evasion may negate the hit entirely.
        final = 0
    else:
        final = amount
        if target.has_status_effect(StatusEffectType.DEFENSE_UP):
            final = math.ceil(final / 2)
        shield = target.effects.get(StatusEffectType.SHIELDED)
        if isinstance(shield, ShieldedEffect) and not shield.used:
            final = max(0, final - shield.block_amount)
    marked = target.effects.get(StatusEffectType.MARKED)
    if isinstance(marked, MarkedEffect):
        final += marked.bonus_damage
    return final


# =============================================================================
# Strategies
# =============================================================================


class AIStrategy:
    """Base class for move selection strategies."""

    def __init__(
        self, rng: random.Random | None = None, rules: CombatRules | None = None
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.rules = rules or CombatRules()

    def decide_move(self, bot: Any, opponent: Any) -> BaseMove:
        """
        Pick the move the bot submits this round.

        Args:
            bot (Character): The character controlled by this strategy.
            opponent (Character): The opposing character.

        Returns:
            BaseMove: The chosen move.

        """
        raise NotImplementedError("Subclasses must implement decide_move")

    def _recharge(self) -> Recharge:
        return Recharge(gain=self.rules.recharge_ep_gain)

    def _pick(self, moves: list[BaseMove]) -> BaseMove:
        return moves[self.rng.randrange(len(moves))]


class SimpleBot(AIStrategy):
    """Picks uniformly among every affordable ability and usable item."""

    def decide_move(self, bot: Any, opponent: Any) -> BaseMove:
        require_not_none(bot, "bot character")
        require_not_none(opponent, "opponent character")
        options: list[BaseMove] = [
            *_affordable_ability_moves(bot),
            *_usable_item_moves(bot),
        ]
        if not options:
            log_debug(f"{bot.name} has no affordable option, recharging")
            return self._recharge()
        return self._pick(options)


class SmartBot(AIStrategy):
    """
    Heuristic strategy. In order of preference: heal when HP is at or below a
    third of the maximum, restore EP when it cannot pay for its cheapest
    ability, finish the opponent with a guaranteed kill, deal the most
    damage, defend, restore EP if not full, and finally recharge.
    """

    def decide_move(self, bot: Any, opponent: Any) -> BaseMove:
        require_not_none(bot, "bot character")
        require_not_none(opponent, "opponent character")

        healing: list[BaseMove] = []
        energy: list[BaseMove] = []
        attacks: list[BaseMove] = []
        defensive: list[BaseMove] = []

        for ability_move in _affordable_ability_moves(bot):
            effect_type = ability_move.effect_type
            if effect_type == AbilityEffectType.HEAL:
                healing.append(ability_move)
            elif effect_type == AbilityEffectType.ENERGY_GAIN:
                energy.append(ability_move)
            elif effect_type in (
                AbilityEffectType.DEFENSE,
                AbilityEffectType.EVADE,
                AbilityEffectType.UTILITY,
            ):
                defensive.append(ability_move)
            else:
                attacks.append(ability_move)

        for item_move in _usable_item_moves(bot):
            effect_type = item_move.item.effect_type
            if effect_type == SingleUseEffectType.HEAL_HP:
                healing.append(item_move)
            elif effect_type == SingleUseEffectType.RESTORE_EP:
                energy.append(item_move)
            elif effect_type == SingleUseEffectType.GRANT_IMMUNITY:
                defensive.append(item_move)
            elif effect_type == SingleUseEffectType.DAMAGE:
                attacks.append(item_move)

        costs = [ability.ep_cost for ability in bot.abilities if ability.ep_cost > 0]
        cheapest_cost = min(costs) if costs else 0

        # Rule 1: Heal when badly hurt.
        if bot.current_hp <= bot.max_hp // 3 and healing:
            return self._pick(healing)

        # Rule 2: Refill EP when nothing with a cost can be afforded.
        if bot.current_ep < cheapest_cost and energy:
            return self._pick(energy)

        # Rule 3: Opportunistic kill.
        for move in attacks:
            if 0 < opponent.current_hp <= _guaranteed_damage(_raw_damage(move), opponent):
                log_debug(f"{bot.name} goes for the kill with {move.name}")
                return move

        # Rule 4: Highest damage attack.
        if attacks:
            best = max(_raw_damage(move) for move in attacks)
            return self._pick([move for move in attacks if _raw_damage(move) == best])

        # Rule 5: Defend or evade.
        if defensive:
            return self._pick(defensive)

        # Rule 6: Top up EP.
        if energy and bot.current_ep < bot.max_ep:
            return self._pick(energy)

        # Rule 7: Recharge.
        return self._recharge()


class AIController:
    """Asks a strategy for the bot's move each round."""

    def __init__(self, strategy: AIStrategy) -> None:
        require_not_none(strategy, "AI strategy")
        self.strategy = strategy

    def request_move(self, bot: Any, opponent: Any) -> BaseMove:
        require_not_none(bot, "bot character")
        require_not_none(opponent, "opponent character")
        return self.strategy.decide_move(bot, opponent)

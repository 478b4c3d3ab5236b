"""
Tests for ability descriptors and their execution as moves.
"""

import pytest

from battlesim.actions.ability import Ability
from battlesim.actions.ability_move import AbilityMove
from battlesim.core.constants import AbilityEffectType, MoveStatus, StatusEffectType


def test_apply_status_requires_a_status():
    with pytest.raises(ValueError):
        Ability(
            name="Empty Curse",
            description="Curses nobody.",
            ep_cost=5,
            effect_type=AbilityEffectType.APPLY_STATUS,
        )


def test_ep_cost_bounds():
    with pytest.raises(ValueError):
        Ability(
            name="Overload",
            description="Too expensive.",
            ep_cost=51,
            effect_type=AbilityEffectType.DAMAGE,
            effect_value=10,
        )


def test_abilities_compare_by_name(cleave):
    copy = Ability(
        name="Cleave",
        description="Another description.",
        ep_cost=10,
        effect_type=AbilityEffectType.DAMAGE,
        effect_value=30,
    )
    assert copy == cleave
    assert hash(copy) == hash(cleave)


def test_damage_ability_spends_ep_and_hits(hero, rival, cleave, log):
    outcome = AbilityMove(ability=cleave).execute(hero, rival, log)

    assert outcome.succeeded
    assert hero.current_ep == 45
    assert rival.current_hp == 80
    assert log.snapshot() == ("Aria uses Cleave!", "Cleave deals 20 damage to Brom.")


def test_damage_ability_with_status_grants_it_to_the_user(hero, rival, log):
    sneak_attack = Ability(
        name="Sneak Attack",
        description="Strike and slip away.",
        ep_cost=25,
        effect_type=AbilityEffectType.DAMAGE,
        effect_value=45,
        status_effect=StatusEffectType.IMMUNITY,
    )
    AbilityMove(ability=sneak_attack).execute(hero, rival, log)
    assert rival.current_hp == 55
    assert hero.has_status_effect(StatusEffectType.IMMUNITY)
    assert not rival.has_status_effect(StatusEffectType.IMMUNITY)


def test_heal_ability(hero, rival, lesser_heal, log):
    hero.take_damage(30)
    AbilityMove(ability=lesser_heal).execute(hero, rival, log)
    assert hero.current_hp == 100
    assert hero.current_ep == 35
    assert "Aria restores 30 HP." in log.snapshot()


def test_energy_ability(hero, rival, mana_channel, log):
    hero.spend_ep(20)
    AbilityMove(ability=mana_channel).execute(hero, rival, log)
    assert hero.current_ep == 45


def test_apply_status_targets_the_opponent(hero, rival, concussive_blow, log):
    AbilityMove(ability=concussive_blow).execute(hero, rival, log)
    assert rival.is_stunned
    assert not hero.is_stunned
    assert "Brom is now STUNNED." in log.snapshot()


def test_evade_ability_targets_the_user(hero, rival, smoke_bomb, log):
    AbilityMove(ability=smoke_bomb).execute(hero, rival, log)
    assert hero.has_status_effect(StatusEffectType.EVADING)


def test_defense_without_status_grants_defense_up(hero, rival, log):
    brace = Ability(
        name="Brace",
        description="Plant your feet.",
        ep_cost=5,
        effect_type=AbilityEffectType.DEFENSE,
    )
    AbilityMove(ability=brace).execute(hero, rival, log)
    assert hero.has_status_effect(StatusEffectType.DEFENSE_UP)


def test_utility_with_shield(hero, rival, log):
    raise_shield = Ability(
        name="Raise Shield",
        description="Block the next blow.",
        ep_cost=8,
        effect_type=AbilityEffectType.UTILITY,
        status_effect=StatusEffectType.SHIELDED,
    )
    AbilityMove(ability=raise_shield).execute(hero, rival, log)
    assert hero.has_status_effect(StatusEffectType.SHIELDED)


def test_insufficient_ep_fails_softly(hero, rival, log):
    """
    Test that a 20 EP ability with only 15 EP leaves everyone untouched.
    """
    arcane_bolt = Ability(
        name="Arcane Bolt",
        description="A bolt of raw magic.",
        ep_cost=20,
        effect_type=AbilityEffectType.DAMAGE,
        effect_value=20,
    )
    hero.spend_ep(35)

    outcome = AbilityMove(ability=arcane_bolt).execute(hero, rival, log)

    assert outcome.status == MoveStatus.FAILED
    assert hero.current_ep == 15
    assert rival.current_hp == 100
    assert log.snapshot() == (
        "Aria tries to use Arcane Bolt but does not have enough EP (15/20).",
    )


def test_unimplemented_effect_type_is_logged_not_raised(hero, rival, log, mocker):
    warning = mocker.patch("battlesim.actions.ability_move.log_warning")
    teleport = Ability.model_construct(
        name="Teleport",
        description="Blink away.",
        ep_cost=10,
        effect_type="TELEPORT",
        effect_value=0,
        status_effect=None,
    )

    outcome = AbilityMove(ability=teleport).execute(hero, rival, log)

    assert outcome.status == MoveStatus.FAILED
    assert hero.current_ep == 50
    assert rival.current_hp == 100
    assert "Aria uses Teleport, but its effect is not implemented." in log.snapshot()
    warning.assert_called_once()


def test_status_blocked_by_cap_is_narrated(hero, rival, concussive_blow, log):
    rival.effects.max_effects = 0
    outcome = AbilityMove(ability=concussive_blow).execute(hero, rival, log)
    assert outcome.succeeded
    assert not rival.is_stunned
    assert "Brom is unaffected by STUNNED." in log.snapshot()

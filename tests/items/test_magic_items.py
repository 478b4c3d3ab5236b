"""
Tests for magic items and reward rolls.
"""

import random

import pytest

from battlesim.core.constants import RarityType, SingleUseEffectType, StatusEffectType
from battlesim.core.content import ContentRepository
from battlesim.core.error_handling import ValidationError
from battlesim.items.magic_item import SingleUseItem
from battlesim.items.reward import roll_rarity, roll_reward


def test_effect_value_bounds():
    with pytest.raises(ValueError):
        SingleUseItem(
            name="Empty Flask",
            description="Nothing inside.",
            effect_type=SingleUseEffectType.HEAL_HP,
            effect_value=0,
        )


def test_blank_name_rejected():
    with pytest.raises(ValueError):
        SingleUseItem(
            name="",
            description="Nameless.",
            effect_type=SingleUseEffectType.HEAL_HP,
            effect_value=10,
        )


def test_restore_ep(hero, rival, log):
    elixir = SingleUseItem(
        name="Elixir of Focus",
        description="Sharpens the mind.",
        effect_type=SingleUseEffectType.RESTORE_EP,
        effect_value=15,
    )
    hero.spend_ep(30)
    elixir.apply_effect(hero, rival, log)
    assert hero.current_ep == 35
    assert log.snapshot() == ("Aria uses Elixir of Focus and gains 15 EP!",)


def test_restore_ep_narrates_the_capped_gain(hero, rival, log):
    elixir = SingleUseItem(
        name="Elixir of Focus",
        description="Sharpens the mind.",
        effect_type=SingleUseEffectType.RESTORE_EP,
        effect_value=15,
    )
    hero.spend_ep(4)
    elixir.apply_effect(hero, rival, log)
    assert hero.current_ep == 50
    assert log.snapshot() == ("Aria uses Elixir of Focus and gains 4 EP!",)


def test_revive_on_conscious_user_does_nothing(hero, rival, phoenix_tear, log):
    hero.take_damage(10)
    phoenix_tear.apply_effect(hero, rival, log)
    assert hero.current_hp == 90
    assert log.snapshot() == ("Aria uses Phoenix Tear but is already conscious.",)


def test_revive_restores_a_share_of_max_hp(hero, rival, phoenix_tear, log):
    hero.take_damage(100)
    phoenix_tear.apply_effect(hero, rival, log)
    assert hero.current_hp == 50
    assert "Aria is revived by Phoenix Tear with 50 HP!" in log.snapshot()


def test_grant_immunity(hero, rival, log):
    draught = SingleUseItem(
        name="Warding Draught",
        description="Wards off harm.",
        effect_type=SingleUseEffectType.GRANT_IMMUNITY,
        effect_value=1,
    )
    draught.apply_effect(hero, rival, log)
    assert hero.has_status_effect(StatusEffectType.IMMUNITY)
    assert hero.take_damage(40) == 0


def test_copy_item_is_independent(healing_potion):
    copy = healing_potion.copy_item()
    assert copy == healing_potion
    assert copy is not healing_potion


@pytest.mark.parametrize(
    "roll, expected",
    [
        (0, RarityType.COMMON),
        (69, RarityType.COMMON),
        (70, RarityType.UNCOMMON),
        (94, RarityType.UNCOMMON),
        (95, RarityType.RARE),
        (99, RarityType.RARE),
    ],
)
def test_roll_rarity_tiers(scripted_rng, roll, expected):
    assert roll_rarity(scripted_rng(randranges=[roll])) == expected


def test_roll_reward_picks_within_tier(scripted_rng, repo, phoenix_feather):
    # RARE tier holds Phoenix Feather then Phoenix Tear, in load order.
    reward = roll_reward(scripted_rng(randranges=[97, 0]), repo)
    assert reward == phoenix_feather
    assert reward is not repo.items["Phoenix Feather"]


def test_roll_reward_is_reproducible(repo):
    first = [roll_reward(random.Random(3), repo).name for _ in range(5)]
    second = [roll_reward(random.Random(3), repo).name for _ in range(5)]
    assert first == second


def test_roll_reward_empty_tier_raises(scripted_rng, healing_potion):
    repo = ContentRepository(items={healing_potion.name: healing_potion})
    with pytest.raises(ValidationError):
        roll_reward(scripted_rng(randranges=[99]), repo)

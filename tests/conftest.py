"""
Shared fixtures for the battle simulator tests.
"""

import random

import pytest

from battlesim.actions.ability import Ability
from battlesim.character.character_class import CharacterClass
from battlesim.character.character_race import CharacterRace
from battlesim.character.main import Character
from battlesim.combat.combat_log import CombatLog
from battlesim.core.constants import (
    AbilityEffectType,
    PassiveEffectType,
    RarityType,
    SingleUseEffectType,
    StatusEffectType,
)
from battlesim.core.content import ContentRepository
from battlesim.items.magic_item import PassiveItem, SingleUseItem


class ScriptedRandom:
    """Stand-in for random.Random replaying pre-recorded results."""

    def __init__(self, randoms=(), randranges=()):
        self._randoms = list(randoms)
        self._randranges = list(randranges)

    def random(self) -> float:
        return self._randoms.pop(0)

    def randrange(self, *args) -> int:
        return self._randranges.pop(0)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


# ============================================================================
# RACES AND CLASSES
# ============================================================================


@pytest.fixture
def plain_race():
    return CharacterRace(
        name="Human",
        description="Versatile and adaptable.",
        hp_bonus=0,
        ep_bonus=0,
        extra_ability_slots=0,
    )


@pytest.fixture
def gnome_race():
    return CharacterRace(
        name="Gnome",
        description="Small and clever.",
        extra_ability_slots=1,
    )


@pytest.fixture
def warrior_class():
    return CharacterClass(
        name="Warrior",
        description="Resilient melee fighter.",
        base_hp=100,
        base_ep=50,
        abilities=[
            "Cleave",
            "Backstab",
            "Lesser Heal",
            "Mana Channel",
            "Smoke Bomb",
            "Concussive Blow",
        ],
    )


# ============================================================================
# ABILITIES
# ============================================================================


@pytest.fixture
def cleave():
    return Ability(
        name="Cleave",
        description="A wide swing.",
        ep_cost=5,
        effect_type=AbilityEffectType.DAMAGE,
        effect_value=20,
    )


@pytest.fixture
def backstab():
    return Ability(
        name="Backstab",
        description="A precise strike from behind.",
        ep_cost=15,
        effect_type=AbilityEffectType.DAMAGE,
        effect_value=35,
    )


@pytest.fixture
def lesser_heal():
    return Ability(
        name="Lesser Heal",
        description="Restore some health.",
        ep_cost=15,
        effect_type=AbilityEffectType.HEAL,
        effect_value=40,
    )


@pytest.fixture
def mana_channel():
    return Ability(
        name="Mana Channel",
        description="Draw energy from the surroundings.",
        ep_cost=0,
        effect_type=AbilityEffectType.ENERGY_GAIN,
        effect_value=15,
    )


@pytest.fixture
def smoke_bomb():
    return Ability(
        name="Smoke Bomb",
        description="Vanish in a cloud of smoke.",
        ep_cost=15,
        effect_type=AbilityEffectType.EVADE,
        status_effect=StatusEffectType.EVADING,
    )


@pytest.fixture
def concussive_blow():
    return Ability(
        name="Concussive Blow",
        description="Leaves the target dazed.",
        ep_cost=20,
        effect_type=AbilityEffectType.APPLY_STATUS,
        status_effect=StatusEffectType.STUNNED,
    )


@pytest.fixture
def all_abilities(cleave, backstab, lesser_heal, mana_channel, smoke_bomb, concussive_blow):
    return {
        ability.name: ability
        for ability in (cleave, backstab, lesser_heal, mana_channel, smoke_bomb, concussive_blow)
    }


# ============================================================================
# ITEMS
# ============================================================================


@pytest.fixture
def healing_potion():
    return SingleUseItem(
        name="Minor Healing Potion",
        description="Restores a little health.",
        effect_type=SingleUseEffectType.HEAL_HP,
        effect_value=25,
    )


@pytest.fixture
def blazing_charm():
    return SingleUseItem(
        name="Blazing Charm",
        description="Bursts into flames when thrown.",
        effect_type=SingleUseEffectType.DAMAGE,
        effect_value=25,
    )


@pytest.fixture
def elven_cloak():
    return PassiveItem(
        name="Elven Cloak",
        description="Shrugs off the first malady of a battle.",
        rarity=RarityType.UNCOMMON,
        passive_effect=PassiveEffectType.NEGATE_FIRST_STATUS,
    )


@pytest.fixture
def phoenix_feather():
    return PassiveItem(
        name="Phoenix Feather",
        description="Revives its bearer once.",
        rarity=RarityType.RARE,
        passive_effect=PassiveEffectType.REVIVE_ONCE,
    )


@pytest.fixture
def phoenix_tear():
    return SingleUseItem(
        name="Phoenix Tear",
        description="Brings a fallen hero back.",
        rarity=RarityType.RARE,
        effect_type=SingleUseEffectType.REVIVE,
        effect_value=50,
    )


# ============================================================================
# REPOSITORY AND CHARACTERS
# ============================================================================


@pytest.fixture
def repo(
    plain_race,
    gnome_race,
    warrior_class,
    all_abilities,
    healing_potion,
    blazing_charm,
    elven_cloak,
    phoenix_feather,
    phoenix_tear,
):
    return ContentRepository(
        classes={warrior_class.name: warrior_class},
        races={plain_race.name: plain_race, gnome_race.name: gnome_race},
        abilities=all_abilities,
        items={
            item.name: item
            for item in (
                healing_potion,
                blazing_charm,
                elven_cloak,
                phoenix_feather,
                phoenix_tear,
            )
        },
    )


@pytest.fixture
def hero(plain_race, warrior_class, cleave, backstab, lesser_heal):
    return Character(
        name="Aria",
        race=plain_race,
        char_class=warrior_class,
        abilities=[cleave, backstab, lesser_heal],
        rng=random.Random(1),
    )


@pytest.fixture
def rival(plain_race, warrior_class, cleave, backstab, lesser_heal):
    return Character(
        name="Brom",
        race=plain_race,
        char_class=warrior_class,
        abilities=[cleave, backstab, lesser_heal],
        rng=random.Random(2),
    )


@pytest.fixture
def log():
    return CombatLog()

"""
Tests for character serialization.
"""

import json
import random

import pytest

from battlesim.character.character_serialization import (
    character_from_dict,
    character_to_dict,
    load_character,
    save_character,
)
from battlesim.combat.combat_log import CombatLog
from battlesim.core.constants import StatusEffectType
from battlesim.core.error_handling import ValidationError
from battlesim.effects.damage_over_time_effect import PoisonedEffect
from battlesim.effects.incapacitating_effect import StunnedEffect
from battlesim.effects.modifier_effect import EvadingEffect


def test_round_trip_preserves_state(hero, repo, elven_cloak, healing_potion):
    hero.inventory.add_item(healing_potion)
    hero.inventory.add_item(elven_cloak)
    hero.inventory.equip(elven_cloak)
    hero.add_status_effect(PoisonedEffect())  # Negated by the cloak.
    hero.add_status_effect(StunnedEffect())
    hero.take_damage(12)
    hero.spend_ep(7)
    hero.add_experience(60)
    hero.increment_battles_won()

    data = character_to_dict(hero)
    restored = character_from_dict(data, repo)

    assert character_to_dict(restored) == data
    assert restored.is_stunned
    assert restored.effects.negation_used
    assert restored.inventory.equipped is restored.inventory.items[1]
    assert [a.name for a in restored.abilities] == ["Cleave", "Backstab", "Lesser Heal"]


def test_restored_character_resumes_identically(hero, repo):
    """
    Test that a character restored mid-battle produces the same outcomes as
    the original from then on.
    """
    hero.rng = random.Random(7)
    hero.add_status_effect(PoisonedEffect(duration=2))
    hero.add_status_effect(EvadingEffect(duration=3))
    restored = character_from_dict(character_to_dict(hero), repo, rng=random.Random(7))

    def play(character):
        log = CombatLog()
        for _ in range(3):
            character.process_turn_start_effects(log)
            character.take_damage(10)
            character.process_turn_end_effects(log)
        return character.current_hp, log.snapshot()

    original_hp, original_log = play(hero)
    restored_hp, restored_log = play(restored)
    assert original_hp == restored_hp
    assert original_log == restored_log
    assert not restored.has_status_effect(StatusEffectType.POISONED)


def test_save_and_load(tmp_path, hero, repo):
    path = tmp_path / "hero.json"
    hero.take_damage(25)
    save_character(hero, path)

    with open(path, encoding="utf-8") as f:
        assert json.load(f)["current_hp"] == 75

    loaded = load_character(path, repo)
    assert loaded is not None
    assert loaded.name == "Aria"
    assert loaded.current_hp == 75


def test_load_missing_file_returns_none(tmp_path, repo):
    assert load_character(tmp_path / "missing.json", repo) is None


def test_load_unknown_race_returns_none(tmp_path, hero, repo):
    data = character_to_dict(hero)
    data["race"] = "Orc"
    path = tmp_path / "orc.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    assert load_character(path, repo) is None


def test_restore_drops_effects_past_the_cap(mocker, hero, repo):
    warn = mocker.patch("battlesim.character.character_serialization.log_warning")
    data = character_to_dict(hero)
    data["status_effects"] = [{"kind": "MARKED", "duration": 2}] * 8

    restored = character_from_dict(data, repo)

    assert len(restored.status_effects) == restored.effects.max_effects == 5
    warn.assert_called_once()


def test_restore_skips_stun_flag_without_a_stun_effect(hero, repo):
    data = character_to_dict(hero)
    data["stunned"] = True
    data["status_effects"] = []
    assert not character_from_dict(data, repo).is_stunned


@pytest.mark.parametrize("equipped_index", [7, -1, "0"])
def test_restore_rejects_bad_equipped_index(hero, repo, healing_potion, equipped_index):
    hero.inventory.add_item(healing_potion)
    data = character_to_dict(hero)
    data["equipped_index"] = equipped_index
    with pytest.raises(ValidationError):
        character_from_dict(data, repo)


def test_restore_translates_bad_item_data(hero, repo):
    data = character_to_dict(hero)
    data["items"] = [{"item_type": "CURSED", "name": "Idol"}]
    with pytest.raises(ValidationError):
        character_from_dict(data, repo)


def test_load_bad_equipped_index_returns_none(tmp_path, hero, repo, healing_potion):
    hero.inventory.add_item(healing_potion)
    data = character_to_dict(hero)
    data["equipped_index"] = 7
    path = tmp_path / "broken.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    assert load_character(path, repo) is None

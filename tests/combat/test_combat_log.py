"""
Tests for the combat log and the battle state holder.
"""

import threading

import pytest

from battlesim.combat.battle import Battle
from battlesim.combat.combat_log import CombatLog
from battlesim.core.error_handling import ValidationError


def test_entries_keep_insertion_order():
    log = CombatLog()
    log.add_entry("first")
    log.add_entry("second")
    assert log.snapshot() == ("first", "second")
    assert len(log) == 2


@pytest.mark.parametrize("text", [None, "", "   "])
def test_blank_entries_rejected(text):
    log = CombatLog()
    with pytest.raises(ValidationError):
        log.add_entry(text)
    assert len(log) == 0


def test_snapshot_is_not_affected_by_later_entries():
    log = CombatLog()
    log.add_entry("before")
    snapshot = log.snapshot()
    log.add_entry("after")
    assert snapshot == ("before",)


def test_concurrent_writers_lose_nothing():
    log = CombatLog()

    def write(prefix):
        for index in range(200):
            log.add_entry(f"{prefix}-{index}")

    threads = [threading.Thread(target=write, args=(name,)) for name in "abcd"]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(log) == 800


def test_battle_opponent_lookup(hero, rival, plain_race, warrior_class):
    from battlesim.character.main import Character

    battle = Battle(hero, rival)
    assert battle.opponent_of(hero) is rival
    assert battle.opponent_of(rival) is hero
    outsider = Character(name="Cid", race=plain_race, char_class=warrior_class)
    assert not battle.involves(outsider)
    with pytest.raises(ValidationError):
        battle.opponent_of(outsider)


def test_next_round_narrates_header(hero, rival):
    battle = Battle(hero, rival)
    battle.next_round()
    assert battle.round == 2
    assert battle.log.snapshot()[-1] == "── Round 2 ──"

"""
Main entry point for the battle simulator.

This script loads the bundled content, builds two characters and lets two
computer-controlled strategies fight a duel, printing the combat log and the
state of both combatants at the end.

Run it with:

    python -m battlesim.main
"""

import logging
import random

from battlesim.actions.ability import Ability
from battlesim.character.main import Character
from battlesim.combat.leveling import LevelingSystem
from battlesim.combat.npc_ai import AIController, SimpleBot, SmartBot
from battlesim.combat.rewards import VictoryRewards
from battlesim.combat.turn_resolver import TurnResolver
from battlesim.core.config import CombatRules
from battlesim.core.content import ContentRepository
from battlesim.core.logging import setup_logging
from battlesim.core.utils import cprint, crule, make_bar

# Safety net against two strategies that can never finish each other.
MAX_ROUNDS = 200


def build_character(
    repo: ContentRepository,
    name: str,
    race_name: str,
    class_name: str,
    rng: random.Random,
) -> Character:
    """
    Build a character with the first abilities of its class pool.

    Args:
        repo (ContentRepository): The content to build from.
        name (str): The character name.
        race_name (str): The name of the race.
        class_name (str): The name of the class.
        rng (random.Random): The randomness source of the character.

    Returns:
        Character: The new character.

    """
    race = repo.get_character_race(race_name)
    char_class = repo.get_character_class(class_name)
    assert race is not None, f"Unknown race {race_name}"
    assert char_class is not None, f"Unknown class {class_name}"
    character = Character(name=name, race=race, char_class=char_class, rng=rng)
    pool: list[Ability] = repo.get_class_abilities(char_class)
    character.set_abilities(pool[: character.ability_slots])
    for item_name in ("Minor Healing Potion", "Elixir of Focus"):
        item = repo.get_item(item_name)
        if item is not None:
            character.inventory.add_item(item)
    return character


def character_sheet(character: Character) -> list[str]:
    """
    Build the lines describing a character at the end of the duel.

    Args:
        character (Character): The character to describe.

    Returns:
        list[str]: Rich-markup lines, one per section of the sheet.

    """
    hp_bar = make_bar(character.current_hp, character.max_hp, color="red")
    ep_bar = make_bar(character.current_ep, character.max_ep, color="blue")
    abilities = ", ".join(
        f"{ability.effect_type.emoji} {ability.colored_name}" for ability in character.abilities
    )
    effects = ", ".join(
        f"{effect.emoji} {effect.colored_name} ({effect.duration})"
        for effect in character.status_effects
    )
    items = ", ".join(
        item.colored_name + (" (equipped)" if item is character.inventory.equipped else "")
        for item in character.inventory.items
    )
    return [
        f"{character.colored_name} "
        f"(Lvl {character.level} {character.race.name} {character.char_class.name})",
        f"    HP {hp_bar} {character.current_hp}/{character.max_hp}",
        f"    EP {ep_bar} {character.current_ep}/{character.max_ep}",
        f"    Abilities: {abilities or 'none'}",
        f"    Effects: {effects or 'none'}",
        f"    Items: {items or 'none'}",
        f"    XP: {character.experience}, Wins: {character.battles_won}",
    ]


def print_character(character: Character) -> None:
    for line in character_sheet(character):
        cprint(line)


def run_duel(seed: int = 42) -> TurnResolver:
    """
    Run a full duel between a SmartBot and a SimpleBot.

    Args:
        seed (int): Seed for every randomness source of the duel.

    Returns:
        TurnResolver: The resolver, holding the finished battle.

    """
    rules = CombatRules()
    repo = ContentRepository.default()

    hero = build_character(repo, "Aria", "Elf", "Mage", random.Random(seed))
    rival = build_character(repo, "Brom", "Dwarf", "Warrior", random.Random(seed + 1))

    leveling = LevelingSystem(rules)
    resolver = TurnResolver(rules)
    resolver.add_battle_end_hook(
        VictoryRewards(leveling, repo=repo, rng=random.Random(seed + 2), rules=rules)
    )

    # Battles work on copies, the originals stay untouched.
    fighter_one = hero.copy_for_battle()
    fighter_two = rival.copy_for_battle()
    smart = AIController(SmartBot(rng=random.Random(seed + 3), rules=rules))
    simple = AIController(SimpleBot(rng=random.Random(seed + 4), rules=rules))

    resolver.start_battle_vs_bot(fighter_one, fighter_two, simple)
    while resolver.battle is not None and resolver.battle.round <= MAX_ROUNDS:
        resolver.submit_move(fighter_one, smart.request_move(fighter_one, fighter_two))

    crule("Combat Log", style="bold green")
    log = resolver.log
    assert log is not None
    for entry in log.snapshot():
        if entry.startswith("──"):
            crule(entry.strip("─ "), style="dim")
        else:
            cprint(entry)

    crule("Combatants", style="bold green")
    print_character(fighter_one)
    print_character(fighter_two)
    return resolver


def main() -> None:
    setup_logging(logging.INFO)
    crule("Battle Simulator", style="bold green")
    run_duel()


if __name__ == "__main__":
    main()

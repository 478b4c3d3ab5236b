"""
Character system module for the battle simulator.

This module handles the combatants: their race and class, resources,
status effects, inventory, and serialization.
"""

from .character_class import CharacterClass
from .character_effects import CharacterEffects
from .character_inventory import CharacterInventory
from .character_race import CharacterRace
from .character_serialization import (
    character_from_dict,
    character_to_dict,
    load_character,
    save_character,
)
from .character_stats import CharacterStats
from .main import Character

__all__ = [
    # Import from character_class.py
    "CharacterClass",
    # Import from character_effects.py
    "CharacterEffects",
    # Import from character_inventory.py
    "CharacterInventory",
    # Import from character_race.py
    "CharacterRace",
    # Import from character_serialization.py
    "character_from_dict",
    "character_to_dict",
    "load_character",
    "save_character",
    # Import from character_stats.py
    "CharacterStats",
    # Import from main.py
    "Character",
]

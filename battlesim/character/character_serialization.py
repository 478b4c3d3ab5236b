"""
Character serialization and deserialization functions.

This module provides functions to serialize and deserialize Character instances
to and from dictionaries and JSON files. Status effects and per-battle flags
are included, so a character saved mid-battle resumes identically.
"""

import json
import random
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from battlesim.core.constants import StatusEffectType
from battlesim.core.error_handling import ValidationError
from battlesim.core.logging import log_error, log_warning
from battlesim.effects.effect_serialization import deserialize_effect, serialize_effect
from battlesim.items.magic_item import AnyMagicItem

from .main import Character

_item_adapter: TypeAdapter = TypeAdapter(AnyMagicItem)


def character_to_dict(character: Character) -> dict[str, Any]:
    """
    Converts a Character instance into a JSON-friendly dictionary.

    Args:
        character (Character):
            The character to serialize.

    Returns:
        dict[str, Any]:
            The dictionary representation.

    """
    equipped_index: int | None = None
    for index, item in enumerate(character.inventory.items):
        if item is character.inventory.equipped:
            equipped_index = index
    return {
        "name": character.name,
        "race": character.race.name,
        "class": character.char_class.name,
        "level": character.level,
        "experience": character.experience,
        "battles_won": character.battles_won,
        "max_hp": character.max_hp,
        "max_ep": character.max_ep,
        "current_hp": character.current_hp,
        "current_ep": character.current_ep,
        "abilities": [ability.name for ability in character.abilities],
        "items": [item.model_dump(mode="json") for item in character.inventory.items],
        "equipped_index": equipped_index,
        "stunned": character.is_stunned,
        "phoenix_used": character.phoenix_used,
        "negation_used": character.effects.negation_used,
        "status_effects": [serialize_effect(e) for e in character.status_effects],
    }


def character_from_dict(
    data: dict[str, Any], repo: Any, rng: random.Random | None = None
) -> Character:
    """
    Creates a Character instance from a dictionary of data.

    Args:
        data (dict[str, Any]):
            The dictionary containing character data.
        repo (ContentRepository):
            The repository used to resolve races, classes and abilities.
        rng (random.Random | None):
            Randomness source for the restored character.

    Returns:
        Character:
            The created Character instance.

    Raises:
        ValidationError:
            If the data references unknown content or is malformed.

    """
    race_name: str = data.get("race", "")
    race = repo.get_character_race(race_name)
    if not race:
        raise ValidationError(f"Character race '{race_name}' not found.")

    class_name: str = data.get("class", "")
    char_class = repo.get_character_class(class_name)
    if not char_class:
        raise ValidationError(f"Character class '{class_name}' not found.")

    abilities = []
    for ability_name in data.get("abilities", []):
        ability = repo.get_ability(ability_name)
        if not ability:
            raise ValidationError(f"Ability '{ability_name}' not found in repository.")
        abilities.append(ability)

    try:
        character = Character(
            name=data["name"],
            race=race,
            char_class=char_class,
            abilities=abilities,
            level=data.get("level", 1),
            rng=rng,
        )
    except KeyError as e:
        raise ValidationError(f"Missing character field: {e}") from e

    character.experience = data.get("experience", 0)
    character.battles_won = data.get("battles_won", 0)
    character.stats.max_hp = data.get("max_hp", character.max_hp)
    character.stats.max_ep = data.get("max_ep", character.max_ep)
    character.stats.restore(
        data.get("current_hp", character.max_hp),
        data.get("current_ep", character.max_ep),
    )

    # Items, with the equipped slot restored by position.
    for item_data in data.get("items", []):
        try:
            item = _item_adapter.validate_python(item_data)
        except PydanticValidationError as e:
            log_error("Failed to deserialize item", {"name": character.name, "data": item_data})
            raise ValidationError(f"Invalid item data: {item_data}") from e
        character.inventory.items.append(item)
    equipped_index = data.get("equipped_index")
    if equipped_index is not None:
        items = character.inventory.items
        if (
            not isinstance(equipped_index, int)
            or isinstance(equipped_index, bool)
            or not 0 <= equipped_index < len(items)
        ):
            log_error(
                "Equipped index outside the inventory",
                {"name": character.name, "equipped_index": equipped_index, "items": len(items)},
            )
            raise ValidationError(f"Invalid equipped item index: {equipped_index}")
        character.inventory.equip(items[equipped_index])

    # Status effects are restored as-is, without re-running their attach hook,
    # so the stun flag comes from the saved state. Past the cap, the extra
    # effects are dropped like they would be in battle.
    effects = [deserialize_effect(effect_data) for effect_data in data.get("status_effects", [])]
    limit = character.effects.max_effects
    if len(effects) > limit:
        log_warning(
            "Saved status effects dropped, cap reached",
            {"name": character.name, "saved": len(effects), "max_effects": limit},
        )
    character.effects.active_effects.extend(effects[:limit])
    character.set_stunned(
        bool(data.get("stunned", False)) and character.effects.has(StatusEffectType.STUNNED)
    )
    character.phoenix_used = data.get("phoenix_used", False)
    character.effects.negation_used = data.get("negation_used", False)

    return character


def save_character(character: Character, path: Path) -> None:
    """
    Saves a character as JSON.

    Args:
        character (Character):
            The character to save.
        path (Path):
            The destination file.

    """
    with open(path, "w", encoding="utf-8") as f:
        json.dump(character_to_dict(character), f, indent=4)


def load_character(path: Path, repo: Any) -> Character | None:
    """
    Loads a character from a JSON file.

    Args:
        path (Path):
            The path to the JSON file.
        repo (ContentRepository):
            The repository used to resolve content references.

    Returns:
        Character | None:
            The loaded character, or None if loading failed.

    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return character_from_dict(data, repo)
    except (OSError, json.JSONDecodeError, ValueError) as e:
        log_error(
            f"Failed to load character file {path}: {e}",
            {"file_path": str(path), "error": str(e)},
        )
        return None

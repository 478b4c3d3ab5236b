import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from catchery import log_warning
from pydantic import TypeAdapter

from battlesim.actions.ability import Ability
from battlesim.character.character_class import CharacterClass
from battlesim.character.character_race import CharacterRace
from battlesim.core.constants import RarityType
from battlesim.core.error_handling import ValidationError
from battlesim.core.logging import log_debug
from battlesim.items.magic_item import AnyMagicItem, MagicItem

_item_adapter: TypeAdapter = TypeAdapter(AnyMagicItem)

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class ContentRepository:
    """
    Registry of every game asset that needs by-name access.

    Repositories are built explicitly and handed to whoever needs them, so
    tests can swap in alternate content sets.
    """

    # Character-related attributes.
    classes: dict[str, CharacterClass]
    races: dict[str, CharacterRace]
    # Action-related attributes.
    abilities: dict[str, Ability]
    # Item-related attributes.
    items: dict[str, MagicItem]

    def __init__(
        self,
        classes: dict[str, CharacterClass] | None = None,
        races: dict[str, CharacterRace] | None = None,
        abilities: dict[str, Ability] | None = None,
        items: dict[str, MagicItem] | None = None,
    ) -> None:
        """
        Initialize the ContentRepository from already-built lookups.

        Args:
            classes (dict[str, CharacterClass] | None): Classes by name.
            races (dict[str, CharacterRace] | None): Races by name.
            abilities (dict[str, Ability] | None): Abilities by name.
            items (dict[str, MagicItem] | None): Item templates by name.

        """
        self.classes = dict(classes or {})
        self.races = dict(races or {})
        self.abilities = dict(abilities or {})
        self.items = dict(items or {})
        self._check_class_pools()

    @classmethod
    def from_directory(cls, root: Path) -> "ContentRepository":
        """
        Load all JSON assets from a directory.

        Args:
            root (Path):
                The directory containing the data files.

        Returns:
            ContentRepository:
                The loaded repository.

        """
        log_debug("Loading content", {"root": root})
        return cls(
            classes=_load_json_file(
                root / "character_classes.json",
                _load_character_classes,
                "character classes",
            ),
            races=_load_json_file(
                root / "character_races.json",
                _load_character_races,
                "character races",
            ),
            abilities=_load_json_file(
                root / "abilities.json",
                _load_abilities,
                "abilities",
            ),
            items=_load_json_file(
                root / "items.json",
                _load_items,
                "items",
            ),
        )

    @classmethod
    def default(cls) -> "ContentRepository":
        """Load the content bundled with the package."""
        return cls.from_directory(DEFAULT_DATA_DIR)

    def _check_class_pools(self) -> None:
        if not self.abilities:
            return
        for character_class in self.classes.values():
            for ability_name in character_class.abilities:
                if ability_name not in self.abilities:
                    log_warning(
                        f"Class '{character_class.name}' lists unknown ability "
                        f"'{ability_name}'.",
                        {"class": character_class.name, "ability": ability_name},
                    )

    def _get_from_collection(self, collection_name: str, item_name: str) -> Any | None:
        """
        Generic helper to get an entry from any collection.

        Args:
            collection_name (str):
                Name of the collection attribute (e.g., 'abilities', 'items')
            item_name (str):
                Name of the entry to retrieve

        Returns:
            Any | None:
                The entry if found, None otherwise

        """
        collection: dict[str, Any] = getattr(self, collection_name, {})
        entry = collection.get(item_name)
        if entry is None:
            log_warning(
                f"'{item_name}' not found in collection '{collection_name}'.",
                {"collection_name": collection_name, "item_name": item_name},
            )
        return entry

    def get_character_class(self, name: str) -> CharacterClass | None:
        """Get a character class by name, or None if not found."""
        return self._get_from_collection("classes", name)

    def get_character_race(self, name: str) -> CharacterRace | None:
        """Get a character race by name, or None if not found."""
        return self._get_from_collection("races", name)

    def get_ability(self, name: str) -> Ability | None:
        """Get an ability by name, or None if not found."""
        return self._get_from_collection("abilities", name)

    def get_item(self, name: str) -> MagicItem | None:
        """Get a fresh copy of an item by name, or None if not found."""
        template = self._get_from_collection("items", name)
        return template.copy_item() if template is not None else None

    def get_class_abilities(self, character_class: CharacterClass) -> list[Ability]:
        """Get the abilities of a class pool, in the order the class lists them."""
        return [
            self.abilities[name]
            for name in character_class.abilities
            if name in self.abilities
        ]

    def items_of_rarity(self, rarity: RarityType) -> list[MagicItem]:
        """Get the item templates of a rarity tier, in load order."""
        return [item for item in self.items.values() if item.rarity == rarity]


def _load_named(
    data: list[dict], factory: Callable[[dict], Any], kind: str
) -> dict[str, Any]:
    entries: dict[str, Any] = {}
    for entry_data in data:
        entry = factory(entry_data)
        if entry.name in entries:
            raise ValueError(f"Duplicate {kind} name: {entry.name}")
        entries[entry.name] = entry
    return entries


def _load_character_classes(data: list[dict]) -> dict[str, CharacterClass]:
    return _load_named(data, lambda d: CharacterClass(**d), "class")


def _load_character_races(data: list[dict]) -> dict[str, CharacterRace]:
    return _load_named(data, lambda d: CharacterRace(**d), "race")


def _load_abilities(data: list[dict]) -> dict[str, Ability]:
    return _load_named(data, lambda d: Ability(**d), "ability")


def _load_items(data: list[dict]) -> dict[str, MagicItem]:
    return _load_named(data, _item_adapter.validate_python, "item")


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], dict[str, Any]],
    description: str,
) -> dict[str, Any]:
    """Helper to load and validate JSON files"""
    try:
        log_debug(f"Loading {description}", {"file": filepath.name})
        # Validate file path
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        # Load and validate JSON
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not data:
            raise ValueError(f"Empty data list in {filepath}")
        if not isinstance(data, list):
            raise ValueError(f"Expected list in {filepath}, got {type(data).__name__}")
        return loader_func(data)
    except (json.JSONDecodeError, FileNotFoundError, ValueError) as e:
        raise ValidationError(f"File {filepath} raised an error: {e}") from e
